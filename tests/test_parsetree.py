import pytest

from interspace.parsetree import (
    ParseTreeError,
    capitalize,
    damerau_levenshtein,
    normalized_damerau_levenshtein,
    parse_tree,
    parse_typed_tree,
    suggest_names,
    tokenize,
    validate_block_variants,
)

ENUMS = {
    "Render": ["META", "Skia", "Vello"],
    "Platform": ["META", "Linux", "Windows"],
}


def test_capitalize():
    assert capitalize("langbridge") == "Langbridge"
    assert capitalize("") == ""
    assert capitalize("Ui") == "Ui"


def test_tokenize_kinds():
    tokens = tokenize("$ Skia *, Blink_pa")
    assert [(t.kind, t.text) for t in tokens] == [
        ("punct", "$"),
        ("ident", "Skia"),
        ("punct", "*"),
        ("punct", ","),
        ("ident", "Blink_pa"),
    ]


def test_tokenize_groups_literals_and_comments():
    tokens = tokenize('a (b, [c]) "s" 12 // note\n /* x /* y */ */ d')
    assert [t.kind for t in tokens] == ["ident", "group", "literal", "literal", "ident"]
    assert tokens[1].text == "(b, [c])"
    assert tokens[-1].text == "d"


def test_tokenize_unbalanced():
    with pytest.raises(ParseTreeError):
        tokenize("(a")
    with pytest.raises(ParseTreeError):
        tokenize("a]")


def test_damerau_levenshtein_values():
    assert damerau_levenshtein("ab", "ba") == 1
    assert damerau_levenshtein("ca", "abc") == 2
    assert damerau_levenshtein("", "Skia") == 4
    assert damerau_levenshtein("Vello", "Vello") == 0


@pytest.mark.parametrize("a,b", [("Skia", "Sika"), ("Opengl", "Opengles"), ("", "x")])
def test_damerau_levenshtein_symmetric(a, b):
    assert damerau_levenshtein(a, b) == damerau_levenshtein(b, a)


def test_normalized():
    assert normalized_damerau_levenshtein("", "") == 1.0
    assert normalized_damerau_levenshtein("Skia", "Skia") == 1.0
    assert normalized_damerau_levenshtein("abc", "") == 0.0
    score = normalized_damerau_levenshtein("Skia", "Sika")
    assert 0.0 < score < 1.0


def test_suggest_names_best_first():
    result = suggest_names("Skai", ["Linux", "Skia", "Vello"], 3)
    assert result[0] == "Skia"
    assert len(result) <= 3


def test_validate_block_variants_ok():
    by_enum, all_variants = validate_block_variants(ENUMS)
    assert by_enum == {"Render": ["Skia", "Vello"], "Platform": ["Linux", "Windows"]}
    assert all_variants == {"Skia", "Vello", "Linux", "Windows"}


@pytest.mark.parametrize(
    "enums",
    [
        {"Render": ["Skia"]},
        {"Render": ["META", "Skia"], "Platform": ["META", "Skia"]},
        {"Render": ["META", "skia"]},
        {"Render": ["META", "Blink_pa"]},
        {"Render": ["META", "All"]},
        {"Render": ["META", "SkIa"]},
    ],
)
def test_validate_block_variants_errors(enums):
    with pytest.raises(ParseTreeError):
        validate_block_variants(enums)


def test_parse_tree_lines():
    text = "Opengles $ D3d Windows,\n Opengles $ Opengl Linux,\n Opengles $ Vulkan,"
    assert parse_tree(text) == [
        ["Opengles", "$", "D3d", "Windows"],
        ["Opengles", "$", "Opengl", "Linux"],
        ["Opengles", "$", "Vulkan"],
    ]


def test_parse_tree_single_and_empty():
    assert parse_tree("$") == [["$"]]
    assert parse_tree("$ Taffy Vello *") == [["$", "Taffy", "Vello", "*"]]
    assert parse_tree("") == []


@pytest.mark.parametrize(
    "text",
    ["$ $", ", $", "$ Foo::Bar", '$ "lit"', "$ (x)", "Skia, $", "$ 3"],
)
def test_parse_tree_errors(text):
    with pytest.raises(ParseTreeError):
        parse_tree(text)


def test_parse_tree_error_lists_messages():
    with pytest.raises(ParseTreeError) as info:
        parse_tree("$ ; ?")
    assert info.value.errors == ["invalid token ';'", "invalid token '?'"]


def test_parse_typed_tree():
    result = parse_typed_tree("$ Skia Linux *, $ Vello", ENUMS)
    assert result == [
        [("SELF", None), ("Render", "Skia"), ("Platform", "Linux"), ("ALL", None)],
        [("SELF", None), ("Render", "Vello")],
    ]


def test_parse_typed_tree_all_not_last():
    with pytest.raises(ParseTreeError):
        parse_typed_tree("$ * Skia", ENUMS)


def test_parse_typed_tree_unknown_name_suggests():
    with pytest.raises(ParseTreeError) as info:
        parse_typed_tree("$ Skai", ENUMS)
    assert "block name 'Skai' not found" in str(info.value)
    assert "Skia" in str(info.value)


def test_parse_typed_tree_missing_stage():
    with pytest.raises(ParseTreeError):
        parse_typed_tree("$ Skia", {"Paint": ["META", "Skia"]})


def test_parse_typed_tree_custom_stages():
    enums = {"Paint": ["META", "Skia"]}
    assert parse_typed_tree("$ Skia", enums, {"Paint": 3}) == [
        [("SELF", None), ("Paint", "Skia")]
    ]


def test_parse_typed_tree_bad_definitions():
    with pytest.raises(ParseTreeError):
        parse_typed_tree("$", {"Render": ["Skia"]})