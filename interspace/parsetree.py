"""Parsing and validation of block path trees.

A path tree is a comma separated list of lines. Each line holds block names,
exactly one ``$`` standing for the block that owns the tree, and optionally a
trailing ``*`` meaning "continue with every path of the previous block".
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import NamedTuple

STAGES: dict[str, int] = {
    "Langbridge": 0,
    "Ui": 1,
    "Layout": 2,
    "Render": 3,
    "Intergfx": 4,
    "Gfx": 4,
    "Platform": 5,
}

SELF = "SELF"
ALL = "ALL"

_SPECIAL_TOKENS = frozenset({"*", "$", ","})
_RESERVED_NAMES = frozenset({"root", "leaf", "meta", "all"})
_OPEN = {"(": ")", "[": "]", "{": "}"}
_CLOSE = frozenset(_OPEN.values())


class ParseTreeError(ValueError):
    """Raised when a path tree or its block definitions are invalid."""

    def __init__(self, errors: str | Iterable[str]):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__("\n".join(self.errors))


class _Token(NamedTuple):
    kind: str
    text: str


def capitalize(s: str) -> str:
    """Upper-case the first character of ``s``."""
    return s[:1].upper() + s[1:]


class _Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def _skip_trivia(self) -> None:
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif self.text.startswith("//", self.pos):
                end = self.text.find("\n", self.pos)
                self.pos = len(self.text) if end == -1 else end + 1
            elif self.text.startswith("/*", self.pos):
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        depth = 0
        while self.pos < len(self.text):
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        raise ParseTreeError("unterminated block comment")

    def tokens(self, closing: str | None = None) -> list[_Token]:
        out: list[_Token] = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.text):
                if closing is not None:
                    raise ParseTreeError(f"unclosed delimiter, expected '{closing}'")
                return out
            ch = self.text[self.pos]
            if ch in _CLOSE:
                if ch != closing:
                    raise ParseTreeError(f"unexpected closing delimiter '{ch}'")
                self.pos += 1
                return out
            out.append(self._token())

    def _token(self) -> _Token:
        start = self.pos
        ch = self.text[self.pos]
        if ch in _OPEN:
            self.pos += 1
            self.tokens(_OPEN[ch])
            return _Token("group", self.text[start:self.pos])
        if ch.isalpha() or ch == "_":
            while self._peek() and (self._peek().isalnum() or self._peek() == "_"):
                self.pos += 1
            return _Token("ident", self.text[start:self.pos])
        if ch.isdigit():
            self.pos += 1
            while self._peek() and (
                self._peek().isalnum()
                or self._peek() == "_"
                or (self._peek() == "." and self._peek(1).isdigit())
            ):
                self.pos += 1
            return _Token("literal", self.text[start:self.pos])
        if ch == '"':
            self._scan_quoted('"')
            return _Token("literal", self.text[start:self.pos])
        if ch == "'":
            if self._peek(1) == "\\" or (self._peek(1) and self._peek(2) == "'"):
                self._scan_quoted("'")
                return _Token("literal", self.text[start:self.pos])
        self.pos += 1
        return _Token("punct", ch)

    def _scan_quoted(self, quote: str) -> None:
        self.pos += 1
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == "\\":
                self.pos += 2
            elif ch == quote:
                self.pos += 1
                return
            else:
                self.pos += 1
        raise ParseTreeError("unterminated literal")


def tokenize(text: str) -> list[_Token]:
    """Split ``text`` into top-level tokens of kind ident, punct, group or literal."""
    return _Lexer(text).tokens()


def damerau_levenshtein(a: str, b: str) -> int:
    """Unrestricted Damerau-Levenshtein distance between two strings."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    max_dist = len(a) + len(b)
    width = len(b) + 2
    table = [[max_dist] * width for _ in range(len(a) + 2)]
    for i in range(len(a) + 1):
        table[i + 1][1] = i
    for j in range(len(b) + 1):
        table[1][j + 1] = j

    last_row: dict[str, int] = {}
    for i, a_char in enumerate(a, start=1):
        last_match_col = 0
        for j, b_char in enumerate(b, start=1):
            k = last_row.get(b_char, 0)
            l = last_match_col
            cost = 1
            if a_char == b_char:
                cost = 0
                last_match_col = j
            table[i + 1][j + 1] = min(
                table[i][j] + cost,
                table[i + 1][j] + 1,
                table[i][j + 1] + 1,
                table[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[a_char] = i
    return table[len(a) + 1][len(b) + 1]


def normalized_damerau_levenshtein(a: str, b: str) -> float:
    """Similarity in [0, 1]; 1.0 means identical."""
    if not a and not b:
        return 1.0
    return 1.0 - damerau_levenshtein(a, b) / max(len(a), len(b))


def suggest_names(name: str, candidates: Iterable[str], count: int = 3) -> list[str]:
    """Return up to ``count`` candidates most similar to ``name``, best first.

    A candidate whose score ties one already kept is not added.
    """
    best: list[tuple[str, float]] = [("", 0.0)] * count
    for candidate in candidates:
        score = normalized_damerau_levenshtein(name, candidate)
        for i in reversed(range(len(best))):
            if score > best[i][1] and (i == 0 or score < best[i - 1][1]):
                best.insert(i, (candidate, score))
                best.pop()
                break
    return [candidate for candidate, score in best if score > 0.0]


def _collect_variants(
    enums: Mapping[str, Sequence[str]],
) -> tuple[dict[str, list[str]], set[str], list[str]]:
    errors: list[str] = []
    by_enum: dict[str, list[str]] = {}
    for enum_name, variants in enums.items():
        variants = list(variants)
        if not variants or variants[0] != "META":
            errors.append(
                f"first variant of block {enum_name} should always be `META`"
            )
        by_enum[enum_name] = variants[1:]

    seen: dict[str, str] = {}
    for enum_name, variants in by_enum.items():
        for variant in variants:
            if variant in seen and variant != "META":
                errors.append(
                    f"found duplicate block variant name {variant} "
                    f"in enum {seen[variant]} and {enum_name}"
                )
            else:
                seen[variant] = enum_name

    for variants in by_enum.values():
        for variant in variants:
            errors.extend(_variant_name_errors(variant))

    all_variants = {variant for variants in by_enum.values() for variant in variants}
    return by_enum, all_variants, errors


def _variant_name_errors(variant: str) -> list[str]:
    errors = []
    if not variant.isascii():
        errors.append(
            f"block variant {variant} does not consist of just ascii characters "
            "(a-z A-Z 0-9)"
        )
    if not variant or not (variant[0].isascii() and variant[0].isupper()):
        errors.append(f"block variant {variant} must start with capital ascii letter")
    if any(
        not (ch.isascii() and ch.isalnum()) or ch.isupper() for ch in variant[1:]
    ):
        errors.append(
            "block variant name must be capital letter followed by lowercase "
            f"letters or numbers, found {variant}"
        )
    if variant.lower() in _RESERVED_NAMES:
        errors.append(
            "names 'root', 'leaf', 'meta', and 'all' are reserved for internal use"
        )
    return errors


def validate_block_variants(
    enums: Mapping[str, Sequence[str]],
) -> tuple[dict[str, list[str]], set[str]]:
    """Check block enum definitions.

    ``enums`` maps each block type to its variant names, ``META`` first.
    Returns the variants per block type without ``META`` and the set of all
    variant names.
    """
    by_enum, all_variants, errors = _collect_variants(enums)
    if errors:
        raise ParseTreeError(errors)
    return by_enum, all_variants


def _token_errors(tokens: Sequence[_Token], known: set[str] | None) -> list[str]:
    errors = []
    for token in tokens:
        if token.kind == "group":
            errors.append(f"invalid tokens '{token.text}'")
        elif token.kind == "literal":
            errors.append(f"invalid token: found literal {token.text}")
        elif token.kind == "punct":
            if token.text not in _SPECIAL_TOKENS:
                errors.append(f"invalid token '{token.text}'")
        elif known is not None and token.text not in known:
            suggestions = suggest_names(token.text, sorted(known), 3)
            message = f"block name '{token.text}' not found"
            if suggestions:
                message += "; did you perhaps mean one of these: " + ", ".join(
                    suggestions
                )
            errors.append(message)
    return errors


def _dollar_errors(tokens: Sequence[_Token]) -> list[str]:
    errors = []
    found_dollar = False
    for token in tokens:
        if token.kind != "punct":
            continue
        if token.text == "$" and not found_dollar:
            found_dollar = True
        elif token.text == "," and not found_dollar:
            errors.append("unexpected token ','; every line must contain '$'")
        elif token.text == ",":
            found_dollar = False
        elif token.text == "$":
            errors.append(
                "token '$' can only appear once on a line; "
                "did you perhaps forget a ','"
            )
    return errors


def _checked_lines(tokens: Sequence[_Token], known: set[str] | None) -> list[list[str]]:
    errors = _token_errors(tokens, known)
    if errors:
        raise ParseTreeError(errors)
    errors = _dollar_errors(tokens)
    if errors:
        raise ParseTreeError(errors)

    lines: list[list[str]] = []
    current: list[str] = []
    for token in tokens:
        if token.text == ",":
            lines.append(current)
            current = []
        else:
            current.append(token.text)
    if current:
        lines.append(current)
    return lines


def parse_tree(text: str) -> list[list[str]]:
    """Parse a path tree into lines of block names, ``$`` and ``*``."""
    return _checked_lines(tokenize(text), None)


def parse_typed_tree(
    text: str,
    enums: Mapping[str, Sequence[str]],
    stages: Mapping[str, int] | None = None,
) -> list[list[tuple[str, str | None]]]:
    """Parse a path tree, resolving every name to its block type.

    Each entry is ``(block_type, variant)``; ``$`` becomes ``("SELF", None)``
    and ``*`` becomes ``("ALL", None)``.
    """
    stages = STAGES if stages is None else stages
    by_enum, all_variants, errors = _collect_variants(enums)
    tokens = tokenize(text)
    errors.extend(_token_errors(tokens, all_variants))
    if errors:
        raise ParseTreeError(errors)

    owner: dict[str, str] = {}
    for enum_name, variants in by_enum.items():
        for variant in variants:
            owner.setdefault(variant, enum_name)

    typed: list[list[tuple[str, str | None]]] = []
    for line in _checked_lines(tokens, all_variants):
        entries: list[tuple[str, str | None]] = []
        for name in line:
            if name == "$":
                entries.append((SELF, None))
            elif name == "*":
                entries.append((ALL, None))
            else:
                entries.append((owner[name], name))
        typed.append(entries)

    current_stage = 0
    errors = []
    for line in typed:
        for index, (block_type, variant) in enumerate(line):
            if variant is not None:
                if block_type not in stages:
                    raise ParseTreeError(f"no stage known for block type {block_type}")
                if stages[block_type] < current_stage:
                    errors.append(
                        f"a block {variant} of type {block_type} cannot follow "
                        f"a block of type {block_type}"
                    )
            elif block_type == ALL and index != len(line) - 1:
                errors.append(
                    "a block ALL can only occur at the end of a line; "
                    "did you perhaps forget a ','?"
                )
    if errors:
        raise ParseTreeError(errors)
    return typed