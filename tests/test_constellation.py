from datetime import datetime, timezone

import pytest

from interspace.constellation import ASTERISK_ID, Constellation, catalog_entries
from interspace.model import (
    BasicExtra,
    ComponentEntry,
    ComponentType,
    Info,
    LayoutExtra,
    Repo,
    SourceOpenness,
    StarCache,
    UiExtra,
)
from interspace.parsetree import parse_tree


def _info(name, owner="Acme", repo=None):
    return Info(
        name=name,
        owner=owner,
        description="",
        website="",
        code_openness=SourceOpenness.NA,
        impl_langs=[],
        source=repo,
    )


def _small_entries():
    return [
        (
            ComponentType.UI,
            ComponentEntry("Front", _info("Front", repo=Repo.with_url("https://example.com/front")), UiExtra(), parse_tree("$ Mid *")),
        ),
        (
            ComponentType.LAYOUT,
            ComponentEntry("Mid", _info("Mid", owner="Other"), LayoutExtra(), parse_tree("$ Back, $ Side")),
        ),
        (
            ComponentType.PLATFORM,
            ComponentEntry("Back", _info("Back"), BasicExtra(ComponentType.PLATFORM), parse_tree("$")),
        ),
        (
            ComponentType.PLATFORM,
            ComponentEntry("Side", _info("Side"), BasicExtra(ComponentType.PLATFORM), parse_tree("$")),
        ),
    ]


def test_ids_follow_entry_order():
    c = Constellation.generate_skeleton(_small_entries())
    assert [comp.str_id for comp in c.comps] == ["Front", "Mid", "Back", "Side"]
    assert [comp.id for comp in c.comps] == [0, 1, 2, 3]


def test_asterisk_expands_paths_of_previous_block():
    c = Constellation.generate_skeleton(_small_entries())
    front = c.get_comp_by_str_id("Front")
    assert sorted(front.paths) == [[0, 1, 2], [0, 1, 3]]


def test_component_paths_are_those_containing_it():
    c = Constellation.generate_skeleton(_small_entries())
    back = c.get_comp_by_str_id("Back")
    assert sorted(back.paths) == [[0, 1, 2], [1, 2], [2]]
    for comp in c.comps:
        assert all(comp.id in path for path in comp.paths)


def test_get_expanded_paths_from_direct():
    c = Constellation.generate_skeleton(_small_entries())
    id_paths = [[[0, 1, ASTERISK_ID]], [[1, 2], [1, 3]], [[2]], [[3]]]
    assert c.get_expanded_paths_from(id_paths, 0) == [[0, 1, 2], [0, 1, 3]]
    assert c.get_expanded_paths_from(id_paths, 2) == [[2]]


def test_expand_paths_drops_repeats_and_duplicates():
    c = Constellation.generate_skeleton(_small_entries())
    id_paths = [[[0, 1, 0], [0, 1]], [[0, 1]], [[2]], [[3]]]
    assert c.expand_paths(id_paths) == [[0, 1], [2], [3]]


def test_expand_paths_rejects_out_of_range_ids():
    c = Constellation.generate_skeleton(_small_entries())
    with pytest.raises(ValueError):
        c.expand_paths([[[0, ASTERISK_ID, 1]], [[1]], [[2]], [[3]]])


def test_empty_path_is_rejected():
    c = Constellation.generate_skeleton(_small_entries())
    with pytest.raises(ValueError):
        c.get_expanded_paths_from([[[]]], 0)


def test_unknown_name_raises():
    entries = _small_entries()
    entries.append(
        (ComponentType.PLATFORM, ComponentEntry("Bad", _info("Bad"), BasicExtra(ComponentType.PLATFORM), [["$", "Nowhere"]]))
    )
    with pytest.raises(ValueError):
        Constellation.generate_skeleton(entries)


def test_asterisk_needs_a_block_in_front():
    entries = _small_entries()
    entries.append(
        (ComponentType.PLATFORM, ComponentEntry("Star", _info("Star"), BasicExtra(ComponentType.PLATFORM), parse_tree("$ *")))
    )
    with pytest.raises(ValueError):
        Constellation.generate_skeleton(entries)


def test_preset_stars_are_rejected():
    entries = _small_entries()
    entries[0][1].info.source = Repo("https://example.com/front", stars=5)
    with pytest.raises(ValueError):
        Constellation.generate_skeleton(entries)


def _cache(str_id, repo):
    return StarCache(datetime(2024, 1, 1, tzinfo=timezone.utc), 0, str_id, repo)


def test_incorporate_stars():
    c = Constellation.generate_skeleton(_small_entries())
    c.incorporate_stars([_cache("Front", Repo("https://example.com/front", stars=42))])
    assert c.get_comp_by_str_id("Front").info.source.stars == 42
    assert c.get_comp_by_str_id("Mid").info.source is None


def test_incorporate_stars_missing_cache():
    c = Constellation.generate_skeleton(_small_entries())
    with pytest.raises(LookupError):
        c.incorporate_stars([])


def test_incorporate_stars_cache_without_repo():
    c = Constellation.generate_skeleton(_small_entries())
    with pytest.raises(ValueError):
        c.incorporate_stars([_cache("Front", None)])


def test_lookups():
    c = Constellation.generate_skeleton(_small_entries())
    assert c.get_comp(1).str_id == "Mid"
    assert c.get_all_ids_of_comp_typ(ComponentType.PLATFORM) == [2, 3]
    assert [x.str_id for x in c.get_all_comps_of_comp_typ(ComponentType.UI)] == ["Front"]
    assert c.get_all_ids_of_owner("Other") == [1]
    assert [x.id for x in c.get_all_comps_of_owner("Acme")] == [0, 2, 3]
    with pytest.raises(KeyError):
        c.get_comp_by_str_id("Missing")


def test_dict_round_trip():
    c = Constellation.generate_skeleton(_small_entries())
    assert Constellation.from_dict(c.to_dict()) == c


def test_store_and_load(tmp_path):
    c = Constellation.generate_skeleton(_small_entries())
    target = tmp_path / "constellation.json"
    c.store(target)
    assert Constellation.load(target) == c


def test_from_dict_rejects_garbage():
    with pytest.raises(ValueError):
        Constellation.from_dict({"nothing": []})


def test_full_catalog_invariants():
    entries = catalog_entries()
    c = Constellation.generate_skeleton()
    assert len(c.comps) == len(entries)
    assert [comp.id for comp in c.comps] == list(range(len(entries)))
    for comp in c.comps:
        for path in comp.paths:
            assert len(set(path)) == len(path)
            assert all(0 <= i < len(c.comps) for i in path)


def test_full_catalog_expands_through_dom():
    c = Constellation.generate_skeleton()
    ids = [c.get_comp_by_str_id(s).id for s in ("React", "Dom", "Blink_ly", "Blink_pa")]
    react = c.get_comp_by_str_id("React")
    assert any(path[:4] == ids for path in react.paths)