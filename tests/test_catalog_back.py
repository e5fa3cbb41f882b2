import pytest

from interspace.catalog_back import (
    gfxapi_entries,
    intergfx_entries,
    paint_entries,
    platform_entries,
    raster_entries,
)
from interspace.catalog_front import langbridge_entries, layout_entries, ui_entries
from interspace.lang import Lang
from interspace.model import BasicExtra, ComponentType

GROUPS = [
    (paint_entries, ComponentType.PAINT, "Erithaxpaint"),
    (raster_entries, ComponentType.RASTER, "Erithaxraster"),
    (gfxapi_entries, ComponentType.GFXAPI, "Erithaxgfx"),
    (intergfx_entries, ComponentType.INTERGFX, "Erithaxintergfx"),
    (platform_entries, ComponentType.PLATFORM, "Erithaxplatform"),
]


def _all_back():
    return [
        *paint_entries(),
        *raster_entries(),
        *gfxapi_entries(),
        *intergfx_entries(),
        *platform_entries(),
    ]


def _by_id(entries):
    return {e.str_id: e for e in entries}


@pytest.mark.parametrize("factory,kind,first", GROUPS)
def test_extra_kind_matches_group(factory, kind, first):
    entries = factory()
    assert entries[0].str_id == first
    assert all(e.extra == BasicExtra(kind) for e in entries)


def test_every_line_has_single_dollar_and_trailing_star():
    entries = [
        *paint_entries(),
        *raster_entries(),
        *gfxapi_entries(),
        *intergfx_entries(),
        *platform_entries(),
    ]
    assert entries
    for entry in entries:
        assert entry.paths
        for line in entry.paths:
            assert line.count("$") == 1
            assert "*" not in line[:-1]


def test_str_ids_unique_across_catalogue():
    ids = [e.str_id for e in _all_back()] + [
        e.str_id for e in (*langbridge_entries(), *ui_entries(), *layout_entries())
    ]
    assert len(ids) == len(set(ids))


def test_all_path_names_resolve():
    everything = _all_back() + langbridge_entries() + ui_entries() + layout_entries()
    known = {e.str_id for e in everything}
    for entry in everything:
        for line in entry.paths:
            for name in line:
                assert name in {"$", "*"} or name in known, (entry.str_id, name)


def test_no_stars_before_incorporation():
    entries = [
        *paint_entries(),
        *raster_entries(),
        *gfxapi_entries(),
        *intergfx_entries(),
        *platform_entries(),
    ]
    with_source = [e for e in entries if e.info.source is not None]
    assert with_source
    assert all(e.info.source.stars is None for e in with_source)


def test_platforms_are_leaves():
    assert all(e.paths == [["$"]] for e in platform_entries())


def test_angle_paths():
    angle = _by_id(intergfx_entries())["Angle"]
    assert angle.paths == [
        ["Opengles", "$", "D3d", "Windows"],
        ["Opengles", "$", "Opengl", "Linux"],
        ["Opengles", "$", "Vulkan"],
    ]
    assert angle.info.name == "ANGLE"
    assert angle.info.owner == "Google"


def test_dawn_repo_as_listed():
    dawn = _by_id(intergfx_entries())["Dawn"]
    assert dawn.info.source.url == "https://github.com/google/angle"
    assert dawn.paths[-1] == ["Webgpu", "$", "Metal", "*"]
    assert dawn.info.impl_langs == [Lang.CPP]


def test_coregraphics_named_quartz():
    cg = _by_id(raster_entries())["Coregraphics"]
    assert cg.info.name == "Quartz"
    assert cg.paths == [["$", "Metal"], ["$", "Metal", "Macos"], ["$", "Metal", "Ios"]]


def test_blink_paint_paths():
    blink = _by_id(paint_entries())["Blink_pa"]
    assert blink.paths == [["$", "Skia", "*"], ["$", "Webgpu", "Dawn", "*"]]


def test_wgpu_website_and_metal_paths():
    wgpu = _by_id(intergfx_entries())["Wgpu"]
    assert wgpu.info.website == "https://wgpu.rs"
    metal = _by_id(gfxapi_entries())["Metal"]
    assert metal.paths == [["$", "Macos"], ["$", "Ios"]]


def test_entries_are_fresh_objects():
    first = raster_entries()
    first[0].paths.append(["$", "Cpu"])
    assert raster_entries()[0].paths == [["$"]]