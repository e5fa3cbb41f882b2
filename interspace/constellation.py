"""The constellation: every catalogued component and the paths between them."""

from __future__ import annotations

import copy
import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Union

from interspace.catalog_back import (
    gfxapi_entries,
    intergfx_entries,
    paint_entries,
    platform_entries,
    raster_entries,
)
from interspace.catalog_front import langbridge_entries, layout_entries, ui_entries
from interspace.model import Component, ComponentEntry, ComponentType, StarCache

ASTERISK_ID = 9902

IdPaths = Sequence[Sequence[Sequence[int]]]
PathLikeStr = Union[str, "PathLike[str]"]


def catalog_entries() -> list[tuple[ComponentType, ComponentEntry]]:
    """Every catalogued entry with its component type, in pipeline order."""
    groups = [
        (ComponentType.LANGBRIDGE, langbridge_entries()),
        (ComponentType.UI, ui_entries()),
        (ComponentType.LAYOUT, layout_entries()),
        (ComponentType.PAINT, paint_entries()),
        (ComponentType.RASTER, raster_entries()),
        (ComponentType.GFXAPI, gfxapi_entries()),
        (ComponentType.INTERGFX, intergfx_entries()),
        (ComponentType.PLATFORM, platform_entries()),
    ]
    return [(kind, entry) for kind, entries in groups for entry in entries]


@dataclass
class Constellation:
    """All components, each holding the expanded id paths it takes part in."""

    comps: list[Component] = field(default_factory=list)

    @classmethod
    def generate_skeleton(
        cls, entries: Iterable[tuple[ComponentType, ComponentEntry]] | None = None
    ) -> Constellation:
        """Build a constellation from catalogue entries and expand their paths."""
        entries = catalog_entries() if entries is None else list(entries)

        components: list[Component] = []
        str_paths: list[list[list[str]]] = []
        for kind, entry in entries:
            source = entry.info.source
            if source is not None and source.stars is not None:
                raise ValueError(
                    f"component {entry.str_id} must not carry a star count yet"
                )
            components.append(
                Component(
                    id=len(components),
                    str_id=entry.str_id,
                    typ=kind,
                    info=copy.deepcopy(entry.info),
                    extra=copy.deepcopy(entry.extra),
                )
            )
            str_paths.append([list(path) for path in entry.paths])

        if any(comp.str_id in ("$", "*") for comp in components):
            raise ValueError("'$' and '*' cannot be used as component identifiers")

        index: dict[str, int] = {}
        for comp in components:
            index.setdefault(comp.str_id, comp.id)

        def resolve(name: str, comp_id: int) -> int:
            if name in index:
                return index[name]
            if name == "$":
                return comp_id
            if name == "*":
                return ASTERISK_ID
            raise ValueError(
                f"component {components[comp_id].str_id} has an unknown name "
                f"{name!r} in its paths {str_paths[comp_id]}"
            )

        id_paths = [
            [
                list(path)
                for path in sorted(
                    {tuple(resolve(name, comp_id) for name in path) for path in paths}
                )
            ]
            for comp_id, paths in enumerate(str_paths)
        ]

        constellation = cls(components)
        expanded = constellation.expand_paths(id_paths)
        for comp in constellation.comps:
            comp.paths = [list(path) for path in expanded if comp.id in path]
        return constellation

    def incorporate_stars(self, stars: Iterable[StarCache]) -> None:
        """Copy cached star counts into the repositories of the components."""
        caches = list(stars)
        for comp in self.comps:
            source = comp.info.source
            if source is None:
                continue
            if source.stars is not None:
                raise ValueError(f"component {comp.str_id} already has a star count")
            cache = next((c for c in caches if c.comp_str_id == comp.str_id), None)
            if cache is None:
                raise LookupError(
                    f"did not find star cache of component `{comp.str_id}`; "
                    "regenerate the star cache"
                )
            if cache.repo is None:
                raise ValueError(
                    f"star cache of component `{comp.str_id}` has no repository; "
                    "regenerate the star cache"
                )
            source.stars = cache.repo.stars

    def get_comp(self, comp_id: int) -> Component:
        return self.comps[comp_id]

    def get_comp_by_str_id(self, str_id: str) -> Component:
        for comp in self.comps:
            if comp.str_id == str_id:
                return comp
        raise KeyError(str_id)

    def get_all_ids_of_comp_typ(self, comp_typ: ComponentType) -> list[int]:
        return [comp.id for comp in self.comps if comp.typ == comp_typ]

    def get_all_comps_of_comp_typ(self, comp_typ: ComponentType) -> list[Component]:
        return [comp for comp in self.comps if comp.typ == comp_typ]

    def get_all_ids_of_owner(self, owner: str) -> list[int]:
        return [comp.id for comp in self.comps if comp.info.owner == owner]

    def get_all_comps_of_owner(self, owner: str) -> list[Component]:
        return [comp for comp in self.comps if comp.info.owner == owner]

    def get_expanded_paths_from(self, id_paths: IdPaths, comp_id: int) -> list[list[int]]:
        """Paths of ``comp_id`` with every trailing ``*`` replaced by the paths
        of the block in front of it."""
        new_paths: list[list[int]] = []
        for path in id_paths[comp_id]:
            if not path:
                raise ValueError(f"every path length must be > 0, found {list(path)}")
            if path[-1] != ASTERISK_ID:
                new_paths.append(list(path))
                continue
            if len(path) <= 2:
                raise ValueError(
                    f"there must be a node in front of '*' in a branch, found {list(path)}"
                )
            base = list(path[:-1])
            last_node = base[-1]
            if last_node == ASTERISK_ID:
                raise ValueError(f"invalid branch contains consecutive '*' {list(path)}")
            for sub_path in self.get_expanded_paths_from(id_paths, last_node):
                new_paths.append(base + list(sub_path[1:]))
        return new_paths

    def expand_paths(self, id_paths: IdPaths) -> list[list[int]]:
        """Expand the paths of every component, dropping paths that visit a
        block twice and duplicate paths."""
        count = len(self.comps)
        paths = [
            path
            for comp_id in range(count)
            for path in self.get_expanded_paths_from(id_paths, comp_id)
        ]
        bad = next((p for p in paths if any(not 0 <= i < count for i in p)), None)
        if bad is not None:
            raise ValueError(f"path {bad} refers to ids outside 0..{count}")

        unique: list[list[int]] = []
        seen: set[tuple[int, ...]] = set()
        for path in paths:
            key = tuple(path)
            if len(set(path)) != len(path) or key in seen:
                continue
            seen.add(key)
            unique.append(path)
        return unique

    def to_dict(self) -> dict[str, Any]:
        return {"comps": [comp.to_dict() for comp in self.comps]}

    @classmethod
    def from_dict(cls, data: Any) -> Constellation:
        if not isinstance(data, dict) or "comps" not in data:
            raise ValueError("constellation data must be a mapping with 'comps'")
        return cls([Component.from_dict(item) for item in data["comps"]])

    def store(self, path: PathLikeStr) -> None:
        """Write the constellation to ``path`` as JSON."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=1), encoding="utf-8")

    @classmethod
    def load(cls, path: PathLikeStr) -> Constellation:
        """Read a constellation written by :meth:`store`."""
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))