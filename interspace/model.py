"""Component data model: types, descriptive info and type-specific extras."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union

from interspace.lang import Lang


class ComponentType(Enum):
    """Pipeline stage a component belongs to, in pipeline order."""

    LANGBRIDGE = "Langbridge"
    UI = "Ui"
    LAYOUT = "Layout"
    PAINT = "Paint"
    RASTER = "Raster"
    GFXAPI = "Gfxapi"
    INTERGFX = "Intergfx"
    PLATFORM = "Platform"


class SourceOpenness(Enum):
    NA = "NA"
    SUPEROPEN = "Superopen"
    COPYLEFT = "Copyleft"
    SOURCEAVAILABLE = "Sourceavailable"
    CLOSED = "Closed"


class RoughRange(Enum):
    TODO = "TODO"
    NONE = "None"
    LO = "Lo"
    MID = "Mid"
    HI = "Hi"


class Reactivity(Enum):
    TODO = "TODO"
    NONE = "None"
    FINE_GRAINED = "FineGrained"
    ELMY = "Elmy"
    REACTY = "Reacty"
    SWIFTY = "Swifty"


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field '{key}'") from None


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _langs_text(langs: list[Lang] | tuple[Lang, ...]) -> str:
    return "[" + ", ".join(lang.value for lang in langs) + "]"


@dataclass(frozen=True)
class UiLang:
    """Language a UI is written in: unknown, a plain language, or a custom one."""

    lang: Lang | None = None
    custom_name: str | None = None
    logic_langs: tuple[Lang, ...] = ()

    def __post_init__(self) -> None:
        if self.lang is not None and self.custom_name is not None:
            raise ValueError("a UI language is either a plain or a custom language")
        if self.custom_name is None and self.logic_langs:
            raise ValueError("logic languages belong to a custom UI language")

    @classmethod
    def todo(cls) -> UiLang:
        return cls()

    @classmethod
    def of(cls, lang: Lang) -> UiLang:
        return cls(lang=lang)

    @classmethod
    def custom(cls, name: str, logic_langs) -> UiLang:
        return cls(custom_name=name, logic_langs=tuple(logic_langs))

    @property
    def is_todo(self) -> bool:
        return self.lang is None and self.custom_name is None

    def __str__(self) -> str:
        if self.lang is not None:
            return f"Lang({self.lang.value})"
        if self.custom_name is not None:
            return (
                f'Custom {{ name: "{self.custom_name}", '
                f"logic_langs: {_langs_text(self.logic_langs)} }}"
            )
        return "TODO"


def _ui_lang_to_data(ui_lang: UiLang) -> Any:
    if ui_lang.lang is not None:
        return {"Lang": ui_lang.lang.value}
    if ui_lang.custom_name is not None:
        return {
            "Custom": {
                "name": ui_lang.custom_name,
                "logic_langs": [lang.value for lang in ui_lang.logic_langs],
            }
        }
    return "TODO"


def _ui_lang_from_data(data: Any) -> UiLang:
    if data == "TODO":
        return UiLang.todo()
    if isinstance(data, dict) and len(data) == 1:
        ((key, value),) = data.items()
        if key == "Lang":
            return UiLang.of(Lang(value))
        if key == "Custom":
            return UiLang.custom(
                _require(value, "name"),
                [Lang(v) for v in _require(value, "logic_langs")],
            )
    raise ValueError(f"invalid UI language: {data!r}")


@dataclass
class Repo:
    """A source repository and its star count, if known."""

    url: str
    stars: int | None = None

    @classmethod
    def with_url(cls, url: str) -> Repo:
        """A repository with no star count yet."""
        return cls(url=url)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "stars": self.stars}

    @classmethod
    def from_dict(cls, data: Any) -> Repo:
        url = _require(data, "url")
        stars = data.get("stars")
        if not isinstance(url, str):
            raise ValueError("repository url must be a string")
        if stars is not None and (not isinstance(stars, int) or isinstance(stars, bool)):
            raise ValueError("repository stars must be an integer")
        return cls(url=url, stars=stars)


@dataclass
class Info:
    """Descriptive information shown for a component."""

    name: str
    owner: str
    description: str
    website: str
    code_openness: SourceOpenness
    impl_langs: list[Lang] = field(default_factory=list)
    source: Repo | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "owner": self.owner,
            "description": self.description,
            "website": self.website,
            "code_openness": self.code_openness.value,
            "impl_langs": [lang.value for lang in self.impl_langs],
            "source": None if self.source is None else self.source.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Info:
        source = _require(data, "source")
        return cls(
            name=_require(data, "name"),
            owner=_require(data, "owner"),
            description=_require(data, "description"),
            website=_require(data, "website"),
            code_openness=SourceOpenness(_require(data, "code_openness")),
            impl_langs=[Lang(v) for v in _require(data, "impl_langs")],
            source=None if source is None else Repo.from_dict(source),
        )


@dataclass
class LangbridgeExtra:
    bind_langs: list[Lang] = field(default_factory=list)

    @property
    def kind(self) -> ComponentType:
        return ComponentType.LANGBRIDGE

    def __str__(self) -> str:
        return f"Langbridge::{{\n{_langs_text(self.bind_langs)}}}"


@dataclass
class UiExtra:
    is_immediate: bool = False
    reactivity: Reactivity = Reactivity.TODO
    declarativity: RoughRange = RoughRange.TODO
    macrotivity: RoughRange = RoughRange.TODO
    language: UiLang = field(default_factory=UiLang.todo)
    hot_reload: bool = False
    ssr: bool = False
    liveview: bool = False

    @property
    def kind(self) -> ComponentType:
        return ComponentType.UI

    def __str__(self) -> str:
        parts = [
            _bool_text(self.is_immediate),
            self.reactivity.value,
            self.declarativity.value,
            self.macrotivity.value,
            str(self.language),
            _bool_text(self.hot_reload),
            _bool_text(self.ssr),
            _bool_text(self.liveview),
        ]
        return "Ui::{\n" + "\n".join(parts) + "\n}"


@dataclass
class LayoutExtra:
    constraint_based: bool = False
    css: bool = False
    flexbox: bool = False
    grid: bool = False

    @property
    def kind(self) -> ComponentType:
        return ComponentType.LAYOUT

    def __str__(self) -> str:
        return (
            "Layout::{\n"
            f" constraint_based: {_bool_text(self.constraint_based)}\n"
            f" css: {_bool_text(self.css)}\n"
            f" flexbox: {_bool_text(self.flexbox)}\n"
            f" grid: {_bool_text(self.grid)}}}"
        )


_FIELDLESS_KINDS = frozenset(
    {
        ComponentType.PAINT,
        ComponentType.RASTER,
        ComponentType.GFXAPI,
        ComponentType.INTERGFX,
        ComponentType.PLATFORM,
    }
)


@dataclass(frozen=True)
class BasicExtra:
    """Extra info of a component type that carries no fields."""

    kind: ComponentType

    def __post_init__(self) -> None:
        if self.kind not in _FIELDLESS_KINDS:
            raise ValueError(f"component type {self.kind.value} has its own extra info")

    def __str__(self) -> str:
        return self.kind.value


Extra = Union[LangbridgeExtra, UiExtra, LayoutExtra, BasicExtra]


def extra_to_dict(extra: Extra) -> dict[str, Any]:
    """Serialize extra info as ``{type name: fields}``."""
    if isinstance(extra, LangbridgeExtra):
        body: dict[str, Any] = {"bind_langs": [lang.value for lang in extra.bind_langs]}
    elif isinstance(extra, UiExtra):
        body = {
            "is_immediate": extra.is_immediate,
            "reactivity": extra.reactivity.value,
            "declarativity": extra.declarativity.value,
            "macrotivity": extra.macrotivity.value,
            "language": _ui_lang_to_data(extra.language),
            "hot_reload": extra.hot_reload,
            "ssr": extra.ssr,
            "liveview": extra.liveview,
        }
    elif isinstance(extra, LayoutExtra):
        body = {
            "constraint_based": extra.constraint_based,
            "css": extra.css,
            "flexbox": extra.flexbox,
            "grid": extra.grid,
        }
    elif isinstance(extra, BasicExtra):
        body = {}
    else:
        raise TypeError(f"not an extra info value: {extra!r}")
    return {extra.kind.value: body}


def extra_from_dict(data: Any) -> Extra:
    """Inverse of :func:`extra_to_dict`."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("extra info must be a mapping with exactly one type name")
    ((key, body), ) = data.items()
    kind = ComponentType(key)
    if kind is ComponentType.LANGBRIDGE:
        return LangbridgeExtra([Lang(v) for v in _require(body, "bind_langs")])
    if kind is ComponentType.UI:
        return UiExtra(
            is_immediate=bool(_require(body, "is_immediate")),
            reactivity=Reactivity(_require(body, "reactivity")),
            declarativity=RoughRange(_require(body, "declarativity")),
            macrotivity=RoughRange(_require(body, "macrotivity")),
            language=_ui_lang_from_data(_require(body, "language")),
            hot_reload=bool(_require(body, "hot_reload")),
            ssr=bool(_require(body, "ssr")),
            liveview=bool(_require(body, "liveview")),
        )
    if kind is ComponentType.LAYOUT:
        return LayoutExtra(
            constraint_based=bool(_require(body, "constraint_based")),
            css=bool(_require(body, "css")),
            flexbox=bool(_require(body, "flexbox")),
            grid=bool(_require(body, "grid")),
        )
    return BasicExtra(kind)


@dataclass
class ComponentEntry:
    """A catalogue entry: identifier, info, extras and its path tree lines."""

    str_id: str
    info: Info
    extra: Extra
    paths: list[list[str]] = field(default_factory=list)


@dataclass
class Component:
    """A component placed in the constellation, with its expanded id paths."""

    id: int
    str_id: str
    typ: ComponentType
    info: Info
    extra: Extra
    paths: list[list[int]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "str_id": self.str_id,
            "typ": self.typ.value,
            "info": self.info.to_dict(),
            "extra": extra_to_dict(self.extra),
            "paths": [list(path) for path in self.paths],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Component:
        return cls(
            id=int(_require(data, "id")),
            str_id=_require(data, "str_id"),
            typ=ComponentType(_require(data, "typ")),
            info=Info.from_dict(_require(data, "info")),
            extra=extra_from_dict(_require(data, "extra")),
            paths=[[int(i) for i in path] for path in data.get("paths", [])],
        )


@dataclass
class StarCache:
    """Cached repository star count of one component."""

    update_time: datetime
    comp_id: int
    comp_str_id: str
    repo: Repo | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "update_time": self.update_time.isoformat(),
            "comp_id": self.comp_id,
            "comp_str_id": self.comp_str_id,
            "repo": None if self.repo is None else self.repo.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> StarCache:
        repo = _require(data, "repo")
        return cls(
            update_time=datetime.fromisoformat(_require(data, "update_time")),
            comp_id=int(_require(data, "comp_id")),
            comp_str_id=_require(data, "comp_str_id"),
            repo=None if repo is None else Repo.from_dict(repo),
        )