"""Implementation languages of the catalogued components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LangType(Enum):
    """How a language is usually executed."""

    NA = "NA"
    AOT = "AOT"
    JIT = "JIT"
    INTERPRETED = "Interpreted"


@dataclass(frozen=True)
class LangInfo:
    """Display name and execution model of a language."""

    name: str
    langtype: LangType


class Lang(Enum):
    """A programming or markup language; the value is its serialized name."""

    NA = "NA"
    TODO = "TODO"
    C = "C"
    CPP = "Cpp"
    CSHARP = "Csharp"
    DART = "Dart"
    HTML = "Html"
    JAVA = "Java"
    JAVASCRIPT = "Javascript"
    KOTLIN = "Kotlin"
    OBJECTIVEC = "Objectivec"
    QML = "Qml"
    PYTHON = "Python"
    RUBY = "Ruby"
    RUST = "Rust"
    SLINTMARKUP = "Slintmarkup"
    SWIFT = "Swift"
    TYPESCRIPT = "Typescript"

    def info(self) -> LangInfo:
        """Return the display name and execution model of this language."""
        return _LANG_INFO[self]


_LANG_INFO: dict[Lang, LangInfo] = {
    Lang.NA: LangInfo("N/A", LangType.NA),
    Lang.TODO: LangInfo("TODO", LangType.NA),
    Lang.C: LangInfo("C", LangType.AOT),
    Lang.CPP: LangInfo("C++", LangType.AOT),
    Lang.CSHARP: LangInfo("C#", LangType.JIT),
    Lang.DART: LangInfo("Dart", LangType.JIT),
    Lang.HTML: LangInfo("HTML", LangType.NA),
    Lang.JAVA: LangInfo("Java", LangType.JIT),
    Lang.JAVASCRIPT: LangInfo("Javascript", LangType.JIT),
    Lang.KOTLIN: LangInfo("Kotlin", LangType.JIT),
    Lang.OBJECTIVEC: LangInfo("Objective C", LangType.AOT),
    Lang.PYTHON: LangInfo("Python", LangType.NA),
    Lang.QML: LangInfo("QML", LangType.NA),
    Lang.RUBY: LangInfo("Ruby", LangType.JIT),
    Lang.RUST: LangInfo("Rust", LangType.AOT),
    Lang.SLINTMARKUP: LangInfo("Slint Markup", LangType.NA),
    Lang.SWIFT: LangInfo("Swift", LangType.AOT),
    Lang.TYPESCRIPT: LangInfo("Typescript", LangType.JIT),
}