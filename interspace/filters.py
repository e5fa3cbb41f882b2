"""Filters that decide which components are shown."""

from __future__ import annotations

from dataclasses import dataclass, field

from interspace.model import Component, ComponentType


@dataclass
class ComponentIdFilter:
    """Hides the components whose ids are listed."""

    disallowed: list[int] = field(default_factory=list)

    def toggle(self, comp_id: int) -> None:
        if comp_id in self.disallowed:
            self.disallowed = [i for i in self.disallowed if i != comp_id]
        else:
            self.disallowed.append(comp_id)

    def filter(self, comp: Component) -> bool:
        return comp.id not in self.disallowed


@dataclass
class ComponentTypeFilter:
    """Shows only the components of the listed types."""

    allowed: list[ComponentType] = field(default_factory=list)

    def toggle(self, comp_type: ComponentType) -> None:
        if comp_type in self.allowed:
            self.allowed = [t for t in self.allowed if t != comp_type]
        else:
            self.allowed.append(comp_type)

    def filter(self, comp: Component) -> bool:
        return comp.typ in self.allowed


@dataclass
class OwnerFilter:
    """Hides the components of the listed owners."""

    disallowed: list[str] = field(default_factory=list)

    def toggle(self, owner: str) -> None:
        if owner in self.disallowed:
            self.disallowed = [o for o in self.disallowed if o != owner]
        else:
            self.disallowed.append(owner)

    def filter(self, comp: Component) -> bool:
        return comp.info.owner not in self.disallowed