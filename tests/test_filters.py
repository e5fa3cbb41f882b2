from interspace.filters import ComponentIdFilter, ComponentTypeFilter, OwnerFilter
from interspace.model import (
    BasicExtra,
    Component,
    ComponentType,
    Info,
    SourceOpenness,
)


def _comp(comp_id, typ=ComponentType.PLATFORM, owner="Acme"):
    info = Info(
        name=f"c{comp_id}",
        owner=owner,
        description="",
        website="",
        code_openness=SourceOpenness.NA,
    )
    return Component(
        id=comp_id,
        str_id=f"C{comp_id}",
        typ=typ,
        info=info,
        extra=BasicExtra(ComponentType.PLATFORM),
    )


def test_id_filter_toggle_and_filter():
    f = ComponentIdFilter()
    assert f.filter(_comp(3)) is True
    f.toggle(3)
    assert f.disallowed == [3]
    assert f.filter(_comp(3)) is False
    assert f.filter(_comp(4)) is True
    f.toggle(3)
    assert f.disallowed == []
    assert f.filter(_comp(3)) is True


def test_id_filter_keeps_order():
    f = ComponentIdFilter([1, 2])
    f.toggle(5)
    f.toggle(1)
    assert f.disallowed == [2, 5]


def test_type_filter():
    f = ComponentTypeFilter()
    assert f.filter(_comp(0, ComponentType.UI)) is False
    f.toggle(ComponentType.UI)
    assert f.filter(_comp(0, ComponentType.UI)) is True
    assert f.filter(_comp(0, ComponentType.LAYOUT)) is False
    f.toggle(ComponentType.UI)
    assert f.allowed == []


def test_owner_filter():
    f = OwnerFilter()
    comp = _comp(0, owner="Acme")
    assert f.filter(comp) is True
    f.toggle("Acme")
    assert f.filter(comp) is False
    assert f.filter(_comp(1, owner="Other")) is True
    f.toggle("Acme")
    assert f.disallowed == []
    assert f.filter(comp) is True


def test_double_toggle_is_identity():
    f = OwnerFilter(["A", "B"])
    f.toggle("C")
    f.toggle("C")
    assert f.disallowed == ["A", "B"]