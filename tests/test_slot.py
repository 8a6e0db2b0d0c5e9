"""Tests for Slot typed write targets."""

import pytest

from lazywire import Slot, SlotEmptyError, TypeMismatchError


class Base:
    pass


class Derived(Base):
    pass


def test_new_slot_is_empty() -> None:
    slot = Slot(Base)

    assert slot.expected_type is Base
    assert not slot.is_filled
    with pytest.raises(SlotEmptyError, match="has not been filled"):
        _ = slot.value


def test_assign_exact_type() -> None:
    slot = Slot(Base)
    value = Base()

    slot.assign(value)

    assert slot.is_filled
    assert slot.value is value


def test_assign_subclass_is_rejected() -> None:
    slot = Slot(Base)

    with pytest.raises(TypeMismatchError) as exc_info:
        slot.assign(Derived())

    assert exc_info.value.expected is Base
    assert exc_info.value.actual is Derived
    assert not slot.is_filled


def test_assign_bool_into_int_slot_is_rejected() -> None:
    with pytest.raises(TypeMismatchError):
        Slot(int).assign(True)


def test_failed_assign_keeps_previous_value() -> None:
    slot = Slot(str)
    slot.assign("first")

    with pytest.raises(TypeMismatchError):
        slot.assign(2)

    assert slot.value == "first"


def test_assign_none_into_none_type_slot() -> None:
    slot = Slot(type(None))

    slot.assign(None)

    assert slot.is_filled
    assert slot.value is None


def test_expected_type_must_be_a_class() -> None:
    with pytest.raises(TypeError, match="must be a class"):
        Slot("str")  # type: ignore[arg-type]


def test_repr() -> None:
    slot = Slot(int)
    assert repr(slot) == "Slot[int](<empty>)"

    slot.assign(3)
    assert repr(slot) == "Slot[int](3)"
