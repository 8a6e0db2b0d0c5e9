from __future__ import annotations

from typing import Any, Generic, TypeVar, cast

from lazywire.exceptions import SlotEmptyError, TypeMismatchError

T = TypeVar("T")

_EMPTY: Any = object()


class Slot(Generic[T]):
    """Hold a caller-owned value of one exact type.

    A slot is the write target of ``Container.fill``. It is created empty with
    the concrete type it accepts, and only values whose ``type()`` is exactly
    that type can be assigned; subclasses are rejected as well.

    Examples:
        .. code-block:: python

            slot = Slot(Database)
            container.fill("db", slot)
            database = slot.value

    """

    __slots__ = ("_expected_type", "_value")

    def __init__(self, expected_type: type[T]) -> None:
        if not isinstance(expected_type, type):
            msg = f"Slot expected type must be a class, got {expected_type!r}."
            raise TypeError(msg)
        self._expected_type = expected_type
        self._value: T = _EMPTY

    @property
    def expected_type(self) -> type[T]:
        return self._expected_type

    @property
    def is_filled(self) -> bool:
        return self._value is not _EMPTY

    @property
    def value(self) -> T:
        """Return the assigned value.

        Raises:
            SlotEmptyError: If nothing was assigned yet.

        """
        if self._value is _EMPTY:
            msg = f"Slot of type '{self._expected_type.__qualname__}' has not been filled."
            raise SlotEmptyError(msg)
        return self._value

    def assign(self, value: object, *, key: str | None = None) -> None:
        """Store ``value`` if its concrete type is exactly ``expected_type``.

        The slot is left untouched when the check fails.

        Args:
            value: Value to store.
            key: Container key the value was resolved from, used in error messages.

        Raises:
            TypeMismatchError: If ``type(value)`` is not ``expected_type``.

        """
        if type(value) is not self._expected_type:
            raise TypeMismatchError(key, self._expected_type, type(value))
        self._value = cast("T", value)

    def __repr__(self) -> str:
        state = repr(self._value) if self.is_filled else "<empty>"
        return f"Slot[{self._expected_type.__qualname__}]({state})"


__all__ = ["Slot"]
