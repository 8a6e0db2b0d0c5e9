from __future__ import annotations

from typing import Any


class LazyWireError(Exception):
    """Represent a base class for all lazywire-specific failures.

    Catch this type when you want to handle any lazywire error path without
    matching each concrete exception class individually, for example to report
    wiring errors at application startup.
    """


class InvalidRegistrationError(LazyWireError):
    """Signal invalid registration arguments or container configuration.

    Raised by ``Container.set``, ``Container.set_value`` and ``Container.extend``
    when the key is not a non-empty string or when a builder/extender is not
    callable, and by ``Container(lock_mode=...)`` for unknown lock modes.
    """


class DuplicateKeyError(LazyWireError):
    """Signal registration of a key that already has an entry.

    Raised by ``Container.set`` and ``Container.set_value``. Builder-backed and
    static entries share one key namespace, and re-registration is never
    allowed, so the first registration stays authoritative.

    Typical fix is removing the second registration or choosing a distinct key.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"Key '{key}' is already registered.")
        self.key = key


class UnknownKeyError(LazyWireError):
    """Signal use of a key that has no entry.

    Raised by ``Container.get``, ``Container.fill`` and ``Container.extend``.

    Typical fix is registering the key with ``set``/``set_value`` before it is
    resolved or extended.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"Key '{key}' is not registered.")
        self.key = key


class AlreadyResolvedError(LazyWireError):
    """Signal an extension registered after its key was resolved.

    Raised by ``Container.extend`` when the entry already holds a cached value,
    which is always the case for static entries. The extender would never run,
    so the call is rejected instead of being silently ignored.

    Typical fix is registering extenders during application wiring, before the
    first ``get``/``fill`` of the key.
    """

    def __init__(self, key: str, *, is_static: bool = False) -> None:
        reason = "holds a static value" if is_static else "is already resolved"
        super().__init__(f"Key '{key}' {reason} and can no longer be extended.")
        self.key = key
        self.is_static = is_static


class TypeMismatchError(LazyWireError):
    """Signal a value whose runtime type does not match the expected type.

    Raised by ``Container.fill`` and ``Slot.assign`` when the resolved value is
    not exactly of the slot's expected type, and during resolution when the
    value flowing into an extender (or returned by it) does not match the
    extender's annotated parameter (or return) class, or when an extender
    returns a value of a different concrete type than it received.

    Typical fix is returning the (possibly modified) value from the extender,
    since a missing ``return`` yields ``None``, or registering a new key
    instead of changing the type of an existing one.
    """

    def __init__(self, key: str | None, expected: type[Any], actual: type[Any]) -> None:
        where = f" for key '{key}'" if key is not None else ""
        super().__init__(
            f"Type mismatch{where}: expected '{expected.__qualname__}', "
            f"got '{actual.__qualname__}'.",
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class SlotEmptyError(LazyWireError):
    """Signal a read of ``Slot.value`` before the slot was filled.

    Typical fix is calling ``container.fill(key, slot)`` first, or checking
    ``slot.is_filled``.
    """
