from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias, TypeVar, cast

from lazywire._internal.extenders import ExtenderSpec, ExtenderSpecExtractor
from lazywire._internal.slot import Slot
from lazywire.exceptions import (
    AlreadyResolvedError,
    DuplicateKeyError,
    InvalidRegistrationError,
    UnknownKeyError,
)
from lazywire.lock_mode import LockMode

T = TypeVar("T")

Builder: TypeAlias = Callable[["Container"], Any]
"""Callable producing a key's initial value from the container."""

Extender: TypeAlias = Callable[[T, "Container"], T]
"""Callable transforming a previously built value, given the container."""

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Entry:
    builder: Builder | None = None
    extenders: list[ExtenderSpec] = field(default_factory=list)
    value: Any = None
    is_resolved: bool = False
    is_static: bool = False


class Container:
    """Map string keys to lazily built, cached service instances.

    Register a builder with ``set`` or a ready value with ``set_value``, decorate
    builders with ``extend``, and read values back with ``get`` or ``fill``. A
    builder runs on the first ``get``/``fill`` of its key, followed by the key's
    extenders in registration order; the result is cached for the lifetime of
    the container and returned by every later call.

    Builders and extenders receive the container, so they can resolve other
    keys. Resolution cycles are not detected and end in ``RecursionError``.
    """

    def __init__(
        self,
        *,
        lock_mode: LockMode | Literal["thread", "none"] = LockMode.THREAD,
    ) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: Locking strategy. ``LockMode.THREAD`` serializes all
                operations with one reentrant lock, which guarantees that a
                builder runs at most once even under concurrent first access.
                ``LockMode.NONE`` disables locking for single-threaded hosts.

        Raises:
            InvalidRegistrationError: If ``lock_mode`` is not a known mode.

        """
        self._lock_mode = self._resolve_lock_mode(lock_mode)
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._lock_mode is LockMode.THREAD else nullcontext()
        )
        self._entries: dict[str, _Entry] = {}
        self._extender_spec_extractor = ExtenderSpecExtractor()

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    # region Registration Methods
    def set(self, key: str, builder: Builder) -> None:
        """Register a builder for ``key`` without calling it.

        The builder runs on the first ``get``/``fill`` of the key and receives
        the container as its only argument.

        Args:
            key: Non-empty key to register.
            builder: Callable producing the key's initial value.

        Raises:
            DuplicateKeyError: If ``key`` is already registered.
            InvalidRegistrationError: If ``key`` is empty or ``builder`` is not callable.

        Examples:
            .. code-block:: python

                container.set("db", lambda c: Database(c.get("db.url")))

        """
        self._validate_key(key, method_name="set")
        if not callable(builder):
            msg = f"set() parameter 'builder' must be callable, got {builder!r}."
            raise InvalidRegistrationError(msg)

        with self._lock:
            if key in self._entries:
                raise DuplicateKeyError(key)
            self._entries[key] = _Entry(builder=builder)
        logger.debug("Registered builder for '%s'", key)

    def set_value(self, key: str, value: Any) -> None:
        """Register an already constructed value for ``key``.

        The entry is resolved immediately and can never be extended.

        Args:
            key: Non-empty key to register.
            value: Value returned by every later ``get``.

        Raises:
            DuplicateKeyError: If ``key`` is already registered.
            InvalidRegistrationError: If ``key`` is empty.

        """
        self._validate_key(key, method_name="set_value")

        with self._lock:
            if key in self._entries:
                raise DuplicateKeyError(key)
            self._entries[key] = _Entry(value=value, is_resolved=True, is_static=True)
        logger.debug("Registered static value for '%s'", key)

    def extend(self, key: str, extender: Extender[Any]) -> None:
        """Append an extender to the builder chain of ``key``.

        Extenders run after the builder, in the order they were added, each
        receiving the previous value and the container and returning the value
        passed on. When the key is resolved, each extender must return a value
        of the same concrete type it received, and annotated parameter and
        return classes are checked against the actual values.

        Args:
            key: Key previously registered with ``set``.
            extender: Callable ``(value, container) -> value``.

        Raises:
            UnknownKeyError: If ``key`` is not registered.
            AlreadyResolvedError: If ``key`` is already resolved, which includes
                every ``set_value`` entry.
            InvalidRegistrationError: If ``extender`` is not callable.

        Examples:
            .. code-block:: python

                def add_tracing(client: HttpClient, container: Container) -> HttpClient:
                    client.tracer = container.get("tracer")
                    return client

                container.extend("http.client", add_tracing)

        """
        if not callable(extender):
            msg = f"extend() parameter 'extender' must be callable, got {extender!r}."
            raise InvalidRegistrationError(msg)
        spec = self._extender_spec_extractor.extract(extender)

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                raise UnknownKeyError(key)
            if entry.is_resolved:
                raise AlreadyResolvedError(key, is_static=entry.is_static)
            entry.extenders.append(spec)
            position = len(entry.extenders)
        logger.debug("Registered extender #%d for '%s'", position, key)

    # endregion Registration Methods

    # region Resolution

    def get(self, key: str) -> Any:
        """Return the value of ``key``, building it on first access.

        The first call runs the builder and every extender, caches the result
        and returns it. Later calls return the cached object without running
        anything again. If the builder or an extender raises, nothing is cached
        and the exception propagates.

        Raises:
            UnknownKeyError: If ``key`` is not registered.
            TypeMismatchError: If a value does not match an extender's
                annotated parameter or return class, or an extender returns a
                value of a different concrete type than it received.

        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                raise UnknownKeyError(key)
            if entry.is_resolved:
                return entry.value
            return self._resolve(key, entry)

    def fill(self, key: str, slot: Slot[T]) -> T:
        """Resolve ``key`` and assign the value to ``slot``.

        The value is assigned only when its concrete type is exactly the slot's
        expected type; otherwise the slot is left untouched.

        Args:
            key: Key to resolve.
            slot: Caller-owned write target.

        Returns:
            The resolved value.

        Raises:
            UnknownKeyError: If ``key`` is not registered.
            TypeMismatchError: If the resolved value's type is not the slot's
                expected type.
            TypeError: If ``slot`` is not a ``Slot``.

        Examples:
            .. code-block:: python

                slot = Slot(Database)
                container.fill("db", slot)
                slot.value.query("SELECT 1")

        """
        if not isinstance(slot, Slot):
            msg = f"fill() parameter 'slot' must be a Slot, got {type(slot).__qualname__}."
            raise TypeError(msg)

        value = self.get(key)
        slot.assign(value, key=key)
        return cast("T", value)

    def _resolve(self, key: str, entry: _Entry) -> Any:
        builder = cast("Builder", entry.builder)
        value = builder(self)
        for spec in entry.extenders:
            value = spec.apply(key, value, self)

        entry.value = value
        entry.is_resolved = True
        logger.debug("Resolved '%s' with %d extender(s)", key, len(entry.extenders))
        return value

    # endregion Resolution

    # region Introspection

    def has(self, key: str) -> bool:
        """Return whether ``key`` is registered, without resolving it. Never raises."""
        with self._lock:
            return isinstance(key, str) and key in self._entries

    def get_keys(self) -> list[str]:
        """Return registered keys in first-registration order."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"Container(keys={self.get_keys()!r}, lock_mode={self._lock_mode.value!r})"

    # endregion Introspection

    def _validate_key(self, key: object, *, method_name: str) -> None:
        if not isinstance(key, str) or not key:
            msg = f"{method_name}() parameter 'key' must be a non-empty string, got {key!r}."
            raise InvalidRegistrationError(msg)

    def _resolve_lock_mode(self, lock_mode: object) -> LockMode:
        if isinstance(lock_mode, LockMode):
            return lock_mode
        try:
            return LockMode(lock_mode)
        except ValueError:
            msg = f"Container() parameter 'lock_mode' must be a LockMode, got {lock_mode!r}."
            raise InvalidRegistrationError(msg) from None


def new(*, lock_mode: LockMode | Literal["thread", "none"] = LockMode.THREAD) -> Container:
    """Create an empty container.

    Equivalent to ``Container(lock_mode=lock_mode)``. There is no implicit
    process-wide container; pass the returned instance through your own
    initialization code.
    """
    return Container(lock_mode=lock_mode)


__all__ = ["Builder", "Container", "Extender", "new"]
