from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for container registration and resolution.

    Use these values for the container-level ``lock_mode`` option. Container
    initialization also accepts the plain string values ``"thread"`` and
    ``"none"``.

    Keep the default ``THREAD`` mode whenever the container is shared between
    threads. ``NONE`` only fits single-threaded hosts, where it removes lock
    overhead from every call.
    """

    THREAD = "thread"
    """Serialize every container operation with one ``threading.RLock``."""

    NONE = "none"
    """Disable locking; concurrent first access may run a builder twice."""
