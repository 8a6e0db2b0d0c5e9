from lazywire._internal.container import Builder, Container, Extender, new
from lazywire._internal.slot import Slot
from lazywire.exceptions import (
    AlreadyResolvedError,
    DuplicateKeyError,
    InvalidRegistrationError,
    LazyWireError,
    SlotEmptyError,
    TypeMismatchError,
    UnknownKeyError,
)
from lazywire.lock_mode import LockMode

__all__ = [
    "AlreadyResolvedError",
    "Builder",
    "Container",
    "DuplicateKeyError",
    "Extender",
    "InvalidRegistrationError",
    "LazyWireError",
    "LockMode",
    "Slot",
    "SlotEmptyError",
    "TypeMismatchError",
    "UnknownKeyError",
    "new",
]
