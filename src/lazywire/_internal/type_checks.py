from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a concrete runtime class usable for isinstance checks.

    Generic aliases and protocol classes are rejected: they describe a shape, not a
    concrete type a resolved value can be compared against.

    Args:
        candidate: Annotation value being checked.

    """
    if candidate is Any:
        return False
    if not isinstance(candidate, type) or isinstance(candidate, types.GenericAlias):
        return False
    return not getattr(candidate, "_is_protocol", False)


__all__ = ["is_runtime_class"]
