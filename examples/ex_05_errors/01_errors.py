"""Wiring errors and how they surface.

Every misuse raises immediately. All errors share the ``LazyWireError`` base,
so application startup can report them in one place.
"""

from __future__ import annotations

from lazywire import (
    AlreadyResolvedError,
    Container,
    DuplicateKeyError,
    LazyWireError,
    TypeMismatchError,
    UnknownKeyError,
)


class Cache:
    pass


def tune_cache(cache: Cache, container: Container) -> Cache:
    return cache


def main() -> None:
    container = Container()
    container.set("cache", lambda c: Cache())
    container.set_value("cache.ttl", 60)

    try:
        container.set("cache", lambda c: Cache())
    except DuplicateKeyError as error:
        print(error)  # => Key 'cache' is already registered.

    try:
        container.get("missing")
    except UnknownKeyError as error:
        print(error)  # => Key 'missing' is not registered.

    try:
        container.extend("cache.ttl", tune_cache)
    except AlreadyResolvedError as error:
        print(error)  # => Key 'cache.ttl' holds a static value and can no longer be extended.

    container.set("text", lambda c: "not a cache")
    container.extend("text", tune_cache)
    try:
        container.get("text")
    except TypeMismatchError as error:
        print(error)  # => Type mismatch for key 'text': expected 'Cache', got 'str'.

    print(f"is_lazywire_error={issubclass(TypeMismatchError, LazyWireError)}")  # => is_lazywire_error=True


if __name__ == "__main__":
    main()
