"""Quickstart: register builders and static values, resolve them lazily.

Builders run on first access only. Every later ``get`` returns the cached
object, and builders can resolve other keys to form a dependency graph.
"""

from __future__ import annotations

from lazywire import Container, new


class Database:
    def __init__(self, url: str) -> None:
        self.url = url


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


def main() -> None:
    container = new()
    builds: list[str] = []

    def build_database(c: Container) -> Database:
        builds.append("db")
        return Database(c.get("db.url"))

    container.set_value("db.url", "sqlite:///app.db")
    container.set("db", build_database)
    container.set("users", lambda c: UserRepository(c.get("db")))

    print(f"keys={container.get_keys()}")  # => keys=['db.url', 'db', 'users']
    print(f"built_before_get={len(builds)}")  # => built_before_get=0

    first = container.get("users")
    second = container.get("users")

    print(f"same_instance={first is second}")  # => same_instance=True
    print(f"database_url={first.database.url}")  # => database_url=sqlite:///app.db
    print(f"builds={builds}")  # => builds=['db']
    print(f"has_cache={container.has('cache')}")  # => has_cache=False


if __name__ == "__main__":
    main()
