"""Pydantic settings as static container values.

``set_settings`` copies an already loaded settings object into the container:
the object under one key and, with ``prefix``, every field under its own key.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from lazywire import Container
from lazywire.integrations.pydantic_settings import set_settings


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LAZYWIRE_EXAMPLE_")

    database_url: str = "sqlite:///example.db"
    pool_size: int = 5


def main() -> None:
    container = Container()
    keys = set_settings(container, AppSettings(), prefix="app")

    print(f"keys={keys}")  # => keys=['app_settings', 'app.database_url', 'app.pool_size']
    print(f"pool_size={container.get('app.pool_size')}")  # => pool_size=5

    container.set("pool", lambda c: [None] * c.get("app.pool_size"))
    print(f"pool_len={len(container.get('pool'))}")  # => pool_len=5


if __name__ == "__main__":
    main()
