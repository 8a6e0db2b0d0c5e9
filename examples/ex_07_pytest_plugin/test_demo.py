from __future__ import annotations

import pytest

from lazywire import Container

pytest_plugins = ["lazywire.integrations.pytest_plugin"]


class Greeter:
    def __init__(self, name: str) -> None:
        self.name = name

    def greet(self) -> str:
        return f"Hello, {self.name}!"


@pytest.mark.lazywire_values({"greeter.name": "tests"})
def test_plugin_container_has_marker_values(lazywire_container: Container) -> None:
    lazywire_container.set("greeter", lambda c: Greeter(c.get("greeter.name")))

    assert lazywire_container.get("greeter").greet() == "Hello, tests!"


def test_plugin_container_is_fresh_per_test(lazywire_container: Container) -> None:
    assert lazywire_container.get_keys() == []
