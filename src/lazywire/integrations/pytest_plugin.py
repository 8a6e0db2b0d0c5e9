from __future__ import annotations

import pytest

from lazywire._internal.container import Container

LAZYWIRE_VALUES_MARKER = "lazywire_values"


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``lazywire_values`` marker."""
    config.addinivalue_line(
        "markers",
        f"{LAZYWIRE_VALUES_MARKER}(*mappings, **values): register static values on the "
        "lazywire_container fixture before the test runs.",
    )


@pytest.fixture()
def lazywire_container(request: pytest.FixtureRequest) -> Container:
    """Create a per-test container.

    The fixture is function-scoped, so registrations are isolated between
    tests. Mappings and keyword arguments of every ``@pytest.mark.lazywire_values(...)``
    marker applied to the test are registered with ``set_value``; markers
    closest to the test are applied first, and a key set by two markers
    raises ``DuplicateKeyError``.

    Override the fixture in a ``conftest.py`` to share application wiring:

    .. code-block:: python

        @pytest.fixture()
        def lazywire_container() -> Container:
            container = Container()
            wire_application(container)
            return container

    Returns:
        A new ``Container`` instance.

    """
    container = Container()
    for marker in request.node.iter_markers(LAZYWIRE_VALUES_MARKER):
        values: dict[str, object] = {}
        for mapping in marker.args:
            values.update(mapping)
        values.update(marker.kwargs)
        for key, value in values.items():
            container.set_value(key, value)
    return container


__all__ = ["LAZYWIRE_VALUES_MARKER", "lazywire_container"]
