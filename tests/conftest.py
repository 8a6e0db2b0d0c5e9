"""Shared pytest fixtures for lazywire tests."""

import pytest

from lazywire import Container, LockMode

pytest_plugins = ["lazywire.integrations.pytest_plugin"]


@pytest.fixture()
def container() -> Container:
    """Default container with thread locking."""
    return Container()


@pytest.fixture(params=[LockMode.THREAD, LockMode.NONE], ids=["thread", "none"])
def any_lock_container(request: pytest.FixtureRequest) -> Container:
    """Container for each lock mode, for single-threaded behavior checks."""
    return Container(lock_mode=request.param)
