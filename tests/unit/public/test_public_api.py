import inspect

import lazywire
from lazywire import Container, LockMode


def test_all_exports_are_importable() -> None:
    for name in lazywire.__all__:
        assert hasattr(lazywire, name), name


def test_public_container_methods() -> None:
    public = {
        name
        for name, member in inspect.getmembers(Container)
        if not name.startswith("_") and callable(member)
    }

    assert public == {"extend", "fill", "get", "get_keys", "has", "set", "set_value"}


def test_lock_mode_values() -> None:
    assert [mode.value for mode in LockMode] == ["thread", "none"]


def test_public_methods_have_docstrings() -> None:
    for name in ("set", "set_value", "extend", "get", "fill", "has", "get_keys"):
        assert inspect.getdoc(getattr(Container, name)), name
    assert inspect.getdoc(lazywire.new)
