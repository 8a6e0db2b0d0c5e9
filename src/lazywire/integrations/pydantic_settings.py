from __future__ import annotations

import logging
import re

from pydantic_settings import BaseSettings

from lazywire._internal.container import Container
from lazywire.exceptions import InvalidRegistrationError

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def default_settings_key(settings_type: type[BaseSettings]) -> str:
    """Return the snake_case class name used when no explicit key is given.

    ``AppSettings`` maps to ``"app_settings"``.
    """
    return _CAMEL_BOUNDARY.sub("_", settings_type.__name__).lower()


def set_settings(
    container: Container,
    settings: BaseSettings,
    *,
    key: str | None = None,
    prefix: str | None = None,
) -> list[str]:
    """Register an already loaded settings object as static container values.

    The settings object itself is registered under ``key``. When ``prefix`` is
    given, every model field is also registered under ``"<prefix>.<field>"``
    in model field order, so builders can depend on single values.

    Loading (environment variables, dotenv files, CLI sources) stays with
    ``pydantic-settings``; this function only copies the result.

    Args:
        container: Container receiving the values.
        settings: Loaded ``pydantic_settings.BaseSettings`` instance.
        key: Key of the settings object. Defaults to the snake_case class name.
        prefix: Optional key prefix for per-field values.

    Returns:
        Registered keys, in registration order.

    Raises:
        InvalidRegistrationError: If ``settings`` is not a ``BaseSettings`` instance.
        DuplicateKeyError: If any key is already registered. Keys registered
            before the collision stay registered.

    Examples:
        .. code-block:: python

            class AppSettings(BaseSettings):
                database_url: str = "sqlite://"

            set_settings(container, AppSettings(), prefix="app")
            container.get("app.database_url")

    """
    if not isinstance(settings, BaseSettings):
        msg = (
            "set_settings() parameter 'settings' must be a pydantic_settings.BaseSettings "
            f"instance, got {type(settings).__qualname__}."
        )
        raise InvalidRegistrationError(msg)

    settings_key = key if key is not None else default_settings_key(type(settings))
    container.set_value(settings_key, settings)
    registered = [settings_key]

    if prefix is not None:
        for field_name in type(settings).model_fields:
            field_key = f"{prefix}.{field_name}"
            container.set_value(field_key, getattr(settings, field_name))
            registered.append(field_key)

    logger.info(
        "Registered %d settings key(s) from %s",
        len(registered),
        type(settings).__qualname__,
    )
    return registered


__all__ = ["default_settings_key", "set_settings"]
