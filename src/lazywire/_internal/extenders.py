from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from lazywire._internal.type_checks import is_runtime_class
from lazywire.exceptions import TypeMismatchError


@dataclass(frozen=True, slots=True)
class ExtenderSpec:
    """An extender callable plus the runtime classes it declares.

    ``value_type`` is the annotated class of the first parameter and
    ``return_type`` the annotated return class. Either is ``None`` when the
    annotation is missing or cannot be checked with ``isinstance``.

    Whatever the annotations say, an extender must return a value of the same
    concrete type it received; annotations only add checks on top of that.
    """

    extender: Callable[[Any, Any], Any]
    value_type: type[Any] | None = None
    return_type: type[Any] | None = None

    def apply(self, key: str, value: Any, container: Any) -> Any:
        """Run the extender on ``value`` and check both ends of the call.

        Raises:
            TypeMismatchError: If ``value`` or the returned value does not match
                the declared classes, or if the returned value's concrete type
                differs from ``type(value)``.

        """
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise TypeMismatchError(key, self.value_type, type(value))
        extended = self.extender(value, container)
        if self.return_type is not None and not isinstance(extended, self.return_type):
            raise TypeMismatchError(key, self.return_type, type(extended))
        if type(extended) is not type(value):
            raise TypeMismatchError(key, type(value), type(extended))
        return extended


class ExtenderSpecExtractor:
    """Extracts declared value/return classes from user-defined extenders."""

    def extract(self, extender: Callable[[Any, Any], Any]) -> ExtenderSpec:
        """Build an ``ExtenderSpec`` from the extender's annotations.

        Annotations that cannot be evaluated (for example forward references to
        names that do not exist at module level, or strings that are not valid
        Python) disable the corresponding annotation check; the same-type check
        in ``ExtenderSpec.apply`` still applies.

        Args:
            extender: Extender callable to inspect.

        """
        type_hints = self._resolved_type_hints(extender)
        value_parameter = self._first_parameter_name(extender)

        value_annotation = type_hints.get(value_parameter) if value_parameter else None
        return ExtenderSpec(
            extender=extender,
            value_type=self._checkable_class(value_annotation),
            return_type=self._checkable_class(type_hints.get("return")),
        )

    def _resolved_type_hints(self, extender: Callable[..., Any]) -> dict[str, Any]:
        target = extender
        if not (inspect.isfunction(extender) or inspect.ismethod(extender)):
            target = getattr(type(extender), "__call__", extender)  # noqa: B004
        try:
            return get_type_hints(target, include_extras=True)
        except (AttributeError, NameError, SyntaxError, TypeError):
            return {}

    def _first_parameter_name(self, extender: Callable[..., Any]) -> str | None:
        try:
            parameters = list(inspect.signature(extender).parameters.values())
        except (TypeError, ValueError):
            return None
        positional_kinds = (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        )
        if parameters and parameters[0].kind in positional_kinds:
            return parameters[0].name
        return None

    def _checkable_class(self, annotation: Any) -> type[Any] | None:
        annotation = self._unwrap_annotated(annotation)
        if is_runtime_class(annotation):
            return annotation
        return None

    def _unwrap_annotated(self, annotation: Any) -> Any:
        if get_origin(annotation) is not Annotated:
            return annotation
        return self._unwrap_annotated(get_args(annotation)[0])


__all__ = ["ExtenderSpec", "ExtenderSpecExtractor"]
