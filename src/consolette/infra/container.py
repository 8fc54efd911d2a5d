"""Minimal dependency-injection container.

Instances are bound by type and, optionally, by parameter name.  When a
class is instantiated or a callable is invoked, each parameter is
supplied in this order:

1. an instance bound to the parameter's annotated type (or a subclass),
2. an instance bound to the parameter's name,
3. the parameter's own default value.

Anything else raises :class:`~consolette.exceptions.UnresolvableDependencyError`.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from typing import Any

from consolette.exceptions import UnresolvableDependencyError

_MISSING = object()


class Container:
    """Satisfies the :class:`~consolette.core.protocols.Invoker` protocol."""

    def __init__(self) -> None:
        self._by_type: dict[type, Any] = {}
        self._by_name: dict[str, Any] = {}

    def bind(self, key: type | str, instance: Any) -> Container:
        """Make *instance* available for parameters typed or named *key*."""
        if isinstance(key, str):
            self._by_name[key] = instance
        else:
            self._by_type[key] = instance
        return self

    def instantiate(self, cls: type) -> Any:
        return cls(**self._arguments(cls.__init__, cls.__qualname__, skip_first=True))

    def call(self, func: Callable[..., Any]) -> Any:
        return func(**self._arguments(func, getattr(func, "__qualname__", repr(func))))

    def resolve(self, target: type | Callable[..., Any], method: str | None = None) -> Any:
        """Instantiate a class (then call *method* on it) or call a callable."""
        if isinstance(target, type):
            instance = self.instantiate(target)
            return instance if method is None else self.call(getattr(instance, method))
        return self.call(target)

    # ------------------------------------------------------------------

    def _arguments(self, func: Callable[..., Any], owner: str, skip_first: bool = False) -> dict[str, Any]:
        if func is object.__init__:
            return {}
        parameters = list(inspect.signature(func).parameters.values())
        if skip_first:
            parameters = parameters[1:]
        hints = _type_hints(func)

        arguments: dict[str, Any] = {}
        for parameter in parameters:
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            value = self._lookup(parameter.name, hints.get(parameter.name))
            if value is not _MISSING:
                arguments[parameter.name] = value
            elif parameter.default is parameter.empty:
                raise UnresolvableDependencyError(
                    f"Unable to resolve parameter [{parameter.name}] of [{owner}].",
                )
        return arguments

    def _lookup(self, name: str, annotation: Any) -> Any:
        if isinstance(annotation, type):
            if annotation in self._by_type:
                return self._by_type[annotation]
            for bound_type, instance in self._by_type.items():
                if issubclass(bound_type, annotation):
                    return instance
        return self._by_name.get(name, _MISSING)


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    """Evaluated annotations of *func*; empty when they cannot be resolved."""
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError):
        return {}
