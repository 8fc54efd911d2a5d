"""Command resolution — validate, then dispatch.

A :class:`Resolver` is built once per run.  Construction validates that
the invocation names a registered command; :meth:`Resolver.resolve` then
checks the required argument (class commands only) and executes the
command through the injected :class:`~consolette.core.protocols.Invoker`.
"""

from __future__ import annotations

from typing import Any

from consolette.core.input import Input
from consolette.core.models import Binding, CallableBinding, ClassBinding
from consolette.core.protocols import Invoker
from consolette.core.registry import Registry
from consolette.exceptions import (
    MissingArgumentError,
    MissingCommandError,
    UnregisteredCommandError,
    UnresolvableCommandError,
)


class Resolver:
    """Resolves and executes the command named by an :class:`Input`.

    Raises
    ------
    MissingCommandError
        At construction, when the input carries no command name.
    UnregisteredCommandError
        At construction, when the name has no binding.
    """

    def __init__(self, invoker: Invoker, registry: Registry, input: Input) -> None:  # noqa: A002
        self.invoker = invoker
        self.registry = registry
        self.input = input

        name = input.get_command()
        if not name:
            raise MissingCommandError()
        binding = registry.get_command(name)
        if binding is None:
            raise UnregisteredCommandError(name)

        self.name: str = name
        self.binding: Binding = binding

    def resolve(self) -> Any:
        """Execute the command and return whatever it returns."""
        match self.binding:
            case CallableBinding(func=func):
                return self.invoker.call(func)
            case ClassBinding(command_class=command_class):
                instance = self._instantiate(command_class)
                return self.invoker.call(instance.run)

    def _instantiate(self, command_class: type) -> Any:
        try:
            argument = command_class.describe().argument
            if argument and not self.input.get_argument():
                raise MissingArgumentError(argument, self.name)
            return self.invoker.instantiate(command_class)
        except MissingArgumentError:
            raise
        except Exception as exc:
            raise UnresolvableCommandError(self.name) from exc
