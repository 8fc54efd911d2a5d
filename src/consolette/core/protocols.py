"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on concrete
implementations, so the dependency-injection mechanism and the command
base class can live in outer layers.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from consolette.core.models import CommandSpec


class Invoker(Protocol):
    """Contract for the dependency-injection capability.

    Given a class or a callable, produce the instance or the call result
    with every parameter supplied from the invoker's bindings.
    """

    def instantiate(self, cls: type) -> Any:
        """Construct *cls*, injecting its constructor parameters.

        Raises
        ------
        UnresolvableDependencyError
            When a required parameter cannot be supplied.
        """
        ...  # pragma: no cover

    def call(self, func: Callable[..., Any]) -> Any:
        """Invoke *func*, injecting its parameters, and return the result."""
        ...  # pragma: no cover


class DescribedCommand(Protocol):
    """Contract for class commands.

    The class declares its metadata through :meth:`describe` and is
    executed through :meth:`run` on an injected instance.
    """

    @classmethod
    def describe(cls) -> CommandSpec:
        """Return the command's static metadata."""
        ...  # pragma: no cover

    def run(self) -> int | None:
        """Execute the command and return an exit code (``None`` means success)."""
        ...  # pragma: no cover
