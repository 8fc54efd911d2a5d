"""Console application — command registration and the run loop.

:meth:`Console.run` is the framework's error boundary: any exception
raised while resolving or running a command is shown as a single red
message and mapped to :data:`~consolette.cli.exit_codes.GENERAL_ERROR`.
The process itself is only exited by :func:`consolette.cli.app.cli`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from consolette.cli import exit_codes
from consolette.cli.output import Output
from consolette.core.input import Input
from consolette.core.models import Binding
from consolette.core.protocols import Invoker
from consolette.core.registry import Registry
from consolette.core.resolver import Resolver
from consolette.infra.container import Container

LISTING_CAPTION: str = "Available Commands"
LISTING_PADDING: int = 7


class Console:
    """Wires input, output, registry and invoker into one application.

    When no *invoker* is given, a :class:`Container` is created with the
    input, output, registry and console bound by type and by name, so
    commands can ask for any of them.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        input: Input | None = None,  # noqa: A002
        output: Output | None = None,
        invoker: Invoker | None = None,
    ) -> None:
        self.registry = Registry() if registry is None else registry
        self.input = Input() if input is None else input
        self.output = Output() if output is None else output
        self.invoker = self._default_container() if invoker is None else invoker

    def add_command(self, name: str, command: type | Callable[..., Any] | Binding) -> Console:
        self.registry.add_command(name, command)
        return self

    def clear(self) -> Console:
        self.output.clear()
        return self

    def run(self) -> int:
        """Run the invoked command and return the process exit code."""
        try:
            if not self.input.has_command():
                return self._show_commands()
            result = Resolver(self.invoker, self.registry, self.input).resolve()
        except Exception as exc:  # noqa: BLE001
            code = self.output.error(str(exc)) or exit_codes.GENERAL_ERROR
            hint = getattr(exc, "hint", None)
            if hint:
                self.output.warning(f"Hint: {hint}", exit=False)
            return code
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return exit_codes.SUCCESS

    def _show_commands(self) -> int:
        commands = self.registry.get_detailed_commands()
        if not commands:
            return self.output.info("No available commands.") or exit_codes.SUCCESS
        self.output.table([detail.as_row() for detail in commands], LISTING_CAPTION, LISTING_PADDING)
        return exit_codes.SUCCESS

    def _default_container(self) -> Container:
        container = Container()
        for key, instance in (
            (Input, self.input),
            (Output, self.output),
            (Registry, self.registry),
            (Console, self),
        ):
            container.bind(key, instance).bind(key.__name__.lower(), instance)
        return container
