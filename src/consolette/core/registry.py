"""Command registry — name to binding storage.

Commands are registered either as a plain callable or as a class that
exposes ``describe()`` and ``run()`` (see
:class:`~consolette.core.protocols.DescribedCommand`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from consolette.core.models import (
    Binding,
    CallableBinding,
    ClassBinding,
    CommandDetail,
)
from consolette.exceptions import DuplicateCommandError


def to_binding(command: type | Callable[..., Any] | Binding) -> Binding:
    """Tag *command* as a class or callable binding."""
    if isinstance(command, (CallableBinding, ClassBinding)):
        return command
    if isinstance(command, type):
        return ClassBinding(command)
    if callable(command):
        return CallableBinding(command)
    raise TypeError(f"Command must be a class or a callable, got {type(command).__name__}.")


class Registry:
    """Holds every registered command for the lifetime of the process."""

    def __init__(self) -> None:
        self._commands: dict[str, Binding] = {}

    def add_command(self, name: str, command: type | Callable[..., Any] | Binding) -> Registry:
        """Register *command* under *name*.

        Raises
        ------
        DuplicateCommandError
            When *name* is already registered.
        """
        if name in self._commands:
            raise DuplicateCommandError(name)
        self._commands[name] = to_binding(command)
        return self

    def has(self, name: str) -> bool:
        return name in self._commands

    def get_command(self, name: str) -> Binding | None:
        return self._commands.get(name)

    def get_all_commands(self) -> dict[str, Binding]:
        return dict(self._commands)

    def get_detailed_commands(self) -> list[CommandDetail]:
        """Return one listing row per command, sorted for display."""
        details = [self._describe(name, binding) for name, binding in self._commands.items()]
        return sorted(
            details,
            key=lambda detail: (detail.command, detail.description, detail.argument, detail.options),
        )

    @staticmethod
    def _describe(name: str, binding: Binding) -> CommandDetail:
        match binding:
            case ClassBinding(command_class=command_class):
                describe = getattr(command_class, "describe", None)
                if describe is None:
                    return CommandDetail(command=name)
                return CommandDetail.from_spec(name, describe())
            case _:
                return CommandDetail(command=name)
