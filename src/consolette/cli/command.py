"""Base class for class-based commands."""

from __future__ import annotations

from typing import ClassVar

from consolette.cli.output import Output
from consolette.core.input import Input
from consolette.core.models import CommandSpec


class Command:
    """Subclass, fill in the metadata and implement :meth:`run`.

    Example::

        class Greet(Command):
            description = "Say hello."
            argument = "name"
            options = ("loud",)

            def run(self) -> int | None:
                return self.output.success(f"Hello {self.input.get_argument()}!")

    The constructor receives the invocation's :class:`Input` and the
    shared :class:`Output` from the container.  Subclasses may declare
    further constructor parameters; they are injected the same way.
    """

    description: ClassVar[str] = ""
    argument: ClassVar[str | None] = None
    options: ClassVar[tuple[str, ...]] = ()

    def __init__(self, input: Input, output: Output) -> None:  # noqa: A002
        self.input = input
        self.output = output

    @classmethod
    def describe(cls) -> CommandSpec:
        return CommandSpec(
            description=cls.description,
            argument=cls.argument,
            options=tuple(cls.options),
        )

    def run(self) -> int | None:
        raise NotImplementedError(f"{type(self).__name__} must implement run().")
