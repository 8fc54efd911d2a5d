"""Domain models for consolette.

Value objects only: named colors, caption alignment, command metadata,
and the two kinds of command binding.  No I/O and no behaviour beyond
simple data access.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from consolette.core.protocols import DescribedCommand


PLACEHOLDER: str = "-"
"""Shown in detailed command listings for empty metadata fields."""


# ---------------------------------------------------------------------------
# Styling enums
# ---------------------------------------------------------------------------

class Color(IntEnum):
    """The eight named terminal colors plus the terminal default."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9


class Alignment(IntEnum):
    """Horizontal text alignment inside a fixed-width cell."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2


# ---------------------------------------------------------------------------
# Command metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Static metadata a class command declares about itself."""

    description: str = ""
    """One-line summary shown in the command listing."""

    argument: str | None = None
    """Name of the required positional argument, or ``None``."""

    options: tuple[str, ...] = ()
    """Names of the optional ``--options`` the command understands."""


@dataclass(frozen=True, slots=True)
class CommandDetail:
    """One row of the detailed command listing."""

    command: str
    description: str = PLACEHOLDER
    argument: str = PLACEHOLDER
    options: str = PLACEHOLDER

    @classmethod
    def from_spec(cls, command: str, spec: CommandSpec) -> CommandDetail:
        """Build a listing row, substituting the placeholder for empty fields."""
        options = ", ".join(option.strip() for option in spec.options if option.strip())
        return cls(
            command=command,
            description=spec.description or PLACEHOLDER,
            argument=PLACEHOLDER if spec.argument is None else spec.argument,
            options=options or PLACEHOLDER,
        )

    def as_row(self) -> dict[str, str]:
        return {
            "command": self.command,
            "description": self.description,
            "argument": self.argument,
            "options": self.options,
        }


# ---------------------------------------------------------------------------
# Command bindings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CallableBinding:
    """A command implemented by a plain callable, invoked directly."""

    func: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class ClassBinding:
    """A command implemented by a class exposing ``describe()`` and ``run()``."""

    command_class: type[DescribedCommand]


Binding = CallableBinding | ClassBinding
