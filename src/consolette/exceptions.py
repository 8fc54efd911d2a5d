"""Custom exception hierarchy for consolette.

Every error raised by the framework inherits from
:class:`ConsoletteError`, so that the console run loop can turn any of
them into a single red message without leaking a stack trace.

Hierarchy
---------
ConsoletteError
├── CommandError
│   ├── DuplicateCommandError
│   ├── MissingCommandError
│   ├── UnregisteredCommandError
│   ├── MissingArgumentError
│   └── UnresolvableCommandError
├── UnresolvableDependencyError
└── InvalidColorError
    └── InvalidAlignmentError
"""

from __future__ import annotations


class ConsoletteError(Exception):
    """Base exception for all consolette errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command registration and resolution ----------------------------------

class CommandError(ConsoletteError):
    """Base class for registry and resolver failures."""


class DuplicateCommandError(CommandError):
    """Raised when a command name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command name [{name}] has already been used.")
        self.name = name


class MissingCommandError(CommandError):
    """Raised when resolution is attempted without a command name."""

    def __init__(self) -> None:
        super().__init__("Missing command name.")


class UnregisteredCommandError(CommandError):
    """Raised when the requested command has no binding."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown command [{name}]. Did you register this command?",
            hint="Run the program without a command to list the available ones.",
        )
        self.name = name


class MissingArgumentError(CommandError):
    """Raised when a class command requires an argument that was not given."""

    def __init__(self, argument: str, command: str) -> None:
        super().__init__(f"Missing argument [{argument}] for [{command}] command.")
        self.argument = argument
        self.command = command


class UnresolvableCommandError(CommandError):
    """Raised when a class command cannot be inspected or instantiated."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unable to resolve command [{name}].")
        self.name = name


# --- Dependency injection --------------------------------------------------

class UnresolvableDependencyError(ConsoletteError):
    """Raised when the container cannot supply a required parameter."""


# --- Styling ---------------------------------------------------------------

class InvalidColorError(ConsoletteError):
    """Raised for palette/RGB values outside 0-255 or malformed colors."""


class InvalidAlignmentError(InvalidColorError):
    """Raised when a table caption alignment is not a known value."""
