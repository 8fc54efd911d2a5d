"""Demo application entry point for consolette.

Registers a handful of sample commands on a :class:`Console` and wraps
it in the process-level error boundary:

* ``consolette``                     — list the available commands
* ``consolette greet <name> [--loud] [--greeting=Hi]``
* ``consolette palette [--bg]``      — show the named colors
* ``consolette version``
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from consolette.cli import exit_codes
from consolette.cli.application import Console
from consolette.cli.command import Command
from consolette.cli.console import console
from consolette.cli.output import Output
from consolette.core.input import Input
from consolette.core.models import Color
from consolette.version import __version__


# ---------------------------------------------------------------------------
# Sample commands
# ---------------------------------------------------------------------------

class GreetCommand(Command):
    description = "Greet someone by name."
    argument = "name"
    options = ("loud", "greeting")

    def run(self) -> int | None:
        greeting = self.input.get_option("greeting", "Hello")
        if greeting is True:
            return self.output.warning("--greeting needs a value, e.g. --greeting=Hi")
        message = f"{greeting}, {self.input.get_argument()}!"
        if self.input.get_option("loud"):
            message = message.upper()
        return self.output.success(message)


class PaletteCommand(Command):
    description = "Show the named terminal colors."
    options = ("bg",)

    def run(self) -> int | None:
        background = bool(self.input.get_option("bg"))
        rows = []
        for color in Color:
            styles = self.output.styles.reset()
            if background:
                styles.bg_color(color).padding_x(1)
            else:
                styles.fg_color(color)
            sample = styles.apply(color.name.lower(), reset=True)
            rows.append({"color": color.name.lower(), "code": str(color.value), "sample": sample})
        self.output.table(rows, "Colors")
        return exit_codes.SUCCESS


def show_version(output: Output) -> int | None:
    return output.info(f"consolette {__version__}")


def build_console(argv: Sequence[str] | None = None, output: Output | None = None) -> Console:
    """Create the demo console with every sample command registered."""
    return (
        Console(input=Input(argv), output=output)
        .add_command("greet", GreetCommand)
        .add_command("palette", PaletteCommand)
        .add_command("version", show_version)
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the demo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    return build_console(argv).run()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    :meth:`Console.run` already converts every ``Exception`` into an error
    message; only interrupts reach this level.
    """
    try:
        code = main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    sys.exit(code)
