"""Output façade — raw writes, severity messages and tables.

Severity messages never terminate the process.  With ``exit=True`` (the
default) they return the exit code that goes with their severity, and a
command stops by returning it::

    def run(self) -> int | None:
        if not self.input.get_option("force"):
            return self.output.warning("Nothing done without --force.")
        ...
        return self.output.success("Done.")
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import IO, Any

from consolette.cli import exit_codes
from consolette.cli.table import Table
from consolette.core.models import Alignment, Color
from consolette.core.styles import ColorValue, Styles

CLEAR_SCREEN: str = "\033[2J\033[H"
"""Erase the display and move the cursor home."""


class Output:
    """Writes plain and styled text to one stream (stdout by default)."""

    def __init__(self, stream: IO[str] | None = None, styles: Styles | None = None) -> None:
        self.stream: IO[str] = sys.stdout if stream is None else stream
        self.styles: Styles = Styles() if styles is None else styles

    # --- raw writes ------------------------------------------------------

    def write(self, text: str) -> Output:
        self.stream.write(text)
        return self

    def writeln(self, text: str) -> Output:
        self.stream.write(text + "\n")
        return self

    def newln(self) -> Output:
        self.stream.write("\n")
        return self

    def clear(self) -> Output:
        return self.writeln(CLEAR_SCREEN)

    # --- styled writes ---------------------------------------------------

    def colorize(self, message: str, color: ColorValue, bright: bool = False) -> str:
        """Return *message* in the given foreground color."""
        return self.styles.reset().fg_colorize(color, bright).apply(message, reset=True)

    def success(self, message: str, exit: bool = True) -> int | None:  # noqa: A002
        return self._message(message, Color.GREEN, True, exit_codes.SUCCESS, exit)

    def info(self, message: str, exit: bool = True) -> int | None:  # noqa: A002
        return self._message(message, Color.BLUE, True, exit_codes.SUCCESS, exit)

    def warning(self, message: str, exit: bool = True) -> int | None:  # noqa: A002
        return self._message(message, Color.YELLOW, False, exit_codes.WARNING, exit)

    def error(self, message: str, exit: bool = True) -> int | None:  # noqa: A002
        return self._message(message, Color.RED, False, exit_codes.GENERAL_ERROR, exit)

    def table(
        self,
        data: Sequence[Mapping[str, Any]],
        caption: str = "",
        padding: int = 3,
        header_padding: int = 9,
    ) -> None:
        Table(self, data, padding, header_padding).caption(caption, Alignment.CENTER).render()

    def _message(self, message: str, color: Color, bright: bool, code: int, exit: bool) -> int | None:  # noqa: A002
        self.writeln(self.colorize(message, color, bright))
        return code if exit else None
