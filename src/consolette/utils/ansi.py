"""ANSI-aware text measurement and padding.

Styled strings carry invisible SGR escape sequences, so their ``len()``
overstates what the terminal shows.  These helpers measure and pad by
*visible* width instead, using Rich's ANSI decoder and cell-width tables.
"""

from __future__ import annotations

import re

from rich.text import Text

from consolette.core.models import Alignment

SGR_PATTERN: re.Pattern[str] = re.compile(r"\x1b\[[\d;]*m")
"""Matches one Select Graphic Rendition sequence (``ESC [ params m``)."""


def strip_ansi(text: str) -> str:
    """Remove every SGR escape sequence from *text*."""
    return SGR_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Return the number of terminal cells *text* occupies.

    Escape sequences count as zero; wide characters count as two.
    """
    if not text:
        return 0
    return Text.from_ansi(text).cell_len


def pad(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """Pad *text* with spaces up to *width* visible cells.

    Text that is already as wide as *width* is returned unchanged.  With
    :attr:`Alignment.CENTER` any odd space goes to the right.
    """
    missing = width - visible_length(text)
    if missing <= 0:
        return text
    if alignment is Alignment.RIGHT:
        return " " * missing + text
    if alignment is Alignment.CENTER:
        left = missing // 2
        return " " * left + text + " " * (missing - left)
    return text + " " * missing
