"""ANSI style engine.

:class:`Styles` accumulates format codes (bold, italic, ...), color codes
and padding through chained calls, then :meth:`Styles.apply` wraps a text
in a single SGR start sequence and the SGR reset sequence::

    Styles().bold().fg_color(Color.GREEN).padding_x(1).apply("OK")
    # -> "\\x1b[1;32m OK \\x1b[0m"

Colors come in three shapes, for foreground and background alike:

* a named :class:`~consolette.core.models.Color` plus a brightness flag
  (``32``, ``92``, ``42``, ``102`` ...),
* a 256-color palette index (``38;5;<n>`` / ``48;5;<n>``),
* an RGB triple (``38;2;<r>;<g>;<b>`` / ``48;2;<r>;<g>;<b>``).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from consolette.core.models import Color
from consolette.exceptions import InvalidColorError
from consolette.utils.ansi import visible_length

ESC: str = "\033"
SEPARATOR: str = ";"
RESET_CODE: int = 0

BOLD: int = 1
MUTED: int = 2
ITALIC: int = 3
UNDERLINED: int = 4
INVERT: int = 7

_CUSTOM: int = 8
_PALETTE: int = 5
_RGB: int = 2

ColorValue = Color | int | Sequence[int]


def sgr(params: str) -> str:
    """Wrap *params* in the ``ESC [ ... m`` form."""
    return f"{ESC}[{params}m"


def _check_range(*components: int) -> None:
    for component in components:
        if not isinstance(component, int) or isinstance(component, bool):
            raise InvalidColorError(f"Color components must be integers, got [{component!r}].")
        if not 0 <= component <= 255:
            raise InvalidColorError(
                "Invalid color code, only between 0 - 255 is accepted.",
            )


# ---------------------------------------------------------------------------
# Color code builders
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ColorLayer:
    """Code builder for one color layer (foreground or background)."""

    normal: int
    """Prefix for the normal-intensity named colors."""

    bright: int
    """Prefix for the bright named colors."""

    def color(self, color: Color, bright: bool = False) -> str:
        prefix = self.bright if bright else self.normal
        return f"{prefix}{color.value}"

    def palette(self, code: int) -> str:
        _check_range(code)
        return SEPARATOR.join(map(str, (f"{self.normal}{_CUSTOM}", _PALETTE, code)))

    def rgb(self, red: int, green: int, blue: int) -> str:
        _check_range(red, green, blue)
        return SEPARATOR.join(
            map(str, (f"{self.normal}{_CUSTOM}", _RGB, red, green, blue)),
        )

    def colorize(self, value: ColorValue, bright: bool = False) -> str:
        """Build the code for a named color, palette index or RGB triple."""
        # Color is an IntEnum, so it has to be matched before plain int.
        if isinstance(value, Color):
            return self.color(value, bright)
        if isinstance(value, bool):
            raise InvalidColorError(f"Unsupported color value [{value!r}].")
        if isinstance(value, int):
            return self.palette(value)
        if isinstance(value, Sequence) and not isinstance(value, str):
            if len(value) != 3:
                raise InvalidColorError(
                    f"RGB colors need exactly 3 components, got {len(value)}.",
                )
            red, green, blue = value
            return self.rgb(red, green, blue)
        raise InvalidColorError(f"Unsupported color value [{value!r}].")


FOREGROUND = ColorLayer(normal=3, bright=9)
BACKGROUND = ColorLayer(normal=4, bright=10)


# ---------------------------------------------------------------------------
# Style accumulator
# ---------------------------------------------------------------------------

class Styles:
    """Chainable builder for one styled string.

    State accumulates until :meth:`reset` is called, or until
    ``apply(..., reset=True)`` consumes it.
    """

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self._formats: list[int] = []
        self._colors: list[str] = []
        self._paddings: dict[str, int] = dict.fromkeys(("top", "right", "bottom", "left"), 0)

    # --- formats ---------------------------------------------------------

    def bold(self) -> Styles:
        self._formats.append(BOLD)
        return self

    def muted(self) -> Styles:
        self._formats.append(MUTED)
        return self

    def italic(self) -> Styles:
        self._formats.append(ITALIC)
        return self

    def underlined(self) -> Styles:
        self._formats.append(UNDERLINED)
        return self

    def invert(self) -> Styles:
        self._formats.append(INVERT)
        return self

    # --- colors ----------------------------------------------------------

    def fg_color(self, color: Color, bright: bool = False) -> Styles:
        self._colors.append(FOREGROUND.color(color, bright))
        return self

    def fg_palette(self, code: int) -> Styles:
        self._colors.append(FOREGROUND.palette(code))
        return self

    def fg_rgb(self, red: int, green: int, blue: int) -> Styles:
        self._colors.append(FOREGROUND.rgb(red, green, blue))
        return self

    def fg_colorize(self, value: ColorValue, bright: bool = False) -> Styles:
        """Add a foreground color given as a named color, index or RGB triple."""
        self._colors.append(FOREGROUND.colorize(value, bright))
        return self

    def bg_color(self, color: Color, bright: bool = False) -> Styles:
        self._colors.append(BACKGROUND.color(color, bright))
        return self

    def bg_palette(self, code: int) -> Styles:
        self._colors.append(BACKGROUND.palette(code))
        return self

    def bg_rgb(self, red: int, green: int, blue: int) -> Styles:
        self._colors.append(BACKGROUND.rgb(red, green, blue))
        return self

    def bg_colorize(self, value: ColorValue, bright: bool = False) -> Styles:
        """Add a background color given as a named color, index or RGB triple."""
        self._colors.append(BACKGROUND.colorize(value, bright))
        return self

    # --- padding ---------------------------------------------------------

    def padding_left(self, padding: int) -> Styles:
        self._paddings["left"] = padding
        return self

    def padding_right(self, padding: int) -> Styles:
        self._paddings["right"] = padding
        return self

    def padding_x(self, padding: int) -> Styles:
        self._paddings["left"] = self._paddings["right"] = padding
        return self

    def padding_top(self, padding: int) -> Styles:
        self._paddings["top"] = padding
        return self

    def padding_bottom(self, padding: int) -> Styles:
        self._paddings["bottom"] = padding
        return self

    def padding_y(self, padding: int) -> Styles:
        self._paddings["top"] = self._paddings["bottom"] = padding
        return self

    # --- output ----------------------------------------------------------

    def reset(self) -> Styles:
        """Drop every accumulated format, color and padding."""
        self._formats.clear()
        self._colors.clear()
        for side in self._paddings:
            self._paddings[side] = 0
        return self

    def apply(self, text: str | None = None, reset: bool = False) -> str:
        """Return *text* (or the stored default) wrapped in the current style."""
        if text is None:
            text = self.text or ""
        styled = self.start() + self._apply_paddings(text) + self.end()
        if reset:
            self.reset()
        return styled

    def start(self) -> str:
        codes = [str(code) for code in self._formats] + self._colors
        return sgr(SEPARATOR.join(codes))

    @staticmethod
    def end() -> str:
        return sgr(str(RESET_CODE))

    def _apply_paddings(self, text: str) -> str:
        padded = " " * self._paddings["left"] + text + " " * self._paddings["right"]
        blank = " " * visible_length(padded)
        top = (blank + "\n") * self._paddings["top"]
        bottom = ("\n" + blank) * self._paddings["bottom"]
        return top + padded + bottom
