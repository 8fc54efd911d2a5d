"""Plain-text table rendering.

Headers come from the first row's keys (title-cased and colored green);
every row is assumed to have the same keys.  Column widths are measured
on visible text, so cells that already carry escape codes still line up.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from consolette.core.models import Alignment, Color
from consolette.exceptions import InvalidAlignmentError
from consolette.utils.ansi import pad, visible_length

if TYPE_CHECKING:
    from consolette.cli.output import Output


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _title(column: str) -> str:
    # Upper-case the first letter of each word and keep the rest as is.
    return " ".join(word[:1].upper() + word[1:] for word in column.split(" "))


class Table:
    """One renderable table bound to an :class:`Output`.

    Parameters
    ----------
    output:
        Destination for the rendered lines.
    data:
        Rows as mappings from column name to value.
    padding:
        Spaces added to each column's widest cell.
    header_padding:
        Extra raw width given to header cells, which covers the escape
        bytes of the green header color (9 for the default).
    """

    def __init__(
        self,
        output: Output,
        data: Sequence[Mapping[str, Any]],
        padding: int = 3,
        header_padding: int = 9,
    ) -> None:
        self.output = output
        self.rows: list[dict[str, str]] = [
            {str(column): _cell(value) for column, value in row.items()} for row in data
        ]
        self.padding = padding
        self.header_padding = header_padding
        self.headers: dict[str, str] = {column: _title(column) for column in (self.rows[0] if self.rows else {})}
        self.widths: dict[str, int] = self._column_widths()

        self._caption: str = ""
        self._caption_fg: int = 0
        self._caption_bg: int = 2
        self._caption_alignment: Alignment = Alignment.CENTER

    def caption(
        self,
        text: str,
        alignment: Alignment | int = Alignment.CENTER,
        fg: int = 0,
        bg: int = 2,
    ) -> Table:
        """Set a caption printed above the headers.

        *fg* and *bg* are 256-color palette indices.

        Raises
        ------
        InvalidAlignmentError
            When *alignment* is not one of :class:`Alignment`'s values.
        """
        try:
            self._caption_alignment = Alignment(alignment)
        except ValueError as exc:
            raise InvalidAlignmentError(
                "Invalid alignment, accepted values are 0 (left), 1 (right) or 2 (center).",
            ) from exc
        self._caption = text
        self._caption_fg = fg
        self._caption_bg = bg
        return self

    def render(self) -> None:
        if not self.rows:
            return
        self._print_caption()
        self._print_headers()
        self._print_body()

    # ------------------------------------------------------------------

    def _column_widths(self) -> dict[str, int]:
        widths: dict[str, int] = {}
        for column, header in self.headers.items():
            longest = max(
                [visible_length(header)] + [visible_length(row.get(column, "")) for row in self.rows],
            )
            widths[column] = longest + self.padding
        return widths

    def _print_caption(self) -> None:
        if not self._caption:
            return
        total = sum(self.widths.values())
        text = pad(self._caption, total, self._caption_alignment)
        styled = (
            self.output.styles.reset()
            .fg_palette(self._caption_fg)
            .bg_palette(self._caption_bg)
            .apply(text, reset=True)
        )
        self.output.writeln(styled)

    def _print_headers(self) -> None:
        for column, header in self.headers.items():
            colored = self.output.colorize(header, Color.GREEN)
            # ljust counts characters; wide characters take two cells each.
            wide_cells = visible_length(header) - len(header)
            self.output.write(colored.ljust(self.widths[column] + self.header_padding - wide_cells))
        self.output.newln()

    def _print_body(self) -> None:
        for row in self.rows:
            for column in self.headers:
                self.output.write(pad(row.get(column, ""), self.widths[column]))
            self.output.newln()
