"""Tests for table rendering (cli/table.py)."""

from __future__ import annotations

import io

import pytest

from consolette.cli.output import Output
from consolette.cli.table import Table
from consolette.core.models import Alignment
from consolette.exceptions import InvalidAlignmentError
from consolette.utils.ansi import strip_ansi, visible_length

GREEN = "\x1b[32m"
END = "\x1b[0m"


def _render(table: Table, stream: io.StringIO) -> list[str]:
    table.render()
    return stream.getvalue().split("\n")


class TestWidths:
    def test_width_is_longest_cell_plus_padding(self, output: Output) -> None:
        table = Table(output, [{"name": "Al", "age": "30"}, {"name": "Barbara", "age": "7"}])
        assert table.widths == {"name": 7 + 3, "age": 3 + 3}

    def test_custom_padding(self, output: Output) -> None:
        table = Table(output, [{"id": "1"}], padding=0)
        assert table.widths == {"id": 2}

    def test_escape_codes_are_not_counted(self, output: Output) -> None:
        table = Table(output, [{"c": f"{GREEN}red{END}"}, {"c": "blue"}])
        assert table.widths == {"c": 4 + 3}

    def test_headers_from_first_row_only(self, output: Output) -> None:
        table = Table(output, [{"first name": "Al"}, {"first name": "Bo", "extra": "x"}])
        assert table.headers == {"first name": "First Name"}


class TestRender:
    def test_empty_data_prints_nothing(self, output: Output, stream: io.StringIO) -> None:
        Table(output, []).caption("Title").render()
        assert stream.getvalue() == ""

    def test_single_row(self, output: Output, stream: io.StringIO) -> None:
        lines = _render(Table(output, [{"name": "Al", "age": "30"}]), stream)
        assert lines[0] == f"{GREEN}Name{END}   {GREEN}Age{END}   "
        assert lines[1] == "Al     30    "
        assert lines[2] == ""

    def test_header_and_body_align(self, output: Output, stream: io.StringIO) -> None:
        data = [{"name": "Al", "role": "admin"}, {"name": "Barbara", "role": "dev"}]
        header, *body, _ = _render(Table(output, data), stream)
        plain_header = strip_ansi(header)
        assert all(len(row) == len(plain_header) for row in body)
        assert plain_header.index("Role") == body[0].index("admin")

    def test_colored_cells_align(self, output: Output, stream: io.StringIO) -> None:
        data = [{"c": f"{GREEN}red{END}"}, {"c": "blue"}]
        _, first, second, _ = _render(Table(output, data), stream)
        assert strip_ansi(first) == "red    "
        assert second == "blue   "

    def test_wide_character_header_aligns(self, output: Output, stream: io.StringIO) -> None:
        header, body, _ = _render(Table(output, [{"名前": "Al", "age": "30"}]), stream)
        assert visible_length(header) == visible_length(body) == 13
        assert header == f"{GREEN}名前{END}   {GREEN}Age{END}   "

    def test_values_are_stringified(self, output: Output, stream: io.StringIO) -> None:
        lines = _render(Table(output, [{"n": 5, "x": None}]), stream)
        assert lines[1] == "5   " + "    "


class TestCaption:
    def test_centered_caption(self, output: Output, stream: io.StringIO) -> None:
        lines = _render(Table(output, [{"name": "Al", "age": "30"}]).caption("Hi"), stream)
        assert lines[0] == "\x1b[38;5;0;48;5;2m     Hi      \x1b[0m"
        assert lines[1].startswith(GREEN + "Name")

    def test_alignment_accepts_int(self, output: Output, stream: io.StringIO) -> None:
        table = Table(output, [{"name": "Al", "age": "30"}]).caption("Hi", 0)
        assert strip_ansi(_render(table, stream)[0]) == "Hi" + " " * 11

    def test_right_alignment_and_colors(self, output: Output, stream: io.StringIO) -> None:
        table = Table(output, [{"name": "Al", "age": "30"}]).caption("Hi", Alignment.RIGHT, fg=15, bg=4)
        assert _render(table, stream)[0] == "\x1b[38;5;15;48;5;4m" + " " * 11 + "Hi\x1b[0m"

    def test_empty_caption_is_skipped(self, output: Output, stream: io.StringIO) -> None:
        lines = _render(Table(output, [{"a": "1"}]).caption(""), stream)
        assert lines[0].startswith(GREEN)

    @pytest.mark.parametrize("alignment", [3, -1, 99])
    def test_invalid_alignment(self, output: Output, alignment: int) -> None:
        with pytest.raises(InvalidAlignmentError):
            Table(output, [{"a": "1"}]).caption("Hi", alignment)

    def test_caption_does_not_leak_styles(self, output: Output, stream: io.StringIO) -> None:
        _render(Table(output, [{"a": "1"}]).caption("Hi"), stream)
        assert output.styles.apply("x") == "\x1b[mx\x1b[0m"
