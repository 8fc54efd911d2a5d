"""Tests for the output façade (cli/output.py)."""

from __future__ import annotations

import io

import pytest

from consolette.cli import exit_codes
from consolette.cli.output import CLEAR_SCREEN, Output
from consolette.core.models import Color
from consolette.core.styles import Styles
from consolette.exceptions import InvalidColorError


class TestRawWrites:
    def test_write_writeln_newln(self, output: Output, stream: io.StringIO) -> None:
        output.write("a").writeln("b").newln()
        assert stream.getvalue() == "ab\n\n"

    def test_clear(self, output: Output, stream: io.StringIO) -> None:
        output.clear()
        assert stream.getvalue() == CLEAR_SCREEN + "\n"
        assert CLEAR_SCREEN == "\x1b[2J\x1b[H"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        Output().writeln("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_custom_styles_instance(self, stream: io.StringIO) -> None:
        styles = Styles()
        assert Output(stream, styles).styles is styles


class TestColorize:
    def test_named(self, output: Output) -> None:
        assert output.colorize("OK", Color.GREEN) == "\x1b[32mOK\x1b[0m"

    def test_bright(self, output: Output) -> None:
        assert output.colorize("OK", Color.GREEN, True) == "\x1b[92mOK\x1b[0m"

    def test_palette_and_rgb(self, output: Output) -> None:
        assert output.colorize("x", 208) == "\x1b[38;5;208mx\x1b[0m"
        assert output.colorize("x", [9, 8, 7]) == "\x1b[38;2;9;8;7mx\x1b[0m"

    def test_previous_styles_do_not_leak(self, output: Output) -> None:
        output.styles.bold().bg_color(Color.BLUE)
        assert output.colorize("x", Color.RED) == "\x1b[31mx\x1b[0m"

    def test_invalid_color(self, output: Output) -> None:
        with pytest.raises(InvalidColorError):
            output.colorize("x", 256)


class TestSeverity:
    @pytest.mark.parametrize(
        ("method", "sgr", "code"),
        [
            ("success", "92", exit_codes.SUCCESS),
            ("info", "94", exit_codes.SUCCESS),
            ("warning", "33", exit_codes.WARNING),
            ("error", "31", exit_codes.GENERAL_ERROR),
        ],
    )
    def test_message_and_code(
        self, output: Output, stream: io.StringIO, method: str, sgr: str, code: int,
    ) -> None:
        result = getattr(output, method)("message")
        assert result == code
        assert stream.getvalue() == f"\x1b[{sgr}mmessage\x1b[0m\n"

    @pytest.mark.parametrize("method", ["success", "info", "warning", "error"])
    def test_no_exit_returns_none(self, output: Output, stream: io.StringIO, method: str) -> None:
        assert getattr(output, method)("message", exit=False) is None
        assert "message" in stream.getvalue()


class TestTable:
    def test_table_with_caption(self, output: Output, stream: io.StringIO) -> None:
        output.table([{"name": "Al"}], "People")
        first, header, body, _ = stream.getvalue().split("\n")
        assert "People" in first
        assert "Name" in header
        assert body == "Al" + " " * 5

    def test_table_paddings(self, output: Output, stream: io.StringIO) -> None:
        output.table([{"name": "Al"}], padding=1, header_padding=9)
        header, body, _ = stream.getvalue().split("\n")
        assert header == "\x1b[32mName\x1b[0m "
        assert body == "Al   "
