"""Shared pytest fixtures and configuration for the consolette test suite.

Guidelines
----------
* Output is captured in ``io.StringIO`` streams, never the real terminal.
* Tests never exit the process; exit codes are asserted as return values.
* Inputs are built from explicit token lists, not ``sys.argv``.
"""

from __future__ import annotations

import io

import pytest

from consolette.cli.output import Output


@pytest.fixture()
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def output(stream: io.StringIO) -> Output:
    return Output(stream)
