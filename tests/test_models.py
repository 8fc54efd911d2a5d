"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses
import typing

import pytest

from consolette.core.models import (
    PLACEHOLDER,
    Alignment,
    CallableBinding,
    ClassBinding,
    Color,
    CommandDetail,
    CommandSpec,
)
from consolette.core.protocols import DescribedCommand


class TestColor:
    def test_named_values(self) -> None:
        assert Color.BLACK == 0
        assert Color.GREEN == 2
        assert Color.WHITE == 7
        assert Color.DEFAULT == 9

    def test_no_code_eight(self) -> None:
        assert 8 not in {color.value for color in Color}


class TestAlignment:
    def test_values(self) -> None:
        assert [a.value for a in Alignment] == [0, 1, 2]


class TestCommandSpec:
    def test_defaults(self) -> None:
        spec = CommandSpec()
        assert spec.description == ""
        assert spec.argument is None
        assert spec.options == ()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            CommandSpec().description = "x"  # type: ignore[misc]


class TestCommandDetail:
    def test_placeholders_by_default(self) -> None:
        detail = CommandDetail(command="run")
        assert (detail.description, detail.argument, detail.options) == (PLACEHOLDER,) * 3

    def test_from_spec_joins_options(self) -> None:
        spec = CommandSpec(description="Build it.", argument="target", options=("fast", " verbose "))
        detail = CommandDetail.from_spec("build", spec)
        assert detail == CommandDetail("build", "Build it.", "target", "fast, verbose")

    def test_from_spec_empty_fields(self) -> None:
        detail = CommandDetail.from_spec("build", CommandSpec(options=("", " ")))
        assert detail == CommandDetail("build")

    def test_empty_argument_name_is_kept(self) -> None:
        detail = CommandDetail.from_spec("build", CommandSpec(argument=""))
        assert detail.argument == ""

    def test_as_row(self) -> None:
        row = CommandDetail("a", "b", "c", "d").as_row()
        assert row == {"command": "a", "description": "b", "argument": "c", "options": "d"}
        assert list(row) == ["command", "description", "argument", "options"]


class TestBindings:
    def test_equality(self) -> None:
        assert CallableBinding(print) == CallableBinding(print)
        assert ClassBinding(int) != ClassBinding(str)

    def test_match_dispatch(self) -> None:
        def kind(binding: CallableBinding | ClassBinding) -> str:
            match binding:
                case CallableBinding():
                    return "callable"
                case ClassBinding():
                    return "class"
            return "unknown"

        assert kind(CallableBinding(print)) == "callable"
        assert kind(ClassBinding(int)) == "class"

    def test_class_binding_is_typed_by_the_command_contract(self) -> None:
        hints = typing.get_type_hints(ClassBinding, localns={"DescribedCommand": DescribedCommand})
        assert hints["command_class"] == type[DescribedCommand]
