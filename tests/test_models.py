"""Tests for domain models (core/models.py).

Verifies immutability and derived values of the frozen dataclasses.
"""

from __future__ import annotations

import dataclasses

import pytest

from urlargs.core.models import DecodedCommand, RunConfig


class TestRunConfig:
    def test_defaults(self) -> None:
        config = RunConfig(executable="echo")
        assert config.arguments == ()
        assert config.dry_run is False
        assert config.filter_mode is False
        assert config.verbose is False

    def test_frozen(self) -> None:
        config = RunConfig(executable="echo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.dry_run = True  # type: ignore[misc]

    def test_executable_may_be_none(self) -> None:
        assert RunConfig(executable=None, filter_mode=True).executable is None


class TestDecodedCommand:
    def test_argv_includes_executable(self) -> None:
        command = DecodedCommand(executable="grep", arguments=(b"a b", b"file"))
        assert command.argv == [b"grep", b"a b", b"file"]

    def test_argv_restores_surrogate_escaped_name(self) -> None:
        command = DecodedCommand(executable="tool\udcff", arguments=())
        assert command.argv == [b"tool\xff"]

    def test_frozen(self) -> None:
        command = DecodedCommand(executable="grep", arguments=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            command.executable = "sed"  # type: ignore[misc]

    def test_equality(self) -> None:
        first = DecodedCommand(executable="echo", arguments=(b"x",))
        second = DecodedCommand(executable="echo", arguments=(b"x",))
        assert first == second
