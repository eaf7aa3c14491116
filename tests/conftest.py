"""Shared pytest fixtures and configuration for the urlargs test suite.

Guidelines
----------
* Unit tests never start a real process: launchers are faked, or
  ``os.execvp`` / ``subprocess.Popen`` are mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Only ``test_end_to_end.py`` runs real programs, in a child interpreter.
"""

from __future__ import annotations

import io
from collections.abc import Iterable

import pytest

from urlargs.core.models import DecodedCommand


class RecordingLauncher:
    """Fake :class:`ProcessLauncher` that records what would be run."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[DecodedCommand, bytes | None]] = []

    def launch(
        self,
        command: DecodedCommand,
        *,
        stdin: Iterable[bytes] | None = None,
    ) -> int:
        spooled = b"".join(stdin) if stdin is not None else None
        self.calls.append((command, spooled))
        return self.returncode

    @property
    def last_command(self) -> DecodedCommand:
        return self.calls[-1][0]

    @property
    def last_stdin(self) -> bytes | None:
        return self.calls[-1][1]


@pytest.fixture()
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture()
def stdout() -> io.BytesIO:
    return io.BytesIO()
