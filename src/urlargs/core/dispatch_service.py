"""Core dispatch service — drives the decode-before-dispatch pipeline.

This service delegates process start-up to a
:class:`~urlargs.core.protocols.ProcessLauncher` injected at
construction time.  It is responsible for:

* Streaming decoded stdin when no executable is given.
* Writing the dry-run preview.
* Handing the decoded command (and decoded stdin, in filter mode) to
  the launcher.
* Ensuring only :class:`~urlargs.exceptions.UrlArgsError` subclasses
  escape.

Guarantees
----------
* Streams are always supplied by the caller; nothing is opened here.
* No ``print()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from urlargs.core.models import DecodedCommand
from urlargs.core.pipeline import decode_lines, render_preview
from urlargs.core.protocols import ProcessLauncher
from urlargs.exceptions import LaunchError, UrlArgsError


class DispatchService:
    """Stateless service for the three terminal modes of a run.

    Parameters
    ----------
    launcher:
        Any object satisfying the :class:`ProcessLauncher` protocol.
    """

    def __init__(self, launcher: ProcessLauncher) -> None:
        self._launcher: ProcessLauncher = launcher

    # ------------------------------------------------------------------
    # Filter without executable
    # ------------------------------------------------------------------

    @staticmethod
    def stream(stdin: Iterable[bytes], stdout: BinaryIO) -> int:
        """Copy *stdin* to *stdout*, decoding line by line.

        Returns the number of lines written.
        """
        count = 0
        for line in decode_lines(stdin):
            stdout.write(line)
            count += 1
        stdout.flush()
        return count

    # ------------------------------------------------------------------
    # Dry run
    # ------------------------------------------------------------------

    @staticmethod
    def preview(command: DecodedCommand, stdout: BinaryIO) -> None:
        """Write the decoded command to *stdout* instead of running it."""
        stdout.write(render_preview(command))
        stdout.flush()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(
        self,
        command: DecodedCommand,
        *,
        stdin: Iterable[bytes] | None = None,
    ) -> int:
        """Launch *command* and return its exit status.

        In filter mode *stdin* is decoded lazily here and materialised
        by the launcher before the target starts.  Outside filter mode
        *stdin* is ignored and the target inherits ours.

        Raises
        ------
        ExecutableNotFoundError
            When the executable cannot be resolved.
        LaunchError
            When the launch fails for any other reason.
        """
        decoded_stdin = None
        if command.filter_mode and stdin is not None:
            decoded_stdin = decode_lines(stdin)

        try:
            return self._launcher.launch(command, stdin=decoded_stdin)
        except UrlArgsError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise LaunchError(
                f"Unexpected error launching {command.executable}: {exc}",
            ) from exc
