"""Process launchers — concrete :class:`~urlargs.core.protocols.ProcessLauncher` implementations.

This module is the **only** place in the codebase that starts the
target executable.  All ``OSError`` instances raised by the OS are
caught here and re-raised as
:class:`~urlargs.exceptions.ExecutableNotFoundError` or
:class:`~urlargs.exceptions.LaunchError`.

Two strategies are provided:

* :class:`ExecLauncher` — replaces the current process image with
  :func:`os.execvp`.  Exit status and signals belong to the target
  directly.  Used on POSIX.
* :class:`SpawnLauncher` — starts a child with :mod:`subprocess`, waits,
  and reproduces the child's termination (exit status, or the same
  signal raised on ourselves).  Used where ``exec`` is not a true
  process replacement.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import BinaryIO, NoReturn

from urlargs.core.models import DecodedCommand
from urlargs.exceptions import ExecutableNotFoundError, LaunchError
from urlargs.infra.spool import spool_chunks

_STDIN_FILENO = 0


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def translate_os_error(executable: str, exc: OSError) -> LaunchError:
    """Map an ``OSError`` from process start-up to a typed error."""
    if isinstance(exc, FileNotFoundError):
        return ExecutableNotFoundError(
            f"Could not execute {executable}: command not found.",
            hint="Check the executable name and your PATH.",
        )
    if isinstance(exc, PermissionError):
        return LaunchError(
            f"Could not execute {executable}: permission denied.",
            hint="Check that the file exists and is executable.",
        )
    reason = exc.strerror or str(exc)
    return LaunchError(f"Could not execute {executable}: {reason}.")


def _null_byte_error(executable: str) -> LaunchError:
    """The OS cannot pass a NUL byte inside an argument."""
    return LaunchError(
        f"Could not execute {executable}: an argument contains a NUL byte.",
        hint="Arguments cannot contain %00.",
    )


def _flush_std_streams() -> None:
    """Flush Python-level buffers before the OS takes over the fds."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


# ---------------------------------------------------------------------------
# exec(3) replacement
# ---------------------------------------------------------------------------

class ExecLauncher:
    """Replace the running interpreter with the target executable.

    This class satisfies the :class:`~urlargs.core.protocols.ProcessLauncher`
    protocol structurally — no explicit inheritance required.
    """

    def launch(
        self,
        command: DecodedCommand,
        *,
        stdin: Iterable[bytes] | None = None,
    ) -> int:
        """Exec *command*; never returns on success.

        With *stdin*, the decoded stream is spooled and its descriptor
        installed as fd 0 before the exec.

        Raises
        ------
        ExecutableNotFoundError
            When ``execvp`` cannot find the executable.
        LaunchError
            For any other ``execvp`` failure, or an argument holding a
            NUL byte.
        """
        if stdin is None:
            self._exec(command)
        else:
            with spool_chunks(stdin) as handle:
                os.dup2(handle.fileno(), _STDIN_FILENO)
                self._exec(command)

    @staticmethod
    def _exec(command: DecodedCommand) -> NoReturn:
        _flush_std_streams()
        try:
            os.execvp(command.executable, command.argv)
        except OSError as exc:
            raise translate_os_error(command.executable, exc) from exc
        except ValueError as exc:
            raise _null_byte_error(command.executable) from exc


# ---------------------------------------------------------------------------
# Spawn and wait
# ---------------------------------------------------------------------------

@contextmanager
def _interrupts_deferred_to_child() -> Iterator[None]:
    """Ignore SIGINT while a child owns the terminal, like a shell does."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def propagate_returncode(returncode: int) -> int:
    """Reproduce a child's termination on the current process.

    A negative *returncode* means the child died from that signal; the
    same signal is re-raised here with its default disposition.  If the
    signal does not terminate us, the shell convention ``128 + N`` is
    returned instead.
    """
    if returncode >= 0:
        return returncode
    signum = -returncode
    signal.signal(signum, signal.SIG_DFL)
    os.kill(os.getpid(), signum)
    return 128 + signum


class SpawnLauncher:
    """Run the target as a child process and mirror its exit status.

    This class satisfies the :class:`~urlargs.core.protocols.ProcessLauncher`
    protocol structurally — no explicit inheritance required.
    """

    def launch(
        self,
        command: DecodedCommand,
        *,
        stdin: Iterable[bytes] | None = None,
    ) -> int:
        """Spawn *command*, wait for it, and return its exit status.

        Raises
        ------
        ExecutableNotFoundError
            When the executable cannot be found.
        LaunchError
            For any other start-up failure, or an argument holding a
            NUL byte.
        """
        if stdin is None:
            return self._spawn(command, None)

        with spool_chunks(stdin) as handle:
            return self._spawn(command, handle)

    @staticmethod
    def _spawn(command: DecodedCommand, stdin: BinaryIO | None) -> int:
        _flush_std_streams()
        try:
            process = subprocess.Popen(command.argv, stdin=stdin)
        except OSError as exc:
            raise translate_os_error(command.executable, exc) from exc
        except ValueError as exc:
            raise _null_byte_error(command.executable) from exc

        with _interrupts_deferred_to_child():
            returncode = process.wait()
        return propagate_returncode(returncode)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def default_launcher() -> ExecLauncher | SpawnLauncher:
    """Return the launcher matching the host's process model."""
    if os.name == "posix":
        return ExecLauncher()
    return SpawnLauncher()
