"""CLI application entry point and mode routing for urlargs.

This module is the **sole error boundary** for the entire application.
It catches :class:`~urlargs.exceptions.UrlArgsError`, ``KeyboardInterrupt``,
``BrokenPipeError`` and any unexpected ``Exception``, rendering short
diagnostics on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No decoding logic lives here — all work is delegated to the core and
  infrastructure layers.
* Options are only recognised *before* the executable name.  Everything
  from the executable onwards belongs to the target, so the command
  line is split first and only the option part reaches ``argparse``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import BinaryIO, NoReturn

from urlargs.cli import exit_codes
from urlargs.cli.console import console, escape
from urlargs.cli.help_text import DESCRIPTION, EPILOG
from urlargs.core.dispatch_service import DispatchService
from urlargs.core.models import DecodedCommand, RunConfig
from urlargs.core.pipeline import build_command
from urlargs.core.protocols import ProcessLauncher
from urlargs.exceptions import UnknownOptionError, UrlArgsError, UsageError
from urlargs.version import __version__

_END_OF_OPTIONS = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser whose errors go through the CLI error boundary.

    The stock parser prints its own usage text and exits; raising
    :class:`UsageError` instead keeps every usage failure in the same
    ``Error:`` / ``Hint:`` format.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message[:1].upper() + message[1:] + ".")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The positional ``command`` is declared for the help output only; it
    is filled from the part of the command line that follows the
    options (see :func:`split_argv`).
    """
    parser = _ArgumentParser(
        prog="urlargs",
        usage=(
            "%(prog)s [OPTIONS] [--] EXECUTABLE [ARGS...]\n"
            "       %(prog)s --filter [OPTIONS] [EXECUTABLE [ARGS...]]"
        ),
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        "--preview",
        dest="dry_run",
        action="store_true",
        help="Print the decoded command and arguments instead of running them.",
    )
    parser.add_argument(
        "-f",
        "--filter",
        dest="filter_mode",
        action="store_true",
        help=(
            "Also decode stdin line by line. Without EXECUTABLE the decoded "
            "lines are written to stdout; with it they become its stdin."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace what is decoded and launched on stderr.",
    )
    parser.add_argument(
        "command",
        nargs="*",
        metavar="EXECUTABLE",
        help="Program to run, followed by its percent-encoded arguments.",
    )
    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* into ``(options, command)``.

    The command starts at the first token that is not option-like, or
    right after an explicit ``--``.  A lone ``-`` is not an option.
    """
    for index, token in enumerate(argv):
        if token == _END_OF_OPTIONS:
            return list(argv[:index]), list(argv[index + 1:])
        if token == "-" or not token.startswith("-"):
            return list(argv[:index]), list(argv[index:])
    return list(argv), []


def parse_config(argv: Sequence[str] | None = None) -> RunConfig:
    """Parse *argv* into an immutable :class:`RunConfig`.

    ``--help`` and ``--version`` print and raise ``SystemExit(0)`` as
    usual with ``argparse``.

    Raises
    ------
    UnknownOptionError
        For any unrecognised option before the executable name.
    UsageError
        For a malformed option, such as a value given to a flag.
    """
    if argv is None:
        argv = sys.argv[1:]
    option_tokens, command = split_argv(argv)

    parser = _build_parser()
    args, extras = parser.parse_known_args(option_tokens)
    unknown = [*extras, *args.command]
    if unknown:
        raise UnknownOptionError(f"Unknown option: {unknown[0]}")

    return RunConfig(
        executable=command[0] if command else None,
        arguments=tuple(command[1:]),
        dry_run=args.dry_run,
        filter_mode=args.filter_mode,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Mode handlers
# ---------------------------------------------------------------------------

def _trace(config: RunConfig, message: str) -> None:
    if config.verbose:
        console.trace(message)


def _handle_stream(
    config: RunConfig,
    service: DispatchService,
    stdin: BinaryIO,
    stdout: BinaryIO,
) -> int:
    """``--filter`` without an executable: decode stdin onto stdout."""
    count = service.stream(stdin, stdout)
    _trace(config, f"decoded {count} stdin line(s)")
    return exit_codes.SUCCESS


def _handle_preview(
    config: RunConfig,
    service: DispatchService,
    command: DecodedCommand,
    stdout: BinaryIO,
) -> int:
    """``--dry-run`` / ``--preview``: show the command, run nothing."""
    service.preview(command, stdout)
    _trace(config, "dry run, nothing executed")
    return exit_codes.SUCCESS


def _handle_execute(
    config: RunConfig,
    service: DispatchService,
    command: DecodedCommand,
    stdin: BinaryIO,
) -> int:
    """Run the target with decoded arguments (and decoded stdin)."""
    if command.filter_mode:
        _trace(config, "decoded stdin will replace the target's stdin")
    _trace(config, f"launching {escape(command.executable)}")
    return service.execute(command, stdin=stdin)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    launcher: ProcessLauncher | None = None,
) -> int:
    """Run the urlargs CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdin, stdout:
        Binary streams; default to the process's standard streams.
    launcher:
        Process launcher; defaults to
        :func:`~urlargs.infra.launcher.default_launcher`.

    Returns
    -------
    int
        OS process exit code.  When the target replaces this process
        the function never returns.
    """
    config = parse_config(argv)

    if launcher is None:
        from urlargs.infra.launcher import default_launcher

        launcher = default_launcher()
    service = DispatchService(launcher)

    in_stream: BinaryIO = stdin if stdin is not None else sys.stdin.buffer
    out_stream: BinaryIO = stdout if stdout is not None else sys.stdout.buffer

    if config.filter_mode and config.executable is None:
        return _handle_stream(config, service, in_stream, out_stream)

    command = build_command(config)
    _trace(config, f"decoded {len(command.arguments)} argument(s)")

    if config.dry_run:
        return _handle_preview(config, service, command, out_stream)

    return _handle_execute(config, service, command, in_stream)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point fd 1 at the null device so the exit-time flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UrlArgsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        # The reader of stdout went away, as with `urlargs --filter | head -1`.
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
