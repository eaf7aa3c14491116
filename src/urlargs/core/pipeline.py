"""Pure decoding pipeline: arguments, stdin lines, and preview text.

Every function here is a transformation over values or iterables the
caller supplies.  Nothing in this module opens, closes, or flushes a
stream.

Each encoded unit is decoded independently; no state is carried
between arguments or between lines.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from urlargs.core.models import DecodedCommand, RunConfig
from urlargs.core.percent import decode, to_bytes
from urlargs.exceptions import MissingExecutableError

_LF = b"\n"


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------

def decode_arguments(arguments: Iterable[str | bytes]) -> tuple[bytes, ...]:
    """Decode each argument exactly once, preserving order."""
    return tuple(decode(argument) for argument in arguments)


def build_command(config: RunConfig) -> DecodedCommand:
    """Resolve *config* into the command that will be previewed or run.

    Raises
    ------
    MissingExecutableError
        When no executable was given, or it is the empty string.
    """
    if not config.executable:
        raise MissingExecutableError("No executable specified.")
    return DecodedCommand(
        executable=config.executable,
        arguments=decode_arguments(config.arguments),
        filter_mode=config.filter_mode,
    )


# ---------------------------------------------------------------------------
# Standard input
# ---------------------------------------------------------------------------

def decode_line(line: bytes) -> bytes:
    """Decode one stdin line and return it with a single ``\\n`` terminator.

    Only the line feed is stripped; a preceding ``\\r`` is ordinary data.
    """
    if line.endswith(_LF):
        line = line[:-1]
    return decode(line) + _LF


def decode_lines(lines: Iterable[bytes]) -> Iterator[bytes]:
    """Lazily decode an iterable of byte lines (e.g. a binary stream)."""
    for line in lines:
        yield decode_line(line)


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

def render_preview(command: DecodedCommand) -> bytes:
    """Render the dry-run report for *command*.

    Format::

        Command: <executable>
        Arg 1: '<decoded value>'
        Arg 2: '<decoded value>'

    Values are the raw decoded bytes, so the output is not required to
    be valid text.
    """
    lines = [b"Command: " + to_bytes(command.executable) + _LF]
    for index, argument in enumerate(command.arguments, start=1):
        lines.append(b"Arg %d: '" % index + argument + b"'" + _LF)
    return b"".join(lines)
