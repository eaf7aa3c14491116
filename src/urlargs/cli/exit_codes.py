"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
error classes in :mod:`urlargs.exceptions` carry the same values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: help, version, preview and filter output."""

GENERAL_ERROR: int = 1
"""A known UrlArgsError was caught. User-facing message was displayed."""

USAGE_ERROR: int = 2
"""Bad or missing options / executable.  Matches argparse's convention."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

COMMAND_NOT_EXECUTABLE: int = 126
"""The target exists but could not be started.  Shell convention."""

COMMAND_NOT_FOUND: int = 127
"""The target could not be found.  Shell convention."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

BROKEN_PIPE: int = 141
"""The reader of stdout went away early.  Shell convention (128 + SIGPIPE=13)."""
