"""Custom exception hierarchy for urlargs.

All exceptions that cross layer boundaries must inherit from
:class:`UrlArgsError`.  Raw ``OSError`` instances raised while launching
the target must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Each class carries the process exit code the CLI error boundary uses
when it terminates because of that error.

Hierarchy
---------
UrlArgsError
├── UsageError
│   ├── MissingExecutableError
│   └── UnknownOptionError
├── LaunchError
│   └── ExecutableNotFoundError
└── EnvironmentError

Malformed percent-encoding is deliberately absent: decoding is total
and never fails.
"""

from __future__ import annotations

HELP_HINT = "Try 'urlargs --help' for more information."


class UrlArgsError(Exception):
    """Base exception for all urlargs errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    exit_code: int = 1
    """Process exit status used when this error terminates the run."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Usage -----------------------------------------------------------------

class UsageError(UrlArgsError):
    """Raised when the command line itself is malformed."""

    exit_code = 2

    def __init__(self, message: str, *, hint: str | None = HELP_HINT) -> None:
        super().__init__(message, hint=hint)


class MissingExecutableError(UsageError):
    """Raised when no executable is given and ``--filter`` is not active."""


class UnknownOptionError(UsageError):
    """Raised for an unrecognised option before the executable name."""


# --- Launch ----------------------------------------------------------------

class LaunchError(UrlArgsError):
    """Raised when the target executable cannot be started."""

    exit_code = 126


class ExecutableNotFoundError(LaunchError):
    """Raised when the executable name does not resolve to a program."""

    exit_code = 127


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(UrlArgsError):
    """Raised when an optional runtime dependency is not available."""
