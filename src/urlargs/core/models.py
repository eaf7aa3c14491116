"""Domain models for urlargs.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and are built once
per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass

from urlargs.core.percent import to_bytes


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunConfig:
    """Parsed command line for a single invocation."""

    executable: str | None
    """Target program name, or ``None`` when only ``--filter`` was given."""

    arguments: tuple[str, ...] = ()
    """Still-encoded arguments for the target, in order."""

    dry_run: bool = False
    """Print the decoded command instead of running it."""

    filter_mode: bool = False
    """Decode standard input line by line as well."""

    verbose: bool = False
    """Emit a diagnostic trace on stderr."""


# ---------------------------------------------------------------------------
# Decoded command
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DecodedCommand:
    """The executable plus its decoded argument vector.

    The executable name is kept exactly as given; only the arguments
    are percent-decoded.
    """

    executable: str
    arguments: tuple[bytes, ...]
    filter_mode: bool = False
    """Whether decoded stdin must replace the target's standard input."""

    @property
    def argv(self) -> list[bytes]:
        """Full argument vector, ``argv[0]`` included, as bytes."""
        return [to_bytes(self.executable), *self.arguments]
