"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from urlargs.core.models import DecodedCommand


class ProcessLauncher(Protocol):
    """Contract for backends that start the target executable.

    Any object that implements :meth:`launch` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def launch(
        self,
        command: DecodedCommand,
        *,
        stdin: Iterable[bytes] | None = None,
    ) -> int:
        """Run *command* and return its exit status.

        Parameters
        ----------
        command:
            Executable name plus decoded argument vector.
        stdin:
            Decoded chunks that must become the target's standard
            input.  Implementations must consume it **completely**
            before the target starts.  ``None`` means the target
            inherits the caller's standard input unchanged.

        Implementations that replace the current process image never
        return on success.

        Raises
        ------
        ExecutableNotFoundError
            When the executable cannot be resolved.
        LaunchError
            When the executable exists but cannot be started.
        """
        ...  # pragma: no cover
