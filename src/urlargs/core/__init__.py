"""Core / service layer — percent-decoding and dispatch policy.

Rules
-----
* No ``print()`` calls.
* No streams opened here; callers pass them in.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from urlargs.core.dispatch_service import DispatchService
from urlargs.core.models import DecodedCommand, RunConfig
from urlargs.core.percent import decode
from urlargs.core.protocols import ProcessLauncher

__all__: list[str] = [
    "DecodedCommand",
    "DispatchService",
    "ProcessLauncher",
    "RunConfig",
    "decode",
]
