"""Infrastructure layer — operating-system integration.

This layer owns process start-up and the temporary staging of decoded
stdin.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~urlargs.exceptions.UrlArgsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from urlargs.infra.launcher import ExecLauncher, SpawnLauncher, default_launcher
from urlargs.infra.spool import spool_chunks

__all__: list[str] = [
    "ExecLauncher",
    "SpawnLauncher",
    "default_launcher",
    "spool_chunks",
]
