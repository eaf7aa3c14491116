"""urlargs — run commands with percent-decoded arguments.

Arguments (and optionally stdin) are percent-decoded before the target
executable is invoked, so callers never have to fight shell quoting.
"""

from urlargs.version import __version__

__all__: list[str] = ["__version__"]
