"""Allow ``python -m urlargs`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m urlargs`` behaves identically to the ``urlargs``
console script.
"""

from __future__ import annotations

from urlargs.cli.app import cli

if __name__ == "__main__":
    cli()
