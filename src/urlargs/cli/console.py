"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the
decoding paths remain functional even when Rich is not installed.

All rendering targets **stderr**: stdout belongs to the preview and
filter output, which are written as raw bytes elsewhere.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from urlargs.exceptions import EnvironmentError

_MARKUP_RE = re.compile(r"(?<!\\)\[/?[a-z #]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape(text: str) -> str:
	"""Escape user-controlled *text* so Rich does not read it as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text.replace("[", "\\[")
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove our own style tags for plain-text rendering."""
	return _MARKUP_RE.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)

	def trace(self, message: str) -> None:
		"""Render a dimmed ``--verbose`` diagnostic line."""
		self.print(f"[dim]urlargs: {message}[/dim]")


console = _ConsoleProxy()
