"""Presentation helpers: Rich console and questionary, loaded lazily.

Both libraries are imported on first use and memoized, so each loads at
most once per process and bootstrap paths (``--help``, ``--version``)
keep working when they are not installed.  A failed import is not
memoized.
"""

from __future__ import annotations

import functools
import sys
from typing import Any

from bmad_installer.exceptions import EnvironmentError


@functools.cache
def get_rich_console() -> Any:
	"""Return the process-wide Rich console targeting stderr."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console(stderr=True)


@functools.cache
def import_questionary() -> Any:
	"""Return the ``questionary`` module for interactive prompts."""
	try:
		import questionary
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"questionary is not installed. Install with: pip install questionary",
		) from exc
	return questionary


def escape(text: object) -> str:
	"""Escape Rich markup in *text*; plain output needs no escaping."""
	try:
		get_rich_console()
	except EnvironmentError:
		return str(text)
	from rich.markup import escape as escape_markup

	return escape_markup(str(text))


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, soft_wrap: bool = False) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, soft_wrap=soft_wrap)

	def error(self, prefix: str, message: object) -> None:
		"""Print ``<prefix> <message>`` with a red prefix.

		*message* is escaped, so brackets from installer errors are not
		read as Rich markup.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(prefix, message, file=sys.stderr)
			return
		rich_console.print(
			f"[red]{escape(prefix)}[/red] {escape(message)}",
			soft_wrap=True,
		)


console = _ConsoleProxy()
