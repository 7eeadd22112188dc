"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``,
``doctor``) keep working when it is not installed.

Two proxies are exported:

* :data:`console` — diagnostics, errors and prompts, on stderr.
* :data:`output` — command results, on stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from starter_drills.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console bound to stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text*; a no-op when Rich is not installed."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain ``print``.

		Pass ``markup=False`` for text that must appear verbatim, such as
		user input.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, file=stream)
			return
		rich_console.print(
			*objects,
			markup=markup,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
