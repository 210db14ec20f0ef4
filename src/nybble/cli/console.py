"""CLI console and logging helpers backed by Rich.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) never pay for it.  A missing Rich surfaces as
:class:`~nybble.exceptions.MissingDependencyError` with an install
hint, and the console still gets that message to stderr as plain text.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from nybble.exceptions import MissingDependencyError

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")
"""Accepted values for ``--log-level``."""

_RICH_HINT = "Install with: pip install rich"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError("rich is not installed.", hint=_RICH_HINT) from exc
	return Console


def _load_rich_handler_class() -> type[Any]:
	"""Return ``rich.logging.RichHandler`` or raise ``MissingDependencyError``."""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError as exc:
		raise MissingDependencyError("rich is not installed.", hint=_RICH_HINT) from exc
	return RichHandler


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with a plain-stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(level: str) -> None:
	"""Route the root logger through a Rich handler on stderr.

	*level* is one of :data:`LOG_LEVELS`.  Has no effect when the root
	logger already has handlers (e.g. under pytest).

	Raises
	------
	MissingDependencyError
		When Rich cannot be imported.
	"""
	handler_class = _load_rich_handler_class()
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.WARNING),
		format="%(message)s",
		datefmt="[%X]",
		handlers=[handler_class(console=get_rich_console(), show_path=False)],
	)
