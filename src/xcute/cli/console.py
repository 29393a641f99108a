"""CLI console helpers built on Rich.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) work before any rendering is needed.  All diagnostics go
to standard error; standard output belongs to dry-run previews and to
the commands being run.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

from xcute.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, color: bool | None = None, file: IO[str] | None = None) -> Any:
	"""Create a Rich console targeting stderr (or *file*).

	*color* ``True`` forces ANSI colors even when the stream is not a
	terminal, ``False`` disables them, ``None`` lets Rich auto-detect.
	Markup, emoji codes and highlighting are off: diagnostic lines carry
	user data and must be printed literally.
	"""
	console_class = _load_rich_console_class()
	options: dict[str, Any] = {
		"markup": False,
		"emoji": False,
		"highlight": False,
		"soft_wrap": True,
	}
	if file is not None:
		options["file"] = file
	else:
		options["stderr"] = True
	if color is True:
		options["force_terminal"] = True
		options["color_system"] = "standard"
		options["no_color"] = False
	elif color is False:
		options["color_system"] = None
	return console_class(**options)


def configure_logging(verbose: bool, rich_console: Any) -> None:
	"""Route DEBUG logging through Rich when *verbose* is set."""
	if not verbose:
		return
	from rich.logging import RichHandler

	logging.basicConfig(
		level=logging.DEBUG,
		format="%(message)s",
		datefmt="[%X]",
		handlers=[RichHandler(console=rich_console, show_path=False)],
		force=True,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy for the error boundary.

	The boundary must be able to report *any* failure, including Rich
	itself being unavailable, so it degrades to a plain stderr print.
	"""

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, style=style)


console = _ConsoleProxy()
