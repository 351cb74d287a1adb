"""CLI console and logging helpers with optional Rich support.

Optional UI dependencies are imported lazily so bootstrap paths
(``--help``, ``--version``) and the plain algorithm commands keep working
even when Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from twoptr.exceptions import EnvironmentError

_HANDLER_NAME = "twoptr-cli"

# Rich style tags open with a letter, "#", "/" or "@"; "[-1, 0, 1]" is not one.
_MARKUP_TAG = re.compile(r"(?<!\\)\[[a-z#/@][^\[\]]*\]")


def strip_markup(text: str) -> str:
	"""Drop Rich style tags so the plain fallback prints clean text."""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install 'twoptr[ui]'",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True, soft_wrap: bool = False) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout).

	Soft-wrapped consoles carry raw results, so they also skip highlighting.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=soft_wrap, highlight=not soft_wrap)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True, soft_wrap: bool = False) -> None:
		self._stderr = stderr
		self._soft_wrap = soft_wrap

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(
				stderr=self._stderr, soft_wrap=self._soft_wrap,
			)
		except EnvironmentError:
			plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
			print(*plain, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
"""Status and diagnostics (stderr)."""

output = _ConsoleProxy(stderr=False, soft_wrap=True)
"""Command results (stdout); long lines are never wrapped."""


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(verbose: bool = False) -> logging.Handler:
	"""Attach a single stderr handler to the ``twoptr`` logger.

	Uses ``rich.logging.RichHandler`` when Rich is importable.  Calling
	this again replaces the previously installed handler.
	"""
	logger = logging.getLogger("twoptr")
	for existing in list(logger.handlers):
		if existing.get_name() == _HANDLER_NAME:
			logger.removeHandler(existing)

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(
			logging.Formatter("%(levelname)s %(name)s: %(message)s"),
		)
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)

	handler.set_name(_HANDLER_NAME)
	logger.addHandler(handler)
	logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	return handler
