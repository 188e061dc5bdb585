"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so the demo program
keeps working, in plain text, when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from pysarge.exceptions import MissingDependencyError

_STYLE_TAG = re.compile(r"(?<!\\)\[/?(?:bold|dim|red|green|yellow|cyan)(?: (?:bold|dim|red|green|yellow|cyan))*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: str) -> str:
	"""Escape user-supplied *text* so Rich does not read it as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		# Mirrors Rich's escape so strip_markup leaves user text intact.
		return text.replace("[", "\\[")
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Drop the style tags this package uses, for plain-text output."""
	return _STYLE_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			if markup:
				objects = tuple(
					strip_markup(obj) if isinstance(obj, str) else obj
					for obj in objects
				)
			print(*objects, file=sys.stderr)
			return
		# Plain output is printed verbatim: no emoji codes, no wrapping.
		rich_console.print(
			*objects,
			markup=markup,
			highlight=False,
			emoji=False,
			soft_wrap=not markup,
		)


console = _ConsoleProxy()
