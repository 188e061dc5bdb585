"""Core layer — flag registry, parser state machine and parse results.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Failures are raised as :class:`~pysarge.exceptions.SargeError`
  subclasses, never printed or logged above ``DEBUG``.
"""

from pysarge.core.command_line import CommandLine
from pysarge.core.models import FlagDefinition, FlagResult
from pysarge.core.parser import parse
from pysarge.core.registry import FlagRegistry
from pysarge.core.result import ParseResult

__all__: list[str] = [
    "CommandLine",
    "FlagDefinition",
    "FlagRegistry",
    "FlagResult",
    "ParseResult",
    "parse",
]
