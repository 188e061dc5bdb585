"""pysarge — small, strict command-line flag parser.

Short and long flags, combined short-flag clusters, value binding and
text arguments, in one left-to-right pass.
"""

from pysarge.core.command_line import CommandLine
from pysarge.core.models import FlagDefinition, FlagResult
from pysarge.core.parser import parse
from pysarge.core.registry import FlagRegistry
from pysarge.core.result import ParseResult
from pysarge.version import __version__

__all__: list[str] = [
    "CommandLine",
    "FlagDefinition",
    "FlagRegistry",
    "FlagResult",
    "ParseResult",
    "__version__",
    "parse",
]
