"""Stateful convenience wrapper around the registry and the parser.

:class:`CommandLine` is what most programs use: define flags, parse
``sys.argv[1:]`` once, then ask questions.  It keeps only the most
recent :class:`~pysarge.core.result.ParseResult`; parsing again replaces
it wholesale, so no match or value from an earlier call survives.
"""

from __future__ import annotations

from collections.abc import Iterable

from pysarge.core.models import FlagDefinition
from pysarge.core.parser import parse
from pysarge.core.registry import FlagRegistry
from pysarge.core.result import ParseResult
from pysarge.utils.help_text import format_help


class CommandLine:
    """Flag registry plus the outcome of the last parse.

    Parameters
    ----------
    permissive:
        Skip unknown flags and allow flags after text arguments.
    description:
        One-line program description used by :meth:`format_help`.
    usage:
        Usage synopsis used by :meth:`format_help`.
    """

    def __init__(
        self,
        *,
        permissive: bool = False,
        description: str = "",
        usage: str = "",
    ) -> None:
        self.permissive: bool = permissive
        self.description: str = description
        self.usage: str = usage
        self.registry: FlagRegistry = FlagRegistry()
        self._last_result: ParseResult | None = None

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def define(
        self,
        short_name: str,
        long_name: str,
        description: str | None = None,
        requires_value: bool = False,
    ) -> FlagDefinition:
        """Register a flag; see :meth:`FlagRegistry.define`."""
        return self.registry.define(
            short_name, long_name, description, requires_value,
        )

    def define_all(self, definitions: Iterable[FlagDefinition]) -> None:
        """Register several flags; see :meth:`FlagRegistry.define_all`."""
        self.registry.define_all(definitions)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, tokens: Iterable[str]) -> ParseResult:
        """Parse *tokens* and remember the result for later queries.

        On failure the exception propagates and the previous result is
        discarded, so queries report nothing found.
        """
        self._last_result = None
        self._last_result = parse(tokens, self.registry, permissive=self.permissive)
        return self._last_result

    @property
    def last_result(self) -> ParseResult | None:
        """The most recent successful parse, or ``None``."""
        return self._last_result

    @property
    def parsed(self) -> bool:
        return self._last_result is not None

    # ------------------------------------------------------------------
    # Queries (all safe before parsing)
    # ------------------------------------------------------------------

    def flag(self, name: str) -> tuple[bool, str | None]:
        if self._last_result is None:
            return False, None
        return self._last_result.flag(name)

    def exists(self, name: str) -> bool:
        return self._last_result is not None and self._last_result.exists(name)

    def positional(self, index: int) -> str | None:
        if self._last_result is None:
            return None
        return self._last_result.positional(index)

    @property
    def positionals(self) -> tuple[str, ...]:
        if self._last_result is None:
            return ()
        return self._last_result.positionals

    @property
    def matched_flag_count(self) -> int:
        if self._last_result is None:
            return 0
        return self._last_result.matched_flag_count

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def format_help(self) -> str:
        """Render description, usage and the option table."""
        return format_help(
            self.registry,
            description=self.description,
            usage=self.usage,
        )
