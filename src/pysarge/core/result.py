"""Parse outcome and its read-only query interface.

A :class:`ParseResult` is created fresh by every call to
:func:`pysarge.core.parser.parse`.  It never changes afterwards, so a
result can be kept, compared against a later one, or shared freely.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pysarge.core.models import FlagDefinition, FlagResult
from pysarge.core.registry import FlagRegistry

_NOT_MATCHED = FlagResult()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Flags seen, values bound and text arguments collected by one pass."""

    registry: FlagRegistry
    """Registry the tokens were parsed against; used for name lookup."""

    results: Mapping[FlagDefinition, FlagResult]
    """Outcome for every definition that matched at least once."""

    positionals: tuple[str, ...]
    """Text arguments, in command-line order."""

    matched_flag_count: int
    """Total flag matches, counting repeats and every cluster character."""

    permissive: bool = False
    """Whether the pass ran in permissive mode."""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def result_for(self, name: str) -> FlagResult | None:
        """Return the :class:`FlagResult` for *name*, or ``None`` if unknown.

        *name* is matched against long names first, then short names.
        A known flag that did not appear yields an unmatched result.
        """
        definition = self.registry.find(name)
        if definition is None:
            return None
        return self.results.get(definition, _NOT_MATCHED)

    def flag(self, name: str) -> tuple[bool, str | None]:
        """Return ``(found, value)`` for the flag called *name*.

        ``found`` is true only when the flag is registered and was seen.
        ``value`` is populated only for value-taking flags.
        """
        result = self.result_for(name)
        if result is None or not result.matched:
            return False, None
        return True, result.value

    def exists(self, name: str) -> bool:
        """Return whether the flag called *name* was seen."""
        found, _ = self.flag(name)
        return found

    def value(self, name: str) -> str | None:
        """Return the value bound to *name*, or ``None``."""
        _, bound = self.flag(name)
        return bound

    def positional(self, index: int) -> str | None:
        """Return the zero-based text argument at *index*, or ``None``."""
        if 0 <= index < len(self.positionals):
            return self.positionals[index]
        return None
