"""Flag registry — the ordered set of flags a program accepts.

The registry is populated once, before parsing, and is only read by the
parser and the query layer afterwards.  Names are indexed in
dictionaries so lookups stay O(1); duplicate names are a configuration
error and are rejected at registration time rather than resolved at
lookup time.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pysarge.core.models import FlagDefinition
from pysarge.exceptions import DuplicateFlagError, InvalidFlagDefinitionError


class FlagRegistry:
    """Ordered collection of :class:`FlagDefinition` entries.

    Parameters
    ----------
    definitions:
        Optional initial definitions, registered in order via
        :meth:`define_all`.
    """

    def __init__(self, definitions: Iterable[FlagDefinition] = ()) -> None:
        self._definitions: list[FlagDefinition] = []
        self._by_long: dict[str, FlagDefinition] = {}
        self._by_short: dict[str, FlagDefinition] = {}
        self.define_all(definitions)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def define(
        self,
        short_name: str,
        long_name: str,
        description: str | None = None,
        requires_value: bool = False,
    ) -> FlagDefinition:
        """Register a new flag and return its definition.

        Raises
        ------
        InvalidFlagDefinitionError
            If the names are malformed.
        DuplicateFlagError
            If either name is already registered.
        """
        definition = FlagDefinition(
            short_name=short_name,
            long_name=long_name,
            description=description,
            requires_value=requires_value,
        )
        self._check(definition, self._by_short, self._by_long)
        self._add(definition)
        return definition

    def define_all(self, definitions: Iterable[FlagDefinition]) -> None:
        """Register several definitions at once.

        The batch is validated as a whole first: when any entry is
        rejected, none of them is added.
        """
        batch = list(definitions)
        pending_short = dict(self._by_short)
        pending_long = dict(self._by_long)
        for definition in batch:
            self._check(definition, pending_short, pending_long)
            if definition.short_name:
                pending_short[definition.short_name] = definition
            if definition.long_name:
                pending_long[definition.long_name] = definition
        for definition in batch:
            self._add(definition)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_by_long(self, name: str) -> FlagDefinition | None:
        """Return the definition whose long name is *name*, if any."""
        return self._by_long.get(name) if name else None

    def find_by_short(self, name: str) -> FlagDefinition | None:
        """Return the definition whose short name is *name*, if any."""
        return self._by_short.get(name) if name else None

    def find(self, name: str) -> FlagDefinition | None:
        """Look *name* up as a long name first, then as a short name."""
        found = self.find_by_long(name)
        if found is None:
            found = self.find_by_short(name)
        return found

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _check(
        definition: FlagDefinition,
        by_short: dict[str, FlagDefinition],
        by_long: dict[str, FlagDefinition],
    ) -> None:
        """Validate *definition* against the given name indexes."""
        short, long = definition.short_name, definition.long_name
        if not short and not long:
            raise InvalidFlagDefinitionError(
                "A flag needs a short name, a long name, or both.",
            )
        if len(short) > 1:
            raise InvalidFlagDefinitionError(
                f"Short name must be a single character: {short!r}",
                hint=f"Register {short!r} as a long name instead.",
            )
        if short == "-" or long.startswith("-"):
            raise InvalidFlagDefinitionError(
                f"Flag names must not include leading dashes: {short or long!r}",
                hint="Pass names without '-' or '--'; they are added when parsing.",
            )
        if short and short in by_short:
            raise DuplicateFlagError(f"Short flag -{short} is already defined.")
        if long and long in by_long:
            raise DuplicateFlagError(f"Long flag --{long} is already defined.")

    def _add(self, definition: FlagDefinition) -> None:
        self._definitions.append(definition)
        if definition.short_name:
            self._by_short[definition.short_name] = definition
        if definition.long_name:
            self._by_long[definition.long_name] = definition
