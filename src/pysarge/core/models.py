"""Domain models for pysarge.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Parse outcomes are never written back
onto a :class:`FlagDefinition`; each parse produces fresh
:class:`FlagResult` values instead.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Flag definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagDefinition:
    """A flag the program understands, as registered before parsing."""

    short_name: str
    """Single character (e.g. ``"h"``), or ``""`` for no short form."""

    long_name: str
    """Long name without dashes (e.g. ``"help"``), or ``""`` for none."""

    description: str | None = None
    """Help text shown next to the flag."""

    requires_value: bool = False
    """Whether the next token is consumed as this flag's value."""

    @property
    def display_name(self) -> str:
        """Return ``--long`` when a long form exists, else ``-s``."""
        if self.long_name:
            return f"--{self.long_name}"
        return f"-{self.short_name}"


# ---------------------------------------------------------------------------
# Per-parse outcome for one definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagResult:
    """What a single parse pass observed for one :class:`FlagDefinition`."""

    matched: bool = False
    """Whether the flag was seen at least once."""

    value: str | None = None
    """Bound value; only set for value-taking flags that received one."""
