"""Plain-text help rendering for a set of flag definitions.

Layout::

    <description>
    Usage:
    <usage>

    Options:
    -h, --help             Get help.
    -k, --kittens <val>    K is for kittens.
        --snake            Long form only.

The short column is always four characters wide; the long column is
padded to the widest entry plus :data:`COLUMN_GAP` spaces.
"""

from __future__ import annotations

from collections.abc import Iterable

from pysarge.core.models import FlagDefinition

VALUE_PLACEHOLDER: str = " <val>"
"""Appended to the long column of value-taking flags."""

COLUMN_GAP: int = 3
"""Spaces between the widest long column and the descriptions."""


def _short_column(definition: FlagDefinition) -> str:
    if not definition.short_name:
        return "    "
    return f"-{definition.short_name}, "


def _long_label(definition: FlagDefinition) -> str:
    label = definition.long_name
    if definition.requires_value:
        label += VALUE_PLACEHOLDER
    return label


def _long_column(definition: FlagDefinition, width: int) -> str:
    """Return ``--name`` padded to *width*, or blanks for short-only flags."""
    if not definition.long_name:
        return "  " + _long_label(definition).lstrip().ljust(width)
    return "--" + _long_label(definition).ljust(width)


def format_options(definitions: Iterable[FlagDefinition]) -> list[str]:
    """Return one aligned line per definition, in registration order."""
    entries = list(definitions)
    width = max((len(_long_label(d)) for d in entries), default=0)
    width = max(width, 1) + COLUMN_GAP

    lines: list[str] = []
    for definition in entries:
        line = (
            _short_column(definition)
            + _long_column(definition, width)
            + (definition.description or "")
        )
        lines.append(line)
    return lines


def format_help(
    definitions: Iterable[FlagDefinition],
    *,
    description: str = "",
    usage: str = "",
) -> str:
    """Render the full help screen as a single newline-joined string."""
    lines = [description, "Usage:", usage, "", "Options: "]
    lines.extend(format_options(definitions))
    return "\n".join(lines)
