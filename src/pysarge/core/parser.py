"""Token classification and value binding.

:func:`parse` walks the token sequence once, left to right:

1. **Value** — if the previous flag takes a value, the token is bound to
   it verbatim, whatever it looks like.
2. **Long flag** — ``--name`` is looked up by long name only.
3. **Short cluster** — ``-abc`` is read one character at a time; only
   the last character may take a value.
4. **Text argument** — anything else.

The function is pure: the registry is only read, and every call returns
a brand-new :class:`~pysarge.core.result.ParseResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from pysarge.core.models import FlagDefinition, FlagResult
from pysarge.core.registry import FlagRegistry
from pysarge.core.result import ParseResult
from pysarge.exceptions import (
    FlagsAfterPositionalsError,
    UnknownLongFlagError,
    UnknownShortFlagError,
    ValueFlagNotAtClusterEndError,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ParseState:
    """Mutable bookkeeping for a single pass; never escapes :func:`parse`."""

    expecting_value: bool = False
    pending_target: FlagDefinition | None = None
    matched_flag_count: int = 0


def parse(
    tokens: Iterable[str],
    registry: FlagRegistry,
    *,
    permissive: bool = False,
) -> ParseResult:
    """Parse *tokens* against *registry*.

    Parameters
    ----------
    tokens:
        Raw command-line tokens, without the program name.
    registry:
        The flags the program understands.
    permissive:
        When true, unknown flags are skipped and flags may follow text
        arguments.

    Raises
    ------
    FlagsAfterPositionalsError
        Strict mode only: a flag token follows a text argument.
    UnknownLongFlagError
        Strict mode only: ``--name`` is not registered.
    UnknownShortFlagError
        Strict mode only: a cluster character is not registered.
    ValueFlagNotAtClusterEndError
        A value-taking short flag is not the last character of its
        cluster.
    """
    state = _ParseState()
    seen: dict[FlagDefinition, str | None] = {}
    positionals: list[str] = []

    for token in tokens:
        target = state.pending_target
        if state.expecting_value and target is not None:
            logger.debug("Binding %r to %s", token, target.display_name)
            seen[target] = token
            state.expecting_value = False
            state.pending_target = None
            continue

        if not token.startswith("-"):
            logger.debug("Text argument %r", token)
            positionals.append(token)
            continue

        if not permissive and positionals:
            raise FlagsAfterPositionalsError(
                f"Flags not allowed after text arguments: {token}",
                token=token,
                hint="Put all flags before the first text argument.",
            )

        if token.startswith("--"):
            _match_long(token, registry, state, seen, permissive)
        else:
            _match_cluster(token, registry, state, seen, permissive)

    if state.expecting_value and state.pending_target is not None:
        logger.debug(
            "%s reached end of input without a value",
            state.pending_target.display_name,
        )

    results = {
        definition: FlagResult(matched=True, value=value)
        for definition, value in seen.items()
    }
    return ParseResult(
        registry=registry,
        results=MappingProxyType(results),
        positionals=tuple(positionals),
        matched_flag_count=state.matched_flag_count,
        permissive=permissive,
    )


# ---------------------------------------------------------------------------
# Flag handlers
# ---------------------------------------------------------------------------

def _match_long(
    token: str,
    registry: FlagRegistry,
    state: _ParseState,
    seen: dict[FlagDefinition, str | None],
    permissive: bool,
) -> None:
    name = token[2:]
    definition = registry.find_by_long(name)
    if definition is None:
        if permissive:
            logger.debug("Skipping unknown long flag %r", token)
            return
        raise UnknownLongFlagError(
            f"Long flag {name} isn't defined.",
            token=token,
        )
    _mark(definition, state, seen)


def _match_cluster(
    token: str,
    registry: FlagRegistry,
    state: _ParseState,
    seen: dict[FlagDefinition, str | None],
    permissive: bool,
) -> None:
    cluster = token[1:]
    last = len(cluster) - 1
    for position, char in enumerate(cluster):
        definition = registry.find_by_short(char)
        if definition is None:
            if permissive:
                logger.debug("Skipping unknown short flag -%s in %r", char, token)
                continue
            raise UnknownShortFlagError(
                f"Short flag {char} isn't defined.",
                token=token,
            )
        if definition.requires_value and position != last:
            raise ValueFlagNotAtClusterEndError(
                f"Flag -{char} needs to be followed by a value string.",
                token=token,
                hint=f"Move -{char} to the end of {token!r} or give it its own token.",
            )
        _mark(definition, state, seen)


def _mark(
    definition: FlagDefinition,
    state: _ParseState,
    seen: dict[FlagDefinition, str | None],
) -> None:
    """Record a match and arm value binding when the flag takes one."""
    logger.debug("Matched %s", definition.display_name)
    # A repeated flag keeps its earlier value until a new one is bound.
    seen.setdefault(definition, None)
    state.matched_flag_count += 1
    if definition.requires_value:
        state.expecting_value = True
        state.pending_target = definition
