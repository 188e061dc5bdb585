"""Custom exception hierarchy for pysarge.

Every error the library raises inherits from :class:`SargeError`, so
callers can catch a single type at their own error boundary.  The core
never prints or logs a failure; it raises one of these and lets the
caller decide how to render it.

Hierarchy
---------
SargeError
├── MissingDependencyError
├── RegistryError
│   ├── InvalidFlagDefinitionError
│   └── DuplicateFlagError
└── ParseError
    ├── FlagsAfterPositionalsError
    ├── UnknownLongFlagError
    ├── UnknownShortFlagError
    └── ValueFlagNotAtClusterEndError
"""

from __future__ import annotations


class SargeError(Exception):
    """Base exception for all pysarge errors.

    Every user-visible error condition maps to a subclass of this
    exception so that an application's error boundary can render a clean
    message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registry / definitions ------------------------------------------------

class RegistryError(SargeError):
    """Raised when a flag definition cannot be registered."""


class InvalidFlagDefinitionError(RegistryError):
    """Raised when a flag definition has malformed or missing names."""


class DuplicateFlagError(RegistryError):
    """Raised when a short or long name is already taken in the registry."""


# --- Parsing ---------------------------------------------------------------

class ParseError(SargeError):
    """Base class for failures detected while walking the token sequence.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    token:
        The raw command-line token being processed when parsing stopped.
    hint:
        Optional actionable guidance.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str = token


class FlagsAfterPositionalsError(ParseError):
    """Raised in strict mode when a flag follows a text argument."""


class UnknownLongFlagError(ParseError):
    """Raised in strict mode when ``--name`` is not registered."""


class UnknownShortFlagError(ParseError):
    """Raised in strict mode when a short flag character is not registered."""


class ValueFlagNotAtClusterEndError(ParseError):
    """Raised when a value-taking short flag is not last in its cluster."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(SargeError):
    """Raised when an optional runtime dependency is not installed."""
