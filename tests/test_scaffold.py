"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import pysarge
from pysarge import __version__
from pysarge.cli import exit_codes
from pysarge.exceptions import (
    DuplicateFlagError,
    FlagsAfterPositionalsError,
    InvalidFlagDefinitionError,
    MissingDependencyError,
    ParseError,
    RegistryError,
    SargeError,
    UnknownLongFlagError,
    UnknownShortFlagError,
    ValueFlagNotAtClusterEndError,
)


# ---------------------------------------------------------------------------
# Version and public API
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicAPI:
    @pytest.mark.parametrize("name", pysarge.__all__)
    def test_exported(self, name: str) -> None:
        assert hasattr(pysarge, name)

    def test_parse_from_root(self) -> None:
        registry = pysarge.FlagRegistry()
        registry.define("h", "help")
        assert pysarge.parse(["-h"], registry).exists("help")


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            RegistryError,
            InvalidFlagDefinitionError,
            DuplicateFlagError,
            ParseError,
            FlagsAfterPositionalsError,
            UnknownLongFlagError,
            UnknownShortFlagError,
            ValueFlagNotAtClusterEndError,
            MissingDependencyError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SargeError]
    ) -> None:
        assert issubclass(exc_class, SargeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(SargeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = SargeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = SargeError("boom")
        assert err.hint is None

    def test_parse_error_keeps_token(self) -> None:
        err = UnknownLongFlagError("Long flag x isn't defined.", token="--x")
        assert err.token == "--x"
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
