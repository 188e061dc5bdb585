"""Shared pytest fixtures and configuration for the pysarge test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no output.
* CLI tests capture stderr through ``capsys``.
* Tests must not depend on OS state or the real ``sys.argv``.
"""

from __future__ import annotations

import pytest

from pysarge.core.registry import FlagRegistry


@pytest.fixture()
def registry() -> FlagRegistry:
    """The flag set used throughout the suite.

    ``k``, ``n`` and ``c`` take values; ``snake`` has no short form.
    """
    reg = FlagRegistry()
    reg.define("h", "help", "Get help.")
    reg.define("k", "kittens", "K is for kittens.", requires_value=True)
    reg.define("n", "number", "Gimme a number.", requires_value=True)
    reg.define("a", "apple", "Just an apple.")
    reg.define("b", "bear", "Look, it's a bear.")
    reg.define("c", "cat", "A cat needs a name.", requires_value=True)
    reg.define("x", "extra", "Something extra.")
    reg.define("", "snake", "Snakes only come in long form.")
    return reg
