"""Tests for plain-text help rendering (utils/help_text.py)."""

from __future__ import annotations

from pysarge.core.models import FlagDefinition
from pysarge.utils.help_text import format_help, format_options


def _definitions() -> list[FlagDefinition]:
    return [
        FlagDefinition("h", "help", "Get help."),
        FlagDefinition("k", "kittens", "Kittens.", requires_value=True),
        FlagDefinition("", "snake", "Snake."),
    ]


class TestFormatOptions:
    def test_columns_aligned(self) -> None:
        # Widest long label is "kittens <val>" (13) plus a 3-space gap.
        assert format_options(_definitions()) == [
            "-h, --help" + " " * 12 + "Get help.",
            "-k, --kittens <val>" + " " * 3 + "Kittens.",
            "    --snake" + " " * 11 + "Snake.",
        ]

    def test_missing_description(self) -> None:
        assert format_options([FlagDefinition("a", "apple")]) == ["-a, --apple   "]

    def test_empty(self) -> None:
        assert format_options([]) == []


class TestFormatHelp:
    def test_layout(self) -> None:
        text = format_help(
            _definitions(),
            description="Demo program.",
            usage="demo <options>",
        )
        lines = text.split("\n")
        assert lines[:5] == ["Demo program.", "Usage:", "demo <options>", "", "Options: "]
        assert lines[5:] == format_options(_definitions())

    def test_no_definitions(self) -> None:
        assert format_help([]) == "\nUsage:\n\n\nOptions: "


class TestShortOnlyFlags:
    def test_no_long_column_dashes(self) -> None:
        lines = format_options([
            FlagDefinition("h", "help", "Get help."),
            FlagDefinition("x", "", "Short only."),
            FlagDefinition("n", "", "Number.", requires_value=True),
        ])
        # Widest long label is " <val>" (6) plus a 3-space gap.
        assert lines == [
            "-h, --help" + " " * 5 + "Get help.",
            "-x, " + " " * 11 + "Short only.",
            "-n,   <val>" + " " * 4 + "Number.",
        ]
        assert all("--" not in line for line in lines[1:])

    def test_descriptions_stay_aligned(self) -> None:
        lines = format_options([
            FlagDefinition("a", "apple", "A."),
            FlagDefinition("q", "", "Q."),
        ])
        assert lines[0].index("A.") == lines[1].index("Q.")
