"""Demonstration program for pysarge and its error boundary.

The program registers a handful of flags, parses its own command line
with :class:`~pysarge.core.command_line.CommandLine`, and reports what
it found.  It doubles as a quick manual test bench for the parser::

    pysarge-demo -abk cat --number 42 notes.txt

This module is the only place that translates between the library's
exceptions and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from pysarge.cli import exit_codes
from pysarge.cli.console import console, escape
from pysarge.core.command_line import CommandLine
from pysarge.exceptions import SargeError
from pysarge.version import __version__


# ---------------------------------------------------------------------------
# Flag setup
# ---------------------------------------------------------------------------

def _build_command_line(*, permissive: bool = False) -> CommandLine:
    """Construct the demo's command line and register its flags."""
    command_line = CommandLine(
        permissive=permissive,
        description=(
            "pysarge command line argument parsing demo. "
            "For demonstration purposes and testing."
        ),
        usage="pysarge-demo <options> [text ...]",
    )
    command_line.define("h", "help", "Get help.")
    command_line.define(
        "k", "kittens", "K is for kittens. Everyone needs kittens in their life.",
        requires_value=True,
    )
    command_line.define("n", "number", "Gimme a number. Any number.", requires_value=True)
    command_line.define("a", "apple", "Just an apple.")
    command_line.define("b", "bear", "Look, it's a bear.")
    command_line.define("", "snake", "Snakes only come in long form, there are no short snakes.")
    command_line.define("v", "verbose", "Log each parsing step to stderr.")
    command_line.define("V", "version", "Show the version and exit.")
    return command_line


def _configure_logging() -> None:
    """Send the parser's DEBUG trace to stderr."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, permissive: bool = False) -> int:
    """Run the demo program.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    permissive:
        Parse in permissive mode.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SargeError
        When the command line cannot be parsed.
    """
    tokens = sys.argv[1:] if argv is None else argv
    command_line = _build_command_line(permissive=permissive)

    command_line.parse(tokens)
    if command_line.exists("verbose"):
        # Parsing is side-effect free, so replay it with tracing on.
        _configure_logging()
        command_line.parse(tokens)

    if command_line.exists("version"):
        console.print(f"pysarge-demo {__version__}", markup=False)
        return exit_codes.SUCCESS

    console.print(
        f"Number of flags found: {command_line.matched_flag_count}",
        markup=False,
    )

    if command_line.exists("help"):
        console.print(command_line.format_help(), markup=False)
    else:
        console.print("No help requested...", markup=False)

    found, kittens = command_line.flag("kittens")
    if found:
        console.print(f"Got kittens: {kittens}", markup=False)

    found, number = command_line.flag("number")
    if found:
        console.print(f"Got number: {number}", markup=False)

    text_argument = command_line.positional(0)
    if text_argument is not None:
        console.print(f"Got text argument: {text_argument}", markup=False)

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SargeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
