"""Allow ``python -m pysarge`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pysarge`` behaves identically to the ``pysarge-demo``
console script.
"""

from __future__ import annotations

from pysarge.cli.app import cli

if __name__ == "__main__":
    cli()
