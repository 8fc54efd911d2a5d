"""Allow ``python -m consolette`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m consolette`` behaves identically to the ``consolette``
console script.
"""

from __future__ import annotations

from consolette.cli.app import cli

if __name__ == "__main__":
    cli()
