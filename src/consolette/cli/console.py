"""Rich console bound to stderr for process-level diagnostics.

Command output goes through :class:`~consolette.cli.output.Output`; this
console is only used by the process boundary in :mod:`consolette.cli.app`
for messages that must not mix with a command's stdout.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True)
