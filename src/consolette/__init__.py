"""consolette — a small console application framework.

Parses command-line invocations, resolves registered commands (classes or
callables), injects their dependencies, and renders colorized text and
tables to a terminal stream.
"""

from consolette.cli.application import Console
from consolette.cli.command import Command
from consolette.cli.output import Output
from consolette.cli.table import Table
from consolette.core.input import Input
from consolette.core.models import Alignment, Color
from consolette.core.registry import Registry
from consolette.core.styles import Styles
from consolette.infra.container import Container
from consolette.version import __version__

__all__: list[str] = [
    "Alignment",
    "Color",
    "Command",
    "Console",
    "Container",
    "Input",
    "Output",
    "Registry",
    "Styles",
    "Table",
    "__version__",
]
