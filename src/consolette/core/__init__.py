"""Core layer — input parsing, command registry, resolution and styling.

Rules
-----
* No writes to any stream.
* No imports from ``cli`` or ``infra``.
* Dependency injection is consumed only through :class:`Invoker`.
"""

from consolette.core.input import Input
from consolette.core.models import (
    Alignment,
    CallableBinding,
    ClassBinding,
    Color,
    CommandDetail,
    CommandSpec,
)
from consolette.core.protocols import DescribedCommand, Invoker
from consolette.core.registry import Registry
from consolette.core.resolver import Resolver
from consolette.core.styles import BACKGROUND, FOREGROUND, ColorLayer, Styles

__all__: list[str] = [
    "BACKGROUND",
    "FOREGROUND",
    "Alignment",
    "CallableBinding",
    "ClassBinding",
    "Color",
    "ColorLayer",
    "CommandDetail",
    "CommandSpec",
    "DescribedCommand",
    "Input",
    "Invoker",
    "Registry",
    "Resolver",
    "Styles",
]
