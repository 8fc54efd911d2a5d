"""Infrastructure layer — integration with the Python runtime.

Holds the default dependency-injection container used to construct class
commands and call callable commands.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from consolette.infra.container import Container

__all__: list[str] = ["Container"]
