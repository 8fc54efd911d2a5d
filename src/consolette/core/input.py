"""Command-line input parsing.

The token list is everything after the program name::

    prog greet Bob --loud --greeting=Hi
         ^^^^^ command
               ^^^ argument
                   ^^^^^^^^^^^^^^^^^^^^ options -> {"loud": True, "greeting": "Hi"}

Only the token directly after the command can be the argument; any other
non-flag token is ignored.  Argument and options are extracted lazily and
cached on first access.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

OptionValue = str | bool

_DASHES = re.compile(r"^(--|-)")


class Input:
    """Read-only view over one invocation's tokens."""

    def __init__(self, tokens: Sequence[str] | None = None) -> None:
        self._tokens: tuple[str, ...] = tuple(sys.argv[1:] if tokens is None else tokens)
        self._argument: str | None = None
        self._argument_parsed: bool = False
        self._options: dict[str, OptionValue] | None = None

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    def has_command(self) -> bool:
        return len(self._tokens) >= 1

    def get_command(self) -> str | None:
        return self._tokens[0] if self.has_command() else None

    def get_argument(self) -> str | None:
        """Return the positional argument, or ``None`` if a flag comes first."""
        if not self._argument_parsed:
            rest = self._tokens[1:]
            if rest and not rest[0].startswith("-"):
                self._argument = rest[0]
            self._argument_parsed = True
        return self._argument

    def get_options(self) -> dict[str, OptionValue]:
        """Return every ``-flag`` / ``--key=value`` token as a mapping."""
        if self._options is None:
            options: dict[str, OptionValue] = {}
            for token in self._tokens[1:]:
                if not token.startswith("-"):
                    continue
                key, sep, value = token.partition("=")
                options[_DASHES.sub("", key, count=1)] = value if sep else True
            self._options = options
        return dict(self._options)

    def get_option(self, name: str, default: OptionValue | None = None) -> OptionValue | None:
        return self.get_options().get(name, default)
