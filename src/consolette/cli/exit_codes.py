"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: success/info messages and the command listing."""

GENERAL_ERROR: int = 1
"""An error message was displayed (including every caught exception)."""

WARNING: int = 2
"""A warning message was displayed and the command stopped."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
