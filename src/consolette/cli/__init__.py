"""CLI layer — terminal output, the command base class, and error boundaries.

This package is the outermost layer of the framework.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""
