"""Generic utilities and helpers.

Helpers that support the engine but are not part of
the rewriting logic itself, like formatting tokens for display.
"""

from . import tabulate

__all__ = ("tabulate",)
