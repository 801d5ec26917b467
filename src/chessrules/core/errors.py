"""Exceptions raised by the notation and coordinate layers.

Both derive from :class:`ValueError`, so ``except ValueError`` keeps
catching them. Illegal moves are never reported through exceptions.
"""

from __future__ import annotations


class InvalidNotationError(ValueError):
    """Text that cannot be decoded as a square, move or FEN record."""


class OutOfRangeError(ValueError):
    """A board coordinate outside ``[0, 7]``."""
