from __future__ import annotations


class InvalidDimensions(ValueError):
    """Raised when a board is built with fewer than 2 columns or 2 rows of dots."""


class IndexOutOfRange(IndexError):
    """Raised when an edge or cell accessor gets coordinates outside the board."""
