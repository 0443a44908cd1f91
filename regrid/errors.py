from __future__ import annotations


class GridError(Exception):
    """Base class for every failure raised by regrid."""


class GridIndexError(GridError, IndexError):
    """Row, column or insert position outside the range valid for the operation."""


class SizeMismatchError(GridError, ValueError):
    """A supplied row or column does not match the grid's width or height."""

    def __init__(self, kind: str, expected: int, actual: int):
        super().__init__(f"Incorrect {kind} length: expected {expected}, got {actual}")
        self.kind = kind
        self.expected = expected
        self.actual = actual


class InvalidSizeError(GridError, ValueError):
    """Grid dimensions that cannot describe a grid."""
