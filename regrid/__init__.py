from .errors import GridError, GridIndexError, InvalidSizeError, SizeMismatchError
from .grid import Grid
from .matrix import Matrix

__all__ = [
    "Grid",
    "Matrix",
    "GridError",
    "GridIndexError",
    "InvalidSizeError",
    "SizeMismatchError",
]
