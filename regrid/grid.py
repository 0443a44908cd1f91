from __future__ import annotations
import logging
import operator
from typing import Any, Final, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from regrid.errors import GridIndexError, InvalidSizeError, SizeMismatchError
from regrid.matrix import Matrix

logger = logging.getLogger(__name__)

HASH_MULTIPLIER: Final = 7
HASH_MASK: Final = (1 << 64) - 1


def _cells(values: Iterable[Any]) -> np.ndarray:
    # Item assignment stores each object as-is; np.asarray would unpack sequences.
    values = list(values)
    out = np.empty(len(values), dtype=object)
    for i, v in enumerate(values):
        out[i] = v
    return out


def _broadcastable(val: Any) -> np.ndarray:
    return _cells([val])


def _dimension(value: Any, name: str) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidSizeError(f"Grid {name} must be an integer, got {value!r}") from None
    if value < 0:
        raise InvalidSizeError(f"Grid {name} must be non-negative, got {value}")
    return value


class Grid(Matrix):
    """Resizable two-dimensional container of arbitrary values.

    Cells live in a numpy object array of shape ``(height, width)``.
    Structural edits build a replacement array and swap it in with one
    assignment, so a failed edit never leaves a half-resized grid. Content
    edits write in place.
    """

    __slots__ = ("_data", "_default")

    def __init__(self, width: int, height: int, default: Any = None):
        width = _dimension(width, "width")
        height = _dimension(height, "height")
        self._default = default
        self._data = np.empty((height, width), dtype=object)
        self._data[...] = _broadcastable(default)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], default: Any = None) -> Grid:
        rows = [list(r) for r in rows]
        width = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != width:
                raise SizeMismatchError("row", width, len(row))
        grid = cls(width, len(rows), default)
        for r, row in enumerate(rows):
            grid._data[r] = _cells(row)
        return grid

    @classmethod
    def _from_store(cls, data: np.ndarray, default: Any) -> Grid:
        grid = cls.__new__(cls)
        grid._data = data
        grid._default = default
        return grid

    # ------------------------------------------------------------------
    # Dimensions

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def default(self) -> Any:
        return self._default

    # ------------------------------------------------------------------
    # Bounds

    def _describe(self) -> str:
        return f"{self.width}-wide and {self.height}-high grid"

    def _check_row(self, row: int) -> int:
        row = operator.index(row)
        if not 0 <= row < self.height:
            raise GridIndexError(f"Invalid row {row} for {self._describe()}")
        return row

    def _check_col(self, col: int) -> int:
        col = operator.index(col)
        if not 0 <= col < self.width:
            raise GridIndexError(f"Invalid column {col} for {self._describe()}")
        return col

    def _check_position(self, at: int, limit: int, kind: str) -> int:
        at = operator.index(at)
        if not 0 <= at <= limit:
            raise GridIndexError(
                f"Invalid {kind} insert position {at} for {self._describe()}; expected 0..{limit}"
            )
        return at

    # ------------------------------------------------------------------
    # Access

    def get(self, row: int, col: int) -> Any:
        return self._data[self._check_row(row), self._check_col(col)]

    def set(self, row: int, col: int, val: Any) -> None:
        self._data[self._check_row(row), self._check_col(col)] = val

    def safe_get(self, row: int, col: int, fallback: Any = None) -> Any:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self._data[row, col]
        return fallback

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], val: Any) -> None:
        row, col = key
        self.set(row, col, val)

    def __iter__(self) -> Iterator[List[Any]]:
        for row in self._data:
            yield list(row)

    # ------------------------------------------------------------------
    # Structural edits

    def insert_row(self, at: int, values: Optional[Sequence[Any]] = None) -> None:
        at = self._check_position(at, self.height, "row")
        if values is None:
            row = _broadcastable(self._default)
        else:
            if len(values) != self.width:
                raise SizeMismatchError("row", self.width, len(values))
            row = _cells(values)

        old = self._data
        data = np.empty((self.height + 1, self.width), dtype=object)
        data[:at] = old[:at]
        data[at + 1:] = old[at:]
        data[at] = row
        self._data = data
        logger.debug("insert_row | at=%d shape=%s", at, data.shape)

    def insert_col(self, at: int, values: Optional[Sequence[Any]] = None) -> None:
        at = self._check_position(at, self.width, "column")
        if values is None:
            col = _broadcastable(self._default)
        else:
            if len(values) != self.height:
                raise SizeMismatchError("column", self.height, len(values))
            col = _cells(values)

        old = self._data
        data = np.empty((self.height, self.width + 1), dtype=object)
        data[:, :at] = old[:, :at]
        data[:, at + 1:] = old[:, at:]
        data[:, at] = col
        self._data = data
        logger.debug("insert_col | at=%d shape=%s", at, data.shape)

    def delete_row(self, at: int) -> None:
        at = self._check_row(at)
        self._data = np.delete(self._data, at, axis=0)
        logger.debug("delete_row | at=%d shape=%s", at, self._data.shape)

    def delete_col(self, at: int) -> None:
        at = self._check_col(at)
        self._data = np.delete(self._data, at, axis=1)
        logger.debug("delete_col | at=%d shape=%s", at, self._data.shape)

    # ------------------------------------------------------------------
    # Bulk fills

    def fill_region(self, start_row: int, start_col: int, end_row: int, end_col: int, val: Any) -> None:
        """Set every cell in rows ``[start_row, end_row)`` and columns ``[start_col, end_col)``.

        An empty range on either axis is a no-op. A rectangle reaching
        outside the grid raises ``GridIndexError`` before any cell is written.
        """
        if start_row >= end_row or start_col >= end_col:
            return
        if start_row < 0 or end_row > self.height or start_col < 0 or end_col > self.width:
            raise GridIndexError(
                f"Region rows {start_row}..{end_row}, columns {start_col}..{end_col} "
                f"exceeds {self._describe()}"
            )
        self._data[start_row:end_row, start_col:end_col] = _broadcastable(val)
        logger.debug(
            "fill_region | rows=%d..%d cols=%d..%d", start_row, end_row, start_col, end_col
        )

    def fill_line(
        self,
        start_row: int,
        start_col: int,
        delta_row: int,
        delta_col: int,
        end_row: int,
        end_col: int,
        val: Any,
    ) -> None:
        """Walk from ``(start_row, start_col)`` by ``(delta_row, delta_col)``, setting each cell.

        The walk stops as soon as the row reaches ``end_row`` or the column
        reaches ``end_col``. Cells are written one at a time through ``set``,
        so a walk that leaves the grid raises ``GridIndexError`` after the
        cells before it have been written.
        """
        row, col = start_row, start_col
        if delta_row == 0 and delta_col == 0 and row < end_row and col < end_col:
            raise ValueError("fill_line with a zero step would never reach its end bounds")
        steps = 0
        while row < end_row and col < end_col:
            self.set(row, col, val)
            row += delta_row
            col += delta_col
            steps += 1
        logger.debug("fill_line | start=(%d, %d) cells=%d", start_row, start_col, steps)

    # ------------------------------------------------------------------
    # Value semantics

    def clone(self) -> Grid:
        # ndarray.copy on an object array copies references, not the elements.
        return Grid._from_store(self._data.copy(), self._default)

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        for r, row in enumerate(self._data):
            for c, mine in enumerate(row):
                theirs = other.get(r, c)
                if not (mine is theirs or mine == theirs):
                    return False
        return True

    def hash_code(self) -> int:
        code = self.width + HASH_MULTIPLIER * self.height
        for row in self._data:
            for val in row:
                if val is not None:
                    code = (code * HASH_MULTIPLIER + hash(val)) & HASH_MASK
        return code

    def __copy__(self) -> Grid:
        return self.clone()

    # ------------------------------------------------------------------
    # Conversions

    def to_list(self) -> List[List[Any]]:
        return [list(row) for row in self._data]

    def region(self, start_row: int, start_col: int, end_row: int, end_col: int) -> Grid:
        start_row, end_row = max(0, start_row), min(self.height, end_row)
        start_col, end_col = max(0, start_col), min(self.width, end_col)
        if start_row >= end_row or start_col >= end_col:
            raise ValueError("Invalid region bounds")
        return Grid._from_store(
            self._data[start_row:end_row, start_col:end_col].copy(), self._default
        )

    def render(self, separator: str = " ") -> str:
        cells = [[str(v) for v in row] for row in self._data]
        pad = max((len(s) for row in cells for s in row), default=0)
        return "\n".join(separator.join(s.rjust(pad) for s in row) for row in cells)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, default={self._default!r})"
