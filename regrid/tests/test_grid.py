# regrid/tests/test_grid.py
"""
Construction and cell access
============================
Groups:
  Construction - default fill, empty grids, invalid sizes, from_rows
  Access       - get/set, bounds, negative indices, item syntax
  Conversions  - to_list, region, render, repr, iteration
"""
from __future__ import annotations

import pytest

from regrid import Grid, GridIndexError, InvalidSizeError, SizeMismatchError


@pytest.fixture
def grid():
    return Grid.from_rows([
        [1, 2, 3],
        [4, 5, 6],
    ], default=0)


# ─────────────────────────────────────────────────────────────────────────────
# Construction
# ─────────────────────────────────────────────────────────────────────────────

def test_new_grid_filled_with_default():
    g = Grid(4, 3, "x")
    assert g.width == 4
    assert g.height == 3
    assert g.shape == (3, 4)
    for r in range(3):
        for c in range(4):
            assert g.get(r, c) == "x"


def test_default_is_none_when_omitted():
    g = Grid(2, 2)
    assert g.default is None
    assert g.get(1, 1) is None


def test_zero_sized_grids():
    assert Grid(0, 0).shape == (0, 0)
    assert Grid(3, 0).shape == (0, 3)
    assert Grid(0, 3).shape == (3, 0)


@pytest.mark.parametrize("width,height", [(-1, 2), (2, -1), (-3, -3)])
def test_negative_size_rejected(width, height):
    with pytest.raises(InvalidSizeError):
        Grid(width, height)


def test_non_integer_size_rejected():
    with pytest.raises(InvalidSizeError):
        Grid(2.5, 2)


def test_invalid_size_is_value_error():
    with pytest.raises(ValueError):
        Grid(-1, 0)


def test_sequence_default_stored_as_single_cell():
    marker = [1, 2]
    g = Grid(3, 2, marker)
    assert g.get(0, 0) is marker
    assert g.get(1, 2) is marker


def test_from_rows(grid):
    assert grid.shape == (2, 3)
    assert grid.get(1, 0) == 4
    assert grid.default == 0


def test_from_rows_ragged():
    with pytest.raises(SizeMismatchError):
        Grid.from_rows([[1, 2], [3]])


def test_from_rows_empty():
    g = Grid.from_rows([])
    assert g.shape == (0, 0)


# ─────────────────────────────────────────────────────────────────────────────
# Access
# ─────────────────────────────────────────────────────────────────────────────

def test_set_then_get(grid):
    before = grid.to_list()
    grid.set(0, 2, 99)
    assert grid.get(0, 2) == 99
    for r in range(grid.height):
        for c in range(grid.width):
            if (r, c) != (0, 2):
                assert grid.get(r, c) == before[r][c]


@pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
def test_get_out_of_range(grid, row, col):
    with pytest.raises(GridIndexError):
        grid.get(row, col)


@pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0)])
def test_set_out_of_range(grid, row, col):
    with pytest.raises(IndexError):
        grid.set(row, col, 0)


def test_item_syntax(grid):
    grid[1, 1] = "m"
    assert grid[1, 1] == "m"
    with pytest.raises(GridIndexError):
        grid[2, 0]


def test_safe_get(grid):
    assert grid.safe_get(0, 0) == 1
    assert grid.safe_get(-1, 0) is None
    assert grid.safe_get(9, 9, fallback=-1) == -1


def test_store_mutable_value():
    g = Grid(2, 2, 0)
    cell = {"k": 1}
    g.set(0, 1, cell)
    assert g.get(0, 1) is cell


# ─────────────────────────────────────────────────────────────────────────────
# Conversions
# ─────────────────────────────────────────────────────────────────────────────

def test_to_list_is_a_snapshot(grid):
    rows = grid.to_list()
    rows[0][0] = 100
    assert grid.get(0, 0) == 1
    assert rows == [[100, 2, 3], [4, 5, 6]]


def test_iteration_is_row_major(grid):
    assert list(grid) == [[1, 2, 3], [4, 5, 6]]


def test_region(grid):
    sub = grid.region(0, 1, 2, 3)
    assert sub.to_list() == [[2, 3], [5, 6]]
    assert sub.default == 0
    sub.set(0, 0, 7)
    assert grid.get(0, 1) == 2


def test_region_clamps_to_grid(grid):
    assert grid.region(-5, -5, 1, 10).to_list() == [[1, 2, 3]]


def test_region_empty():
    with pytest.raises(ValueError):
        Grid(2, 2).region(1, 1, 1, 2)


def test_render():
    g = Grid.from_rows([[1, 20], [300, 4]])
    assert g.render() == "  1  20\n300   4"
    assert g.render(separator="|") == "  1| 20\n300|  4"


def test_repr():
    assert repr(Grid(3, 2, 0)) == "Grid(width=3, height=2, default=0)"
