"""Grid primitives and the placement rule shared by the Sudoku solver and generator."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

GRID_SIZE = 9
BOX_SIZE = 3
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0
DIGITS = tuple(range(1, GRID_SIZE + 1))

Grid = List[List[int]]
FrozenGrid = Tuple[Tuple[int, ...], ...]
Position = Tuple[int, int]


def empty_grid() -> Grid:
    return [[EMPTY for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]


def freeze_grid(grid: Sequence[Sequence[int]]) -> FrozenGrid:
    return tuple(tuple(row) for row in grid)


def all_positions() -> List[Position]:
    """Every cell of the board in row-major order."""
    return [(row, col) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]


def find_empty(grid: Sequence[Sequence[int]]) -> Optional[Position]:
    """Return the first empty cell in row-major order, or None for a full board."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if grid[row][col] == EMPTY:
                return row, col
    return None


def box_origin(row: int, col: int) -> Position:
    return row - row % BOX_SIZE, col - col % BOX_SIZE


def is_valid(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Check whether ``value`` may be placed at ``(row, col)``.

    Returns False when ``value`` already appears in the row, the column, or
    the 3x3 box containing the cell. The target cell itself is inspected like
    any other, so callers probing a filled cell must blank it first.
    """
    if value in grid[row]:
        return False
    if any(grid[r][col] == value for r in range(GRID_SIZE)):
        return False
    start_row, start_col = box_origin(row, col)
    for r in range(start_row, start_row + BOX_SIZE):
        for c in range(start_col, start_col + BOX_SIZE):
            if grid[r][c] == value:
                return False
    return True


def count_filled(grid: Sequence[Sequence[int]]) -> int:
    return sum(cell != EMPTY for row in grid for cell in row)


def check_shape(grid: Sequence[Sequence[int]]) -> None:
    """Raise ValueError unless ``grid`` is a 9x9 board of ints in [0, 9]."""
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"Sudoku grid must be {GRID_SIZE}x{GRID_SIZE}")
    for row in grid:
        for cell in row:
            if not isinstance(cell, int) or isinstance(cell, bool) or not EMPTY <= cell <= GRID_SIZE:
                raise ValueError(f"Sudoku cells must be ints in [0, {GRID_SIZE}], got {cell!r}")


__all__ = [
    "BOX_SIZE",
    "DIGITS",
    "EMPTY",
    "FrozenGrid",
    "GRID_SIZE",
    "Grid",
    "Position",
    "TOTAL_CELLS",
    "all_positions",
    "box_origin",
    "check_shape",
    "copy_grid",
    "count_filled",
    "empty_grid",
    "find_empty",
    "freeze_grid",
    "is_valid",
]
