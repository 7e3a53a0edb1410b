"""Backtracking solver with a first-solution mode and a bounded counting mode.

Both modes run the same depth-first search. The search scans for the first
empty cell in row-major order, tries the digits 1-9 in ascending order and
reverts the cell before moving on to the next candidate. ``limit`` decides
when to stop: a limit of one keeps the first completion in place, a limit of
two is enough to tell "unique" from "ambiguous".
"""

from __future__ import annotations

from typing import Sequence

from .grid import DIGITS, EMPTY, Grid, copy_grid, find_empty, is_valid

UNIQUE_LIMIT = 2


def _search(grid: Grid, limit: int) -> int:
    """Count completions of ``grid`` up to ``limit``.

    When the limit is reached the grid is left holding the last completion.
    Along every other return path each cell assigned here is back to empty.
    """
    cell = find_empty(grid)
    if cell is None:
        return 1
    row, col = cell
    found = 0
    for value in DIGITS:
        if not is_valid(grid, row, col, value):
            continue
        grid[row][col] = value
        found += _search(grid, limit - found)
        if found >= limit:
            return found
        grid[row][col] = EMPTY
    return found


def solve(grid: Grid) -> bool:
    """Complete ``grid`` in place with the first solution found.

    Returns False, with the grid unchanged, when no completion exists.
    """
    return _search(grid, 1) == 1


def count_solutions(grid: Sequence[Sequence[int]], limit: int = UNIQUE_LIMIT) -> int:
    """Count completions of ``grid``, stopping once ``limit`` are found.

    The search runs on a private copy; the caller's grid is never touched.
    With the default limit the answer is 0, 1 or 2 (meaning "two or more").
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return _search(copy_grid(grid), limit)


def has_unique_solution(grid: Sequence[Sequence[int]]) -> bool:
    return count_solutions(grid, UNIQUE_LIMIT) == 1


__all__ = ["UNIQUE_LIMIT", "count_solutions", "has_unique_solution", "solve"]
