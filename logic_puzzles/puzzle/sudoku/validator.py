"""Board checks for generated puzzles and player submissions."""

from __future__ import annotations

from typing import Iterator, Sequence, Set, Tuple

import numpy as np

from .grid import BOX_SIZE, EMPTY, GRID_SIZE, Position, check_shape

_DIGIT_SET = np.arange(1, GRID_SIZE + 1)


def _as_array(grid: Sequence[Sequence[int]]) -> np.ndarray:
    check_shape(grid)
    return np.asarray(grid, dtype=np.int8)


def _units(board: np.ndarray) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
    """Yield ``(values, coords)`` for every row, column and box of ``board``."""
    rows, cols = np.indices(board.shape)
    for idx in range(GRID_SIZE):
        yield board[idx, :], np.stack([rows[idx, :], cols[idx, :]], axis=1)
        yield board[:, idx], np.stack([rows[:, idx], cols[:, idx]], axis=1)
    for start_row in range(0, GRID_SIZE, BOX_SIZE):
        for start_col in range(0, GRID_SIZE, BOX_SIZE):
            window = (slice(start_row, start_row + BOX_SIZE), slice(start_col, start_col + BOX_SIZE))
            coords = np.stack([rows[window].ravel(), cols[window].ravel()], axis=1)
            yield board[window].ravel(), coords


def is_solved_grid(grid: Sequence[Sequence[int]]) -> bool:
    """True when every row, column and box holds each digit 1-9 exactly once."""
    board = _as_array(grid)
    return all(np.array_equal(np.sort(values), _DIGIT_SET) for values, _ in _units(board))


def find_conflicts(grid: Sequence[Sequence[int]]) -> Set[Position]:
    """Cells whose value repeats within the same row, column or box. Empty cells never conflict."""
    board = _as_array(grid)
    conflicts: Set[Position] = set()
    for values, coords in _units(board):
        filled = values != EMPTY
        digits, counts = np.unique(values[filled], return_counts=True)
        for digit in digits[counts > 1]:
            for row, col in coords[values == digit]:
                conflicts.add((int(row), int(col)))
    return conflicts


def is_consistent(clue_grid: Sequence[Sequence[int]], solved_grid: Sequence[Sequence[int]]) -> bool:
    """True when every clue agrees with the solution at the same cell."""
    clues = _as_array(clue_grid)
    solution = _as_array(solved_grid)
    given = clues != EMPTY
    return bool(np.array_equal(clues[given], solution[given]))


def check_solution(
    board: Sequence[Sequence[int]],
    solution: Sequence[Sequence[int]],
) -> Tuple[bool, Set[Position]]:
    """Judge a submitted board against the expected solution.

    Returns ``(is_correct, conflicting_cells)``. A board is correct only when
    it is full, breaks no rule and matches ``solution`` cell for cell.
    """
    conflicts = find_conflicts(board)
    candidate = _as_array(board)
    if conflicts or (candidate == EMPTY).any():
        return False, conflicts
    return bool(np.array_equal(candidate, _as_array(solution))), conflicts


__all__ = ["check_solution", "find_conflicts", "is_consistent", "is_solved_grid"]
