import pytest

from logic_puzzles.puzzle.sudoku.grid import (
    check_shape,
    copy_grid,
    empty_grid,
    find_empty,
    freeze_grid,
    is_valid,
)

from sudoku_fixtures import PUZZLE, SOLUTION


def test_row_collision_is_rejected():
    grid = empty_grid()
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert not is_valid(grid, 0, 8, 5)


def test_column_collision_is_rejected():
    grid = empty_grid()
    grid[0][0] = 1
    assert not is_valid(grid, 1, 0, 1)
    assert is_valid(grid, 1, 0, 2)


def test_box_collision_is_rejected():
    grid = empty_grid()
    grid[4][4] = 7
    assert not is_valid(grid, 3, 5, 7)
    assert is_valid(grid, 2, 5, 7)
    assert is_valid(grid, 3, 6, 7)


def test_filled_target_cell_counts_as_occupied():
    grid = empty_grid()
    grid[2][2] = 3
    assert not is_valid(grid, 2, 2, 3)


def test_is_valid_does_not_mutate():
    grid = copy_grid(PUZZLE)
    for value in range(1, 10):
        is_valid(grid, 0, 2, value)
    assert grid == PUZZLE


def test_find_empty_scans_row_major():
    assert find_empty(PUZZLE) == (0, 2)
    assert find_empty(SOLUTION) is None
    assert find_empty(empty_grid()) == (0, 0)


def test_copy_grid_is_deep():
    grid = copy_grid(SOLUTION)
    grid[0][0] = 0
    assert SOLUTION[0][0] == 5


def test_freeze_grid_returns_tuples():
    frozen = freeze_grid(SOLUTION)
    assert isinstance(frozen, tuple)
    assert all(isinstance(row, tuple) for row in frozen)
    assert [list(row) for row in frozen] == SOLUTION


@pytest.mark.parametrize(
    "grid",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[10] + [0] * 8] + [[0] * 9 for _ in range(8)],
        [[-1] + [0] * 8] + [[0] * 9 for _ in range(8)],
        [[True] + [0] * 8] + [[0] * 9 for _ in range(8)],
    ],
)
def test_check_shape_rejects_malformed_grids(grid):
    with pytest.raises(ValueError):
        check_shape(grid)
