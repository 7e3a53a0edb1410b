import unittest

from logic_puzzles.puzzle.sudoku.grid import copy_grid, empty_grid
from logic_puzzles.puzzle.sudoku.solver import count_solutions, has_unique_solution, solve
from logic_puzzles.puzzle.sudoku.validator import is_solved_grid

from sudoku_fixtures import DEAD_END, PUZZLE, SOLUTION


class SolveTests(unittest.TestCase):
    def test_solves_known_puzzle_in_place(self) -> None:
        grid = copy_grid(PUZZLE)
        self.assertTrue(solve(grid))
        self.assertEqual(grid, SOLUTION)

    def test_full_board_is_already_solved(self) -> None:
        grid = copy_grid(SOLUTION)
        self.assertTrue(solve(grid))
        self.assertEqual(grid, SOLUTION)

    def test_empty_board_gets_first_lexicographic_solution(self) -> None:
        grid = empty_grid()
        self.assertTrue(solve(grid))
        self.assertTrue(is_solved_grid(grid))
        self.assertEqual(grid[0], [1, 2, 3, 4, 5, 6, 7, 8, 9])

    def test_failed_search_leaves_grid_untouched(self) -> None:
        grid = copy_grid(DEAD_END)
        self.assertFalse(solve(grid))
        self.assertEqual(grid, DEAD_END)

    def test_failure_deep_in_the_search_is_fully_reverted(self) -> None:
        # 1 is locally legal at (8, 0) but the only completion needs a 3 there.
        grid = copy_grid(PUZZLE)
        grid[8][0] = 1
        before = copy_grid(grid)
        self.assertFalse(solve(grid))
        self.assertEqual(grid, before)


class CountSolutionsTests(unittest.TestCase):
    def test_unique_puzzle_counts_one(self) -> None:
        self.assertEqual(count_solutions(PUZZLE), 1)
        self.assertTrue(has_unique_solution(PUZZLE))

    def test_complete_board_counts_one(self) -> None:
        self.assertEqual(count_solutions(SOLUTION), 1)

    def test_empty_board_stops_at_two(self) -> None:
        self.assertEqual(count_solutions(empty_grid()), 2)
        self.assertFalse(has_unique_solution(empty_grid()))

    def test_limit_controls_the_cutoff(self) -> None:
        self.assertEqual(count_solutions(empty_grid(), limit=5), 5)
        self.assertEqual(count_solutions(PUZZLE, limit=5), 1)
        with self.assertRaises(ValueError):
            count_solutions(PUZZLE, limit=0)

    def test_dead_end_counts_zero(self) -> None:
        self.assertEqual(count_solutions(DEAD_END), 0)

    def test_ambiguous_board_counts_two(self) -> None:
        # 1 and 3 can swap across rows 3-4 in columns 5 and 8.
        grid = copy_grid(SOLUTION)
        for row, col in [(3, 5), (4, 5), (3, 8), (4, 8)]:
            grid[row][col] = 0
        before = copy_grid(grid)
        self.assertEqual(count_solutions(grid), 2)
        self.assertEqual(count_solutions(grid, limit=10), 2)
        self.assertEqual(grid, before)

    def test_contradictory_clue_counts_zero(self) -> None:
        grid = copy_grid(PUZZLE)
        grid[8][0] = 1
        self.assertEqual(count_solutions(grid), 0)

    def test_counting_never_mutates_input(self) -> None:
        grid = copy_grid(PUZZLE)
        count_solutions(grid)
        count_solutions(grid, limit=3)
        self.assertEqual(grid, PUZZLE)

    def test_repeated_counts_are_stable(self) -> None:
        grid = copy_grid(PUZZLE)
        grid[0][0] = 0
        grid[0][1] = 0
        first = count_solutions(grid)
        self.assertEqual(first, count_solutions(grid))
        self.assertEqual(first, count_solutions(grid))

    def test_accepts_frozen_grids(self) -> None:
        frozen = tuple(tuple(row) for row in PUZZLE)
        self.assertEqual(count_solutions(frozen), 1)


if __name__ == "__main__":
    unittest.main()
