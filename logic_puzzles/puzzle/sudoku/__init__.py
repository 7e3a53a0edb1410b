"""Sudoku puzzle toolkit."""

__all__ = [
    "SudokuDifficulty",
    "SudokuGenerator",
    "SudokuPuzzle",
    "SudokuPuzzleRecord",
    "DIFFICULTIES",
    "check_solution",
    "count_solutions",
    "find_conflicts",
    "generate",
    "get_difficulty",
    "has_unique_solution",
    "is_consistent",
    "is_solved_grid",
    "is_valid",
    "solve",
]

from .difficulty import DIFFICULTIES, SudokuDifficulty, get_difficulty
from .generator import SudokuGenerator, SudokuPuzzle, SudokuPuzzleRecord, generate
from .grid import is_valid
from .solver import count_solutions, has_unique_solution, solve
from .validator import check_solution, find_conflicts, is_consistent, is_solved_grid
