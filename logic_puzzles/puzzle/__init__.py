"""Puzzle generation toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "SudokuDifficulty",
    "SudokuGenerator",
    "SudokuPuzzle",
    "SudokuPuzzleRecord",
    "generate",
]

from .base import AbstractPuzzleGenerator
from .sudoku import (
    SudokuDifficulty,
    SudokuGenerator,
    SudokuPuzzle,
    SudokuPuzzleRecord,
    generate,
)
