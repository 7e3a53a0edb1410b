"""Sudoku puzzle generator implementation (9x9 grid, unique solution)."""

from __future__ import annotations

import argparse
import logging
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from logic_puzzles.puzzle.base import AbstractPuzzleGenerator, PathLike

from .difficulty import MEDIUM, SudokuDifficulty, get_difficulty
from .grid import (
    BOX_SIZE,
    DIGITS,
    EMPTY,
    GRID_SIZE,
    TOTAL_CELLS,
    FrozenGrid,
    Grid,
    all_positions,
    copy_grid,
    count_filled,
    empty_grid,
    freeze_grid,
)
from .solver import count_solutions, solve

logger = logging.getLogger(__name__)

# Rejection sampling inside a box almost always succeeds within a handful of
# draws; the cap only matters for a broken random source.
_MAX_DRAWS_PER_CELL = 64


@dataclass(frozen=True)
class SudokuPuzzle:
    """A clue grid paired with its single solution."""

    clue_grid: FrozenGrid
    solved_grid: FrozenGrid
    difficulty: SudokuDifficulty

    @property
    def clue_count(self) -> int:
        return count_filled(self.clue_grid)

    @property
    def removed_count(self) -> int:
        return TOTAL_CELLS - self.clue_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clue_grid": [list(row) for row in self.clue_grid],
            "solved_grid": [list(row) for row in self.solved_grid],
            "difficulty": self.difficulty.to_dict(),
        }


# --- Generation internals ------------------------------------------------------------


def _fill_box(grid: Grid, start_row: int, start_col: int, rng: random.Random) -> None:
    used: set = set()
    for r in range(start_row, start_row + BOX_SIZE):
        for c in range(start_col, start_col + BOX_SIZE):
            value: Optional[int] = None
            for _ in range(_MAX_DRAWS_PER_CELL):
                draw = rng.randint(1, GRID_SIZE)
                if draw not in used:
                    value = draw
                    break
            if value is None:
                value = min(set(DIGITS) - used)
            used.add(value)
            grid[r][c] = value


def fill_diagonal(grid: Grid, rng: random.Random) -> None:
    """Seed the three boxes on the main diagonal, which never constrain each other."""
    for start in range(0, GRID_SIZE, BOX_SIZE):
        _fill_box(grid, start, start, rng)


def fill_board(grid: Grid, rng: random.Random) -> bool:
    """Turn an empty grid into a complete valid board in place."""
    fill_diagonal(grid, rng)
    return solve(grid)


def carve_clues(grid: Grid, removal_count: int, rng: random.Random) -> int:
    """Blank up to ``removal_count`` cells while the grid keeps a unique solution.

    Every cell is tried at most once, in a shuffled order. A removal that
    leaves zero or several solutions is undone and does not use up budget, so
    the result may keep more clues than requested. Returns the number of
    cells actually blanked.
    """
    positions = all_positions()
    rng.shuffle(positions)
    remaining = removal_count
    removed = 0
    for row, col in positions:
        if remaining <= 0:
            break
        if grid[row][col] == EMPTY:
            continue
        backup = grid[row][col]
        grid[row][col] = EMPTY
        if count_solutions(grid) != 1:
            grid[row][col] = backup
            continue
        remaining -= 1
        removed += 1
    logger.debug("Removed %d of %d requested clues", removed, removal_count)
    return removed


def generate(
    difficulty: SudokuDifficulty,
    rng: Optional[random.Random] = None,
) -> Optional[SudokuPuzzle]:
    """Build a puzzle for ``difficulty``, or return None if the board fill fails.

    Pass a seeded ``random.Random`` for reproducible output. All grids are
    local to the call, so concurrent calls never interfere.
    """
    rng = rng if rng is not None else random.Random()
    board = empty_grid()
    if not fill_board(board, rng):
        logger.warning("Sudoku board fill failed for difficulty %s", difficulty.id)
        return None
    solution = freeze_grid(board)
    clues = copy_grid(board)
    carve_clues(clues, difficulty.removal_count, rng)
    return SudokuPuzzle(clue_grid=freeze_grid(clues), solved_grid=solution, difficulty=difficulty)


# --- Dataset builder -----------------------------------------------------------------


@dataclass
class SudokuPuzzleRecord:
    """Persisted Sudoku puzzle metadata."""

    id: str
    difficulty: SudokuDifficulty
    puzzle_grid: List[List[int]]
    solution_grid: List[List[int]]
    clue_count: int

    @property
    def removed_count(self) -> int:
        return TOTAL_CELLS - self.clue_count

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "difficulty": self.difficulty.id,
            "difficulty_name": self.difficulty.name,
            "removal_target": self.difficulty.removal_count,
            "puzzle_grid": self.puzzle_grid,
            "solution_grid": self.solution_grid,
            "clue_count": self.clue_count,
            "removed_count": self.removed_count,
        }


class SudokuGenerator(AbstractPuzzleGenerator[SudokuPuzzleRecord]):
    """Generate batches of uniquely solvable 9x9 Sudoku puzzles."""

    def __init__(
        self,
        output_dir: PathLike = "data/sudoku",
        *,
        difficulty: Union[SudokuDifficulty, str] = MEDIUM,
        max_attempts: int = 3,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir, seed=seed)
        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        self.difficulty = difficulty
        self.max_attempts = max_attempts

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SudokuPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        puzzle = self._generate_with_retries()
        return SudokuPuzzleRecord(
            id=puzzle_uuid,
            difficulty=puzzle.difficulty,
            puzzle_grid=[list(row) for row in puzzle.clue_grid],
            solution_grid=[list(row) for row in puzzle.solved_grid],
            clue_count=puzzle.clue_count,
        )

    def create_random_puzzle(self) -> SudokuPuzzleRecord:
        return self.create_puzzle()

    def _generate_with_retries(self) -> SudokuPuzzle:
        for attempt in range(1, self.max_attempts + 1):
            puzzle = generate(self.difficulty, self._rng)
            if puzzle is not None:
                return puzzle
            logger.warning("Generation attempt %d/%d produced no puzzle", attempt, self.max_attempts)
        raise RuntimeError(
            f"Failed to generate a {self.difficulty.id} Sudoku after {self.max_attempts} attempts"
        )


__all__ = [
    "SudokuGenerator",
    "SudokuPuzzle",
    "SudokuPuzzleRecord",
    "carve_clues",
    "fill_board",
    "fill_diagonal",
    "generate",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate uniquely solvable Sudoku puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/sudoku"), help="Where to save metadata")
    parser.add_argument("--difficulty", type=str, default=MEDIUM.id, help="Difficulty preset id")
    parser.add_argument("--max-attempts", type=int, default=3, help="Retries per puzzle when generation fails")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(message)s")
    generator = SudokuGenerator(
        output_dir=args.output_dir,
        difficulty=args.difficulty,
        max_attempts=args.max_attempts,
        seed=args.seed,
    )
    metadata_path = generator.output_dir / "data.json"
    generator.generate_dataset(args.count, metadata_path=metadata_path)
    logger.info("Wrote %d puzzles to %s", args.count, metadata_path)


if __name__ == "__main__":
    main()
