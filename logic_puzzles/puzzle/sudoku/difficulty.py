"""Difficulty presets and loaders for Sudoku generation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .grid import TOTAL_CELLS


@dataclass(frozen=True)
class SudokuDifficulty:
    """How many clues the generator should try to remove from a full board."""

    id: str
    name: str
    removal_count: int

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("difficulty id must be a non-empty string")
        if not isinstance(self.removal_count, int) or isinstance(self.removal_count, bool):
            raise ValueError(f"removal_count must be an int, got {self.removal_count!r}")
        if not 0 <= self.removal_count <= TOTAL_CELLS:
            raise ValueError(
                f"removal_count must be in [0, {TOTAL_CELLS}], got {self.removal_count}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "removal_count": self.removal_count}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SudokuDifficulty":
        try:
            return cls(
                id=str(payload["id"]),
                name=str(payload.get("name", payload["id"])),
                removal_count=payload["removal_count"],
            )
        except KeyError as exc:
            raise ValueError(f"difficulty entry is missing {exc.args[0]!r}") from exc


EASY = SudokuDifficulty("easy", "Easy", 40)
MEDIUM = SudokuDifficulty("medium", "Medium", 50)
HARD = SudokuDifficulty("hard", "Hard", 60)
EXPERT = SudokuDifficulty("expert", "Expert", 68)
# A single removal pass never visits more than 81 cells, so anything above
# that is equivalent to a full pass.
EXTREME = SudokuDifficulty("extreme", "Extreme", TOTAL_CELLS)
EXTREME_PLUS = SudokuDifficulty("extreme_plus", "Extreme+", TOTAL_CELLS)

DIFFICULTIES: Dict[str, SudokuDifficulty] = {
    preset.id: preset for preset in (EASY, MEDIUM, HARD, EXPERT, EXTREME, EXTREME_PLUS)
}


def get_difficulty(difficulty_id: str) -> SudokuDifficulty:
    """Look up a preset by id, ignoring case."""
    key = difficulty_id.strip().lower()
    try:
        return DIFFICULTIES[key]
    except KeyError as exc:
        known = ", ".join(sorted(DIFFICULTIES))
        raise KeyError(f"Unknown difficulty '{difficulty_id}' (known: {known})") from exc


def custom_difficulty(removal_count: int, *, name: str = "Custom") -> SudokuDifficulty:
    return SudokuDifficulty(id=f"custom_{removal_count}", name=name, removal_count=removal_count)


def load_difficulties(path: Union[str, Path]) -> Dict[str, SudokuDifficulty]:
    """Read extra presets from a JSON object keyed by difficulty id.

    Example::

        {"warmup": {"name": "Warm-up", "removal_count": 20}}
    """
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("difficulty config must contain a JSON object")
    loaded: Dict[str, SudokuDifficulty] = {}
    for difficulty_id, entry in payload.items():
        if not isinstance(entry, dict):
            raise ValueError(f"difficulty '{difficulty_id}' must map to a JSON object")
        loaded[difficulty_id] = SudokuDifficulty.from_dict({"id": difficulty_id, **entry})
    return loaded


__all__ = [
    "DIFFICULTIES",
    "EASY",
    "EXPERT",
    "EXTREME",
    "EXTREME_PLUS",
    "HARD",
    "MEDIUM",
    "SudokuDifficulty",
    "custom_difficulty",
    "get_difficulty",
    "load_difficulties",
]
