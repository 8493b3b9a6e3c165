"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Difficulty(str, Enum):
    """Puzzle difficulty tiers, ordered from easiest to hardest."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


DIFFICULTY_ORDER: Tuple[Difficulty, ...] = (
    Difficulty.EASY,
    Difficulty.MEDIUM,
    Difficulty.HARD,
    Difficulty.EXPERT,
)


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    def other(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class ArrowKey(str, Enum):
    """Arrow keys understood by the cursor controller."""

    UP = "ArrowUp"
    DOWN = "ArrowDown"
    LEFT = "ArrowLeft"
    RIGHT = "ArrowRight"


ARROW_STEPS: Dict[ArrowKey, Tuple[int, int]] = {
    ArrowKey.UP: (-1, 0),
    ArrowKey.DOWN: (1, 0),
    ArrowKey.LEFT: (0, -1),
    ArrowKey.RIGHT: (0, 1),
}


class CellStatus(str, Enum):
    """Per-cell outcome of a validation pass."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    EMPTY = "empty"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
