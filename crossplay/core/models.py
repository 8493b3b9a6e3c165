"""Data models shared by the crossword engine components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import CellStatus, Direction


@dataclass(frozen=True)
class ClueSpec:
    """One word of the puzzle: where it starts, its answer and its clue text."""

    number: int
    direction: Direction
    row: int
    col: int
    answer: str
    clue: str = ""

    @property
    def length(self) -> int:
        return len(self.answer)

    @property
    def key(self) -> "WordRef":
        return WordRef(self.number, self.direction)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]

    def label(self) -> str:
        return f"{self.number} {self.direction.value}"


@dataclass(frozen=True)
class WordRef:
    """Reference from a cell to the word it belongs to."""

    number: int
    direction: Direction


@dataclass
class PuzzleDefinition:
    """A complete, already-generated puzzle as delivered to the engine."""

    title: str
    rows: int
    cols: int
    across: List[ClueSpec] = field(default_factory=list)
    down: List[ClueSpec] = field(default_factory=list)

    def clues(self, direction: Optional[Direction] = None) -> List[ClueSpec]:
        if direction is Direction.ACROSS:
            return list(self.across)
        if direction is Direction.DOWN:
            return list(self.down)
        return list(self.across) + list(self.down)

    def find_clue(self, number: int, direction: Direction) -> Optional[ClueSpec]:
        for clue in self.clues(direction):
            if clue.number == number:
                return clue
        return None


@dataclass(frozen=True)
class Cell:
    """A letter position of the grid; blocked positions have no Cell at all."""

    answer_char: str
    clue_number: Optional[int] = None
    words: Tuple[WordRef, ...] = ()

    def word_for(self, direction: Direction) -> Optional[WordRef]:
        for ref in self.words:
            if ref.direction is direction:
                return ref
        return None

    def supports(self, direction: Direction) -> bool:
        return self.word_for(direction) is not None

    @property
    def is_crossing(self) -> bool:
        return self.supports(Direction.ACROSS) and self.supports(Direction.DOWN)


@dataclass(frozen=True)
class CursorState:
    """Position and direction of the cursor; ``None`` stands for "unset"."""

    row: int
    col: int
    direction: Direction = Direction.ACROSS

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass
class ValidationResult:
    """Outcome of checking the entry layer against the reference answers."""

    per_cell: Dict[Tuple[int, int], CellStatus]
    complete: bool

    def cells_with(self, status: CellStatus) -> List[Tuple[int, int]]:
        return sorted(pos for pos, value in self.per_cell.items() if value is status)
