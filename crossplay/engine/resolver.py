"""Resolve which word a cell belongs to in a given direction."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.constants import Direction
from ..core.models import ClueSpec, CursorState
from .grid import Grid


class WordResolver:
    """Maps (cell, direction) to the owning clue and its cell span."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def resolve(self, row: int, col: int, direction: Direction) -> Optional[ClueSpec]:
        cell = self.grid.cell(row, col)
        if cell is None:
            return None
        ref = cell.word_for(direction)
        if ref is None:
            return None
        return self.grid.clue(ref)

    @staticmethod
    def span(clue: ClueSpec) -> List[Tuple[int, int]]:
        return clue.cells

    def active_word(self, state: Optional[CursorState]) -> Optional[ClueSpec]:
        if state is None:
            return None
        return self.resolve(state.row, state.col, state.direction)

    def highlighted(self, state: Optional[CursorState]) -> List[Tuple[int, int]]:
        """Cells of the active word, empty when the cursor has no word."""

        clue = self.active_word(state)
        return self.span(clue) if clue is not None else []

    def index_in(self, clue: ClueSpec, row: int, col: int) -> Optional[int]:
        try:
            return self.span(clue).index((row, col))
        except ValueError:
            return None
