"""Per-cell entered letters, kept apart from the grid's reference answers."""

from __future__ import annotations

from typing import Dict, Set, Tuple

from ..core.exceptions import CrosswordError
from .grid import Grid


Position = Tuple[int, int]


class EntryLayer:
    """Letters typed by the solver plus the read-only flags set by a check.

    The layer is created fresh for every loaded puzzle and only accepts
    positions that are letter cells of its grid.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._letters: Dict[Position, str] = {}
        self._locked: Set[Position] = set()

    def get(self, row: int, col: int) -> str:
        return self._letters.get((row, col), "")

    def is_empty(self, row: int, col: int) -> bool:
        return not self.get(row, col)

    def is_locked(self, row: int, col: int) -> bool:
        return (row, col) in self._locked

    def is_editable(self, row: int, col: int) -> bool:
        return self.grid.is_cell(row, col) and not self.is_locked(row, col)

    def set(self, row: int, col: int, char: str) -> bool:
        """Store ``char`` uppercased; returns False when the cell refuses it."""

        self._require_cell(row, col)
        if self.is_locked(row, col):
            return False
        letter = (char or "").upper()
        if letter:
            self._letters[(row, col)] = letter
        else:
            self._letters.pop((row, col), None)
        return True

    def clear(self, row: int, col: int) -> bool:
        return self.set(row, col, "")

    def lock(self, row: int, col: int) -> None:
        self._require_cell(row, col)
        self._locked.add((row, col))

    def unlock(self, row: int, col: int) -> None:
        self._locked.discard((row, col))

    @property
    def locked(self) -> Set[Position]:
        return set(self._locked)

    def snapshot(self) -> Dict[Position, str]:
        return dict(self._letters)

    def _require_cell(self, row: int, col: int) -> None:
        if not self.grid.is_cell(row, col):
            raise CrosswordError(f"No letter cell at {(row, col)}")
