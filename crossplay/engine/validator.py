"""Answer checking for the entry layer."""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.constants import CellStatus
from ..core.models import ValidationResult
from ..utils.logger import get_logger
from .entries import EntryLayer
from .grid import Grid


LOGGER = get_logger(__name__)


class ValidationEngine:
    """Compares entered letters with the grid's reference answers.

    A check locks every correct cell: from then on it cannot be retyped,
    cleared, filled over, or advanced into. Incorrect and empty cells are
    unlocked so the solver can keep working on them.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def check(self, entries: EntryLayer) -> ValidationResult:
        per_cell: Dict[Tuple[int, int], CellStatus] = {}
        for row, col in self.grid.positions():
            per_cell[(row, col)] = self._status(entries, row, col)

        for (row, col), status in per_cell.items():
            if status is CellStatus.CORRECT:
                entries.lock(row, col)
            else:
                entries.unlock(row, col)

        complete = all(status is CellStatus.CORRECT for status in per_cell.values())
        result = ValidationResult(per_cell=per_cell, complete=complete)
        if complete:
            LOGGER.info("Puzzle complete (%d cells)", len(per_cell))
        else:
            LOGGER.info(
                "Check: %d correct, %d incorrect, %d empty",
                len(result.cells_with(CellStatus.CORRECT)),
                len(result.cells_with(CellStatus.INCORRECT)),
                len(result.cells_with(CellStatus.EMPTY)),
            )
        return result

    def _status(self, entries: EntryLayer, row: int, col: int) -> CellStatus:
        entered = entries.get(row, col).upper()
        if not entered:
            return CellStatus.EMPTY
        cell = self.grid.cell(row, col)
        if cell is not None and entered == cell.answer_char:
            return CellStatus.CORRECT
        return CellStatus.INCORRECT
