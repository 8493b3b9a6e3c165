"""Grid representation and the builder that derives it from clue data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Bounds
from ..core.exceptions import BoundsError
from ..core.models import Cell, ClueSpec, PuzzleDefinition, WordRef
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Grid:
    """Immutable rows x cols letter grid addressed by (row, col).

    Positions not covered by any clue hold ``None``: they are blocked and
    can never receive focus or entries.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        cells: Sequence[Sequence[Optional[Cell]]],
        clues: Sequence[ClueSpec],
    ) -> None:
        self.bounds = Bounds(rows=rows, cols=cols)
        self._cells: Tuple[Tuple[Optional[Cell], ...], ...] = tuple(tuple(row) for row in cells)
        self._clues: Dict[WordRef, ClueSpec] = {}
        for clue in clues:
            self._clues.setdefault(clue.key, clue)

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.bounds.contains(row, col):
            return None
        return self._cells[row][col]

    def is_cell(self, row: int, col: int) -> bool:
        return self.cell(row, col) is not None

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Yield every letter position in row-major order."""

        for r in range(self.rows):
            for c in range(self.cols):
                if self._cells[r][c] is not None:
                    yield r, c

    def clue(self, ref: WordRef) -> Optional[ClueSpec]:
        return self._clues.get(ref)

    def __len__(self) -> int:
        return sum(1 for _ in self.positions())

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[Optional[dict]]]:
        serialized: List[List[Optional[dict]]] = []
        for row in self._cells:
            serialized_row: List[Optional[dict]] = []
            for cell in row:
                if cell is None:
                    serialized_row.append(None)
                    continue
                serialized_row.append(
                    {
                        "answer": cell.answer_char,
                        "clue_number": cell.clue_number,
                        "words": [
                            {"number": ref.number, "direction": ref.direction.value}
                            for ref in cell.words
                        ],
                    }
                )
            serialized.append(serialized_row)
        return serialized


@dataclass
class _DraftCell:
    answer_char: str = ""
    clue_number: Optional[int] = None
    words: List[WordRef] = field(default_factory=list)

    def freeze(self) -> Cell:
        return Cell(
            answer_char=self.answer_char,
            clue_number=self.clue_number,
            words=tuple(self.words),
        )


class GridBuilder:
    """Turns a :class:`PuzzleDefinition` into a :class:`Grid`."""

    def build(self, definition: PuzzleDefinition) -> Grid:
        bounds = Bounds(rows=definition.rows, cols=definition.cols)
        clues = definition.clues()
        for clue in clues:
            self._check_span(clue, bounds)

        drafts: List[List[Optional[_DraftCell]]] = [
            [None for _ in range(bounds.cols)] for _ in range(bounds.rows)
        ]
        # Across first, then down: at a disagreeing intersection the down
        # letter is the one that survives.
        for clue in clues:
            ref = clue.key
            for index, (r, c) in enumerate(clue.cells):
                draft = drafts[r][c]
                if draft is None:
                    draft = drafts[r][c] = _DraftCell()
                draft.answer_char = clue.answer[index].upper()
                if ref not in draft.words:
                    draft.words.append(ref)
                if index == 0 and draft.clue_number is None:
                    draft.clue_number = clue.number

        cells = [[draft.freeze() if draft is not None else None for draft in row] for row in drafts]
        grid = Grid(definition.rows, definition.cols, cells, clues)
        LOGGER.info(
            "Built %sx%s grid for '%s' (%d clues, %d letter cells)",
            definition.rows,
            definition.cols,
            definition.title,
            len(clues),
            len(grid),
        )
        return grid

    @staticmethod
    def _check_span(clue: ClueSpec, bounds: Bounds) -> None:
        if not clue.answer:
            raise BoundsError(f"Clue {clue.label()} has an empty answer")
        first = clue.cells[0]
        last = clue.cells[-1]
        if not bounds.contains(*first) or not bounds.contains(*last):
            raise BoundsError(
                f"Clue {clue.label()} spans {first}..{last}, outside a "
                f"{bounds.rows}x{bounds.cols} grid"
            )
