"""Cursor state machine: focus, arrow keys, typing and backspace."""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ..core.constants import ARROW_STEPS, ArrowKey, Direction
from ..core.models import ClueSpec, CursorState
from ..utils.logger import get_logger
from .entries import EntryLayer
from .grid import Grid
from .resolver import WordResolver


LOGGER = get_logger(__name__)


class CursorController:
    """Owns the cursor and applies one input event at a time.

    The cursor starts unset with direction ``across``. Typing uses the
    word-aware advance: after a letter is stored the cursor jumps to the
    next empty, unlocked cell of the active word, or stays put when the
    rest of the word is already filled.

    Every transition returns True when the cursor or the entries changed,
    so the caller knows when a redraw is due.
    """

    def __init__(self, grid: Grid, resolver: WordResolver, entries: EntryLayer) -> None:
        self.grid = grid
        self.resolver = resolver
        self.entries = entries
        self.direction = Direction.ACROSS
        self._state: Optional[CursorState] = None
        self._last_focus: Optional[Tuple[int, int]] = None

    @property
    def state(self) -> Optional[CursorState]:
        return self._state

    @property
    def active_word(self) -> Optional[ClueSpec]:
        return self.resolver.active_word(self._state)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def focus(self, row: int, col: int) -> bool:
        cell = self.grid.cell(row, col)
        if cell is None:
            return False

        previous = self._state
        if self._last_focus == (row, col) and cell.is_crossing:
            self.direction = self.direction.other()
        elif not cell.supports(self.direction):
            self.direction = Direction.ACROSS if cell.supports(Direction.ACROSS) else Direction.DOWN

        self._move_to(row, col)
        return self._state != previous

    def arrow(self, key: Union[ArrowKey, str]) -> bool:
        """Step to the neighbouring cell; True only when the cursor moved."""

        try:
            step = ARROW_STEPS[ArrowKey(key)]
        except ValueError:
            return False
        if self._state is None:
            return False
        row, col = self._state.row + step[0], self._state.col + step[1]
        if not self.grid.is_cell(row, col):
            return False
        self._move_to(row, col)
        return True

    def character_entered(self, row: int, col: int, char: str) -> bool:
        if not self.grid.is_cell(row, col):
            return False
        changed = self._sync(row, col)
        letter = (char or "").strip().upper()
        if len(letter) != 1 or not letter.isalpha():
            return changed
        if not self.entries.set(row, col, letter):
            LOGGER.debug("Ignored %r at locked cell %s", letter, (row, col))
            return changed

        word = self.active_word
        if word is not None:
            index = self.resolver.index_in(word, row, col)
            if index is not None:
                for r, c in self.resolver.span(word)[index + 1:]:
                    if self.entries.is_empty(r, c) and self.entries.is_editable(r, c):
                        self._move_to(r, c)
                        break
        return True

    def backspace(self, row: int, col: int) -> bool:
        if not self.grid.is_cell(row, col):
            return False
        changed = self._sync(row, col)
        if not self.entries.is_empty(row, col) and self.entries.clear(row, col):
            return True

        word = self.active_word
        if word is not None and (row, col) == (word.row, word.col):
            return changed

        dr, dc = self.direction.step
        if not self.grid.is_cell(row - dr, col - dc):
            return changed
        self._move_to(row - dr, col - dc)
        return True

    def select_clue(self, clue: ClueSpec) -> bool:
        """Jump to the first cell of ``clue`` with its direction active."""

        if not self.grid.is_cell(clue.row, clue.col):
            return False
        previous = self._state
        self.direction = clue.direction
        self._move_to(clue.row, clue.col)
        return self._state != previous

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _sync(self, row: int, col: int) -> bool:
        """Treat input arriving at another cell as a focus on that cell."""

        if self._state is not None and self._state.position == (row, col):
            return False
        return self.focus(row, col)

    def _move_to(self, row: int, col: int) -> None:
        self._state = CursorState(row, col, self.direction)
        self._last_focus = (row, col)
        LOGGER.debug("Cursor at %s %s", (row, col), self.direction.value)
