"""Host-facing event surface tying the engine components together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from ..core.constants import ArrowKey, Direction
from ..core.exceptions import BoundsError, CrosswordError, LengthMismatchError
from ..core.models import ClueSpec, CursorState, PuzzleDefinition, ValidationResult
from ..io.schema import parse_definition
from ..utils.logger import get_logger
from .cursor import CursorController
from .entries import EntryLayer
from .fill import WordFillEngine
from .grid import Grid, GridBuilder
from .resolver import WordResolver
from .validator import ValidationEngine


LOGGER = get_logger(__name__)

RedrawCallback = Callable[[], None]


@dataclass
class _LoadedPuzzle:
    """Everything that belongs to one loaded puzzle, swapped as a unit."""

    definition: PuzzleDefinition
    grid: Grid
    resolver: WordResolver
    entries: EntryLayer
    cursor: CursorController
    filler: WordFillEngine
    validator: ValidationEngine


class PuzzleSession:
    """Drives one puzzle at a time on behalf of a UI.

    The UI forwards its input events to the ``on_*`` methods and re-renders
    from the session's read-only properties whenever ``on_redraw`` fires.
    Loading a puzzle builds everything for it first and only then replaces
    the current puzzle, so a failed load leaves the previous one in place.
    """

    def __init__(
        self,
        on_redraw: Optional[RedrawCallback] = None,
        builder: Optional[GridBuilder] = None,
    ) -> None:
        self.on_redraw = on_redraw
        self.builder = builder or GridBuilder()
        self._puzzle: Optional[_LoadedPuzzle] = None
        self.last_result: Optional[ValidationResult] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, definition: PuzzleDefinition) -> Grid:
        grid = self.builder.build(definition)
        resolver = WordResolver(grid)
        entries = EntryLayer(grid)
        puzzle = _LoadedPuzzle(
            definition=definition,
            grid=grid,
            resolver=resolver,
            entries=entries,
            cursor=CursorController(grid, resolver, entries),
            filler=WordFillEngine(resolver, entries),
            validator=ValidationEngine(grid),
        )
        self._puzzle = puzzle
        self.last_result = None
        LOGGER.info("Loaded puzzle '%s'", definition.title)
        self._redraw()
        return grid

    def load_document(self, document: Any) -> Grid:
        return self.load(parse_definition(document))

    # ------------------------------------------------------------------
    # Read-only view for the host
    # ------------------------------------------------------------------
    @property
    def loaded(self) -> bool:
        return self._puzzle is not None

    @property
    def definition(self) -> PuzzleDefinition:
        return self._current().definition

    @property
    def grid(self) -> Grid:
        return self._current().grid

    @property
    def entries(self) -> EntryLayer:
        return self._current().entries

    @property
    def cursor(self) -> Optional[CursorState]:
        return self._current().cursor.state

    @property
    def direction(self) -> Direction:
        return self._current().cursor.direction

    @property
    def active_word(self) -> Optional[ClueSpec]:
        return self._current().cursor.active_word

    @property
    def highlighted(self) -> List[Tuple[int, int]]:
        puzzle = self._current()
        return puzzle.resolver.highlighted(puzzle.cursor.state)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def on_focus(self, row: int, col: int) -> None:
        self._apply(self._current().cursor.focus(row, col))

    def on_arrow(self, key: Union[ArrowKey, str]) -> bool:
        """Returns True when the key moved the cursor and should be consumed."""

        moved = self._current().cursor.arrow(key)
        self._apply(moved)
        return moved

    def on_character_entered(self, row: int, col: int, char: str) -> None:
        self._apply(self._current().cursor.character_entered(row, col, char))

    def on_backspace(self, row: int, col: int) -> None:
        self._apply(self._current().cursor.backspace(row, col))

    def on_clue_selected(self, number: int, direction: Union[Direction, str]) -> None:
        puzzle = self._current()
        clue = puzzle.definition.find_clue(number, Direction(direction))
        if clue is None:
            return
        self._apply(puzzle.cursor.select_clue(clue))

    def on_check(self) -> ValidationResult:
        puzzle = self._current()
        self.last_result = puzzle.validator.check(puzzle.entries)
        self._redraw()
        return self.last_result

    def on_fill_word(self, word: ClueSpec, text: str) -> Optional[CrosswordError]:
        """Fill ``word``; returns a rejected fill's error instead of raising it.

        The error is a :class:`LengthMismatchError` for text of the wrong
        length, or a :class:`BoundsError` for a word outside the loaded grid.
        """

        try:
            self._current().filler.fill(word, text)
        except (LengthMismatchError, BoundsError) as exc:
            LOGGER.info("Rejected fill of %s: %s", word.label(), exc)
            return exc
        self._redraw()
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _current(self) -> _LoadedPuzzle:
        if self._puzzle is None:
            raise CrosswordError("No puzzle loaded")
        return self._puzzle

    def _apply(self, changed: bool) -> None:
        if changed:
            self._redraw()

    def _redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw()
