"""Plain-text rendering of a puzzle session."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..core.constants import CellStatus, Direction

if TYPE_CHECKING:
    from ..core.models import ValidationResult
    from ..engine.session import PuzzleSession


BLOCKED = "#"
EMPTY = "."


def cell_symbol(session: PuzzleSession, row: int, col: int, *, show_answers: bool = False) -> str:
    cell = session.grid.cell(row, col)
    if cell is None:
        return BLOCKED
    entered = session.entries.get(row, col)
    if entered:
        return entered
    if show_answers:
        return cell.answer_char.lower()
    return EMPTY


def format_board(session: PuzzleSession, *, show_answers: bool = False) -> str:
    """Render the grid: ``[X]`` is the cursor, ``(X)`` the rest of the active word."""

    grid = session.grid
    cursor = session.cursor
    highlighted = set(session.highlighted)
    header_cells = [f"{c:>2} " for c in range(grid.cols)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.cols))
    for r in range(grid.rows):
        rendered = []
        for c in range(grid.cols):
            symbol = cell_symbol(session, r, c, show_answers=show_answers)
            if cursor is not None and cursor.position == (r, c):
                rendered.append(f"[{symbol}]")
            elif (r, c) in highlighted:
                rendered.append(f"({symbol})")
            else:
                rendered.append(f" {symbol} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def format_clues(session: PuzzleSession) -> str:
    active = session.active_word
    lines: List[str] = []
    for direction in Direction:
        lines.append(direction.value.upper())
        for clue in session.definition.clues(direction):
            marker = ">" if active is not None and active.key == clue.key else " "
            lines.append(f" {marker}{clue.number:>3}. {clue.clue} ({clue.length})")
    return "\n".join(lines)


def format_result(result: ValidationResult) -> str:
    if result.complete:
        return "Solved! Every cell is correct."
    wrong = result.cells_with(CellStatus.INCORRECT)
    empty = result.cells_with(CellStatus.EMPTY)
    parts = ["Not quite right!"]
    if wrong:
        parts.append("Incorrect: " + ", ".join(f"{r},{c}" for r, c in wrong))
    if empty:
        parts.append(f"{len(empty)} empty cell(s)")
    return " ".join(parts)


def pretty_print_session(
    session: PuzzleSession,
    *,
    label: Optional[str] = None,
    show_answers: bool = False,
    stream=None,
) -> None:
    """Print the title, board and clue lists of ``session``."""

    stream = stream or sys.stdout
    print(label or session.definition.title, file=stream)
    print(format_board(session, show_answers=show_answers), file=stream)
    print(file=stream)
    print(format_clues(session), file=stream)
