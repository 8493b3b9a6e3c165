"""Whole-word text entry."""

from __future__ import annotations

from ..core.exceptions import BoundsError, LengthMismatchError
from ..core.models import ClueSpec
from ..utils.logger import get_logger
from .entries import EntryLayer
from .resolver import WordResolver


LOGGER = get_logger(__name__)


def _cell_letter(char: str) -> str:
    letter = char.upper()
    return letter if len(letter) == 1 and letter.isalpha() else ""


class WordFillEngine:
    """Writes a complete answer attempt into the cells of one word."""

    def __init__(self, resolver: WordResolver, entries: EntryLayer) -> None:
        self.resolver = resolver
        self.entries = entries

    def fill(self, word: ClueSpec, text: str) -> None:
        """Write ``text`` along ``word``; an empty string clears the word.

        Raises :class:`BoundsError` when ``word`` is not a word of this grid
        and :class:`LengthMismatchError` when ``text`` is neither empty nor
        exactly as long as the answer, both before touching any cell. Cells
        locked by a previous check keep their letter; any non-letter in
        ``text`` leaves its cell empty.
        """

        known = self.resolver.grid.clue(word.key)
        if known is None or known.cells != word.cells:
            raise BoundsError(f"{word.label()} is not a word of the current grid")
        text = (text or "").strip()
        if text and len(text) != known.length:
            raise LengthMismatchError(expected=known.length, actual=len(text))

        cells = self.resolver.span(known)
        letters = [_cell_letter(char) for char in text] if text else [""] * len(cells)
        skipped = 0
        for (row, col), letter in zip(cells, letters):
            if not self.entries.set(row, col, letter):
                skipped += 1
        LOGGER.debug(
            "Filled %s with %r (%d locked cells kept)", known.label(), "".join(letters), skipped
        )
