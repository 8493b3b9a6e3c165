import unittest

from crossplay.core.constants import ArrowKey, Direction
from crossplay.core.models import CursorState
from crossplay.engine.cursor import CursorController
from crossplay.engine.entries import EntryLayer
from crossplay.engine.grid import GridBuilder
from crossplay.engine.resolver import WordResolver

from puzzles import starter_puzzle


class CursorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.definition = starter_puzzle()
        self.grid = GridBuilder().build(self.definition)
        self.entries = EntryLayer(self.grid)
        self.cursor = CursorController(self.grid, WordResolver(self.grid), self.entries)


class FocusTests(CursorTestCase):
    def test_starts_unset_and_across(self) -> None:
        self.assertIsNone(self.cursor.state)
        self.assertIs(self.cursor.direction, Direction.ACROSS)
        self.assertIsNone(self.cursor.active_word)

    def test_focus_on_blocked_cell_is_noop(self) -> None:
        self.assertFalse(self.cursor.focus(1, 1))
        self.assertIsNone(self.cursor.state)

    def test_repeated_focus_on_crossing_alternates(self) -> None:
        self.cursor.focus(2, 2)
        seen = [self.cursor.direction]
        for _ in range(4):
            self.cursor.focus(2, 2)
            seen.append(self.cursor.direction)
        self.assertEqual(
            seen,
            [Direction.ACROSS, Direction.DOWN, Direction.ACROSS, Direction.DOWN, Direction.ACROSS],
        )

    def test_repeated_focus_without_crossing_keeps_direction(self) -> None:
        self.cursor.focus(0, 1)
        self.assertFalse(self.cursor.focus(0, 1))
        self.assertIs(self.cursor.direction, Direction.ACROSS)

    def test_focus_switches_to_supported_direction(self) -> None:
        self.cursor.focus(1, 0)
        self.assertEqual(self.cursor.state, CursorState(1, 0, Direction.DOWN))
        self.assertEqual(self.cursor.active_word.answer, "CHAFE")

        self.cursor.focus(4, 1)
        self.assertEqual(self.cursor.state, CursorState(4, 1, Direction.ACROSS))
        self.assertEqual(self.cursor.active_word.answer, "ELECT")

    def test_focus_keeps_supported_direction_on_new_cell(self) -> None:
        self.cursor.focus(1, 2)
        self.cursor.focus(4, 2)
        self.assertIs(self.cursor.direction, Direction.DOWN)
        self.assertEqual(self.cursor.active_word.answer, "ATONE")


class ArrowTests(CursorTestCase):
    def test_arrow_before_focus_does_nothing(self) -> None:
        self.assertFalse(self.cursor.arrow(ArrowKey.RIGHT))
        self.assertIsNone(self.cursor.state)

    def test_arrow_moves_to_neighbour(self) -> None:
        self.cursor.focus(0, 0)
        self.assertTrue(self.cursor.arrow(ArrowKey.RIGHT))
        self.assertEqual(self.cursor.state, CursorState(0, 1, Direction.ACROSS))
        self.assertTrue(self.cursor.arrow("ArrowLeft"))
        self.assertEqual(self.cursor.state.position, (0, 0))

    def test_arrow_into_blocked_or_off_grid_is_noop(self) -> None:
        self.cursor.focus(0, 1)
        before = self.cursor.state
        self.assertFalse(self.cursor.arrow(ArrowKey.DOWN))
        self.assertFalse(self.cursor.arrow(ArrowKey.UP))
        self.assertEqual(self.cursor.state, before)

    def test_unknown_key_is_ignored(self) -> None:
        self.cursor.focus(0, 0)
        self.assertFalse(self.cursor.arrow("Enter"))

    def test_arrow_does_not_adjust_direction(self) -> None:
        self.cursor.focus(0, 0)
        self.cursor.arrow(ArrowKey.DOWN)
        self.assertEqual(self.cursor.state, CursorState(1, 0, Direction.ACROSS))
        self.assertIsNone(self.cursor.active_word)

        # A click on the same cell then picks the only direction it supports.
        self.cursor.focus(1, 0)
        self.assertIs(self.cursor.direction, Direction.DOWN)

    def test_arrow_never_leaves_letter_cells(self) -> None:
        self.cursor.focus(2, 2)
        for key in [ArrowKey.UP, ArrowKey.LEFT, ArrowKey.DOWN, ArrowKey.RIGHT] * 6:
            self.cursor.arrow(key)
            self.assertTrue(self.grid.is_cell(*self.cursor.state.position))


class TypingTests(CursorTestCase):
    def test_typing_advances_through_the_word(self) -> None:
        self.cursor.focus(0, 0)
        for col, char in enumerate("crane"):
            self.assertTrue(self.cursor.character_entered(0, col, char))
        self.assertEqual("".join(self.entries.get(0, c) for c in range(5)), "CRANE")
        self.assertEqual(self.cursor.state.position, (0, 4))

    def test_typing_skips_filled_cells(self) -> None:
        self.entries.set(0, 3, "N")
        self.cursor.focus(0, 2)
        self.cursor.character_entered(0, 2, "A")
        self.assertEqual(self.cursor.state.position, (0, 4))

    def test_typing_stays_when_rest_of_word_is_full(self) -> None:
        for col, char in enumerate("CRANE"):
            self.entries.set(0, col, char)
        self.cursor.focus(0, 1)
        self.cursor.character_entered(0, 1, "X")
        self.assertEqual(self.entries.get(0, 1), "X")
        self.assertEqual(self.cursor.state.position, (0, 1))

    def test_typing_does_not_wrap_to_earlier_empty_cells(self) -> None:
        self.cursor.focus(0, 3)
        self.cursor.character_entered(0, 3, "N")
        self.cursor.character_entered(0, 4, "E")
        self.assertEqual(self.cursor.state.position, (0, 4))
        self.assertTrue(self.entries.is_empty(0, 0))

    def test_typing_follows_down_direction(self) -> None:
        self.cursor.focus(0, 2)
        self.cursor.focus(0, 2)
        self.cursor.character_entered(0, 2, "a")
        self.assertEqual(self.cursor.state, CursorState(1, 2, Direction.DOWN))

    def test_non_letters_are_ignored(self) -> None:
        self.cursor.focus(0, 0)
        self.cursor.character_entered(0, 0, "7")
        self.cursor.character_entered(0, 0, "")
        self.assertTrue(self.entries.is_empty(0, 0))
        self.assertEqual(self.cursor.state.position, (0, 0))

    def test_typing_elsewhere_moves_focus_there(self) -> None:
        self.cursor.focus(0, 0)
        self.cursor.character_entered(2, 1, "L")
        self.assertEqual(self.entries.get(2, 1), "L")
        self.assertEqual(self.cursor.state, CursorState(2, 2, Direction.ACROSS))

    def test_locked_cells_refuse_input_and_are_skipped(self) -> None:
        self.entries.set(0, 1, "R")
        self.entries.lock(0, 1)
        self.cursor.focus(0, 0)
        self.cursor.character_entered(0, 0, "C")
        self.assertEqual(self.cursor.state.position, (0, 2))

        self.cursor.focus(0, 1)
        self.cursor.character_entered(0, 1, "Z")
        self.assertEqual(self.entries.get(0, 1), "R")
        self.assertEqual(self.cursor.state.position, (0, 1))


class BackspaceTests(CursorTestCase):
    def test_backspace_clears_and_stays(self) -> None:
        self.entries.set(0, 2, "A")
        self.cursor.focus(0, 2)
        self.assertTrue(self.cursor.backspace(0, 2))
        self.assertTrue(self.entries.is_empty(0, 2))
        self.assertEqual(self.cursor.state.position, (0, 2))

    def test_backspace_on_empty_moves_back_without_clearing(self) -> None:
        self.entries.set(0, 1, "R")
        self.cursor.focus(0, 2)
        self.assertTrue(self.cursor.backspace(0, 2))
        self.assertEqual(self.cursor.state.position, (0, 1))
        self.assertEqual(self.entries.get(0, 1), "R")

    def test_backspace_at_word_start_is_noop(self) -> None:
        self.cursor.focus(2, 0)
        self.assertFalse(self.cursor.backspace(2, 0))
        self.assertEqual(self.cursor.state.position, (2, 0))

    def test_backspace_moves_up_in_down_words(self) -> None:
        self.cursor.focus(3, 2)
        self.cursor.backspace(3, 2)
        self.assertEqual(self.cursor.state, CursorState(2, 2, Direction.DOWN))

    def test_backspace_on_locked_cell_moves_back(self) -> None:
        self.entries.set(0, 3, "N")
        self.entries.lock(0, 3)
        self.cursor.focus(0, 3)
        self.cursor.backspace(0, 3)
        self.assertEqual(self.entries.get(0, 3), "N")
        self.assertEqual(self.cursor.state.position, (0, 2))


class ClueSelectionTests(CursorTestCase):
    def test_select_clue_sets_direction_and_start(self) -> None:
        self.cursor.focus(2, 3)
        clue = self.definition.find_clue(3, Direction.DOWN)
        self.assertTrue(self.cursor.select_clue(clue))
        self.assertEqual(self.cursor.state, CursorState(0, 4, Direction.DOWN))

    def test_select_clue_on_focused_start_does_not_toggle(self) -> None:
        self.cursor.focus(0, 0)
        clue = self.definition.find_clue(1, Direction.ACROSS)
        self.cursor.select_clue(clue)
        self.assertIs(self.cursor.direction, Direction.ACROSS)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
