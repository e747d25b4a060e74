import unittest
from unittest.mock import MagicMock

from crossboard.core.constants import Orientation
from crossboard.core.models import PlacedWord, PuzzleDescription, Selection
from crossboard.engine.board import BoardEngine


CAT = PlacedWord("CAT", "Purring pet", 0, 0, Orientation.ACROSS)
CAR = PlacedWord("CAR", "Four wheels", 0, 0, Orientation.DOWN)
TEN = PlacedWord("TEN", "Perfect score", 0, 2, Orientation.DOWN)
PUZZLE = PuzzleDescription(theme="Animals", words=(CAT, CAR, TEN))


def type_word(engine: BoardEngine, letters: str) -> None:
    for letter in letters:
        engine.enter_letter(letter)


class SelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = BoardEngine()
        self.engine.initialize(PuzzleDescription(theme="t", words=(CAT, CAR)))

    def test_single_covering_word_becomes_active(self) -> None:
        selection = self.engine.select_cell(0, 1)
        self.assertEqual(selection, Selection(active_cell=(0, 1), active_word=CAT))
        self.assertEqual(self.engine.current_clue, "Purring pet")

    def test_repeat_click_on_intersection_toggles(self) -> None:
        self.assertIs(self.engine.select_cell(0, 0).active_word, CAT)
        self.assertIs(self.engine.select_cell(0, 0).active_word, CAR)
        self.assertIs(self.engine.select_cell(0, 0).active_word, CAT)

    def test_repeat_click_cycles_through_three_words(self) -> None:
        words = tuple(
            PlacedWord(answer, clue, 0, 0, orientation)
            for answer, clue, orientation in (
                ("AB", "a", Orientation.ACROSS),
                ("AC", "b", Orientation.DOWN),
                ("AD", "c", Orientation.ACROSS),
            )
        )
        engine = BoardEngine()
        engine.initialize(PuzzleDescription(theme="t", words=words))
        clues = [engine.select_cell(0, 0).active_word.clue for _ in range(4)]
        self.assertEqual(clues, ["a", "b", "c", "a"])

    def test_first_click_on_intersection_picks_first_word(self) -> None:
        self.engine.select_cell(2, 0)
        self.assertIs(self.engine.selection.active_word, CAR)
        self.assertIs(self.engine.select_cell(0, 0).active_word, CAT)

    def test_black_cell_is_ignored(self) -> None:
        self.engine.select_cell(0, 1)
        before = self.engine.selection
        self.assertEqual(self.engine.select_cell(5, 5), before)
        self.assertEqual(self.engine.selection, before)

    def test_out_of_range_is_ignored(self) -> None:
        self.engine.select_cell(-1, 0)
        self.engine.select_cell(0, 12)
        self.assertEqual(self.engine.selection, Selection())
        self.assertIsNone(self.engine.current_clue)

    def test_selection_before_initialize_is_ignored(self) -> None:
        engine = BoardEngine()
        self.assertEqual(engine.select_cell(0, 0), Selection())
        self.assertEqual(engine.enter_letter("A").entries, {})
        engine.delete_letter()
        self.assertFalse(engine.evaluate_completion())


class EntryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = BoardEngine()
        self.engine.initialize(PUZZLE)

    def test_letter_is_uppercased_and_advances(self) -> None:
        self.engine.select_cell(0, 1)
        snapshot = self.engine.enter_letter("a")
        self.assertEqual(snapshot.entries, {(0, 1): "A"})
        self.assertEqual(self.engine.selection.active_cell, (0, 2))
        self.assertFalse(snapshot.solved)

    def test_advance_stops_at_end_of_word(self) -> None:
        self.engine.select_cell(0, 1)
        type_word(self.engine, "AT")
        self.assertEqual(self.engine.selection.active_cell, (0, 2))
        self.assertIs(self.engine.selection.active_word, CAT)

    def test_down_word_advances_by_row(self) -> None:
        self.engine.select_cell(1, 0)
        self.engine.enter_letter("A")
        self.assertEqual(self.engine.selection.active_cell, (2, 0))

    def test_non_letters_are_rejected(self) -> None:
        self.engine.select_cell(0, 1)
        for bad in ("5", "$", "", "AB", " ", "é", None):
            snapshot = self.engine.enter_letter(bad)
            self.assertEqual(snapshot.entries, {})
            self.assertEqual(self.engine.selection.active_cell, (0, 1))

    def test_entry_without_selection_is_ignored(self) -> None:
        self.assertEqual(self.engine.enter_letter("C").entries, {})

    def test_delete_removes_and_moves_back(self) -> None:
        self.engine.select_cell(0, 1)
        self.engine.enter_letter("A")
        self.engine.delete_letter()
        self.assertEqual(self.engine.selection.active_cell, (0, 1))
        self.engine.delete_letter()
        self.assertEqual(self.engine.entries, {})
        self.assertEqual(self.engine.selection.active_cell, (0, 0))

    def test_delete_never_moves_before_origin(self) -> None:
        self.engine.select_cell(0, 1)
        self.engine.delete_letter()
        self.engine.delete_letter()
        self.engine.delete_letter()
        self.assertEqual(self.engine.selection.active_cell, (0, 0))

    def test_delete_without_selection_is_ignored(self) -> None:
        self.engine.delete_letter()
        self.assertEqual(self.engine.selection, Selection())

    def test_reinitialize_clears_player_state(self) -> None:
        first = self.engine.grid.to_jsonable()
        self.engine.select_cell(0, 1)
        self.engine.enter_letter("A")
        self.engine.initialize(PUZZLE)
        self.assertEqual(self.engine.grid.to_jsonable(), first)
        self.assertEqual(self.engine.entries, {})
        self.assertEqual(self.engine.selection, Selection())
        self.assertFalse(self.engine.solved)


class CompletionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.on_complete = MagicMock()
        self.engine = BoardEngine(on_complete=self.on_complete)
        self.engine.initialize(PuzzleDescription(theme="t", words=(CAT, CAR)))

    def test_solved_on_final_correct_keystroke(self) -> None:
        self.engine.select_cell(1, 0)
        type_word(self.engine, "AR")
        self.engine.select_cell(0, 0)
        self.assertIs(self.engine.selection.active_word, CAT)
        self.assertFalse(self.engine.enter_letter("C").solved)
        self.assertFalse(self.engine.enter_letter("a").solved)
        self.on_complete.assert_not_called()
        self.assertTrue(self.engine.enter_letter("T").solved)
        self.assertTrue(self.engine.solved)
        self.on_complete.assert_called_once_with()

    def test_failing_callback_propagates_after_latching(self) -> None:
        self.on_complete.side_effect = RuntimeError("listener failed")
        self.engine.select_cell(1, 0)
        type_word(self.engine, "AR")
        self.engine.select_cell(0, 0)
        type_word(self.engine, "CA")
        with self.assertRaises(RuntimeError):
            self.engine.enter_letter("T")
        self.assertTrue(self.engine.solved)
        self.assertEqual(self.engine.selection.active_cell, (0, 2))
        self.on_complete.assert_called_once_with()

    def test_wrong_letter_keeps_unsolved(self) -> None:
        self.engine.select_cell(1, 0)
        type_word(self.engine, "AR")
        self.engine.select_cell(0, 0)
        type_word(self.engine, "CAX")
        self.assertFalse(self.engine.solved)
        self.engine.select_cell(0, 2)
        self.engine.enter_letter("T")
        self.assertTrue(self.engine.solved)

    def test_entries_rejected_once_solved(self) -> None:
        self.engine.select_cell(1, 0)
        type_word(self.engine, "AR")
        self.engine.select_cell(0, 0)
        type_word(self.engine, "CAT")
        before = self.engine.snapshot()
        after = self.engine.enter_letter("Z")
        self.assertEqual(after, before)
        self.on_complete.assert_called_once_with()

    def test_delete_after_solving_keeps_flag(self) -> None:
        self.engine.select_cell(1, 0)
        type_word(self.engine, "AR")
        self.engine.select_cell(0, 0)
        type_word(self.engine, "CAT")
        self.engine.delete_letter()
        self.assertNotIn((0, 2), self.engine.entries)
        self.assertTrue(self.engine.solved)
        self.assertTrue(self.engine.evaluate_completion())
        self.on_complete.assert_called_once_with()

    def test_conflicting_intersection_is_unsolvable(self) -> None:
        engine = BoardEngine()
        clash = PlacedWord("XAR", "Clash", 0, 0, Orientation.DOWN)
        engine.initialize(PuzzleDescription(theme="t", words=(CAT, clash)))
        engine.select_cell(1, 0)
        type_word(engine, "AR")
        engine.select_cell(0, 0)
        type_word(engine, "CAT")
        self.assertFalse(engine.solved)

    def test_truncated_word_checks_only_grid_cells(self) -> None:
        engine = BoardEngine()
        engine.initialize(PuzzleDescription(theme="t", words=(PlacedWord("OWL", "Hoot", 0, 10, Orientation.ACROSS),)))
        engine.select_cell(0, 10)
        type_word(engine, "OW")
        self.assertEqual(engine.selection.active_cell, (0, 11))
        self.assertTrue(engine.solved)


class ViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = BoardEngine()
        self.engine.initialize(PUZZLE)

    def test_cell_views_reflect_selection_and_entries(self) -> None:
        self.engine.select_cell(0, 1)
        self.engine.enter_letter("A")
        self.engine.select_cell(1, 2)
        self.engine.enter_letter("Q")
        views = self.engine.cell_views()
        self.assertTrue(views[5][5].is_black)
        self.assertEqual(views[0][0].number, 1)
        self.assertEqual(views[0][2].number, 2)
        self.assertEqual(views[0][1].value, "A")
        self.assertTrue(views[0][1].correct)
        self.assertEqual(views[1][2].value, "Q")
        self.assertFalse(views[1][2].correct)
        self.assertTrue(views[2][2].active)
        self.assertTrue(views[0][2].part_of_word)
        self.assertFalse(views[0][1].part_of_word)

    def test_clues_ordered_by_number_across_first(self) -> None:
        self.engine.initialize(PuzzleDescription(theme="t", words=(CAR, TEN, CAT)))
        clues = self.engine.clues()
        self.assertEqual([(c.number, c.orientation) for c in clues], [
            (1, Orientation.ACROSS),
            (1, Orientation.DOWN),
            (2, Orientation.DOWN),
        ])
        self.assertIs(clues[0].word, CAT)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
