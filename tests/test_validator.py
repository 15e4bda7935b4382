import unittest

from daily_crossword.core.constants import Direction
from daily_crossword.core.models import Placement
from daily_crossword.engine.grid import LetterGrid
from daily_crossword.engine.validator import GridValidator


def build_grid(size, placements):
    grid = LetterGrid(size)
    for placement in placements:
        grid.place_word(placement.word, placement.row, placement.col, placement.direction)
    return grid.freeze()


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = GridValidator()

    def test_valid_crossing_passes(self) -> None:
        # ACE starts a row above CAT, so it takes number 1.
        placements = [
            Placement("CAT", 5, 2, Direction.ACROSS, number=2, clue="a"),
            Placement("ACE", 4, 3, Direction.DOWN, number=1, clue="b"),
        ]
        result = self.validator.validate(build_grid(8, placements), placements)
        self.assertTrue(result.ok, result.messages)
        self.assertEqual(result.messages, [])

    def test_detects_letter_mismatch(self) -> None:
        grid = build_grid(6, [Placement("CAT", 0, 0, Direction.ACROSS)])
        result = self.validator.validate(grid, [Placement("COT", 0, 0, Direction.ACROSS)])
        self.assertFalse(result.ok)
        self.assertIn("(0,1)", result.messages[0])

    def test_detects_out_of_bounds(self) -> None:
        grid = build_grid(4, [])
        result = self.validator.validate(grid, [Placement("HORSE", 0, 0, Direction.ACROSS)])
        self.assertFalse(result.ok)
        self.assertIn("leaves the grid", result.messages[0])

    def test_detects_stray_letter(self) -> None:
        grid = build_grid(4, [Placement("CAT", 0, 0, Direction.ACROSS)])
        result = self.validator.validate(grid, [])
        self.assertFalse(result.ok)
        self.assertIn("belongs to no word", result.messages[0])

    def test_detects_touching_parallel_words(self) -> None:
        placements = [
            Placement("CAT", 2, 0, Direction.ACROSS),
            Placement("DOG", 3, 0, Direction.ACROSS),
        ]
        result = self.validator.validate(build_grid(5, placements), placements)
        self.assertFalse(result.ok)
        self.assertIn("Parallel words", result.messages[0])

    def test_detects_word_cap_overflow(self) -> None:
        placements = [
            Placement("CAT", 0, 0, Direction.ACROSS),
            Placement("DOG", 4, 0, Direction.ACROSS),
        ]
        result = self.validator.validate(build_grid(6, placements), placements, max_words=1)
        self.assertFalse(result.ok)

    def test_detects_bad_numbering(self) -> None:
        placements = [
            Placement("CAT", 0, 0, Direction.ACROSS, number=2, clue="a"),
            Placement("DOG", 4, 0, Direction.ACROSS, number=1, clue="b"),
        ]
        result = self.validator.validate(build_grid(6, placements), placements)
        self.assertFalse(result.ok)
        self.assertIn("expected 1", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
