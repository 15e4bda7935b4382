import unittest

from daily_crossword.core.constants import Direction
from daily_crossword.core.models import Placement
from daily_crossword.data.clue_bank import CLUE_BANK, fallback_clue, merge_clue_banks, resolve_clue
from daily_crossword.io.clues import ClueAssigner, number_start_cells


class ClueBankTests(unittest.TestCase):
    def test_custom_entries_override_builtin(self) -> None:
        merged = merge_clue_banks({"stars": "Twinklers"})
        self.assertEqual(merged["STARS"], "Twinklers")
        self.assertEqual(merged["SNOW"], CLUE_BANK["SNOW"])
        self.assertEqual(CLUE_BANK["STARS"], "Lights in the night sky")

    def test_fallback_clue_lowercases_word(self) -> None:
        self.assertEqual(fallback_clue("ZEBRAS"), "A word meaning zebras")

    def test_empty_clue_falls_back(self) -> None:
        self.assertEqual(resolve_clue("ZEBRAS", {"ZEBRAS": ""}), "A word meaning zebras")


class ClueAssignerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.placements = [
            Placement("STARS", 6, 3, Direction.ACROSS),
            Placement("SUN", 6, 7, Direction.DOWN),
            Placement("SEA", 6, 3, Direction.DOWN),
            Placement("MOON", 2, 5, Direction.ACROSS),
        ]

    def test_numbers_follow_reading_order(self) -> None:
        numbers = number_start_cells(self.placements)
        self.assertEqual(numbers, {(2, 5): 1, (6, 3): 2, (6, 7): 3})

    def test_shared_start_cell_shares_number(self) -> None:
        groups = ClueAssigner().assign(self.placements)
        self.assertEqual([(p.word, p.number) for p in groups.across], [("MOON", 1), ("STARS", 2)])
        self.assertEqual([(p.word, p.number) for p in groups.down], [("SEA", 2), ("SUN", 3)])

    def test_clue_text_resolution(self) -> None:
        groups = ClueAssigner().assign(self.placements, {"SUN": "Daystar"})
        clues = {p.word: p.clue for p in groups}
        self.assertEqual(clues["SUN"], "Daystar")
        self.assertEqual(clues["STARS"], "Lights in the night sky")
        self.assertEqual(clues["SEA"], "A word meaning sea")

    def test_custom_builtin_bank(self) -> None:
        groups = ClueAssigner(builtin_bank={"MOON": "Night light"}).assign(self.placements)
        clues = {p.word: p.clue for p in groups}
        self.assertEqual(clues["MOON"], "Night light")
        self.assertEqual(clues["STARS"], "A word meaning stars")

    def test_input_placements_untouched(self) -> None:
        ClueAssigner().assign(self.placements)
        self.assertTrue(all(p.number is None and p.clue is None for p in self.placements))

    def test_empty_placements(self) -> None:
        groups = ClueAssigner().assign([])
        self.assertEqual(groups.across, ())
        self.assertEqual(groups.down, ())
        self.assertEqual(len(groups), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
