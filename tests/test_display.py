import unittest

from daily_crossword.core.constants import EMPTY_CELL, Direction
from daily_crossword.core.models import ClueGroups, DisplayCell, Placement
from daily_crossword.engine.display import DisplayProjector
from daily_crossword.engine.placer import GridPlacer
from daily_crossword.io.clues import ClueAssigner


class DisplayProjectorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid, placements = GridPlacer(seed=1).place(["STARS", "SUN"])
        self.groups = ClueAssigner().assign(placements)

    def test_cells_carry_letters_numbers_and_blank_state(self) -> None:
        display = DisplayProjector().project(self.grid, self.groups, 12)
        self.assertEqual(len(display), 12)
        self.assertTrue(all(len(row) == 12 for row in display))
        self.assertEqual(display[6][3], DisplayCell(letter="S", number=1, is_empty=False))
        self.assertEqual(display[6][7], DisplayCell(letter="S", number=2, is_empty=False))
        self.assertEqual(display[7][7], DisplayCell(letter="U", number=None, is_empty=False))
        self.assertEqual(display[0][0], DisplayCell(letter=EMPTY_CELL, number=None, is_empty=True))

    def test_projection_is_repeatable(self) -> None:
        projector = DisplayProjector()
        self.assertEqual(
            projector.project(self.grid, self.groups),
            projector.project(self.grid, self.groups),
        )

    def test_first_number_wins_on_shared_start(self) -> None:
        groups = ClueGroups(
            across=(Placement("SEA", 0, 0, Direction.ACROSS, number=1, clue="x"),),
            down=(Placement("SUN", 0, 0, Direction.DOWN, number=9, clue="y"),),
        )
        grid = (("S", "E", "A"), ("U", "", ""), ("N", "", ""))
        display = DisplayProjector().project(grid, groups, 3)
        self.assertEqual(display[0][0].number, 1)
        self.assertTrue(display[1][1].is_empty)

    def test_json_shape(self) -> None:
        cell = DisplayCell(letter="A", number=None, is_empty=False)
        self.assertEqual(cell.to_jsonable(), {"letter": "A", "number": None, "isEmpty": False})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
