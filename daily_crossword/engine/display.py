"""Render-friendly projection of a finished grid."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import EMPTY_CELL
from ..core.models import ClueGroups, DisplayCell


DisplayGrid = List[List[DisplayCell]]


class DisplayProjector:
    """Derives per-cell letter, clue number and blank state.

    The projection is read-only over its inputs and can be recomputed at
    any time.
    """

    @staticmethod
    def start_numbers(clue_groups: ClueGroups) -> Dict[Tuple[int, int], int]:
        numbers: Dict[Tuple[int, int], int] = {}
        for placement in clue_groups:
            if placement.start not in numbers and placement.number is not None:
                numbers[placement.start] = placement.number
        return numbers

    def project(
        self,
        grid: Sequence[Sequence[str]],
        clue_groups: ClueGroups,
        size: Optional[int] = None,
    ) -> DisplayGrid:
        size = len(grid) if size is None else size
        numbers = self.start_numbers(clue_groups)
        display: DisplayGrid = []
        for r in range(size):
            row: List[DisplayCell] = []
            for c in range(size):
                letter = grid[r][c]
                row.append(
                    DisplayCell(
                        letter=letter,
                        number=numbers.get((r, c)),
                        is_empty=letter == EMPTY_CELL,
                    )
                )
            display.append(row)
        return display
