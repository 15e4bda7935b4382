"""Clue numbering and text assignment for placed words."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import ClueGroups, Placement
from ..data.clue_bank import CLUE_BANK, merge_clue_banks, resolve_clue
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def number_start_cells(placements: Sequence[Placement]) -> Dict[Tuple[int, int], int]:
    """Number distinct start cells from 1 in reading order."""

    numbers: Dict[Tuple[int, int], int] = {}
    for placement in sorted(placements, key=lambda p: (p.row, p.col)):
        if placement.start not in numbers:
            numbers[placement.start] = len(numbers) + 1
    return numbers


class ClueAssigner:
    """Turns raw placements into numbered across/down clue groups."""

    def __init__(self, builtin_bank: Mapping[str, str] = CLUE_BANK) -> None:
        self.builtin_bank = builtin_bank

    def assign(
        self,
        placements: Sequence[Placement],
        clue_bank: Optional[Mapping[str, str]] = None,
    ) -> ClueGroups:
        bank = merge_clue_banks(clue_bank, self.builtin_bank)
        numbers = number_start_cells(placements)

        ordered = sorted(placements, key=lambda p: (p.row, p.col))
        clued: List[Placement] = [
            placement.with_clue(numbers[placement.start], resolve_clue(placement.word, bank))
            for placement in ordered
        ]

        across = sorted(
            (p for p in clued if p.direction == Direction.ACROSS), key=lambda p: p.number
        )
        down = sorted(
            (p for p in clued if p.direction == Direction.DOWN), key=lambda p: p.number
        )
        LOGGER.debug(
            "Assigned %s numbers to %s across and %s down words",
            len(numbers),
            len(across),
            len(down),
        )
        return ClueGroups(across=tuple(across), down=tuple(down))
