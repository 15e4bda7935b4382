"""Mutable letter grid used while a puzzle is being placed."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.constants import EMPTY_CELL, Bounds, Direction
from ..core.models import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square buffer of letters with placement feasibility helpers.

    A grid is owned by a single placement run. Callers receive the result of
    :meth:`freeze`, never the buffer itself.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(size)
        self.cells: List[List[str]] = [[EMPTY_CELL] * size for _ in range(size)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY_CELL

    def _is_open(self, row: int, col: int) -> bool:
        """True when the cell is off-grid or holds no letter."""
        return not self.bounds.contains(row, col) or self.is_empty(row, col)

    @staticmethod
    def path(word: str, row: int, col: int, direction: Direction) -> Iterable[Tuple[int, int, str]]:
        dr, dc = direction.step
        for index, letter in enumerate(word):
            yield row + dr * index, col + dc * index, letter

    def fits(self, word: str, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)
        return self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)

    def crossings(self, word: str, row: int, col: int, direction: Direction) -> int:
        """Count path cells already holding the matching letter."""
        return sum(
            1
            for r, c, letter in self.path(word, row, col, direction)
            if self.cells[r][c] == letter
        )

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check bounds, letter conflicts, side adjacency and end caps."""

        if not word or not self.fits(word, row, col, direction):
            return False

        side_steps = ((-1, 0), (1, 0)) if direction == Direction.ACROSS else ((0, -1), (0, 1))
        for r, c, letter in self.path(word, row, col, direction):
            existing = self.cells[r][c]
            if existing == EMPTY_CELL:
                # Parallel words may only touch where the letters agree.
                for dr, dc in side_steps:
                    nr, nc = r + dr, c + dc
                    if self.bounds.contains(nr, nc):
                        neighbor = self.cells[nr][nc]
                        if neighbor != EMPTY_CELL and neighbor != letter:
                            return False
            elif existing != letter:
                return False

        dr, dc = direction.step
        if not self._is_open(row - dr, col - dc):
            return False
        if not self._is_open(row + dr * len(word), col + dc * len(word)):
            return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, word: str, row: int, col: int, direction: Direction) -> None:
        for r, c, letter in self.path(word, row, col, direction):
            self.cells[r][c] = letter
        LOGGER.debug("Placed %s %s at (%s,%s)", word, direction.value, row, col)

    def freeze(self) -> Grid:
        return tuple(tuple(row) for row in self.cells)

