"""Greedy word placement onto a square crossword grid.

Words are placed longest first. The first word is seeded across the middle
of the grid; every later word prefers the most central position where it
crosses an already placed word, and falls back to a bounded number of
random positions. Words that fit nowhere are dropped.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Protocol, Sequence

from ..core.constants import (
    CENTER_SCORE_BASE,
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_WORDS,
    MIN_WORD_LENGTH,
    RANDOM_PLACEMENT_ATTEMPTS,
    Direction,
)
from ..core.exceptions import ConfigurationError
from ..core.models import Grid, Placement
from ..data.normalization import prepare_candidates
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class RandomSource(Protocol):
    """Subset of :class:`random.Random` used by the fallback search."""

    def choice(self, seq): ...

    def randint(self, a: int, b: int) -> int: ...


class PlacementResult(NamedTuple):
    grid: Grid
    placements: List[Placement]


@dataclass
class _Candidate:
    row: int
    col: int
    direction: Direction
    score: float


def validate_dimensions(grid_size: int, max_words: int) -> None:
    if grid_size < MIN_WORD_LENGTH:
        raise ConfigurationError(
            f"Grid size must be at least {MIN_WORD_LENGTH}, got {grid_size}"
        )
    if max_words <= 0:
        raise ConfigurationError(f"Word cap must be positive, got {max_words}")


class GridPlacer:
    """Places candidate words on a fresh grid for every call to :meth:`place`."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        random_attempts: int = RANDOM_PLACEMENT_ATTEMPTS,
    ) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.random_attempts = random_attempts

    def place(
        self,
        words: Sequence[str],
        grid_size: int = DEFAULT_GRID_SIZE,
        max_words: int = DEFAULT_MAX_WORDS,
    ) -> PlacementResult:
        validate_dimensions(grid_size, max_words)
        candidates = prepare_candidates(words, grid_size)
        LOGGER.debug(
            "Placing up to %s of %s candidate words on a %sx%s grid",
            max_words,
            len(candidates),
            grid_size,
            grid_size,
        )

        grid = LetterGrid(grid_size)
        placements: List[Placement] = []
        for word in candidates:
            if len(placements) >= max_words:
                break
            placement = self._find_placement(grid, word, placements)
            if placement is None:
                LOGGER.debug("Dropping %s: no feasible position", word)
                continue
            grid.place_word(word, placement.row, placement.col, placement.direction)
            placements.append(placement)

        LOGGER.info(
            "Placed %s/%s candidate words on a %sx%s grid",
            len(placements),
            len(candidates),
            grid_size,
            grid_size,
        )
        return PlacementResult(grid=grid.freeze(), placements=placements)

    # ------------------------------------------------------------------
    # Search phases
    # ------------------------------------------------------------------
    def _find_placement(
        self, grid: LetterGrid, word: str, placed: Sequence[Placement]
    ) -> Optional[Placement]:
        if not placed:
            return self._seed_placement(grid, word)
        best = self._best_intersection(grid, word, placed)
        if best is not None:
            return Placement(word=word, row=best.row, col=best.col, direction=best.direction)
        return self._random_placement(grid, word)

    @staticmethod
    def _seed_placement(grid: LetterGrid, word: str) -> Placement:
        row = grid.size // 2
        col = (grid.size - len(word)) // 2
        return Placement(word=word, row=row, col=col, direction=Direction.ACROSS)

    @staticmethod
    def _best_intersection(
        grid: LetterGrid, word: str, placed: Sequence[Placement]
    ) -> Optional[_Candidate]:
        center = grid.size / 2
        best: Optional[_Candidate] = None
        for other in placed:
            direction = other.direction.perpendicular
            for i, letter in enumerate(word):
                for j, other_letter in enumerate(other.word):
                    if letter != other_letter:
                        continue
                    if other.direction == Direction.ACROSS:
                        row, col = other.row - i, other.col + j
                    else:
                        row, col = other.row + j, other.col - i
                    if not grid.can_place(word, row, col, direction):
                        continue
                    score = CENTER_SCORE_BASE - (abs(row - center) + abs(col - center))
                    # Strict comparison keeps the first position found on ties.
                    if best is None or score > best.score:
                        best = _Candidate(row=row, col=col, direction=direction, score=score)
        if best is not None:
            LOGGER.debug(
                "%s crosses at (%s,%s) %s, score %.1f, %s shared letters",
                word,
                best.row,
                best.col,
                best.direction.value,
                best.score,
                grid.crossings(word, best.row, best.col, best.direction),
            )
        return best

    def _random_placement(self, grid: LetterGrid, word: str) -> Optional[Placement]:
        directions = [Direction.ACROSS, Direction.DOWN]
        for _ in range(self.random_attempts):
            direction = self.rng.choice(directions)
            max_row = grid.size - len(word) if direction == Direction.DOWN else grid.size - 1
            max_col = grid.size - len(word) if direction == Direction.ACROSS else grid.size - 1
            row = self.rng.randint(0, max_row)
            col = self.rng.randint(0, max_col)
            if grid.can_place(word, row, col, direction):
                LOGGER.debug("%s placed randomly at (%s,%s) %s", word, row, col, direction.value)
                return Placement(word=word, row=row, col=col, direction=direction)
        return None
