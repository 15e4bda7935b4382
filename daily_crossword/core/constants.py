"""Shared constants and enumerations for the crossword core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


EMPTY_CELL = ""

DEFAULT_GRID_SIZE = 12
DEFAULT_MAX_WORDS = 15
MIN_WORD_LENGTH = 3
RANDOM_PLACEMENT_ATTEMPTS = 100
CENTER_SCORE_BASE = 100


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
