"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import EMPTY_CELL, Bounds, Direction
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..io.clues import number_start_cells
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Coverage = Dict[Tuple[int, int], List[Placement]]


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs post-hoc checks over a finished grid and its placements."""

    def validate(
        self,
        grid: Sequence[Sequence[str]],
        placements: Sequence[Placement],
        max_words: Optional[int] = None,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            bounds = Bounds(len(grid))
            self._check_bounds(bounds, placements)
            coverage = self._coverage(placements)
            self._check_letters(grid, placements)
            self._check_no_stray_letters(grid, coverage)
            self._check_lateral_adjacency(grid, coverage, bounds)
            self._check_word_cap(placements, max_words)
            self._check_numbering(placements)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def _coverage(placements: Sequence[Placement]) -> Coverage:
        coverage: Coverage = defaultdict(list)
        for placement in placements:
            for cell in placement.cells:
                coverage[cell].append(placement)
        return coverage

    @staticmethod
    def _check_bounds(bounds: Bounds, placements: Sequence[Placement]) -> None:
        for placement in placements:
            for row, col in placement.cells:
                if not bounds.contains(row, col):
                    raise ValidationError(
                        f"Word '{placement.word}' leaves the grid at ({row},{col})"
                    )

    @staticmethod
    def _check_letters(grid: Sequence[Sequence[str]], placements: Sequence[Placement]) -> None:
        for placement in placements:
            for (row, col), letter in zip(placement.cells, placement.word):
                if grid[row][col] != letter:
                    raise ValidationError(
                        f"Cell ({row},{col}) holds '{grid[row][col]}' but "
                        f"'{placement.word}' needs '{letter}'"
                    )

    @staticmethod
    def _check_no_stray_letters(grid: Sequence[Sequence[str]], coverage: Coverage) -> None:
        for r, row in enumerate(grid):
            for c, letter in enumerate(row):
                if letter != EMPTY_CELL and (r, c) not in coverage:
                    raise ValidationError(f"Letter '{letter}' at ({r},{c}) belongs to no word")

    @staticmethod
    def _check_lateral_adjacency(
        grid: Sequence[Sequence[str]], coverage: Coverage, bounds: Bounds
    ) -> None:
        for (row, col), owners in coverage.items():
            if len(owners) != 1:
                continue
            owner = owners[0]
            side_steps = ((1, 0),) if owner.direction == Direction.ACROSS else ((0, 1),)
            for dr, dc in side_steps:
                nr, nc = row + dr, col + dc
                if not bounds.contains(nr, nc):
                    continue
                neighbors = coverage.get((nr, nc), [])
                if len(neighbors) != 1:
                    continue
                neighbor = neighbors[0]
                if neighbor is owner or neighbor.direction != owner.direction:
                    continue
                if grid[row][col] != grid[nr][nc]:
                    raise ValidationError(
                        f"Parallel words '{owner.word}' and '{neighbor.word}' touch at "
                        f"({row},{col})/({nr},{nc})"
                    )

    @staticmethod
    def _check_word_cap(placements: Sequence[Placement], max_words: Optional[int]) -> None:
        if max_words is not None and len(placements) > max_words:
            raise ValidationError(f"{len(placements)} words placed, cap is {max_words}")

    @staticmethod
    def _check_numbering(placements: Sequence[Placement]) -> None:
        if not any(placement.number is not None for placement in placements):
            return
        expected = number_start_cells(placements)
        for placement in placements:
            if placement.number != expected[placement.start]:
                raise ValidationError(
                    f"Word '{placement.word}' at {placement.start} numbered "
                    f"{placement.number}, expected {expected[placement.start]}"
                )
