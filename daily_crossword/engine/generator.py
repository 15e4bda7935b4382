"""Main crossword generator orchestration.

Three steps, each owned by its own component:
  1. Placement: :class:`GridPlacer` fills a fresh grid greedily.
  2. Clues: :class:`ClueAssigner` numbers the words and resolves clue text.
  3. Checks: :class:`GridValidator` re-verifies the finished puzzle.

The display projection is derived on demand from the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_WORDS
from ..core.exceptions import ValidationError
from ..core.models import ClueGroups, Grid
from ..io.clues import ClueAssigner
from ..utils.logger import get_logger
from .display import DisplayGrid, DisplayProjector
from .placer import GridPlacer, RandomSource, validate_dimensions
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class CrosswordConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    max_words: int = DEFAULT_MAX_WORDS
    seed: Optional[int] = None
    validate_output: bool = True

    def __post_init__(self) -> None:
        validate_dimensions(self.grid_size, self.max_words)


@dataclass(frozen=True)
class CrosswordResult:
    """A finished puzzle. Grid, clue groups and messages are immutable."""

    grid: Grid
    words: ClueGroups
    size: int
    validation_messages: Tuple[str, ...] = ()
    seed: Optional[int] = None

    def display_grid(self, projector: Optional[DisplayProjector] = None) -> DisplayGrid:
        return (projector or DisplayProjector()).project(self.grid, self.words, self.size)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "words": self.words.to_jsonable(),
            "size": self.size,
            "display": [
                [cell.to_jsonable() for cell in row] for row in self.display_grid()
            ],
            "seed": self.seed,
        }


class CrosswordGenerator:
    """High-level orchestrator: placement, clue assignment and validation."""

    def __init__(
        self,
        config: Optional[CrosswordConfig] = None,
        placer: Optional[GridPlacer] = None,
        clue_assigner: Optional[ClueAssigner] = None,
        validator: Optional[GridValidator] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or CrosswordConfig()
        self.placer = placer or GridPlacer(rng=rng, seed=self.config.seed)
        self.clue_assigner = clue_assigner or ClueAssigner()
        self.validator = validator or GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        words: Sequence[str],
        custom_clues: Optional[Mapping[str, str]] = None,
    ) -> CrosswordResult:
        grid, placements = self.placer.place(
            words,
            grid_size=self.config.grid_size,
            max_words=self.config.max_words,
        )
        groups = self.clue_assigner.assign(placements, custom_clues)

        messages: List[str] = []
        if self.config.validate_output:
            validation = self.validator.validate(
                grid, list(groups), max_words=self.config.max_words
            )
            if not validation.ok:
                raise ValidationError(f"Grid validation failed: {validation.messages}")
            messages = validation.messages

        LOGGER.info(
            "Crossword generation completed with %s across and %s down words",
            len(groups.across),
            len(groups.down),
        )
        return CrosswordResult(
            grid=grid,
            words=groups,
            size=self.config.grid_size,
            validation_messages=tuple(messages),
            seed=self.config.seed,
        )


def generate_crossword(
    words: Sequence[str],
    grid_size: int = DEFAULT_GRID_SIZE,
    custom_clues: Optional[Mapping[str, str]] = None,
    max_words: int = DEFAULT_MAX_WORDS,
    seed: Optional[int] = None,
) -> CrosswordResult:
    """Build a numbered crossword from ``words`` in one call."""

    config = CrosswordConfig(grid_size=grid_size, max_words=max_words, seed=seed)
    return CrosswordGenerator(config).generate(words, custom_clues)
