"""Crossword generator for the large-print daily digest.

This package exposes the public API surface via:

- ``daily_crossword.engine.generator.CrosswordGenerator``: place, number and check a puzzle.
- ``daily_crossword.engine.placer.GridPlacer``: greedy intersection-first word placement.
- ``daily_crossword.io.clues.ClueAssigner``: crossword numbering and clue text.
- ``daily_crossword.engine.display.DisplayProjector``: per-cell view for renderers.
- ``daily_crossword.data.word_source`` helpers: candidate word providers.
"""

from .engine.display import DisplayProjector
from .engine.generator import CrosswordConfig, CrosswordGenerator, CrosswordResult, generate_crossword
from .engine.placer import GridPlacer
from .io.clues import ClueAssigner

__all__ = [
    "ClueAssigner",
    "CrosswordConfig",
    "CrosswordGenerator",
    "CrosswordResult",
    "DisplayProjector",
    "GridPlacer",
    "generate_crossword",
]

__version__ = "0.1.0"
