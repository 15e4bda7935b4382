"""Data models supporting the crossword generator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .constants import Direction


Grid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Placement:
    """A word placed on the grid, numbered and clued once assigned."""

    word: str
    row: int
    col: int
    direction: Direction
    number: Optional[int] = None
    clue: Optional[str] = None

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def start(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]

    def with_clue(self, number: int, clue: str) -> "Placement":
        return dataclasses.replace(self, number=number, clue=clue)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "row": self.row,
            "col": self.col,
            "direction": self.direction.value,
            "number": self.number,
            "clue": self.clue,
        }


@dataclass(frozen=True)
class ClueGroups:
    """Numbered placements split by direction, each sorted by number."""

    across: Tuple[Placement, ...] = ()
    down: Tuple[Placement, ...] = ()

    def __iter__(self) -> Iterator[Placement]:
        yield from self.across
        yield from self.down

    def __len__(self) -> int:
        return len(self.across) + len(self.down)

    def to_jsonable(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "across": [placement.to_jsonable() for placement in self.across],
            "down": [placement.to_jsonable() for placement in self.down],
        }


@dataclass(frozen=True)
class DisplayCell:
    """Render-friendly view of one grid cell."""

    letter: str
    number: Optional[int]
    is_empty: bool

    def to_jsonable(self) -> Dict[str, Any]:
        return {"letter": self.letter, "number": self.number, "isEmpty": self.is_empty}
