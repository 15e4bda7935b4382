"""Pretty-print helpers for crossword grids and clue lists."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Sequence

from ..core.constants import EMPTY_CELL

if TYPE_CHECKING:
    from ..core.models import ClueGroups
    from ..engine.generator import CrosswordResult


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max(0, 3 * width - 1))
    for r, row in enumerate(grid):
        row_render = " ".join(f"{(letter if letter != EMPTY_CELL else '.'):>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(groups: ClueGroups) -> str:
    lines: List[str] = []
    for title, placements in (("Across", groups.across), ("Down", groups.down)):
        lines.append(title)
        if not placements:
            lines.append("  (none)")
        for placement in placements:
            lines.append(f"  {placement.number}. {placement.clue} ({placement.length})")
    return "\n".join(lines)


def pretty_print_puzzle(result: CrosswordResult, *, stream=None) -> None:
    """Print grid, clue lists and counts for a completed crossword."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)
    print(file=stream)
    print(format_clues(result.words), file=stream)

    filled = sum(1 for row in result.grid for letter in row if letter != EMPTY_CELL)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:     {result.size} x {result.size}", file=stream)
    print(f"  Letters:  {filled} ({filled / (result.size * result.size) * 100:.0f}%)", file=stream)
    print(f"  Words:    {len(result.words)} ({len(result.words.across)} across, {len(result.words.down)} down)", file=stream)
    if result.seed is not None:
        print(f"  Seed:     {result.seed}", file=stream)
