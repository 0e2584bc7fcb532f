"""Constraint propagation for Fill-a-Pix.

One local rule, applied cell by cell until nothing changes:
- a hint already met by shaded neighbors leaves every unsolved neighbor unshaded;
- a hint only reachable by shading every unsolved neighbor shades them all.

No search is done. Puzzles that need more than this stop at a fixpoint with
some cells still unsolved.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from fill_a_pix.grid import UNSOLVED, Cell, PictureGrid

logger = logging.getLogger(__name__)


def deduce(grid: PictureGrid, x: int, y: int) -> int:
    """Applies the rule to the hint at (x, y); returns the number of cells resolved."""
    cell = grid.get(x, y)
    if not cell.has_hint:
        return 0
    shaded, _, unsolved = grid.neighborhood_counts(x, y)
    if unsolved == 0:
        return 0
    if cell.hint == shaded:
        return grid.fill_unshaded(x, y)
    if cell.hint == shaded + unsolved:
        return grid.fill_shaded(x, y)
    return 0


def run_pass(grid: PictureGrid) -> int:
    changed = 0
    for y in range(grid.height):
        for x in range(grid.width):
            changed += deduce(grid, x, y)
    return changed


def solve(grid: PictureGrid) -> int:
    """Runs passes until one changes nothing; returns the number of productive passes."""
    passes = 0
    while True:
        changed = run_pass(grid)
        logger.debug("pass #%d resolved %d cells", passes + 1, changed)
        if changed == 0:
            break
        passes += 1

    logger.info(
        "fixpoint after %d passes, %d cells unsolved",
        passes,
        grid.count(UNSOLVED),
    )
    return passes


def next_incomplete(grid: PictureGrid, x: int, y: int) -> Tuple[int, int, Optional[Cell]]:
    """Finds the next hint at or after (x, y) whose neighborhood is not resolved yet.

    Scans in row-major order up to the end of the grid without wrapping. When
    nothing qualifies the starting position is returned with ``None``.
    """
    if grid.width == 0:
        return x, y, None
    for idx in range(max(0, y * grid.width + x), grid.width * grid.height):
        cx, cy = idx % grid.width, idx // grid.width
        cell = grid.get(cx, cy)
        if cell.has_hint and not grid.is_complete(cx, cy):
            return cx, cy, cell
    return x, y, None
