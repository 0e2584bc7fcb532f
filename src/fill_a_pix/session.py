"""Steppable solving session driven by a host loop.

The host calls ``tick()`` once per frame. While scanning, each tick checks at
most ``steps_per_tick`` hint cells so intermediate grids can be shown. The
final grid is the same whatever the step budget is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fill_a_pix.engine import deduce, next_incomplete
from fill_a_pix.grid import PictureGrid, Point

logger = logging.getLogger(__name__)

IDLE = "idle"
SCANNING = "scanning"


@dataclass
class SolveSession:
    grid: PictureGrid
    steps_per_tick: int = 1
    mode: str = IDLE
    cursor: Point = (0, 0)
    pass_dirty: bool = False
    passes: int = 0
    current: Optional[Point] = None

    def __post_init__(self) -> None:
        self.steps_per_tick = max(1, self.steps_per_tick)

    @property
    def solving(self) -> bool:
        return self.mode == SCANNING

    # ---------- controls ----------
    def toggle(self) -> None:
        if self.mode == IDLE:
            self.mode = SCANNING
            self.cursor = (0, 0)
            self.pass_dirty = False
            self.passes = 1
            logger.info("solving started")
            return

        if self.mode == SCANNING:
            self.mode = IDLE
            self.current = None
            logger.info("solving stopped at %s", self.cursor)
            return

        raise RuntimeError(f"invalid session mode: {self.mode}")

    def increase_steps(self) -> None:
        self.steps_per_tick += 1

    def decrease_steps(self) -> None:
        self.steps_per_tick = max(1, self.steps_per_tick - 1)

    def edit_cell(self, x: int, y: int) -> bool:
        """Cycles a cell unsolved -> shaded -> unshaded -> unsolved.

        Edits are refused while scanning and outside the grid.
        """
        if self.solving or not self.grid.in_bounds(x, y):
            return False
        self.grid.set(x, y, self.grid.get(x, y).cycled())
        return True

    # ---------- stepping ----------
    def tick(self) -> int:
        """Advances up to ``steps_per_tick`` steps; returns the steps taken."""
        steps = 0
        while self.solving and steps < self.steps_per_tick:
            self._step()
            steps += 1
        return steps

    def _step(self) -> None:
        x, y, cell = next_incomplete(self.grid, *self.cursor)
        if cell is not None:
            self.current = (x, y)
            changed = deduce(self.grid, x, y)
            logger.debug("checked (%d, %d) hint=%d changed=%d", x, y, cell.hint, changed)
            self.pass_dirty = self.pass_dirty or changed > 0
            x += 1
            if x >= self.grid.width:
                x = 0
                y += 1
            self.cursor = (x, y)
            if y < self.grid.height:
                return

        # Past the last cell: start over if this pass changed anything.
        if self.pass_dirty:
            self.cursor = (0, 0)
            self.pass_dirty = False
            self.passes += 1
            return

        self.mode = IDLE
        self.cursor = (0, 0)
        self.current = None
        logger.info("fixpoint reached after %d passes", self.passes)

    # ---------- display ----------
    def status_lines(self) -> List[str]:
        lines = [
            "Press 'x' to stop solving" if self.solving else "Press 'x' to start solving",
            f"Steps per tick: {self.steps_per_tick} (+/- to change)",
        ]
        if self.solving:
            lines.append(f"Pass #{self.passes}")
            if self.current is not None:
                lines.append(f"Checking cell {self.current}")
        else:
            lines.append("Click a cell to change it")
        return lines
