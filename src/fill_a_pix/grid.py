"""Picture grid storage for Fill-a-Pix puzzles.

Cells live in a dense row-major list. Positions outside the grid are never
stored but read as unshaded, hintless cells, so edge and corner neighborhoods
count the same way interior ones do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Point = Tuple[int, int]

# Signifies that a cell has no hint.
EMPTY = 10

# Cell states
UNSOLVED = "unsolved"
SHADED = "shaded"
UNSHADED = "unshaded"

STATES = (UNSOLVED, SHADED, UNSHADED)

# Manual edits cycle through the states in this order.
NEXT_STATE = {
    UNSOLVED: SHADED,
    SHADED: UNSHADED,
    UNSHADED: UNSOLVED,
}

NEIGHBORHOOD: Tuple[Point, ...] = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


@dataclass(frozen=True)
class Cell:
    state: str = UNSOLVED
    hint: int = EMPTY

    def __post_init__(self) -> None:
        if self.state not in STATES:
            raise ValueError(f"invalid cell state: {self.state!r}")
        if self.hint < 0:
            raise ValueError(f"hint must be non-negative (got {self.hint})")

    @property
    def has_hint(self) -> bool:
        return self.hint < EMPTY

    @property
    def is_solved(self) -> bool:
        return self.state != UNSOLVED

    def with_state(self, state: str) -> "Cell":
        return Cell(state=state, hint=self.hint)

    def cycled(self) -> "Cell":
        return self.with_state(NEXT_STATE[self.state])


BOUNDARY = Cell(UNSHADED, EMPTY)


@dataclass
class PictureGrid:
    width: int
    height: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"grid size must be non-negative (got {self.width}x{self.height})")
        size = self.width * self.height
        if not self.cells:
            self.cells = [Cell(UNSOLVED, EMPTY) for _ in range(size)]
        elif len(self.cells) != size:
            raise ValueError(f"expected {size} cells for a {self.width}x{self.height} grid, got {len(self.cells)}")

    @classmethod
    def from_hints(cls, width: int, height: int, hints: List[Optional[int]]) -> "PictureGrid":
        """Builds the starting grid, every cell unsolved with its hint.

        ``None`` and values at or above ``EMPTY`` mean the cell has no hint.
        """
        cells = [Cell(UNSOLVED, EMPTY if h is None or h >= EMPTY else h) for h in hints]
        if len(cells) != width * height:
            raise ValueError(f"expected {width * height} hints, got {len(cells)}")
        return cls(width, height, cells)

    # ---------- access ----------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            return BOUNDARY
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        if self.in_bounds(x, y):
            self.cells[y * self.width + x] = cell

    def set_unsolved(self, x: int, y: int, state: str) -> bool:
        """Resolves an unsolved cell to ``state`` keeping its hint.

        Solved and out-of-range cells are left alone; returns whether the cell
        changed.
        """
        if not self.in_bounds(x, y):
            return False
        cell = self.cells[y * self.width + x]
        if cell.is_solved:
            return False
        self.cells[y * self.width + x] = cell.with_state(state)
        return True

    # ---------- neighborhood ----------
    def neighborhood_counts(self, x: int, y: int) -> Tuple[int, int, int]:
        shaded = unshaded = unsolved = 0
        for dx, dy in NEIGHBORHOOD:
            state = self.get(x + dx, y + dy).state
            if state == SHADED:
                shaded += 1
            elif state == UNSHADED:
                unshaded += 1
            elif state == UNSOLVED:
                unsolved += 1
            else:
                raise RuntimeError(f"invalid cell state: {state}")
        return shaded, unshaded, unsolved

    def is_complete(self, x: int, y: int) -> bool:
        return self.neighborhood_counts(x, y)[2] == 0

    def _fill(self, x: int, y: int, state: str) -> int:
        changed = 0
        for dx, dy in NEIGHBORHOOD:
            if self.set_unsolved(x + dx, y + dy, state):
                changed += 1
        return changed

    def fill_shaded(self, x: int, y: int) -> int:
        return self._fill(x, y, SHADED)

    def fill_unshaded(self, x: int, y: int) -> int:
        return self._fill(x, y, UNSHADED)

    # ---------- summaries ----------
    def count(self, state: str) -> int:
        return sum(1 for c in self.cells if c.state == state)

    def copy(self) -> "PictureGrid":
        return PictureGrid(self.width, self.height, list(self.cells))

    def to_text(self) -> str:
        """One line per row: ``#`` shaded, ``.`` unshaded, hint or blank if unsolved."""
        lines = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                cell = self.get(x, y)
                if cell.state == SHADED:
                    chars.append("#")
                elif cell.state == UNSHADED:
                    chars.append(".")
                elif cell.state == UNSOLVED:
                    chars.append(str(cell.hint) if cell.has_hint else " ")
                else:
                    raise RuntimeError(f"invalid cell state: {cell.state}")
            lines.append("".join(chars))
        return "\n".join(lines)
