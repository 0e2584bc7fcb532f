"""Puzzle file loading.

A puzzle is a JSON object with ``width``, ``height`` and either

- ``cells``: row-major list of tagged states such as ``{"Unsolved": 4}``,
  ``{"Shaded": 10}`` or ``{"Unshaded": 0}``, or
- ``hints``: row-major list of hint values, ``null`` for cells without a hint.

Hints at or above ``EMPTY`` mean "no hint". Each failure class has its own
exit status so the CLI can report it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from fill_a_pix.grid import EMPTY, SHADED, UNSHADED, UNSOLVED, Cell, PictureGrid

logger = logging.getLogger(__name__)

TAGS = {
    "Unsolved": UNSOLVED,
    "Shaded": SHADED,
    "Unshaded": UNSHADED,
}


class PuzzleError(Exception):
    exit_code = 1


class PuzzleIOError(PuzzleError):
    exit_code = 3


class PuzzleSyntaxError(PuzzleError):
    exit_code = 4


class PuzzleSchemaError(PuzzleError):
    exit_code = 5


class PuzzleTruncatedError(PuzzleError):
    exit_code = 6


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _hint(value: object, idx: int) -> int:
    if value is None:
        return EMPTY
    if not _is_int(value):
        raise PuzzleSchemaError(f"cell {idx}: hint must be an integer or null, got {value!r}")
    if value < 0:
        raise PuzzleSchemaError(f"cell {idx}: hint must be non-negative, got {value}")
    return min(value, EMPTY)


def _tagged_cell(value: object, idx: int) -> Cell:
    if not isinstance(value, dict) or len(value) != 1:
        raise PuzzleSchemaError(f"cell {idx}: expected one of {sorted(TAGS)} with a hint, got {value!r}")
    tag, hint = next(iter(value.items()))
    if tag not in TAGS:
        raise PuzzleSchemaError(f"cell {idx}: unknown state {tag!r}")
    return Cell(TAGS[tag], _hint(hint, idx))


def parse_puzzle(text: str) -> PictureGrid:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PuzzleSyntaxError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise PuzzleSchemaError("puzzle must be a JSON object")

    width = data.get("width")
    height = data.get("height")
    if not _is_int(width) or not _is_int(height) or width < 0 or height < 0:
        raise PuzzleSchemaError(f"width/height must be non-negative integers (got {width!r}, {height!r})")

    if "cells" in data:
        entries = data["cells"]
    elif "hints" in data:
        entries = data["hints"]
    else:
        raise PuzzleSchemaError("puzzle needs a 'cells' or 'hints' list")
    if not isinstance(entries, list):
        raise PuzzleSchemaError("'cells'/'hints' must be a list")

    size = width * height
    if len(entries) < size:
        raise PuzzleTruncatedError(f"expected {size} cells, got only {len(entries)}")
    if len(entries) > size:
        raise PuzzleSchemaError(f"expected {size} cells, got {len(entries)}")

    cells: List[Cell]
    if "cells" in data:
        cells = [_tagged_cell(v, i) for i, v in enumerate(entries)]
    else:
        cells = [Cell(UNSOLVED, _hint(v, i)) for i, v in enumerate(entries)]
    return PictureGrid(width, height, cells)


def load_puzzle(path: Union[str, Path]) -> PictureGrid:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise PuzzleIOError(f"cannot read {path}: {e}") from e
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PuzzleSyntaxError(f"{path} is not UTF-8 text: {e}") from e

    grid = parse_puzzle(text)
    logger.info("loaded %s (%dx%d)", path, grid.width, grid.height)
    return grid
