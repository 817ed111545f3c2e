"""Helpers that write piece patterns into a :class:`~blockfall.grid.Grid`.

All functions validate the complete target rectangle before mutating the grid,
so a failing call never leaves a half-written piece behind.
"""

from __future__ import annotations

import numpy as np

from .errors import OutOfBounds
from .grid import CHARACTERS, EMPTY, Footprint, Grid, Position


def _require_region(grid: Grid, position: Position, footprint: Footprint) -> None:
    if footprint.width < 0 or footprint.height < 0:
        raise ValueError(f"Negative footprint: {footprint}")
    if not grid.region_fits(position, footprint):
        raise OutOfBounds(
            f"{footprint.width}x{footprint.height} region at "
            f"({position.column}, {position.row}) exceeds "
            f"{grid.width}x{grid.height} grid"
        )


def stamp(grid: Grid, pattern: str, footprint: Footprint, position: Position) -> None:
    """Copy ``pattern`` onto ``grid`` with its top-left corner at ``position``.

    Cell ``(col, row)`` of the footprint receives
    ``pattern[col + row * footprint.width]``.  Existing cells are overwritten
    unconditionally, empty markers included.

    Raises:
        ValueError: If the pattern length does not match the footprint or it
            contains characters outside the grid vocabulary.
        OutOfBounds: If the footprint does not fit on the grid at ``position``.
    """

    if len(pattern) != footprint.area:
        raise ValueError(
            f"Pattern of {len(pattern)} cells does not match "
            f"{footprint.width}x{footprint.height} footprint"
        )
    if set(pattern) - CHARACTERS:
        raise ValueError(f"Pattern contains unsupported characters: {pattern!r}")
    _require_region(grid, position, footprint)
    if footprint.area == 0:
        return

    block = np.array(list(pattern), dtype="<U1").reshape(footprint.height, footprint.width)
    grid.cells[
        position.row:position.row + footprint.height,
        position.column:position.column + footprint.width,
    ] = block


def read_region(grid: Grid, position: Position, footprint: Footprint) -> str:
    """Return the characters of a rectangle in row-major order."""

    _require_region(grid, position, footprint)
    block = grid.cells[
        position.row:position.row + footprint.height,
        position.column:position.column + footprint.width,
    ]
    return "".join(block.ravel().tolist())


def clear_row_segment(grid: Grid, position: Position, width: int) -> None:
    """Write empty markers across ``width`` cells of the row at ``position``."""

    _require_region(grid, position, Footprint(width, 1))
    grid.cells[position.row, position.column:position.column + width] = EMPTY


def shift_down(grid: Grid, position: Position, footprint: Footprint) -> None:
    """Move the bounding box at ``position`` down by one row.

    Rows are copied bottom row first so that no row is overwritten before it
    has been moved.  The vacated top row of the original box is cleared.

    Raises:
        OutOfBounds: If the shifted box would extend past the grid.
    """

    _require_region(grid, position, footprint)
    _require_region(grid, position.moved(rows=1), footprint)

    left = position.column
    right = position.column + footprint.width
    for offset in range(footprint.height - 1, -1, -1):
        row = position.row + offset
        grid.cells[row + 1, left:right] = grid.cells[row, left:right]
    clear_row_segment(grid, position, footprint.width)


__all__ = ["clear_row_segment", "read_region", "shift_down", "stamp"]
