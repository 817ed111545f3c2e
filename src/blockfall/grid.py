"""Grid representation for the blockfall playfield."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import OutOfBounds


# Character vocabulary of the playfield.
WALL = "#"
EMPTY = " "
FILL = "@"
CHARACTERS = frozenset({WALL, EMPTY, FILL})

Cells = NDArray[np.str_]


@dataclass(frozen=True)
class Position:
    """Top-left ``(column, row)`` of a rectangle on the grid."""

    column: int
    row: int

    def moved(self, columns: int = 0, rows: int = 0) -> "Position":
        return Position(self.column + columns, self.row + rows)


@dataclass(frozen=True)
class Footprint:
    """``(width, height)`` bounding box of a piece pattern."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


def create_empty_cells(width: int, height: int) -> Cells:
    """Return a new ``(height, width)`` character array of empty cells."""

    return np.full((height, width), EMPTY, dtype="<U1")


class Grid:
    """Fixed-size playfield of display characters.

    Cells are addressed as ``(column, row)`` with ``(0, 0)`` in the top-left
    corner.  Every accessor validates its coordinates and raises
    :class:`~blockfall.errors.OutOfBounds` instead of touching memory outside
    the buffer.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self.cells: Cells = create_empty_cells(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._width * self._height

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    # Bounds -------------------------------------------------------------
    def contains(self, column: int, row: int) -> bool:
        return 0 <= column < self._width and 0 <= row < self._height

    def region_fits(self, position: Position, footprint: Footprint) -> bool:
        """Return ``True`` if the rectangle lies completely on the grid."""

        return (
            position.column >= 0
            and position.row >= 0
            and position.column + footprint.width <= self._width
            and position.row + footprint.height <= self._height
        )

    def _check(self, column: int, row: int) -> None:
        if not self.contains(column, row):
            raise OutOfBounds(
                f"Cell ({column}, {row}) outside {self._width}x{self._height} grid"
            )

    # Addressing ---------------------------------------------------------
    def cell_index(self, column: int, row: int) -> int:
        """Return the flat row-major offset of ``(column, row)``.

        Raises:
            OutOfBounds: If the coordinates are outside the grid.
        """

        self._check(column, row)
        return column + row * self._width

    def cell_coords(self, index: int) -> Tuple[int, int]:
        """Inverse of :meth:`cell_index`."""

        if not 0 <= index < len(self):
            raise OutOfBounds(f"Index {index} outside buffer of {len(self)} cells")
        row, column = divmod(index, self._width)
        return column, row

    # Cell access --------------------------------------------------------
    def get_cell(self, column: int, row: int) -> str:
        """Safely return the character at ``(column, row)``.

        Raises:
            OutOfBounds: If the coordinates are outside the grid.
        """

        self._check(column, row)
        return str(self.cells[row, column])

    def set_cell(self, column: int, row: int, char: str) -> None:
        """Safely set the character at ``(column, row)``.

        Raises:
            OutOfBounds: If the coordinates are outside the grid.
            ValueError: If ``char`` is not part of the playfield vocabulary.
        """

        self._check(column, row)
        if char not in CHARACTERS:
            raise ValueError(f"Unsupported cell character: {char!r}")
        self.cells[row, column] = char

    def is_wall(self, column: int, row: int) -> bool:
        return self.get_cell(column, row) == WALL

    # Border -------------------------------------------------------------
    def paint_border(self, top: bool = False) -> None:
        """Reset the grid and paint the static walls.

        The left column, right column and bottom row always become walls; the
        top row does too when ``top`` is set.  Every other cell is emptied.
        """

        self.cells[:, :] = EMPTY
        self.cells[:, 0] = WALL
        self.cells[:, -1] = WALL
        self.cells[-1, :] = WALL
        if top:
            self.cells[0, :] = WALL

    def wall_cells(self) -> Set[Tuple[int, int]]:
        """Return the ``(column, row)`` coordinates currently holding walls."""

        rows, columns = np.nonzero(self.cells == WALL)
        return {(int(c), int(r)) for r, c in zip(rows, columns)}

    # Export -------------------------------------------------------------
    def export(self) -> Tuple[str, ...]:
        """Return a flat row-major snapshot of the buffer.

        The snapshot holds exactly ``width * height`` characters and is
        independent of the grid, so presenters cannot mutate the playfield.
        """

        return tuple(str(ch) for ch in self.cells.ravel())

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells.tolist()]


__all__ = [
    "CHARACTERS",
    "EMPTY",
    "FILL",
    "WALL",
    "Footprint",
    "Grid",
    "Position",
    "create_empty_cells",
]
