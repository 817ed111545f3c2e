"""Active piece controller: spawning, gravity and collision.

The controller tracks a single falling piece.  Every gravity step first runs a
bounding-box collision test against the row directly below the piece; when
that row holds a wall or fill marker the piece lands and never moves again.

The collision test deliberately looks at the whole width of the bounding box
rather than at the piece's filled cells.  Non-rectangular shapes (Z, T, L) can
therefore report a collision underneath one of their empty footprint cells.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from .errors import OutOfBounds
from .grid import FILL, WALL, Footprint, Grid, Position
from .pieces import PieceKind, lookup
from .writer import shift_down, stamp


LOGGER = logging.getLogger(__name__)

# Seconds between gravity steps.
GRAVITY_INTERVAL = 0.1

BLOCKING = frozenset({FILL, WALL})


class PieceState(str, Enum):
    FALLING = "falling"
    LANDED = "landed"


@dataclass
class ActivePiece:
    """The single piece currently controlled by the player."""

    kind: PieceKind
    position: Position
    footprint: Footprint

    @property
    def bottom_row(self) -> int:
        """Row index of the piece's lowest bounding-box row."""

        return self.position.row + self.footprint.height - 1


def spawn_position(grid: Grid) -> Position:
    """Return the spawn coordinate: horizontally centred on the top row."""

    return Position(grid.width // 2 - 1, 0)


class PieceController:
    """Drive one piece down ``grid`` on a fixed cadence.

    ``grid`` belongs to the host; the controller reads and writes it only
    inside its own calls and caches no cell data between them.  ``clock``
    returns the current time in seconds and defaults to
    :func:`time.perf_counter`; tests pass a fake clock to step time manually.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        interval: float = GRAVITY_INTERVAL,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if interval < 0:
            raise ValueError(f"Gravity interval must not be negative, got {interval}")
        self.grid = grid
        self.interval = interval
        self._clock = clock or time.perf_counter
        self._last_step = 0.0
        self.active: Optional[ActivePiece] = None
        self.state: Optional[PieceState] = None

    @property
    def landed(self) -> bool:
        return self.state is PieceState.LANDED

    def _require_active(self) -> ActivePiece:
        if self.active is None:
            raise RuntimeError("No active piece; call spawn() first")
        return self.active

    def spawn(self, kind: Union[PieceKind, str]) -> ActivePiece:
        """Place a new piece of ``kind`` at the spawn position.

        Raises:
            UnknownKind: If ``kind`` is not in the catalog.
            OutOfBounds: If the piece does not fit at the spawn position or
                would cover a wall cell.
            RuntimeError: If a piece has already been spawned.
        """

        if self.active is not None:
            raise RuntimeError("A piece is already active")
        spec = lookup(kind)
        position = spawn_position(self.grid)
        if not self.grid.region_fits(position, spec.footprint):
            raise OutOfBounds(
                f"{spec.kind.value} piece ({spec.width}x{spec.height}) does not fit "
                f"at ({position.column}, {position.row}) on a "
                f"{self.grid.width}x{self.grid.height} grid"
            )
        for dc in range(spec.width):
            for dr in range(spec.height):
                if self.grid.is_wall(position.column + dc, position.row + dr):
                    raise OutOfBounds(
                        f"{spec.kind.value} piece would cover wall cell "
                        f"({position.column + dc}, {position.row + dr})"
                    )

        stamp(self.grid, spec.pattern, spec.footprint, position)
        self.active = ActivePiece(spec.kind, position, spec.footprint)
        self.state = PieceState.FALLING
        self._last_step = self._clock()
        LOGGER.info(
            "Spawned %s piece at (%d, %d)", spec.kind.value, position.column, position.row
        )
        return self.active

    def is_blocked(self) -> bool:
        """Return ``True`` if the row beneath the bounding box is obstructed.

        Only the row ``position.row + footprint.height`` is inspected, across
        the full width of the footprint.  A row past the bottom of the grid
        counts as obstructed.
        """

        piece = self._require_active()
        below = piece.bottom_row + 1
        if below >= self.grid.height:
            return True
        for column in range(piece.position.column, piece.position.column + piece.footprint.width):
            if self.grid.get_cell(column, below) in BLOCKING:
                return True
        return False

    def advance(self) -> bool:
        """Move the piece down one row unless it is blocked.

        Returns ``True`` if the piece moved.  Once blocked the piece is landed
        and further calls leave the grid and position untouched.
        """

        piece = self._require_active()
        if self.state is PieceState.LANDED:
            return False
        if self.is_blocked():
            self.state = PieceState.LANDED
            LOGGER.info(
                "%s piece landed at (%d, %d)",
                piece.kind.value,
                piece.position.column,
                piece.position.row,
            )
            return False

        shift_down(self.grid, piece.position, piece.footprint)
        piece.position = piece.position.moved(rows=1)
        LOGGER.debug("%s piece moved to row %d", piece.kind.value, piece.position.row)
        return True

    def update(self) -> bool:
        """Run one gravity step if at least ``interval`` seconds have passed."""

        if self.active is None or self.state is PieceState.LANDED:
            return False
        now = self._clock()
        if now - self._last_step < self.interval:
            return False
        self._last_step = now
        return self.advance()

    def process_input(self, events: Iterable[object]) -> None:
        """Input hook; events are accepted but do not move the piece."""

    def reset(self) -> None:
        """Forget the active piece and gravity timer."""

        self.active = None
        self.state = None
        self._last_step = 0.0


__all__ = [
    "GRAVITY_INTERVAL",
    "ActivePiece",
    "PieceController",
    "PieceState",
    "spawn_position",
]
