"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import GameConfig
from .controller import ActivePiece, PieceController
from .grid import Grid


@dataclass
class GameState:
    """Owns the playfield and the controller driving its single piece."""

    config: GameConfig = field(default_factory=GameConfig)
    clock: Optional[Callable[[], float]] = None
    grid: Grid = field(init=False)
    controller: PieceController = field(init=False)

    def __post_init__(self) -> None:
        self.grid = Grid(self.config.width, self.config.height)
        self.controller = PieceController(
            self.grid, interval=self.config.interval, clock=self.clock
        )

    @property
    def active(self) -> Optional[ActivePiece]:
        return self.controller.active

    @property
    def landed(self) -> bool:
        return self.controller.landed

    def reset_game(self) -> ActivePiece:
        """Repaint the walls and spawn the configured piece.

        Errors from spawning (unknown kind, piece too large for the grid)
        propagate to the caller.
        """

        self.controller.reset()
        self.grid.paint_border()
        return self.controller.spawn(self.config.piece)
