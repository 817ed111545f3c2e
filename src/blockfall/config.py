"""Game configuration defaults."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from .controller import GRAVITY_INTERVAL
from .pieces import PieceKind, parse_kind


# Dimensions of the playfield, walls included.
WIDTH = 12
HEIGHT = 18
# Frames per second to run the game loop at
FPS = 60
# Size of a single cell in pixels for the pygame front-end
CELL_SIZE = 24

DEFAULT_PIECE = PieceKind.SQUARE


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game session."""

    width: int = WIDTH
    height: int = HEIGHT
    piece: PieceKind = DEFAULT_PIECE
    fps: int = FPS
    interval: float = GRAVITY_INTERVAL
    cell_size: int = CELL_SIZE
    max_ticks: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.interval < 0:
            raise ValueError(f"interval must not be negative, got {self.interval}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.max_ticks is not None and self.max_ticks < 0:
            raise ValueError(f"max_ticks must not be negative, got {self.max_ticks}")
        # Accept plain strings so callers can pass CLI values straight through.
        object.__setattr__(self, "piece", parse_kind(self.piece))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        return cls(
            width=args.width,
            height=args.height,
            piece=args.piece,
            fps=args.fps,
            interval=args.interval,
            cell_size=args.cell_size,
            max_ticks=args.ticks,
        )


__all__ = ["CELL_SIZE", "DEFAULT_PIECE", "FPS", "HEIGHT", "WIDTH", "GameConfig"]
