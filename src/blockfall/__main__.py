"""Console demo for the blockfall engine.

Run with: `python -m blockfall`

A single piece spawns at the top of a walled playfield and falls until it
rests on the floor.  The frame keeps redrawing afterwards; press Ctrl+C to
quit, or pass ``--ticks`` to stop after a fixed number of frames.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import CELL_SIZE, DEFAULT_PIECE, FPS, HEIGHT, WIDTH, GameConfig
from .controller import GRAVITY_INTERVAL
from .errors import OutOfBounds, UnknownKind
from .game_state import GameState
from .loop import GameLoop
from .pieces import PieceKind
from .render import ConsolePresenter


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Grid width in cells, walls included.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Grid height in cells, floor included.")
    parser.add_argument(
        "--piece",
        default=DEFAULT_PIECE.value,
        help=f"Piece kind to drop ({', '.join(k.value for k in PieceKind)}).",
    )
    parser.add_argument("--fps", type=int, default=FPS, help="Frames per second.")
    parser.add_argument(
        "--interval",
        type=float,
        default=GRAVITY_INTERVAL,
        help="Seconds between gravity steps.",
    )
    parser.add_argument("--ticks", type=int, default=None, help="Stop after N frames.")
    parser.add_argument(
        "--frontend",
        choices=("console", "pygame"),
        default="console",
        help="Where to draw the playfield.",
    )
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Pixel size of a cell (pygame).")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    args = parser.parse_args(argv)
    try:
        args.config = GameConfig.from_args(args)
        # Spawn once on a scratch grid so a piece that can never fit is
        # reported as a usage error.
        GameState(args.config).reset_game()
    except (UnknownKind, OutOfBounds, ValueError) as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    # Log to stderr so messages do not interleave with frames on stdout.
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config: GameConfig = args.config

    try:
        if args.frontend == "pygame":
            from .run_pygame import run

            run(config)
        else:
            with ConsolePresenter() as presenter:
                GameLoop(GameState(config), presenter).run()
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")


if __name__ == "__main__":
    main()
