"""Single-piece falling-block engine for text consoles."""

from .errors import BlockfallError, OutOfBounds, UnknownKind
from .grid import EMPTY, FILL, WALL, Footprint, Grid, Position
from .pieces import CATALOG, PieceKind, PieceSpec, lookup
from .writer import clear_row_segment, read_region, shift_down, stamp
from .controller import ActivePiece, PieceController, PieceState
from .config import GameConfig
from .game_state import GameState
from .pacing import FramePacer
from .inputs import InputEvent, NullInput
from .render import ConsolePresenter, format_frame
from .loop import GameLoop

__all__ = [
    "BlockfallError",
    "OutOfBounds",
    "UnknownKind",
    "EMPTY",
    "FILL",
    "WALL",
    "Footprint",
    "Grid",
    "Position",
    "CATALOG",
    "PieceKind",
    "PieceSpec",
    "lookup",
    "clear_row_segment",
    "read_region",
    "shift_down",
    "stamp",
    "ActivePiece",
    "PieceController",
    "PieceState",
    "GameConfig",
    "GameState",
    "FramePacer",
    "InputEvent",
    "NullInput",
    "ConsolePresenter",
    "format_frame",
    "GameLoop",
]
