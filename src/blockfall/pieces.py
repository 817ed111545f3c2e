"""Piece catalog.

Each piece kind maps to a fixed character pattern and footprint.  Patterns are
stored row-major as a flat string of fill (``@``) and empty (space) markers,
which is exactly what :func:`blockfall.writer.stamp` copies onto the grid.
Catalog entries are immutable and shared by every consumer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union

from .errors import UnknownKind
from .grid import EMPTY, FILL, Footprint


class PieceKind(str, Enum):
    """Enumeration of the five catalog shapes."""

    SQUARE = "square"
    Z = "z"
    T = "t"
    L = "l"
    LINE = "line"


@dataclass(frozen=True)
class PieceSpec:
    """Pattern and footprint of one piece kind."""

    kind: PieceKind
    pattern: str
    footprint: Footprint

    def __post_init__(self) -> None:
        if len(self.pattern) != self.footprint.area:
            raise ValueError(
                f"Pattern for {self.kind.value} has {len(self.pattern)} cells, "
                f"expected {self.footprint.width}x{self.footprint.height}"
            )
        if set(self.pattern) - {FILL, EMPTY}:
            raise ValueError(f"Pattern for {self.kind.value} uses unknown markers")

    @property
    def width(self) -> int:
        return self.footprint.width

    @property
    def height(self) -> int:
        return self.footprint.height

    def rows(self) -> List[str]:
        w = self.footprint.width
        return [self.pattern[r * w:(r + 1) * w] for r in range(self.footprint.height)]

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(column, row)`` offsets of the filled cells."""

        w = self.footprint.width
        return [(i % w, i // w) for i, ch in enumerate(self.pattern) if ch == FILL]


def _spec(kind: PieceKind, *rows: str) -> PieceSpec:
    return PieceSpec(kind, "".join(rows), Footprint(len(rows[0]), len(rows)))


CATALOG: Dict[PieceKind, PieceSpec] = {
    PieceKind.SQUARE: _spec(PieceKind.SQUARE, "@@", "@@"),
    PieceKind.Z: _spec(PieceKind.Z, "@@@  ", "  @@@"),
    PieceKind.T: _spec(PieceKind.T, "  @  ", "@@@@@"),
    PieceKind.L: _spec(PieceKind.L, "@   ", "@@@@"),
    PieceKind.LINE: _spec(PieceKind.LINE, "@", "@", "@"),
}


def parse_kind(kind: Union[PieceKind, str]) -> PieceKind:
    """Return the :class:`PieceKind` for ``kind``.

    Members are returned unchanged; strings match either the value or the
    member name, ignoring case.

    Raises:
        UnknownKind: If ``kind`` does not name a catalog piece.
    """

    if isinstance(kind, PieceKind):
        return kind
    if isinstance(kind, str):
        key = kind.strip().lower()
        for member in PieceKind:
            if key in (member.value, member.name.lower()):
                return member
    raise UnknownKind(kind)


def lookup(kind: Union[PieceKind, str]) -> PieceSpec:
    """Return the immutable catalog entry for ``kind``."""

    return CATALOG[parse_kind(kind)]


__all__ = ["CATALOG", "PieceKind", "PieceSpec", "lookup", "parse_kind"]
