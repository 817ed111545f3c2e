"""Exception types raised by the blockfall engine."""

from __future__ import annotations


class BlockfallError(Exception):
    """Base class for all engine errors."""


class UnknownKind(BlockfallError, KeyError):
    """Raised when a piece kind is not part of the catalog."""

    def __init__(self, kind: object) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown piece kind: {self.kind!r}"


class OutOfBounds(BlockfallError, IndexError):
    """Raised when an operation would touch a cell outside the grid.

    This always indicates a configuration or caller bug, e.g. a spawn position
    too close to an edge for the piece footprint.  Operations raising it leave
    the grid untouched.
    """


__all__ = ["BlockfallError", "UnknownKind", "OutOfBounds"]
