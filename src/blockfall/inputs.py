"""Input sources polled once per game tick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class InputEvent:
    """A discrete input event, e.g. a key press."""

    name: str


class NullInput:
    """Input source that never reports any events."""

    def poll(self) -> List[InputEvent]:
        return []


__all__ = ["InputEvent", "NullInput"]
