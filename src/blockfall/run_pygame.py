"""Simple pygame front-end for the blockfall engine.

The grid buffer is drawn as one coloured square per cell.  Window events are
pumped every tick so the window stays responsive; closing the window stops the
loop, while key presses are forwarded to the controller's input hook, which
ignores them.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pygame

from .config import GameConfig
from .game_state import GameState
from .grid import EMPTY, FILL, WALL
from .inputs import InputEvent
from .loop import GameLoop


LOGGER = logging.getLogger(__name__)

# Colours for each cell character
CELL_COLORS = {
    EMPTY: (0, 0, 0),
    WALL: (110, 110, 110),
    FILL: (0, 200, 255),
}
GRID_LINE_COLOR = (40, 40, 40)


class PygamePresenter:
    """Render the flat grid buffer onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, cell_size: int) -> None:
        self.screen = screen
        self.cell_size = cell_size

    def present(self, cells: Sequence[str], width: int, height: int) -> None:
        size = self.cell_size
        self.screen.fill(CELL_COLORS[EMPTY])
        for index, char in enumerate(cells):
            row, column = divmod(index, width)
            rect = pygame.Rect(column * size, row * size, size, size)
            pygame.draw.rect(self.screen, CELL_COLORS[char], rect)
            pygame.draw.rect(self.screen, GRID_LINE_COLOR, rect, 1)
        pygame.display.flip()


class PygameInput:
    """Poll the pygame event queue once per tick."""

    def __init__(self, loop: Optional[GameLoop] = None) -> None:
        self.loop = loop

    def poll(self) -> List[InputEvent]:
        events: List[InputEvent] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                LOGGER.info("Window closed")
                if self.loop is not None:
                    self.loop.stop()
            elif event.type == pygame.KEYDOWN:
                events.append(InputEvent(pygame.key.name(event.key)))
        return events


class ClockPacer:
    """Frame pacing backed by :class:`pygame.time.Clock`."""

    def __init__(self, fps: int) -> None:
        self.fps = fps
        self._clock = pygame.time.Clock()

    def reset(self) -> None:
        self._clock = pygame.time.Clock()

    def wait(self) -> float:
        return self._clock.tick(self.fps) / 1000.0


def run(config: GameConfig) -> int:
    """Open a window sized to the grid and run the game loop in it."""

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (config.width * config.cell_size, config.height * config.cell_size)
        )
        pygame.display.set_caption("Blockfall")
        state = GameState(config)
        input_source = PygameInput()
        loop = GameLoop(
            state,
            PygamePresenter(screen, config.cell_size),
            pacer=ClockPacer(config.fps),
            input_source=input_source,
        )
        input_source.loop = loop
        return loop.run()
    finally:
        pygame.quit()


__all__ = ["ClockPacer", "PygameInput", "PygamePresenter", "run"]
