"""Fixed-rate driver tying pacing, input, gravity and rendering together."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from .game_state import GameState
from .inputs import InputEvent, NullInput
from .pacing import FramePacer


LOGGER = logging.getLogger(__name__)


class Presenter(Protocol):
    def present(self, cells: Sequence[str], width: int, height: int) -> None:
        ...


class Pacer(Protocol):
    def wait(self) -> float:
        ...

    def reset(self) -> None:
        ...


class InputSource(Protocol):
    def poll(self) -> List[InputEvent]:
        ...


class GameLoop:
    """Run ``pace -> input -> update -> render`` once per tick.

    Any exception raised by the engine or a collaborator stops the loop and is
    re-raised to the caller; there is no degraded mode.
    """

    def __init__(
        self,
        state: GameState,
        presenter: Presenter,
        *,
        pacer: Optional[Pacer] = None,
        input_source: Optional[InputSource] = None,
    ) -> None:
        self.state = state
        self.presenter = presenter
        self.pacer = pacer or FramePacer(state.config.fps)
        self.input_source = input_source or NullInput()
        self.running = False
        self.ticks = 0

    def tick(self) -> None:
        self.pacer.wait()
        events = self.input_source.poll()
        self.state.controller.process_input(events)
        self.state.controller.update()
        grid = self.state.grid
        self.presenter.present(grid.export(), grid.width, grid.height)
        self.ticks += 1

    def stop(self) -> None:
        self.running = False

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run until :meth:`stop` is called or ``max_ticks`` ticks have passed.

        Returns the number of ticks executed by this call.
        """

        if max_ticks is None:
            max_ticks = self.state.config.max_ticks
        self.running = True
        start = self.ticks
        LOGGER.info("Game loop started")
        try:
            if self.state.active is None:
                self.state.reset_game()
            # Frame timing restarts with every run.
            self.pacer.reset()
            while self.running and (max_ticks is None or self.ticks - start < max_ticks):
                self.tick()
        except Exception:
            LOGGER.exception("Game loop halted after %d ticks", self.ticks - start)
            raise
        finally:
            self.running = False
        LOGGER.info("Game loop stopped after %d ticks", self.ticks - start)
        return self.ticks - start


__all__ = ["GameLoop", "InputSource", "Pacer", "Presenter"]
