"""Fixed-rate frame pacing."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .config import FPS

# Granularity of the busy-wait between frames, in seconds.
SLEEP_SLICE = 0.001


class FramePacer:
    """Block until one frame interval has elapsed since the previous frame.

    The previous tick time is held on the instance so several pacers (or a
    restarted loop) never share timing state.
    """

    def __init__(
        self,
        fps: int = FPS,
        *,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.frame_time = 1.0 / fps
        self._clock = clock or time.perf_counter
        self._sleep = sleep or time.sleep
        self._previous: Optional[float] = None

    def reset(self) -> None:
        self._previous = None

    def wait(self) -> float:
        """Sleep until the frame interval has passed and return the elapsed time.

        The first call only records the start time and returns ``0.0``.
        """

        if self._previous is None:
            self._previous = self._clock()
            return 0.0
        while self._clock() - self._previous < self.frame_time:
            self._sleep(SLEEP_SLICE)
        now = self._clock()
        elapsed = now - self._previous
        self._previous = now
        return elapsed


__all__ = ["FramePacer", "SLEEP_SLICE"]
