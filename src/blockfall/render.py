"""Text console presentation of the grid buffer."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

# Move the cursor to the top-left corner so each frame overwrites the last.
CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
# Switch to a dedicated screen buffer and hide the cursor while playing.
ENTER_SCREEN = "\x1b[?1049h\x1b[?25l"
# Show the cursor and restore the original screen contents.
LEAVE_SCREEN = "\x1b[?25h\x1b[?1049l"


def format_frame(cells: Sequence[str], width: int, height: int) -> str:
    """Join a flat row-major buffer into newline separated rows."""

    if len(cells) != width * height:
        raise ValueError(
            f"Buffer holds {len(cells)} cells, expected {width}x{height}"
        )
    rows: List[str] = [
        "".join(cells[row * width:(row + 1) * width]) for row in range(height)
    ]
    return "\n".join(rows)


class ConsolePresenter:
    """Write each frame to a text stream using ANSI cursor positioning.

    Used as a context manager the presenter acquires the terminal's alternate
    screen on entry and restores the original screen on exit, including when
    the game loop is interrupted or fails.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, ansi: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.ansi = ansi
        self.frames = 0
        self.is_open = False

    def open(self) -> "ConsolePresenter":
        if not self.is_open:
            if self.ansi:
                self.stream.write(ENTER_SCREEN)
                self.stream.flush()
            self.is_open = True
        return self

    def close(self) -> None:
        if self.is_open:
            if self.ansi:
                self.stream.write(LEAVE_SCREEN)
                self.stream.flush()
            self.is_open = False

    def __enter__(self) -> "ConsolePresenter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def present(self, cells: Sequence[str], width: int, height: int) -> None:
        frame = format_frame(cells, width, height)
        if self.ansi:
            prefix = CLEAR_SCREEN + CURSOR_HOME if self.frames == 0 else CURSOR_HOME
        else:
            prefix = ""
        self.stream.write(prefix + frame + "\n")
        self.stream.flush()
        self.frames += 1


__all__ = ["ConsolePresenter", "format_frame"]
