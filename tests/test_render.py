import io

import pytest

from blockfall.grid import Grid
from blockfall.render import (
    CURSOR_HOME,
    ENTER_SCREEN,
    LEAVE_SCREEN,
    ConsolePresenter,
    format_frame,
)


def test_format_frame_joins_rows():
    cells = ("#", " ", "#", "#", "#", "#")
    assert format_frame(cells, 3, 2) == "# #\n###"


def test_format_frame_rejects_wrong_length():
    with pytest.raises(ValueError):
        format_frame(("#",) * 5, 3, 2)


def test_console_presenter_writes_frames():
    grid = Grid(4, 3)
    grid.paint_border()
    stream = io.StringIO()
    presenter = ConsolePresenter(stream, ansi=False)
    cells = grid.export()
    presenter.present(cells, grid.width, grid.height)
    assert stream.getvalue() == "#  #\n#  #\n####\n"
    assert cells == grid.export()


def test_console_presenter_homes_cursor_between_frames():
    grid = Grid(2, 2)
    stream = io.StringIO()
    presenter = ConsolePresenter(stream)
    presenter.present(grid.export(), 2, 2)
    presenter.present(grid.export(), 2, 2)
    output = stream.getvalue()
    assert output.count(CURSOR_HOME) == 2
    assert presenter.frames == 2


def test_console_presenter_acquires_and_restores_screen():
    stream = io.StringIO()
    with ConsolePresenter(stream) as presenter:
        assert presenter.is_open
        assert stream.getvalue() == ENTER_SCREEN
        presenter.present(Grid(2, 1).export(), 2, 1)
    assert not presenter.is_open
    assert stream.getvalue().endswith(LEAVE_SCREEN)
    presenter.close()
    assert stream.getvalue().count(LEAVE_SCREEN) == 1


def test_console_presenter_restores_screen_after_error():
    stream = io.StringIO()
    with pytest.raises(KeyboardInterrupt):
        with ConsolePresenter(stream):
            raise KeyboardInterrupt
    assert stream.getvalue() == ENTER_SCREEN + LEAVE_SCREEN


def test_plain_presenter_writes_no_control_sequences():
    stream = io.StringIO()
    with ConsolePresenter(stream, ansi=False):
        pass
    assert stream.getvalue() == ""
