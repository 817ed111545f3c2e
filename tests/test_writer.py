import pytest

from blockfall.errors import OutOfBounds
from blockfall.grid import EMPTY, FILL, WALL, Footprint, Grid, Position
from blockfall.pieces import PieceKind, lookup
from blockfall.writer import clear_row_segment, read_region, shift_down, stamp


@pytest.mark.parametrize("kind", list(PieceKind))
def test_stamp_reads_back_pattern(kind):
    grid = Grid(8, 8)
    grid.paint_border()
    spec = lookup(kind)
    position = Position(1, 2)
    stamp(grid, spec.pattern, spec.footprint, position)
    assert read_region(grid, position, spec.footprint) == spec.pattern


def test_stamp_overwrites_existing_cells():
    grid = Grid(4, 4)
    grid.set_cell(1, 0, FILL)
    stamp(grid, "@ ", Footprint(2, 1), Position(0, 0))
    assert grid.rows()[0] == "@   "


def test_stamp_out_of_bounds_leaves_grid_untouched():
    grid = Grid(6, 4)
    grid.paint_border()
    before = grid.export()
    spec = lookup(PieceKind.Z)
    with pytest.raises(OutOfBounds):
        stamp(grid, spec.pattern, spec.footprint, Position(2, 0))
    with pytest.raises(OutOfBounds):
        stamp(grid, "@@@", Footprint(1, 3), Position(0, 2))
    assert grid.export() == before


def test_stamp_rejects_pattern_length_mismatch():
    grid = Grid(4, 4)
    with pytest.raises(ValueError):
        stamp(grid, "@@@", Footprint(2, 2), Position(0, 0))


def test_clear_row_segment():
    grid = Grid(5, 2)
    stamp(grid, "@" * 10, Footprint(5, 2), Position(0, 0))
    clear_row_segment(grid, Position(1, 1), 3)
    assert grid.rows() == ["@@@@@", "@   @"]
    with pytest.raises(OutOfBounds):
        clear_row_segment(grid, Position(3, 0), 3)


def test_shift_down_moves_box_and_clears_top_row():
    grid = Grid(6, 5)
    spec = lookup(PieceKind.T)
    stamp(grid, spec.pattern, spec.footprint, Position(0, 1))
    shift_down(grid, Position(0, 1), spec.footprint)
    assert grid.rows() == [
        "      ",
        "      ",
        "  @   ",
        "@@@@@ ",
        "      ",
    ]


def test_shift_down_past_floor_raises():
    grid = Grid(3, 3)
    grid.paint_border()
    before = grid.export()
    with pytest.raises(OutOfBounds):
        shift_down(grid, Position(1, 1), Footprint(1, 2))
    assert grid.export() == before
    assert grid.get_cell(1, 2) == WALL
    assert grid.get_cell(1, 1) == EMPTY
