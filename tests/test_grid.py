import pytest

from gridpath.core.grid import Grid, DEFAULT_ROWS
from gridpath.core.types import CellState


def test_default_grid_is_square_and_empty():
    grid = Grid()
    assert grid.rows == DEFAULT_ROWS
    assert len(grid.cells) == DEFAULT_ROWS
    assert all(len(row) == DEFAULT_ROWS for row in grid.cells)
    assert all(cell.state is CellState.EMPTY for cell in grid)
    assert grid.start is None and grid.end is None


def test_rejects_empty_grid():
    with pytest.raises(ValueError):
        Grid(0)


def test_cell_at_out_of_bounds(grid5):
    with pytest.raises(IndexError):
        grid5.cell_at((5, 0))
    with pytest.raises(IndexError):
        grid5.cell_at((0, -1))


def test_neighbors_order_up_down_left_right(grid5):
    coords = [c.coord for c in grid5.neighbors_of((2, 2))]
    assert coords == [(1, 2), (3, 2), (2, 1), (2, 3)]


def test_neighbors_at_corner(grid5):
    coords = [c.coord for c in grid5.neighbors_of((0, 0))]
    assert coords == [(1, 0), (0, 1)]


def test_neighbors_skip_obstacles(grid5):
    grid5.place_marker((1, 2), CellState.OBSTACLE)
    coords = [c.coord for c in grid5.neighbors_of((2, 2))]
    assert (1, 2) not in coords
    assert len(coords) == 3


def test_obstacle_has_no_neighbors(grid5):
    grid5.place_marker((2, 2), CellState.OBSTACLE)
    assert grid5.neighbors_of((2, 2)) == []


def test_neighbors_follow_edits_immediately(grid5):
    assert len(grid5.neighbors_of((2, 2))) == 4
    grid5.place_marker((2, 3), CellState.OBSTACLE)
    assert len(grid5.neighbors_of((2, 2))) == 3
    grid5.reset_cell((2, 3))
    assert len(grid5.neighbors_of((2, 2))) == 4


def test_click_order_start_end_then_obstacles(grid5):
    assert grid5.place_marker((0, 0)) is CellState.START
    assert grid5.place_marker((4, 4)) is CellState.END
    assert grid5.place_marker((2, 2)) is CellState.OBSTACLE
    assert grid5.start == (0, 0)
    assert grid5.end == (4, 4)
    assert grid5.cell_at((2, 2)).is_obstacle


def test_second_start_falls_back_to_obstacle(grid5):
    grid5.place_marker((0, 0), CellState.START)
    assert grid5.place_marker((1, 1), CellState.START) is CellState.OBSTACLE
    assert grid5.start == (0, 0)
    assert grid5.cell_at((1, 1)).is_obstacle


def test_second_end_falls_back_to_obstacle(grid5):
    grid5.place_marker((4, 4), CellState.END)
    assert grid5.place_marker((3, 3), CellState.END) is CellState.OBSTACLE
    assert grid5.end == (4, 4)


def test_click_on_start_or_end_is_noop(open_grid5):
    assert open_grid5.place_marker((0, 0)) is None
    assert open_grid5.place_marker((0, 4), CellState.OBSTACLE) is None
    assert open_grid5.cell_at((0, 0)).is_start
    assert open_grid5.cell_at((0, 4)).is_end


def test_click_outside_is_ignored(grid5):
    assert grid5.place_marker((9, 9)) is None
    assert grid5.start is None


def test_start_over_obstacle_replaces_it(grid5):
    grid5.place_marker((1, 1), CellState.OBSTACLE)
    grid5.place_marker((1, 1), CellState.START)
    cell = grid5.cell_at((1, 1))
    assert cell.is_start and not cell.is_obstacle


def test_reset_cell_drops_designation(open_grid5):
    open_grid5.reset_cell((0, 0))
    assert open_grid5.start is None
    assert open_grid5.end == (0, 4)
    assert open_grid5.cell_at((0, 0)).state is CellState.EMPTY
    # next plain click becomes the start again
    assert open_grid5.place_marker((3, 3)) is CellState.START


def test_clear_all(open_grid5):
    open_grid5.place_marker((2, 2))
    open_grid5.clear_all()
    assert open_grid5.start is None and open_grid5.end is None
    assert open_grid5.obstacles() == set()
    assert all(cell.state is CellState.EMPTY for cell in open_grid5)


def test_is_ready(grid5):
    assert not grid5.is_ready()
    grid5.place_marker((0, 0))
    assert not grid5.is_ready()
    grid5.place_marker((1, 0))
    assert grid5.is_ready()


def test_layout_helper(make_grid):
    grid = make_grid(
        "S..",
        ".#.",
        "..E",
    )
    assert grid.start == (0, 0)
    assert grid.end == (2, 2)
    assert grid.obstacles() == {(1, 1)}


def test_is_marker(open_grid5):
    assert open_grid5.is_marker((0, 0))
    assert open_grid5.is_marker((0, 4))
    assert not open_grid5.is_marker((2, 2))
    open_grid5.reset_cell((0, 4))
    assert not open_grid5.is_marker((0, 4))
