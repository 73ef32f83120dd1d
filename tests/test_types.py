from math import inf

from gridpath.core.types import Cell, CellState


def test_new_cell_is_empty_and_unreached():
    cell = Cell(2, 3)
    assert cell.coord == (2, 3)
    assert cell.state is CellState.EMPTY
    assert cell.distance == inf
    assert cell.predecessor is None


def test_set_start_zeroes_distance():
    cell = Cell(0, 0)
    cell.set_start()
    assert cell.is_start
    assert cell.distance == 0


def test_states_are_exclusive():
    cell = Cell(1, 1)
    cell.set_end()
    assert cell.is_end and not cell.is_start and not cell.is_obstacle
    cell.set_obstacle()
    assert cell.is_obstacle and not cell.is_end


def test_reset_clears_everything():
    cell = Cell(1, 1)
    cell.set_start()
    cell.predecessor = (0, 1)
    cell.reset()
    assert cell.state is CellState.EMPTY
    assert cell.distance == inf
    assert cell.predecessor is None


def test_clear_search_keeps_state():
    start = Cell(0, 0)
    start.set_start()
    start.distance = 7
    start.clear_search()
    assert start.is_start
    assert start.distance == 0

    other = Cell(0, 1)
    other.distance = 1
    other.predecessor = (0, 0)
    other.clear_search()
    assert other.distance == inf
    assert other.predecessor is None
