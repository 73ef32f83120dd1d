import pytest

from gridpath.core.path import build_path
from gridpath.core.types import CellState


def test_walks_predecessors_back_to_start(open_grid5):
    chain = [(0, 0), (1, 0), (1, 1), (0, 1)]
    for prev, cur in zip(chain, chain[1:]):
        open_grid5.cell_at(cur).predecessor = prev
    open_grid5.cell_at((0, 4)).predecessor = (0, 1)

    path = build_path(open_grid5, (0, 4))
    assert [c.coord for c in path] == chain + [(0, 4)]


def test_unreached_end_gives_empty_path(open_grid5):
    assert build_path(open_grid5, (0, 4)) == []


def test_chain_not_ending_at_start_is_unreachable(open_grid5):
    open_grid5.cell_at((0, 4)).predecessor = (0, 3)
    # (0, 3) has no predecessor and is not the start
    assert build_path(open_grid5, (0, 4)) == []


def test_path_of_start_is_single_cell(open_grid5):
    path = build_path(open_grid5, (0, 0))
    assert [c.coord for c in path] == [(0, 0)]
    assert path[0].state is CellState.START


def test_cycle_is_reported(open_grid5):
    open_grid5.cell_at((2, 2)).predecessor = (2, 3)
    open_grid5.cell_at((2, 3)).predecessor = (2, 2)
    with pytest.raises(RuntimeError):
        build_path(open_grid5, (2, 2))
