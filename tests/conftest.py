"""
Shared pytest fixtures for grid and search tests
"""

import pytest

from gridpath.core.grid import Grid
from gridpath.core.types import CellState


def grid_from_layout(*rows: str) -> Grid:
    """
    Build a square Grid from text rows:
      '.' empty, '#' obstacle, 'S' start, 'E' end
    """
    grid = Grid(len(rows))
    for r, line in enumerate(rows):
        assert len(line) == len(rows), f"row {r} is not {len(rows)} wide"
        for c, ch in enumerate(line):
            if ch == "S":
                grid.place_marker((r, c), CellState.START)
            elif ch == "E":
                grid.place_marker((r, c), CellState.END)
            elif ch == "#":
                grid.place_marker((r, c), CellState.OBSTACLE)
    return grid


@pytest.fixture
def make_grid():
    return grid_from_layout


@pytest.fixture
def grid5():
    """Empty 5x5 grid"""
    return Grid(5)


@pytest.fixture
def open_grid5(grid5):
    """5x5, start top-left, end top-right, no obstacles"""
    grid5.place_marker((0, 0), CellState.START)
    grid5.place_marker((0, 4), CellState.END)
    return grid5
