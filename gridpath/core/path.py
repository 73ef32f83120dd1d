# gridpath/core/path.py
#!/usr/bin/env python3
from typing import List

from gridpath.core.grid import Grid
from gridpath.core.types import Cell, Coord


def build_path(grid: Grid, end: Coord) -> List[Cell]:
    """
    Follow predecessor links back from `end` and return the cells start -> end.

    Returns [] when the chain does not reach the grid's start (end unreachable).
    """
    path: List[Cell] = []
    cur = grid.cell_at(end)
    limit = grid.rows * grid.rows
    while True:
        path.append(cur)
        if cur.predecessor is None:
            break
        if len(path) > limit:
            raise RuntimeError(f"predecessor chain from {end} loops")
        cur = grid.cell_at(cur.predecessor)

    if cur.coord != grid.start:
        return []
    path.reverse()
    return path
