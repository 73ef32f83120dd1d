# gridpath/core/grid.py
#!/usr/bin/env python3
"""
Square grid of Cells plus the editing policy used by the viewer.

- cells are stored [row][col] and created once, all EMPTY
- neighbors are derived from row/col arithmetic on every call (no cache to go stale)
- at most one START and one END; `start` / `end` hold their coords or None
"""

from typing import Iterator, List, Optional, Set

from gridpath.core.types import Cell, CellState, Coord

DEFAULT_ROWS = 30

# up, down, left, right; fixed so frontier ties break the same way every run
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    def __init__(self, rows: int = DEFAULT_ROWS):
        if rows < 1:
            raise ValueError(f"Grid needs at least one row, got {rows}")
        self.rows = rows
        self.cells: List[List[Cell]] = [[Cell(r, c) for c in range(rows)] for r in range(rows)]
        self.start: Optional[Coord] = None
        self.end: Optional[Coord] = None

    # -------------------- queries --------------------

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.rows

    def cell_at(self, c: Coord) -> Cell:
        if not self.in_bounds(c):
            raise IndexError(f"{c} is outside a {self.rows}x{self.rows} grid")
        r, col = c
        return self.cells[r][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def obstacles(self) -> Set[Coord]:
        return {cell.coord for cell in self if cell.is_obstacle}

    def is_marker(self, c: Coord) -> bool:
        """True for the current start or end cell."""
        return c == self.start or c == self.end

    def is_ready(self) -> bool:
        """True when both a start and an end are designated."""
        return self.start is not None and self.end is not None

    def neighbors_of(self, c: Coord) -> List[Cell]:
        cell = self.cell_at(c)
        if cell.is_obstacle:
            return []
        r, col = c
        out: List[Cell] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            n = (r + dr, col + dc)
            if self.in_bounds(n) and not self.cell_at(n).is_obstacle:
                out.append(self.cell_at(n))
        return out

    # -------------------- edits --------------------

    def place_marker(self, c: Coord, kind: Optional[CellState] = None) -> Optional[CellState]:
        """
        Apply one user click at `c` and return the state it produced.

        kind=None follows the click order: first start, then end, then obstacles.
        Asking for a second START/END paints an obstacle instead. Clicking the
        current start or end does nothing (returns None), as does a click
        outside the grid.
        """
        if not self.in_bounds(c):
            return None
        if self.is_marker(c):
            return None

        if kind is None:
            if self.start is None:
                kind = CellState.START
            elif self.end is None:
                kind = CellState.END
            else:
                kind = CellState.OBSTACLE

        if kind is CellState.START and self.start is not None:
            kind = CellState.OBSTACLE
        elif kind is CellState.END and self.end is not None:
            kind = CellState.OBSTACLE

        cell = self.cell_at(c)
        if kind is CellState.START:
            cell.set_start()
            self.start = c
        elif kind is CellState.END:
            cell.set_end()
            self.end = c
        elif kind is CellState.OBSTACLE:
            cell.set_obstacle()
        else:
            cell.reset()
        return kind

    def reset_cell(self, c: Coord) -> None:
        if not self.in_bounds(c):
            return
        self.cell_at(c).reset()
        if c == self.start:
            self.start = None
        if c == self.end:
            self.end = None

    def clear_all(self) -> None:
        for cell in self:
            cell.reset()
        self.start = None
        self.end = None

    def clear_search(self) -> None:
        for cell in self:
            cell.clear_search()
