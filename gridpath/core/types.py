# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (row, col)


class CellState(Enum):
    EMPTY = "empty"
    OBSTACLE = "obstacle"
    START = "start"
    END = "end"


@dataclass
class Cell:
    row: int
    col: int
    state: CellState = CellState.EMPTY
    distance: float = inf
    predecessor: Optional[Coord] = None   # lookup into the owning Grid, never a Cell

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_obstacle(self) -> bool:
        return self.state is CellState.OBSTACLE

    @property
    def is_start(self) -> bool:
        return self.state is CellState.START

    @property
    def is_end(self) -> bool:
        return self.state is CellState.END

    def reset(self) -> None:
        self.state = CellState.EMPTY
        self.distance = inf
        self.predecessor = None

    def clear_search(self) -> None:
        """Drop search attributes only; the start keeps distance 0."""
        self.distance = 0 if self.is_start else inf
        self.predecessor = None

    def set_start(self) -> None:
        self.state = CellState.START
        self.distance = 0
        self.predecessor = None

    def set_end(self) -> None:
        self.state = CellState.END

    def set_obstacle(self) -> None:
        self.state = CellState.OBSTACLE
        self.distance = inf
        self.predecessor = None


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Coord] = field(default_factory=list)
    closed: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
