from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    # (row delta, column delta)
    LEFT = (0, -1)
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return _OPPOSITES[self] is other


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Cell(NamedTuple):
    row: int
    column: int

    def moved(self, direction: Direction) -> "Cell":
        d_row, d_col = direction.value
        return Cell(self.row + d_row, self.column + d_col)
