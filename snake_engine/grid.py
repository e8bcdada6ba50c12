from __future__ import annotations

from typing import List

import numpy as np

from snake_engine.cell import Cell
from snake_engine.errors import InvariantViolation


class Grid:
    """Occupancy map of the board. A cell is occupied iff the snake is on it."""

    def __init__(self, num_rows: int, num_cols: int) -> None:
        self.num_rows = num_rows
        self.num_cols = num_cols
        self._cells = np.zeros((num_rows, num_cols), dtype=np.uint8)

    def contains(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def _check(self, cell: Cell) -> None:
        # numpy would silently wrap negative indices
        if not self.contains(cell):
            raise InvariantViolation(f"cell {tuple(cell)} is outside a {self.num_rows}x{self.num_cols} grid")

    def mark(self, cell: Cell) -> None:
        self._check(cell)
        self._cells[cell[0], cell[1]] = 1

    def clear(self, cell: Cell) -> None:
        self._check(cell)
        self._cells[cell[0], cell[1]] = 0

    def is_occupied(self, cell: Cell) -> bool:
        self._check(cell)
        return bool(self._cells[cell[0], cell[1]])

    def free_cells(self) -> List[Cell]:
        # argwhere walks the array in row-major order
        return [Cell(int(r), int(c)) for r, c in np.argwhere(self._cells == 0)]

    def occupied_count(self) -> int:
        return int(self._cells.sum())

    def snapshot(self) -> np.ndarray:
        view = self._cells.copy()
        view.setflags(write=False)
        return view
