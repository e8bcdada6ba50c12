from __future__ import annotations

import random
from typing import Optional

from snake_engine.cell import Cell
from snake_engine.errors import NoRoomForFood
from snake_engine.grid import Grid


class FoodPlacer:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.random = random.Random(seed)

    def place(self, grid: Grid) -> Cell:
        """Pick a free cell uniformly at random."""
        available = grid.free_cells()
        if not available:
            raise NoRoomForFood()
        return available[self.random.randrange(len(available))]
