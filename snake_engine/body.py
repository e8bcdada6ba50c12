from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator

from snake_engine.cell import Cell
from snake_engine.errors import InvariantViolation


class Body:
    """Snake segments, head first. The tail is the oldest segment."""

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._cells: Deque[Cell] = deque(cells)

    def head(self) -> Cell:
        if not self._cells:
            raise InvariantViolation("snake body is empty")
        return self._cells[0]

    def tail(self) -> Cell:
        if not self._cells:
            raise InvariantViolation("snake body is empty")
        return self._cells[-1]

    def push_head(self, cell: Cell) -> None:
        self._cells.appendleft(cell)

    def pop_tail(self) -> Cell:
        if not self._cells:
            raise InvariantViolation("cannot pop the tail of an empty body")
        return self._cells.pop()

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __repr__(self) -> str:
        return f"Body({list(self._cells)!r})"
