from __future__ import annotations

from typing import Optional

from snake_engine.cell import Direction


class DirectionController:
    """Buffers at most one heading change between ticks.

    Requests are not validated when they arrive. On ``resolve`` the buffered
    heading is applied unless it would reverse the snake into its own neck,
    and the buffer is emptied either way.
    """

    def __init__(self) -> None:
        self._pending: Optional[Direction] = None

    @property
    def pending(self) -> Optional[Direction]:
        return self._pending

    def request(self, direction: Direction) -> None:
        self._pending = direction

    def resolve(self, current: Direction) -> Direction:
        pending, self._pending = self._pending, None
        if pending is None or pending.is_opposite(current):
            return current
        return pending
