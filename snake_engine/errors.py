from __future__ import annotations


class SnakeEngineError(Exception):
    """Base class for everything the engine raises."""


class TickFailure(SnakeEngineError):
    """Terminal outcome of a tick. The engine performs no further ticks."""

    reason = "tick failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason)


class HitWall(TickFailure):
    reason = "snake hit a wall"


class HitSelf(TickFailure):
    reason = "snake hit itself"


class NoRoomForFood(TickFailure):
    """The board is full. This is the winning end of a session."""

    reason = "no room to spawn food"


class InvariantViolation(SnakeEngineError):
    """Internal precondition broken; a programming error, not a game outcome."""
