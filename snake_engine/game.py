from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from snake_engine.body import Body
from snake_engine.cell import Cell, Direction
from snake_engine.direction import DirectionController
from snake_engine.errors import HitSelf, HitWall, NoRoomForFood, TickFailure
from snake_engine.food import FoodPlacer
from snake_engine.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_NUM_ROWS = 10
DEFAULT_NUM_COLS = 10
DEFAULT_BODY = (Cell(2, 1), Cell(1, 1))
DEFAULT_DIRECTION = Direction.RIGHT
DEFAULT_FOOD = Cell(2, 2)


@dataclass
class StepResult:
    snake: List[Cell]
    food: Cell
    done: bool
    ate_food: bool
    collision: bool
    failure: Optional[TickFailure] = None

    @property
    def won(self) -> bool:
        return isinstance(self.failure, NoRoomForFood)


class Engine:
    """Single-snake game state, advanced one tick at a time by ``update``.

    Invalid construction arguments are not reported as errors: the engine
    logs a warning and starts from the default 10x10 configuration instead.
    """

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        initial_body: Iterable[Tuple[int, int]],
        initial_direction: Direction,
        initial_food: Tuple[int, int],
        seed: Optional[int] = None,
    ) -> None:
        self._food_placer = FoodPlacer(seed)
        self._controller = DirectionController()
        self.failure: Optional[TickFailure] = None

        body = [Cell(*cell) for cell in initial_body]
        food = Cell(*initial_food)
        reason = self._invalid_reason(num_rows, num_cols, body, food)
        if reason is None and not body:
            body = [Cell(1, 1) if food == Cell(0, 0) else Cell(0, 0)]
            if not Grid(num_rows, num_cols).contains(body[0]):
                reason = "starting cell does not fit on the board"

        if reason is not None:
            logger.warning("%s; using the default configuration", reason)
            num_rows, num_cols = DEFAULT_NUM_ROWS, DEFAULT_NUM_COLS
            body, initial_direction, food = list(DEFAULT_BODY), DEFAULT_DIRECTION, DEFAULT_FOOD

        self.num_rows = num_rows
        self.num_cols = num_cols
        self.grid = Grid(num_rows, num_cols)
        self.body = Body(body)
        for cell in self.body:
            self.grid.mark(cell)
        self.current_direction = initial_direction
        self.food = food

    @classmethod
    def default(cls, seed: Optional[int] = None) -> "Engine":
        return cls(DEFAULT_NUM_ROWS, DEFAULT_NUM_COLS, DEFAULT_BODY, DEFAULT_DIRECTION, DEFAULT_FOOD, seed=seed)

    @staticmethod
    def _invalid_reason(num_rows: int, num_cols: int, body: Sequence[Cell], food: Cell) -> Optional[str]:
        if num_rows <= 0:
            return "num_rows is zero"
        if num_cols <= 0:
            return "num_cols is zero"

        in_bounds = Grid(num_rows, num_cols).contains

        if not all(in_bounds(cell) for cell in body):
            return "snake is out of bounds"
        if len(set(body)) != len(body):
            return "snake overlaps itself"
        if not in_bounds(food):
            return "food is out of bounds"
        if food in body:
            return "food is on the snake"
        return None

    # -- read access -------------------------------------------------------

    def get_num_rows(self) -> int:
        return self.num_rows

    def get_num_cols(self) -> int:
        return self.num_cols

    def get_snake_positions(self) -> Tuple[Cell, ...]:
        return tuple(self.body)

    def get_food_position(self) -> Cell:
        return self.food

    @property
    def pending_direction(self) -> Optional[Direction]:
        return self._controller.pending

    @property
    def is_over(self) -> bool:
        return self.failure is not None

    @property
    def won(self) -> bool:
        return isinstance(self.failure, NoRoomForFood)

    def grid_snapshot(self) -> np.ndarray:
        return self.grid.snapshot()

    # -- mutation ----------------------------------------------------------

    def handle_direction_request(self, direction: Direction) -> None:
        self._controller.request(direction)

    def update(self) -> None:
        """Advance one tick.

        Raises ``HitWall``, ``HitSelf`` or ``NoRoomForFood``. Each of them ends
        the session; calling ``update`` again raises the same kind of failure
        without touching the state.
        """
        self._tick()

    def _advance(self) -> bool:
        self.current_direction = self._controller.resolve(self.current_direction)
        new_head = self.body.head().moved(self.current_direction)

        if not self.grid.contains(new_head):
            horizontal = self.current_direction in (Direction.LEFT, Direction.RIGHT)
            raise HitWall("snake hit the left or right wall" if horizontal else "snake hit the top or bottom wall")
        if self.grid.is_occupied(new_head):
            raise HitSelf()

        self.grid.mark(new_head)
        self.body.push_head(new_head)

        if new_head == self.food:
            # growth: the tail stays where it is this tick
            self.food = self._food_placer.place(self.grid)
            return True

        tail = self.body.pop_tail()
        self.grid.clear(tail)
        return False

    def step(self, new_direction: Optional[Direction] = None) -> StepResult:
        """Request ``new_direction`` (if any), run one tick and report the outcome."""
        if self.failure is not None:
            return self._result(ate_food=False, failure=self.failure)
        if new_direction is not None:
            self.handle_direction_request(new_direction)

        ate_food = False
        failure = None
        try:
            ate_food = self._tick()
        except TickFailure as exc:
            failure = exc
            ate_food = isinstance(exc, NoRoomForFood)
        return self._result(ate_food=ate_food, failure=failure)

    def _tick(self) -> bool:
        if self.failure is not None:
            raise type(self.failure)(str(self.failure))
        try:
            return self._advance()
        except TickFailure as exc:
            self.failure = exc
            logger.info("Game over after move to %s: %s", self.current_direction.name, exc)
            raise

    def _result(self, ate_food: bool, failure: Optional[TickFailure]) -> StepResult:
        return StepResult(
            snake=list(self.body),
            food=self.food,
            done=self.is_over,
            ate_food=ate_food,
            collision=isinstance(failure, (HitWall, HitSelf)),
            failure=failure,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Engine):
            return NotImplemented
        return (
            self.num_rows == other.num_rows
            and self.num_cols == other.num_cols
            and list(self.body) == list(other.body)
            and self.current_direction == other.current_direction
            and self.pending_direction == other.pending_direction
            and self.food == other.food
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Engine({self.num_rows}x{self.num_cols}, body={list(self.body)}, "
            f"direction={self.current_direction.name}, food={tuple(self.food)})"
        )
