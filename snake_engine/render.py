from __future__ import annotations

from typing import Optional, Tuple

from snake_engine.cell import Direction
from snake_engine.game import Engine

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

Color = Tuple[int, int, int]

BACKGROUND: Color = (128, 128, 128)
GRID_LINES: Color = (110, 110, 110)
SNAKE_HEAD: Color = (60, 190, 90)
SNAKE_BODY: Color = (51, 153, 76)
FOOD: Color = (178, 76, 51)


def direction_for_key(key: int) -> Optional[Direction]:
    """Map an arrow key code to a heading; any other key maps to ``None``."""
    if pygame is None:
        raise ImportError("pygame is required for keyboard input")
    return {
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_UP: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_DOWN: Direction.DOWN,
    }.get(key)


class Renderer:
    """Paints an engine onto a pygame surface, one square per cell."""

    def __init__(self, surface, cell_size: int = 40) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")
        self.surface = surface
        self.cell_size = cell_size

    def _cell_rect(self, row: int, column: int):
        return pygame.Rect(
            column * self.cell_size,
            row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def draw(self, engine: Engine) -> None:
        self.surface.fill(BACKGROUND)
        for row in range(engine.get_num_rows()):
            for column in range(engine.get_num_cols()):
                pygame.draw.rect(self.surface, GRID_LINES, self._cell_rect(row, column), 1)

        for i, (row, column) in enumerate(engine.get_snake_positions()):
            color = SNAKE_HEAD if i == 0 else SNAKE_BODY
            pygame.draw.rect(self.surface, color, self._cell_rect(row, column))

        # on a won board the food sits under the head
        if not engine.won:
            food = engine.get_food_position()
            pygame.draw.rect(self.surface, FOOD, self._cell_rect(food.row, food.column))

    def draw_banner(self, text: str) -> None:
        font = pygame.font.SysFont("arial", max(12, self.cell_size // 2), bold=True)
        label = font.render(text, True, (255, 255, 255))
        rect = label.get_rect(center=self.surface.get_rect().center)
        self.surface.blit(label, rect)
