import pytest

pygame = pytest.importorskip("pygame")

from snake_engine import render
from snake_engine.cell import Direction
from snake_engine.game import Engine


def test_direction_for_key():
    assert render.direction_for_key(pygame.K_LEFT) is Direction.LEFT
    assert render.direction_for_key(pygame.K_UP) is Direction.UP
    assert render.direction_for_key(pygame.K_RIGHT) is Direction.RIGHT
    assert render.direction_for_key(pygame.K_DOWN) is Direction.DOWN
    assert render.direction_for_key(pygame.K_a) is None


def test_renderer_paints_snake_and_food():
    game = Engine(4, 5, [(1, 2), (1, 1)], Direction.RIGHT, (3, 4))
    surface = pygame.Surface((5 * 10, 4 * 10))
    renderer = render.Renderer(surface, cell_size=10)
    renderer.draw(game)

    def center(row, column):
        return tuple(surface.get_at((column * 10 + 5, row * 10 + 5)))[:3]

    assert center(1, 2) == render.SNAKE_HEAD
    assert center(1, 1) == render.SNAKE_BODY
    assert center(3, 4) == render.FOOD
    assert center(0, 0) == render.BACKGROUND
