from __future__ import annotations

import argparse
import logging
import sys

import pygame

from snake_engine.cell import Direction
from snake_engine.errors import NoRoomForFood, TickFailure
from snake_engine.game import Engine
from snake_engine.render import Renderer, direction_for_key

logger = logging.getLogger("snake_engine.play")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--rows", type=int, default=10)
    parser.add_argument("--cols", type=int, default=10)
    parser.add_argument("--cell-size", type=int, default=48, help="Size of one grid cell in pixels")
    parser.add_argument("--tick-ms", type=int, default=250, help="Milliseconds between snake moves")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def new_game(args: argparse.Namespace) -> Engine:
    body = [(0, 2), (0, 1), (0, 0)]
    food = (args.rows // 2, args.cols // 2)
    return Engine(args.rows, args.cols, body, Direction.RIGHT, food, seed=args.seed)


def advance(game: Engine) -> None:
    try:
        game.update()
    except NoRoomForFood:
        logger.info("Board is full, the player wins")
    except TickFailure as err:
        logger.warning("Update game failed: %s", err)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    game = new_game(args)
    pygame.init()
    window = pygame.display.set_mode(
        (game.get_num_cols() * args.cell_size, game.get_num_rows() * args.cell_size)
    )
    pygame.display.set_caption("Snake")
    renderer = Renderer(window, args.cell_size)
    clock = pygame.time.Clock()
    since_tick = 0
    frames = 0

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit()
                    sys.exit()
                if event.key == pygame.K_r and game.is_over:
                    logger.info("Restarting")
                    game = new_game(args)
                    since_tick = 0
                    continue
                direction = direction_for_key(event.key)
                if direction is not None:
                    game.handle_direction_request(direction)

        since_tick += clock.tick(60)
        if since_tick >= args.tick_ms and not game.is_over:
            since_tick = 0
            advance(game)

        renderer.draw(game)
        if game.is_over:
            renderer.draw_banner("You win! R to restart" if game.won else "Game over - R to restart")
        pygame.display.flip()

        frames += 1
        if frames % 100 == 0:
            logger.debug("Rendered %d frames", frames)


if __name__ == "__main__":
    main()
