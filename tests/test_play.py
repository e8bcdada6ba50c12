import logging

import pytest

pytest.importorskip("pygame")

import play
from snake_engine.cell import Direction
from snake_engine.game import Engine


def test_won_game_is_logged_as_info(caplog):
    game = Engine(1, 2, [(0, 0)], Direction.RIGHT, (0, 1))
    with caplog.at_level(logging.INFO, logger="snake_engine.play"):
        play.advance(game)
    assert game.won
    records = [r for r in caplog.records if r.name == "snake_engine.play"]
    assert [r.levelno for r in records] == [logging.INFO]
    assert "player wins" in records[0].getMessage()


def test_collision_is_logged_as_warning(caplog):
    game = Engine(10, 10, [(0, 5)], Direction.UP, (9, 9))
    with caplog.at_level(logging.INFO, logger="snake_engine.play"):
        play.advance(game)
    assert game.is_over and not game.won
    records = [r for r in caplog.records if r.name == "snake_engine.play"]
    assert [r.levelno for r in records] == [logging.WARNING]


def test_new_game_uses_cli_dimensions():
    args = play.parse_args(["--rows", "8", "--cols", "12", "--seed", "1"])
    game = play.new_game(args)
    assert (game.get_num_rows(), game.get_num_cols()) == (8, 12)
    assert game.get_snake_positions()[0] == (0, 2)
