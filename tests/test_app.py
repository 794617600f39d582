import logging
import random

import pygame
import pytest

from dodger import app
from dodger.game import Game


def test_parse_args_defaults():
    args = app.parse_args([])
    assert args.seed is None
    assert args.log_level == "INFO"


def test_parse_args_seed():
    assert app.parse_args(["--seed", "42"]).seed == 42


def test_parse_args_rejects_unknown_level():
    with pytest.raises(SystemExit):
        app.parse_args(["--log-level", "LOUD"])


def test_seed_from_time_fits_32_bits():
    assert 0 <= app.seed_from_time() <= 0xFFFFFFFF


def test_main_runs_game_with_seeded_rng(monkeypatch):
    seen = []
    monkeypatch.setattr(app, "run", seen.append)
    assert app.main(["--seed", "5"]) == 0
    assert len(seen) == 1
    game = seen[0]
    assert isinstance(game, Game)
    assert game.stars == Game(random.Random(5)).stars


def test_main_logs_fatal_harness_error(monkeypatch, caplog):
    def boom(game):
        raise pygame.error("display went away")

    monkeypatch.setattr(app, "run", boom)
    with caplog.at_level(logging.ERROR, logger="dodger.app"):
        assert app.main(["--seed", "1"]) == 1
    assert "Fatal error in frame loop" in caplog.text


def recorded_game(monkeypatch, calls):
    game = Game(random.Random(0))
    update, draw = game.update, game.draw

    def record_update(keys):
        calls.append("update")
        update(keys)

    def record_draw(screen):
        calls.append(("draw", screen.get_size()))
        draw(screen)

    monkeypatch.setattr(game, "update", record_update)
    monkeypatch.setattr(game, "draw", record_draw)
    return game


def feed_events(monkeypatch, batches):
    batches = iter(batches)
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: next(batches))


def test_run_updates_then_draws_until_escape(monkeypatch):
    calls = []
    game = recorded_game(monkeypatch, calls)
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    feed_events(monkeypatch, [[], [], [escape]])

    app.run(game)

    assert calls == ["update", ("draw", (640, 480))] * 2
    assert not pygame.get_init()


def test_run_stops_on_quit(monkeypatch):
    calls = []
    game = recorded_game(monkeypatch, calls)
    feed_events(monkeypatch, [[], [pygame.event.Event(pygame.QUIT)]])

    app.run(game)

    assert calls == ["update", ("draw", (640, 480))]
    assert not pygame.get_init()


def test_run_ignores_other_keys(monkeypatch):
    calls = []
    game = recorded_game(monkeypatch, calls)
    space = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    feed_events(monkeypatch, [[space], [pygame.event.Event(pygame.QUIT)]])

    app.run(game)

    assert calls == ["update", ("draw", (640, 480))]


def test_run_quits_pygame_when_frame_fails(monkeypatch):
    game = Game(random.Random(0))

    def broken_update(keys):
        raise pygame.error("frame failed")

    monkeypatch.setattr(game, "update", broken_update)
    feed_events(monkeypatch, [[]])

    with pytest.raises(pygame.error):
        app.run(game)
    assert not pygame.get_init()
