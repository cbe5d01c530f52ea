from unittest import mock

import pygame
import pytest

from gridsnake.app import App, main
from gridsnake.engine import GameState


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _quit():
    return pygame.event.Event(pygame.QUIT)


def _key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_quit_event_stops_loop(tmp_path):
    app = App(tmp_path)
    with mock.patch("pygame.event.get", side_effect=[[_quit()]]):
        app.run()
    assert app.engine.closed is True
    assert app.engine.state is GameState.MENU


def test_space_key_starts_game(tmp_path):
    app = App(tmp_path)
    with mock.patch("pygame.event.get", side_effect=[[_key(pygame.K_SPACE)], [_quit()]]):
        app.run()
    assert app.engine.state is GameState.PLAYING
    assert len(app.engine.food) == 3


def test_pause_key_while_playing(tmp_path):
    app = App(tmp_path)
    batches = [[_key(pygame.K_SPACE)], [_key(pygame.K_p)], [_quit()]]
    with mock.patch("pygame.event.get", side_effect=batches):
        app.run()
    assert app.engine.state is GameState.PAUSED


def test_escape_in_menu_closes(tmp_path):
    app = App(tmp_path)
    with mock.patch("pygame.event.get", side_effect=[[_key(pygame.K_ESCAPE)]]):
        app.run()
    assert app.engine.closed is True


def test_missing_texture_is_reported(tmp_path, capsys):
    app = App(tmp_path)
    with mock.patch("pygame.event.get", side_effect=[[_quit()]]):
        app.run()
    assert "Failed to load apple texture!" in capsys.readouterr().err


def test_main_runs_and_returns_zero(tmp_path, capsys):
    with mock.patch("pygame.event.get", return_value=[_quit()]):
        assert main(["--assets", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Starting Snake Game..." in out
    assert "Game finished normally." in out