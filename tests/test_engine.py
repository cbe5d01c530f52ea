import random

import pytest

from gridsnake.engine import Engine, GameState, SoundEvent
from gridsnake.snake import Segment


def _playing(seed=0):
    engine = Engine(rng=random.Random(seed))
    engine.start_new_game()
    engine.graph.clear_walls()
    engine.snake.reset(5, 5)
    engine.food.clear()
    return engine


def test_initial_state():
    engine = Engine(rng=random.Random(1))
    assert engine.state is GameState.MENU
    assert engine.speed == pytest.approx(0.15)
    assert engine.snake.head == Segment(3, 10)
    assert engine.closed is False


def test_update_outside_play_does_nothing():
    engine = Engine(rng=random.Random(1))
    assert engine.update() == []
    assert engine.snake.head == Segment(3, 10)


def test_space_starts_game():
    engine = Engine(rng=random.Random(2))
    engine.handle_key("space")
    assert engine.state is GameState.PLAYING
    assert len(engine.food) == 3
    assert engine.scores.score == 0
    head = engine.snake.head
    assert not engine.graph.is_wall(head.x, head.y)


def test_start_is_deterministic_for_seed():
    first = Engine(rng=random.Random(7))
    second = Engine(rng=random.Random(7))
    first.start_new_game()
    second.start_new_game()
    assert first.food.positions == second.food.positions
    assert first.snake.head == second.snake.head


def test_menu_navigation():
    engine = Engine(rng=random.Random(1))
    engine.handle_key("h")
    assert engine.state is GameState.HIGH_SCORES
    engine.handle_key("space")
    assert engine.state is GameState.MENU
    engine.handle_key("h")
    engine.handle_key("escape")
    assert engine.state is GameState.MENU
    assert engine.closed is False
    engine.handle_key("escape")
    assert engine.closed is True


def test_pause_and_resume():
    engine = _playing()
    engine.handle_key("p")
    assert engine.state is GameState.PAUSED
    assert engine.update() == []
    assert engine.snake.head == Segment(5, 5)
    engine.handle_key("p")
    assert engine.state is GameState.PLAYING


def test_direction_key_turns_snake():
    engine = _playing()
    engine.handle_key("s")
    engine.update()
    assert engine.snake.head == Segment(5, 6)


def test_reverse_key_is_ignored():
    engine = _playing()
    engine.handle_key("a")
    engine.update()
    assert engine.snake.head == Segment(6, 5)


def test_eating_food_scores_and_refills():
    engine = _playing()
    engine.food.spawn(6, 5)
    assert engine.update() == [SoundEvent.EAT]
    assert engine.scores.score == 10
    assert engine.scores.recent_scores() == [10]
    assert len(engine.food) == 3
    assert (6, 5) not in engine.food.positions
    engine.food.clear()
    engine.update()
    assert len(engine.snake) == 4


def test_undo_key_restores_score():
    engine = _playing()
    engine.food.spawn(6, 5)
    engine.update()
    engine.handle_key("u")
    assert engine.scores.score == 0
    assert engine.scores.can_undo() is False


def test_level_up_at_hundred_points():
    engine = _playing()
    engine.scores.score = 90
    engine.food.spawn(6, 5)
    assert engine.update() == [SoundEvent.EAT, SoundEvent.LEVEL_UP]
    assert engine.scores.score == 100
    assert engine.scores.level == 2
    assert engine.speed == pytest.approx(0.14)
    assert len(engine.food) == 3


def test_next_level_speed_has_floor():
    engine = _playing()
    for _ in range(20):
        engine.next_level()
    assert engine.speed == pytest.approx(0.05)
    assert engine.scores.level == 21
    assert len(engine.food) == 3


def test_wall_collision_ends_game():
    engine = _playing()
    engine.graph.add_wall(6, 5)
    assert engine.update() == [SoundEvent.COLLISION]
    assert engine.state is GameState.GAME_OVER
    assert [entry.score for entry in engine.scores.high_scores()] == [0]


def test_boundary_collision_ends_game():
    engine = _playing()
    for _ in range(engine.grid_width):
        engine.food.clear()
        engine.update()
        if engine.state is not GameState.PLAYING:
            break
    assert engine.state is GameState.GAME_OVER
    assert engine.snake.head.x == engine.grid_width


def test_self_collision_ends_game():
    engine = _playing()
    for _ in range(2):
        engine.snake.grow()
        engine.snake.move()
    assert len(engine.snake) == 5
    sounds = []
    for key in ("s", "a", "w"):
        engine.handle_key(key)
        sounds = engine.update()
    assert engine.state is GameState.GAME_OVER
    assert SoundEvent.COLLISION in sounds


def test_game_over_keys():
    engine = _playing()
    engine.graph.add_wall(6, 5)
    engine.update()
    engine.handle_key("space")
    assert engine.state is GameState.MENU

    engine = _playing()
    engine.scores.score = 40
    engine.graph.add_wall(6, 5)
    engine.update()
    engine.handle_key("r")
    assert engine.state is GameState.PLAYING
    assert engine.scores.score == 0
    assert len(engine.scores.high_scores()) == 1