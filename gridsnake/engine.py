"""Game rules: state machine, movement, collisions, scoring and levels."""

from __future__ import annotations

import random
from enum import Enum, auto

from gridsnake.food import Food
from gridsnake.graph import Graph
from gridsnake.scores import ScoreManager
from gridsnake.snake import Direction, Snake

GRID_WIDTH = 30
GRID_HEIGHT = 20
FOOD_COUNT = 3
POINTS_PER_FOOD = 10
POINTS_PER_LEVEL = 100
START_SPEED = 0.15
MIN_SPEED = 0.05
SPEED_STEP = 0.01


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    PAUSED = auto()
    HIGH_SCORES = auto()


class SoundEvent(Enum):
    EAT = auto()
    COLLISION = auto()
    LEVEL_UP = auto()


_MOVE_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


class Engine:
    """Everything about a game except drawing, sound output and timing.

    Keys are given by name: "w", "a", "s", "d", "p", "u", "h", "r",
    "space" and "escape"; other keys are ignored.
    """

    def __init__(
        self,
        grid_width: int = GRID_WIDTH,
        grid_height: int = GRID_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.rng = rng or random.Random()
        self.snake = Snake(3, grid_height // 2)
        self.food = Food(FOOD_COUNT, self.rng)
        self.scores = ScoreManager()
        self.graph = Graph(grid_width, grid_height)
        self.state = GameState.MENU
        self.speed = START_SPEED
        self.closed = False

    def _occupied(self) -> list[tuple[int, int]]:
        return [(segment.x, segment.y) for segment in self.snake.body]

    def _refill_food(self) -> None:
        self.food.spawn_random(self.grid_width, self.grid_height, self._occupied())

    def start_new_game(self) -> None:
        """Reset the score, lay out level-one walls and place the snake and food."""
        self.scores.reset()
        self.graph.generate_wall_level(1, self.rng)

        x, y = 5, 5
        while self.graph.is_wall(x, y):
            x += 1
            if x >= self.grid_width:
                x = 0
                y += 1
                if y >= self.grid_height:
                    y = 0
        self.snake.reset(x, y)

        self.food.clear()
        self._refill_food()
        self.state = GameState.PLAYING

    def pause(self) -> None:
        self.state = GameState.PAUSED

    def resume(self) -> None:
        self.state = GameState.PLAYING

    def handle_key(self, key: str) -> None:
        """React to a key press according to the current state."""
        state = self.state
        if state is GameState.MENU:
            if key == "space":
                self.start_new_game()
            elif key == "h":
                self.state = GameState.HIGH_SCORES
            elif key == "escape":
                self.closed = True
        elif state is GameState.PLAYING:
            if key in _MOVE_KEYS:
                self.snake.set_direction(_MOVE_KEYS[key])
            elif key == "p":
                self.pause()
            elif key == "u" and self.scores.can_undo():
                self.scores.undo_last_score()
        elif state is GameState.PAUSED:
            if key == "p":
                self.resume()
        elif state is GameState.GAME_OVER:
            if key == "space":
                self.state = GameState.MENU
            elif key == "r":
                self.start_new_game()
        elif state is GameState.HIGH_SCORES:
            if key in ("escape", "space"):
                self.state = GameState.MENU

    def _end_game(self) -> list[SoundEvent]:
        self.scores.game_over()
        self.state = GameState.GAME_OVER
        return [SoundEvent.COLLISION]

    def update(self) -> list[SoundEvent]:
        """Advance the game by one step and return the sounds it triggered."""
        if self.state is not GameState.PLAYING:
            return []

        self.snake.move()
        head = self.snake.head
        if self.graph.is_wall(head.x, head.y):
            return self._end_game()
        if self.snake.check_self_collision():
            return self._end_game()

        sounds: list[SoundEvent] = []
        if self.food.check_collision(head.x, head.y):
            sounds.append(SoundEvent.EAT)
            self.snake.grow()
            self.scores.add_score(POINTS_PER_FOOD)
            if self.scores.score % POINTS_PER_LEVEL == 0:
                sounds.append(SoundEvent.LEVEL_UP)
                self.next_level()
            self._refill_food()

        if len(self.food) < FOOD_COUNT:
            self._refill_food()
        return sounds

    def next_level(self) -> None:
        """Raise the level, speed up, rebuild the walls and respawn the food."""
        level = self.scores.level + 1
        self.scores.level = level
        self.speed = max(MIN_SPEED, self.speed - SPEED_STEP)
        self.graph.generate_wall_level(level, self.rng)
        self.food.clear()
        self._refill_food()