"""Window, drawing, sound and the main loop of the snake game."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import pygame

from gridsnake.engine import GRID_HEIGHT, GRID_WIDTH, Engine, GameState, SoundEvent

CELL_SIZE = 25
WINDOW_WIDTH = GRID_WIDTH * CELL_SIZE + 200
WINDOW_HEIGHT = GRID_HEIGHT * CELL_SIZE + 100
FRAME_RATE = 60
TITLE = "Snake Game with Data Structures"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)
YELLOW = (255, 255, 0)

_FONT_CANDIDATES = (
    "C:/Windows/Fonts/arial.ttf",
    "/System/Library/Fonts/Arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
)

_KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_p: "p",
    pygame.K_u: "u",
    pygame.K_h: "h",
    pygame.K_r: "r",
    pygame.K_SPACE: "space",
    pygame.K_ESCAPE: "escape",
}


class App:
    """A pygame window that drives an Engine."""

    def __init__(self, asset_dir: str | Path = "../assets") -> None:
        self.asset_dir = Path(asset_dir)
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.engine = Engine()
        self._clock = pygame.time.Clock()
        self._sounds: dict[SoundEvent, pygame.mixer.Sound] = {}
        self._fonts: dict[int, pygame.font.Font] = {}
        self._init_audio()
        self._apple = self._load_image(self.asset_dir / "images" / "apple.png")
        self._font_path = next((p for p in _FONT_CANDIDATES if Path(p).is_file()), None)
        if self._font_path is None:
            print("Warning: Could not load font. Using default font.")

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            print(f"Audio unavailable: {exc}", file=sys.stderr)
            return
        audio = self.asset_dir / "audio"
        try:
            pygame.mixer.music.load(str(audio / "background.ogg"))
            pygame.mixer.music.set_volume(0.1)
            pygame.mixer.music.play(-1)
        except (pygame.error, OSError):
            print("Failed to load background music", file=sys.stderr)
        for event, filename, label in (
            (SoundEvent.EAT, "eat.wav", "eat"),
            (SoundEvent.COLLISION, "hit.wav", "collision"),
            (SoundEvent.LEVEL_UP, "levelup.wav", "level up"),
        ):
            try:
                sound = pygame.mixer.Sound(str(audio / filename))
            except (pygame.error, OSError):
                print(f"Failed to load {label} sound", file=sys.stderr)
                continue
            sound.set_volume(1.0)
            self._sounds[event] = sound

    @staticmethod
    def _load_image(path: Path) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError):
            print(f"Failed to load food texture: {path}")
            print("Failed to load apple texture!", file=sys.stderr)
            return None
        return pygame.transform.smoothscale(image, (CELL_SIZE, CELL_SIZE))

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self._font_path, size)
            font.set_bold(True)
            self._fonts[size] = font
        return font

    def _text(self, text: str, x: float, y: float, size: int = 24, color=WHITE) -> None:
        font = self._font(size)
        outline = font.render(text, True, BLACK)
        for dx in (-2, 0, 2):
            for dy in (-2, 0, 2):
                if dx or dy:
                    self.screen.blit(outline, (x + dx, y + dy))
        self.screen.blit(font.render(text, True, color), (x, y))

    def _play(self, sounds: list[SoundEvent]) -> None:
        for event in sounds:
            sound = self._sounds.get(event)
            if sound is not None:
                sound.play()

    def run(self) -> None:
        """Process events, advance the game and draw until the window closes."""
        engine = self.engine
        last_step = time.monotonic()
        try:
            while not engine.closed:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        engine.closed = True
                    elif event.type == pygame.KEYDOWN:
                        name = _KEY_NAMES.get(event.key)
                        if name is None:
                            continue
                        before = engine.state
                        engine.handle_key(name)
                        if engine.state is GameState.PLAYING and before is not GameState.PLAYING:
                            last_step = time.monotonic()
                if engine.closed:
                    break
                now = time.monotonic()
                if engine.state is GameState.PLAYING and now - last_step > engine.speed:
                    self._play(engine.update())
                    last_step = now
                self._render()
                self._clock.tick(FRAME_RATE)
        finally:
            pygame.quit()

    def _render(self) -> None:
        self.screen.fill(BLACK)
        state = self.engine.state
        if state is GameState.MENU:
            self._render_menu()
        elif state in (GameState.PLAYING, GameState.PAUSED):
            self._render_game()
        elif state is GameState.GAME_OVER:
            self._render_game_over()
        elif state is GameState.HIGH_SCORES:
            self._render_high_scores()
        pygame.display.flip()

    def _render_menu(self) -> None:
        cx = WINDOW_WIDTH // 2
        self._text("SNAKE GAME", cx - 150, 150, 48, GREEN)
        self._text("Press SPACE to Start", cx - 120, 250)
        self._text("Press H for High Scores", cx - 130, 300)
        self._text("Press ESC to Exit", cx - 100, 350)
        self._text("Controls: WASD keys, P (Pause), U (Undo)", cx - 200, 450, 18)

    def _render_game(self) -> None:
        engine = self.engine
        grid_w = engine.grid_width * CELL_SIZE
        grid_h = engine.grid_height * CELL_SIZE
        pygame.draw.rect(self.screen, (10, 10, 10), (0, 0, grid_w, grid_h))
        line_color = (35, 35, 35)
        for x in range(engine.grid_width + 1):
            pygame.draw.rect(self.screen, line_color, (x * CELL_SIZE, 0, 1, grid_h))
        for y in range(engine.grid_height + 1):
            pygame.draw.rect(self.screen, line_color, (0, y * CELL_SIZE, grid_w, 1))

        for x in range(engine.grid_width):
            for y in range(engine.grid_height):
                if engine.graph.is_wall(x, y):
                    pygame.draw.rect(
                        self.screen, (80, 80, 80), (x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                    )

        for position, segment in enumerate(engine.snake.body):
            color = GREEN if position == 0 else (100, 255, 100)
            rect = (segment.x * CELL_SIZE + 1, segment.y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
            pygame.draw.rect(self.screen, color, rect)

        for x, y in engine.food.positions:
            if self._apple is not None:
                self.screen.blit(self._apple, (x * CELL_SIZE, y * CELL_SIZE))
            else:
                center = (x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)
                pygame.draw.circle(self.screen, RED, center, CELL_SIZE // 2 - 2)

        self._render_ui()

        if engine.state is GameState.PAUSED:
            self._text("PAUSED", WINDOW_WIDTH // 2 - 80, WINDOW_HEIGHT // 2 - 50, 36, YELLOW)
            self._text("Press P to Resume", WINDOW_WIDTH // 2 - 100, WINDOW_HEIGHT // 2)

    def _render_ui(self) -> None:
        engine = self.engine
        left = engine.grid_width * CELL_SIZE
        ui_x = left + 10

        panel = pygame.Surface((190, WINDOW_HEIGHT - 20), pygame.SRCALPHA)
        panel.fill((25, 25, 25, 230))
        self.screen.blit(panel, (left + 5, 10))
        pygame.draw.rect(self.screen, WHITE, (left + 5, 10, 190, WINDOW_HEIGHT - 20), 2)

        self._text(f"Score: {engine.scores.score}", ui_x, 20, 22)
        self._text(f"Level: {engine.scores.level}", ui_x, 50, 22)
        self._text(f"Length: {len(engine.snake)}", ui_x, 80, 22)

        self._text("Recent Points:", ui_x, 120, 18, CYAN)
        for row, points in enumerate(engine.scores.recent_scores()):
            self._text(f"+{points}", ui_x, 145 + row * 20, 16, GREEN)

        self._text(f"Food: {len(engine.food)}", ui_x, 260, 22, RED)

        self._text("Controls:", ui_x, 310, 18, YELLOW)
        self._text("WASD: Move", ui_x, 335, 14)
        self._text("P: Pause", ui_x, 355, 14)
        self._text("U: Undo Score", ui_x, 375, 14)

    def _render_game_over(self) -> None:
        cx = WINDOW_WIDTH // 2
        scores = self.engine.scores
        self._text("GAME OVER", cx - 120, 200, 36, RED)
        self._text(f"Final Score: {scores.score}", cx - 100, 270)
        self._text(f"Level Reached: {scores.level}", cx - 100, 320)
        self._text("Press SPACE for Menu", cx - 120, 370)
        self._text("Press R to Restart", cx - 100, 420)

    def _render_high_scores(self) -> None:
        cx = WINDOW_WIDTH // 2
        self._text("HIGH SCORES", cx - 120, 100, 36, YELLOW)
        high_scores = self.engine.scores.high_scores()
        for rank, entry in enumerate(high_scores[:10], start=1):
            self._text(f"{rank}. Score: {entry.score} Level: {entry.level}", 50, 150 + (rank - 1) * 30, 20)
        if not high_scores:
            self._text("No high scores yet!", cx - 100, 200)
        self._text("Press ESC to return to menu", cx - 150, WINDOW_HEIGHT - 50)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play snake on a grid with walls.")
    parser.add_argument("--assets", default="../assets", help="directory holding audio/ and images/")
    args = parser.parse_args(argv)

    print("Starting Snake Game...")
    try:
        app = App(args.assets)
        app.run()
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Game finished normally.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())