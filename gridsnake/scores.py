"""Score keeping: current score, undo history, recent points and high scores."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreEntry:
    score: int = 0
    level: int = 0
    timestamp: str = ""


def current_timestamp() -> str:
    """Local time formatted as YYYY-MM-DD HH:MM:SS."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class ScoreManager:
    """Tracks one game's score and the table of high scores across games."""

    MAX_HIGH_SCORES = 10
    MAX_RECENT_SCORES = 5

    def __init__(self) -> None:
        self.score = 0
        self.level = 1
        self._history: list[ScoreEntry] = []
        self._recent: deque[int] = deque(maxlen=self.MAX_RECENT_SCORES)
        self._high_scores: list[ScoreEntry] = []

    def add_score(self, points: int) -> None:
        self._history.append(ScoreEntry(self.score, self.level, current_timestamp()))
        self.score += points
        self._recent.append(points)

    def game_over(self) -> None:
        """Record the current score in the high-score table."""
        self._high_scores.append(ScoreEntry(self.score, self.level, current_timestamp()))
        self._high_scores.sort(key=lambda entry: entry.score, reverse=True)
        del self._high_scores[self.MAX_HIGH_SCORES:]

    def reset(self) -> None:
        """Start a new game; high scores are kept."""
        self.score = 0
        self.level = 1
        self._history.clear()
        self._recent.clear()

    def recent_scores(self) -> list[int]:
        """The latest awarded points, oldest first."""
        return list(self._recent)

    def high_scores(self) -> list[ScoreEntry]:
        return list(self._high_scores)

    def can_undo(self) -> bool:
        return bool(self._history)

    def undo_last_score(self) -> None:
        """Restore score and level from before the last award, if any."""
        if self._history:
            entry = self._history.pop()
            self.score = entry.score
            self.level = entry.level