"""Food items placed on the grid."""

from __future__ import annotations

import random
from collections.abc import Iterable


class Food:
    """A bounded collection of food positions."""

    def __init__(self, max_food: int = 3, rng: random.Random | None = None) -> None:
        self.max_food = max_food
        self._rng = rng or random.Random()
        self._positions: list[tuple[int, int]] = []

    def spawn(self, x: int, y: int) -> None:
        """Place food at a cell if there is room for more."""
        if len(self._positions) < self.max_food:
            self._positions.append((x, y))

    def spawn_random(
        self, grid_width: int, grid_height: int, occupied: Iterable[tuple[int, int]]
    ) -> None:
        """Fill up to the limit with food on random free cells."""
        blocked = {(x, y) for x, y in occupied} | set(self._positions)
        free = grid_width * grid_height - sum(
            1 for x, y in blocked if 0 <= x < grid_width and 0 <= y < grid_height
        )
        if free < self.max_food - len(self._positions):
            raise ValueError("not enough free cells to place food")
        while len(self._positions) < self.max_food:
            cell = (self._rng.randrange(grid_width), self._rng.randrange(grid_height))
            if cell not in blocked:
                self._positions.append(cell)
                blocked.add(cell)

    def check_collision(self, x: int, y: int) -> bool:
        """Eat the food at (x, y) if there is any."""
        try:
            self._positions.remove((x, y))
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._positions.clear()

    @property
    def positions(self) -> list[tuple[int, int]]:
        return list(self._positions)

    def __len__(self) -> int:
        return len(self._positions)