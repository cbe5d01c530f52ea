"""Grid connectivity graph used for wall placement and movement checks."""

from __future__ import annotations

import random


class Graph:
    """A 4-connected grid whose wall cells have no connections."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._adjacency: dict[int, set[int]] = {
            self._index(x, y): set(self._grid_neighbors(x, y))
            for x in range(width)
            for y in range(height)
        }

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def _coordinates(self, index: int) -> tuple[int, int]:
        return index % self.width, index // self.width

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _grid_neighbors(self, x: int, y: int):
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if self._in_bounds(nx, ny):
                yield self._index(nx, ny)

    def add_wall(self, x: int, y: int) -> None:
        """Turn a cell into a wall; out-of-range cells are ignored."""
        if not self._in_bounds(x, y):
            return
        wall = self._index(x, y)
        for links in self._adjacency.values():
            links.discard(wall)
        self._adjacency[wall].clear()

    def remove_wall(self, x: int, y: int) -> None:
        """Reconnect a cell with all of its grid neighbours."""
        if not self._in_bounds(x, y):
            return
        current = self._index(x, y)
        links = self._adjacency[current]
        links.clear()
        for neighbor in self._grid_neighbors(x, y):
            links.add(neighbor)
            self._adjacency[neighbor].add(current)

    def is_valid_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """Whether the two cells are directly connected."""
        if not self._in_bounds(to_x, to_y):
            return False
        links = self._adjacency.get(self._index(from_x, from_y))
        return links is not None and self._index(to_x, to_y) in links

    def is_wall(self, x: int, y: int) -> bool:
        """Whether a cell is blocked; anything outside the grid counts as wall."""
        if not self._in_bounds(x, y):
            return True
        links = self._adjacency.get(self._index(x, y))
        return links is not None and not links

    def valid_neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """Cells reachable from (x, y) in one step, in index order."""
        links = self._adjacency.get(self._index(x, y), set())
        return [self._coordinates(index) for index in sorted(links)]

    def clear_walls(self) -> None:
        """Remove every wall from the grid."""
        for x in range(self.width):
            for y in range(self.height):
                self.remove_wall(x, y)

    def generate_wall_level(self, level: int, rng: random.Random | None = None) -> None:
        """Clear the grid and scatter walls for the given level."""
        self.clear_walls()
        rng = rng or random.Random()
        wall_count = min(level * 3, (self.width * self.height) // 4)
        for _ in range(wall_count):
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            if (x < 3 and y < 3) or (x == self.width // 2 and y == self.height // 2):
                continue
            self.add_wall(x, y)