"""The snake: a chain of grid segments moving in one of four directions."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Segment(NamedTuple):
    x: int
    y: int


class Snake:
    """A snake whose head is the first segment of its body."""

    def __init__(self, start_x: int, start_y: int) -> None:
        self._body: deque[Segment] = deque()
        self.reset(start_x, start_y)

    def reset(self, start_x: int, start_y: int) -> None:
        """Place a three-segment snake facing right with its head at the start."""
        self._body = deque(Segment(start_x - offset, start_y) for offset in range(3))
        self.direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._growing = False

    def move(self) -> None:
        """Advance one cell in the pending direction."""
        self.direction = self._next_direction
        dx, dy = self.direction.value
        head = self._body[0]
        self._body.appendleft(Segment(head.x + dx, head.y + dy))
        if self._growing:
            self._growing = False
        else:
            self._body.pop()

    def grow(self) -> None:
        """Keep the tail on the next move."""
        self._growing = True

    def set_direction(self, direction: Direction) -> None:
        """Queue a turn unless it reverses the current heading."""
        if direction is not self.direction.opposite:
            self._next_direction = direction

    def check_self_collision(self) -> bool:
        head = self._body[0]
        return any(segment == head for segment in list(self._body)[1:])

    def occupies(self, x: int, y: int) -> bool:
        return Segment(x, y) in self._body

    @property
    def head(self) -> Segment:
        return self._body[0]

    @property
    def body(self) -> list[Segment]:
        return list(self._body)

    def __len__(self) -> int:
        return len(self._body)