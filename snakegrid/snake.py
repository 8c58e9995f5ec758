"""The snake: an ordered chain of positions, head first."""

from __future__ import annotations

from collections import deque

from .types import Input, Position, SnakeSettings


class Snake:
    """A snake that moves one cell per step and can grow at its tail."""

    def __init__(self, settings: SnakeSettings) -> None:
        start = settings.start_position
        # links laid out horizontally to the left of the head
        self._links: deque[Position] = deque(
            Position(start.x - i, start.y) for i in range(settings.default_size)
        )
        self._direction = Input.DEFAULT

    @property
    def links(self) -> tuple[Position, ...]:
        return tuple(self._links)

    @property
    def head(self) -> Position:
        return self._links[0]

    @property
    def tail(self) -> Position:
        return self._links[-1]

    @property
    def direction(self) -> Input:
        return self._direction

    def move(self, direction: Input) -> None:
        """Advance one cell; a reversal of the current direction is ignored."""
        if not self._direction.opposite(direction):
            self._direction = direction
        self._links.pop()
        step = Position(self._direction.x, self._direction.y)
        self._links.appendleft(self._links[0] + step if self._links else step)

    def increase_tail(self) -> None:
        """Grow by one link placed on the current tail."""
        self._links.append(self._links[-1])

    def __len__(self) -> int:
        return len(self._links)