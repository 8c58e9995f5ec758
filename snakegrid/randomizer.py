"""Strategies for picking an empty cell on the grid."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .types import CellType, Dimension, Position


class PositionRandomizer(ABC):
    """Chooses an empty interior cell of a walled grid."""

    @abstractmethod
    def generate_position(
        self, dimension: Dimension, cells: Sequence[CellType]
    ) -> Position | None:
        """Return an empty position, or None if there is none."""


class RandomPositionRandomizer(PositionRandomizer):
    """Starts at a random interior cell and scans row by row, wrapping around."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def generate_position(
        self, dimension: Dimension, cells: Sequence[CellType]
    ) -> Position | None:
        max_x = dimension.width - 2
        max_y = dimension.height - 2
        start_x = self._rng.randint(1, max_x)
        start_y = self._rng.randint(1, max_y)
        x, y = start_x, start_y

        while True:
            if cells[x + y * dimension.width] is CellType.EMPTY:
                return Position(x, y)
            x += 1
            if x > max_x:
                x = 1
                y += 1
                if y > max_y:
                    y = 1
            if (x, y) == (start_x, start_y):
                return None