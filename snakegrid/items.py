"""Items that occupy a single grid cell."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Position


@dataclass
class Food:
    """Something the snake eats to grow and score."""

    position: Position = Position.ZERO


@dataclass
class Trap:
    """A cell that kills the snake on contact."""

    position: Position = Position.ZERO