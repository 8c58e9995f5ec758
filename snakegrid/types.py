"""Core value types shared by the snake game model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Dimension:
    """Width and height of a grid, in cells."""

    width: int
    height: int


class CellType(Enum):
    """What occupies a grid cell."""

    EMPTY = 0
    WALL = 1
    SNAKE = 2
    FOOD = 3
    TRAP = 4


@dataclass(frozen=True)
class Input:
    """A movement direction; each component is -1, 0 or 1."""

    x: int
    y: int

    DEFAULT: ClassVar[Input]

    def opposite(self, other: Input) -> bool:
        """Return True if ``other`` points the exact opposite way on a moving axis."""
        return (self.x == -other.x and self.x != 0) or (
            self.y == -other.y and self.y != 0
        )


Input.DEFAULT = Input(1, 0)


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the grid."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Position]

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)


Position.ZERO = Position(0, 0)


@dataclass
class SnakeSettings:
    """Initial length and head position of the snake."""

    default_size: int = 4
    start_position: Position = Position.ZERO


@dataclass
class Settings:
    """Everything needed to start a game."""

    grid_size: Dimension = field(default_factory=lambda: Dimension(10, 10))
    snake: SnakeSettings = field(default_factory=SnakeSettings)
    game_speed: float = 1.0
    has_traps: bool = False


class GameplayEvent(Enum):
    """Events a running game reports to its subscribers."""

    GAME_OVER = 0
    GAME_COMPLETED = 1
    FOOD_TAKEN = 2