"""The game board: a walled grid of typed cells."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .randomizer import PositionRandomizer, RandomPositionRandomizer
from .types import CellType, Dimension, Position

logger = logging.getLogger(__name__)

_SYMBOLS = {
    CellType.EMPTY: ".",
    CellType.WALL: "*",
    CellType.SNAKE: "=",
    CellType.FOOD: "F",
    CellType.TRAP: "T",
}


class Grid:
    """A playing field surrounded by a one-cell wall on every side."""

    def __init__(
        self, dimension: Dimension, randomizer: PositionRandomizer | None = None
    ) -> None:
        self._dimension = Dimension(dimension.width + 2, dimension.height + 2)
        self._randomizer = randomizer if randomizer is not None else RandomPositionRandomizer()
        self._cells = [CellType.EMPTY] * (self._dimension.width * self._dimension.height)
        self._indices: dict[CellType, list[int]] = {
            CellType.SNAKE: [],
            CellType.WALL: [],
            CellType.FOOD: [],
            CellType.TRAP: [],
        }
        self._init_walls()
        logger.debug("grid created:\n%s", self.render())

    @property
    def dimension(self) -> Dimension:
        """Full size including the walls."""
        return self._dimension

    @property
    def cells(self) -> tuple[CellType, ...]:
        return tuple(self._cells)

    def _init_walls(self) -> None:
        width, height = self._dimension.width, self._dimension.height
        for y in range(height):
            for x in range(width):
                if x in (0, width - 1) or y in (0, height - 1):
                    self._set(Position(x, y), CellType.WALL)

    def _index(self, position: Position) -> int:
        return position.x + position.y * self._dimension.width

    def _set(self, position: Position, cell_type: CellType) -> None:
        if cell_type not in self._indices:
            raise ValueError(f"cannot place cells of type {cell_type.name}")
        index = self._index(position)
        self._cells[index] = cell_type
        self._indices[cell_type].append(index)

    def _reset(self, cell_type: CellType) -> None:
        if cell_type not in self._indices:
            raise ValueError(f"cannot reset cells of type {cell_type.name}")
        for index in self._indices[cell_type]:
            self._cells[index] = CellType.EMPTY
        self._indices[cell_type].clear()

    def update_links(self, positions: Iterable[Position], cell_type: CellType) -> None:
        """Clear all cells of ``cell_type`` and mark each of ``positions`` with it."""
        self._reset(cell_type)
        for position in positions:
            self._set(position, cell_type)

    def update(
        self, position: Position, cell_type: CellType, reset_cells: bool = True
    ) -> None:
        """Mark one cell, first clearing earlier cells of that type unless told not to."""
        if reset_cells:
            self._reset(cell_type)
        self._set(position, cell_type)

    def hit_test(self, position: Position, cell_type: CellType) -> bool:
        return self._cells[self._index(position)] is cell_type

    def random_empty_position(self) -> Position | None:
        """Return an empty cell chosen by the randomizer, or None if the grid is full."""
        return self._randomizer.generate_position(self._dimension, self._cells)

    @staticmethod
    def center(width: int, height: int) -> Position:
        """Centre cell of a playing field of the given size, in walled coordinates."""
        return Position(width // 2 + 1, height // 2 + 1)

    def render(self) -> str:
        """Text picture of the grid, one line per row."""
        width = self._dimension.width
        rows = (self._cells[start:start + width] for start in range(0, len(self._cells), width))
        return "\n".join("".join(f"{_SYMBOLS[cell]} " for cell in row) for row in rows)