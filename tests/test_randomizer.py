import random

import pytest

from snakegrid.randomizer import PositionRandomizer, RandomPositionRandomizer
from snakegrid.types import CellType, Dimension, Position


class FixedRng:
    """Returns preset values from randint, in order."""

    def __init__(self, *values):
        self._values = list(values)

    def randint(self, low, high):
        value = self._values.pop(0)
        assert low <= value <= high
        return value


def walled_cells(dimension, fill=CellType.EMPTY):
    cells = []
    for y in range(dimension.height):
        for x in range(dimension.width):
            border = x in (0, dimension.width - 1) or y in (0, dimension.height - 1)
            cells.append(CellType.WALL if border else fill)
    return cells


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        PositionRandomizer()


def test_returns_start_cell_when_empty():
    dim = Dimension(6, 5)
    randomizer = RandomPositionRandomizer(FixedRng(2, 3))
    assert randomizer.generate_position(dim, walled_cells(dim)) == Position(2, 3)


def test_scans_forward_along_row():
    dim = Dimension(6, 5)
    cells = walled_cells(dim, CellType.SNAKE)
    cells[4 + 1 * dim.width] = CellType.EMPTY
    randomizer = RandomPositionRandomizer(FixedRng(2, 1))
    assert randomizer.generate_position(dim, cells) == Position(4, 1)


def test_wraps_from_last_cell_to_first():
    dim = Dimension(5, 4)
    cells = walled_cells(dim, CellType.FOOD)
    cells[1 + 1 * dim.width] = CellType.EMPTY
    cells[2 + 1 * dim.width] = CellType.EMPTY
    randomizer = RandomPositionRandomizer(FixedRng(3, 2))
    assert randomizer.generate_position(dim, cells) == Position(1, 1)


def test_full_grid_returns_none():
    dim = Dimension(5, 5)
    cells = walled_cells(dim, CellType.SNAKE)
    assert RandomPositionRandomizer(random.Random(1)).generate_position(dim, cells) is None


@pytest.mark.parametrize("seed", range(20))
def test_result_is_empty_interior_cell(seed):
    dim = Dimension(8, 6)
    rng = random.Random(seed)
    cells = walled_cells(dim)
    for index, cell in enumerate(cells):
        if cell is CellType.EMPTY and rng.random() < 0.7:
            cells[index] = CellType.SNAKE
    cells[3 + 2 * dim.width] = CellType.EMPTY
    pos = RandomPositionRandomizer(random.Random(seed)).generate_position(dim, cells)
    assert 1 <= pos.x <= dim.width - 2
    assert 1 <= pos.y <= dim.height - 2
    assert cells[pos.x + pos.y * dim.width] is CellType.EMPTY


def test_single_empty_cell_is_always_found():
    dim = Dimension(7, 7)
    cells = walled_cells(dim, CellType.TRAP)
    cells[5 + 4 * dim.width] = CellType.EMPTY
    for seed in range(15):
        found = RandomPositionRandomizer(random.Random(seed)).generate_position(dim, cells)
        assert found == Position(5, 4)