"""Mapping between the grid model and world space, plus display formatting."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from .types import Dimension, Position

Vector = tuple[float, float, float]
Color = tuple[float, float, float, float]

_BLACK: Color = (0.0, 0.0, 0.0, 1.0)

# extra cells kept visible around the grid when fitting the camera
GRID_MARGIN = 2.0


@dataclass(frozen=True)
class SnakeColors:
    """One colour scheme: a row of the colour table."""

    grid_background_color: Color = _BLACK
    grid_wall_color: Color = _BLACK
    grid_line_color: Color = _BLACK
    sky_atmosphere_color: Color = _BLACK
    snake_head_color: Color = _BLACK
    snake_link_color: Color = _BLACK
    food_color: Color = _BLACK
    trap_color: Color = _BLACK


def link_position_to_vector(
    position: Position, cell_size: float, dimension: Dimension
) -> Vector:
    """World location of the centre of a grid cell.

    Grid rows run along world X from the bottom row up; grid columns run along
    world Y. The half-cell offset is applied to all three axes.
    """
    half = cell_size * 0.5
    world_x = (dimension.height - 1 - position.y) * cell_size
    world_y = position.x * cell_size
    return (world_x + half, world_y + half, half)


def mesh_scale(
    world_size: Union[float, Sequence[float]], mesh_size: Sequence[float]
) -> Vector:
    """Scale that makes a mesh of ``mesh_size`` fill ``world_size``."""
    if isinstance(world_size, (int, float)):
        target = (float(world_size),) * 3
    else:
        target = tuple(float(value) for value in world_size)
    if len(target) != 3 or len(mesh_size) != 3:
        raise ValueError("sizes must have three components")
    if any(component == 0 for component in mesh_size):
        raise ValueError("mesh size has a zero component")
    return tuple(t / s for t, s in zip(target, mesh_size))  # type: ignore[return-value]


def format_seconds(seconds: float) -> str:
    """Elapsed time as ``MM:SS``, rounded to the nearest second."""
    total = math.floor(seconds + 0.5)
    minutes = math.trunc(total / 60)
    remainder = total - minutes * 60
    return f"{minutes:02d}:{remainder:02d}"


def format_score(score: int) -> str:
    """Score padded to at least two digits."""
    return f"{score:02d}"


def _half_fov_tan(fov_degrees: float) -> float:
    return math.tan(math.radians(fov_degrees * 0.5))


def vertical_fov(horizontal_fov: float, aspect_hw: float) -> float:
    """Vertical field of view in degrees for a viewport with height/width ``aspect_hw``."""
    return math.degrees(
        2.0 * math.atan(math.tan(math.radians(horizontal_fov) * 0.5) * aspect_hw)
    )


def camera_location(
    dimension: Dimension,
    cell_size: float,
    origin: Sequence[float],
    viewport_width: float,
    viewport_height: float,
    fov_degrees: float = 90.0,
) -> Vector | None:
    """Camera position above the grid that fits it, with a margin, in the viewport.

    Returns None when the viewport or the grid has no height.
    """
    if viewport_height == 0 or dimension.height == 0:
        return None

    world_width = dimension.width * cell_size
    world_height = dimension.height * cell_size
    viewport_aspect = viewport_width / viewport_height
    grid_aspect = dimension.width / dimension.height

    if viewport_aspect <= grid_aspect:
        margin_width = (dimension.width + GRID_MARGIN) * cell_size
        height_z = margin_width / _half_fov_tan(fov_degrees)
    else:
        margin_height = (dimension.height + GRID_MARGIN) * cell_size
        fov = vertical_fov(fov_degrees, 1.0 / viewport_aspect)
        height_z = margin_height / _half_fov_tan(fov)

    ox, oy, oz = origin
    return (ox + 0.5 * world_height, oy + 0.5 * world_width, oz + 0.5 * height_z)


def grid_world_size(dimension: Dimension, cell_size: float) -> tuple[float, float]:
    """World width and height covered by a grid, as ``(width, height)``."""
    return (dimension.width * cell_size, dimension.height * cell_size)