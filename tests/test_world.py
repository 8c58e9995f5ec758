import dataclasses
import math

import pytest

from snakegrid.types import Dimension, Position
from snakegrid.world import (
    SnakeColors,
    camera_location,
    format_score,
    format_seconds,
    grid_world_size,
    link_position_to_vector,
    mesh_scale,
    vertical_fov,
)


DIM = Dimension(12, 7)
CELL = 10


def test_link_vector_z_is_half_cell():
    vec = link_position_to_vector(Position(3, 2), CELL, DIM)
    assert vec[2] == pytest.approx(CELL * 0.5)


def test_link_vector_bottom_row_left_column_is_half_cell():
    vec = link_position_to_vector(Position(0, DIM.height - 1), CELL, DIM)
    assert vec == pytest.approx((CELL * 0.5, CELL * 0.5, CELL * 0.5))


def test_link_vector_moving_down_decreases_world_x():
    a = link_position_to_vector(Position(4, 2), CELL, DIM)
    b = link_position_to_vector(Position(4, 3), CELL, DIM)
    assert a[0] - b[0] == pytest.approx(CELL)
    assert a[1] == pytest.approx(b[1])


def test_link_vector_moving_right_increases_world_y():
    a = link_position_to_vector(Position(4, 2), CELL, DIM)
    b = link_position_to_vector(Position(5, 2), CELL, DIM)
    assert b[1] - a[1] == pytest.approx(CELL)
    assert a[0] == pytest.approx(b[0])


def test_mesh_scale_scalar_world_size():
    assert mesh_scale(10, (2, 5, 10)) == pytest.approx((5.0, 2.0, 1.0))


def test_mesh_scale_vector_world_size_round_trip():
    mesh = (4.0, 8.0, 2.0)
    target = (20.0, 16.0, 3.0)
    scale = mesh_scale(target, mesh)
    assert tuple(s * m for s, m in zip(scale, mesh)) == pytest.approx(target)


def test_mesh_scale_zero_size_raises():
    with pytest.raises(ValueError):
        mesh_scale(10, (1, 0, 1))


def test_mesh_scale_wrong_length_raises():
    with pytest.raises(ValueError):
        mesh_scale((1, 2), (1, 1, 1))


def test_format_seconds_zero():
    assert format_seconds(0) == "00:00"


def test_format_seconds_rounds_half_up():
    assert format_seconds(59.5) == format_seconds(60)
    assert format_seconds(59.4) == format_seconds(59)


def test_format_seconds_seconds_part_wraps_at_minute():
    assert format_seconds(60).endswith(":00")
    assert format_seconds(125).split(":")[1] == format_seconds(5).split(":")[1]


def test_format_score_pads_to_two_digits():
    assert format_score(5) == "05"
    assert format_score(123) == str(123)


def test_vertical_fov_square_aspect_keeps_fov():
    assert vertical_fov(90.0, 1.0) == pytest.approx(90.0)


def test_vertical_fov_narrower_for_wide_viewport():
    assert vertical_fov(90.0, 0.5) < 90.0
    assert vertical_fov(90.0, 2.0) > 90.0


def test_camera_location_none_without_viewport_height():
    assert camera_location(DIM, CELL, (0, 0, 0), 100, 0) is None


def test_camera_location_none_without_grid_height():
    assert camera_location(Dimension(10, 0), CELL, (0, 0, 0), 100, 100) is None


def test_camera_location_centres_over_grid():
    origin = (1.0, 2.0, 3.0)
    loc = camera_location(DIM, CELL, origin, 1920, 1080)
    width, height = grid_world_size(DIM, CELL)
    assert loc[0] == pytest.approx(origin[0] + 0.5 * height)
    assert loc[1] == pytest.approx(origin[1] + 0.5 * width)
    assert loc[2] > origin[2]


def test_camera_location_narrow_viewport_fits_width():
    dim = Dimension(10, 10)
    loc = camera_location(dim, CELL, (0, 0, 0), 100, 100, 90.0)
    margin_width = (dim.width + 2) * CELL
    assert loc[2] == pytest.approx(0.5 * margin_width / math.tan(math.radians(45)))


def test_camera_higher_for_larger_grid():
    small = camera_location(Dimension(10, 5), CELL, (0, 0, 0), 800, 600)
    large = camera_location(Dimension(20, 10), CELL, (0, 0, 0), 800, 600)
    assert large[2] > small[2]


def test_grid_world_size_scales_with_cell_size():
    width, height = grid_world_size(DIM, CELL)
    assert (width, height) == (DIM.width * CELL, DIM.height * CELL)
    assert grid_world_size(DIM, CELL * 2) == (width * 2, height * 2)


def test_snake_colors_replace_changes_one_field():
    colors = SnakeColors()
    red = (1.0, 0.0, 0.0, 1.0)
    changed = dataclasses.replace(colors, food_color=red)
    assert changed.food_color == red
    assert changed.trap_color == colors.trap_color
    assert changed != colors


def test_snake_colors_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SnakeColors().food_color = (1.0, 1.0, 1.0, 1.0)