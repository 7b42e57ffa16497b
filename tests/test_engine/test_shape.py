"""Tests for ellipse widths and wedge lookup."""

import numpy as np
import pytest

from piechart.engine.shape import (
    center_column,
    pixel_angle,
    row_wedges,
    row_width,
    wedge_index,
)
from piechart.exceptions import WedgeLookupError


def test_widths_radius_2_square_cells():
    widths = [row_width(2, y, 1) for y in range(-2, 3)]
    assert widths == [0, 2, 2, 2, 0]


def test_width_stretches_with_aspect_ratio():
    # sqrt(4) * 3 = 6
    assert row_width(3, 0, 4) == 6
    assert center_column(3, 4) == 6


def test_center_column_default_chart():
    # round(8 * sqrt(2)) = round(11.31)
    assert center_column(8, 2) == 11


def test_radius_zero():
    assert row_width(0, 0, 5) == 0
    assert center_column(0, 5) == 0


def test_widths_symmetric_and_bounded():
    for radius in range(0, 21):
        for aspect_ratio in range(1, 11):
            cx = center_column(radius, aspect_ratio)
            for y in range(0, radius + 1):
                w = row_width(radius, y, aspect_ratio)
                assert w == row_width(radius, -y, aspect_ratio)
                assert 0 <= w <= cx


def test_pixel_angle_convention():
    # atan2(x, y): 0° points down, 180° points up
    assert pixel_angle(0, 1) == 0.0
    assert pixel_angle(0, -1) == 180.0
    assert pixel_angle(1, 0) == 90.0
    assert pixel_angle(-1, 0) == -90.0


def test_halves_clockwise_from_top():
    partition = np.array([180.0, 360.0])
    assert wedge_index(partition, pixel_angle(0, -1)) == 0  # top
    assert wedge_index(partition, pixel_angle(1, 0)) == 0  # right
    assert wedge_index(partition, pixel_angle(0, 1)) == 0  # bottom, on the boundary
    assert wedge_index(partition, pixel_angle(-1, 0)) == 1  # left
    assert wedge_index(partition, pixel_angle(-1, -1)) == 1  # upper-left


def test_single_wedge_takes_everything():
    partition = np.array([360.0])
    for y in range(-3, 4):
        assert set(row_wedges(partition, y, 5).tolist()) == {0}


def test_row_wedges_matches_scalar_lookup():
    partition = np.array([30.0, 100.0, 100.0, 250.0, 360.0])
    for y in range(-6, 7):
        width = 9
        vector = row_wedges(partition, y, width).tolist()
        scalar = [wedge_index(partition, pixel_angle(x, y)) for x in range(-width, width + 1)]
        assert vector == scalar


def test_lookup_outside_partition_raises():
    partition = np.array([90.0])
    with pytest.raises(WedgeLookupError):
        wedge_index(partition, pixel_angle(-1, 0))
    with pytest.raises(WedgeLookupError):
        row_wedges(partition, 0, 2)
