"""Ellipse geometry and wedge lookup for the character raster.

Coordinates are character cells relative to the chart center: x grows to
the right, y grows downward (scanline -radius is the top row). Pixel angles
use ``atan2(x, y)``, so 0° points down and the query ``180 - angle`` starts
at twelve o'clock and grows clockwise, matching the partition order.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from piechart.exceptions import WedgeLookupError

_HALF_CIRCLE_DEG = 180.0


def _round_half_up(v: float) -> int:
    """Round non-negative v to the nearest integer, halves away from zero."""
    return int(math.floor(v + 0.5))


def row_width(radius: int, y: int, aspect_ratio: int) -> int:
    """Horizontal half-width w(y) of the stretched ellipse on scanline y."""
    inner = max(0, radius * radius - y * y)
    return _round_half_up(math.sqrt(aspect_ratio) * math.sqrt(inner))


def center_column(radius: int, aspect_ratio: int) -> int:
    """Half-width of the widest row; every row is centered on this column."""
    return _round_half_up(radius * math.sqrt(aspect_ratio))


def pixel_angle(x: float, y: float) -> float:
    return math.degrees(math.atan2(x, y))


def wedge_index(partition: NDArray[np.float64], angle: float) -> int:
    """Index of the first boundary >= the pixel's query angle."""
    query = _HALF_CIRCLE_DEG - angle
    idx = int(np.searchsorted(partition, query, side="left"))
    if idx >= len(partition):
        raise WedgeLookupError(query, float(partition[-1]))
    return idx


def row_wedges(partition: NDArray[np.float64], y: int, width: int) -> NDArray[np.intp]:
    """Wedge index for every column in [-width, width] on scanline y.

    Vectorized form of ``wedge_index``; searchsorted on the monotonic
    partition gives the same answer as a linear scan for the first
    boundary >= query.
    """
    xs = np.arange(-width, width + 1, dtype=np.float64)
    angles = np.degrees(np.arctan2(xs, float(y)))
    queries = _HALF_CIRCLE_DEG - angles
    idx = np.searchsorted(partition, queries, side="left")
    if len(idx) and idx.max() >= len(partition):
        bad = int(np.argmax(idx >= len(partition)))
        raise WedgeLookupError(float(queries[bad]), float(partition[-1]))
    return idx
