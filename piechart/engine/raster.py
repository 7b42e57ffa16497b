"""Scanline rasterizer — turns a config and data points into text rows."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from piechart.engine.config import ChartConfig
from piechart.engine.legend import anchor_rows, format_label, legend_padding
from piechart.engine.partition import check_values, data_angles, value_shares
from piechart.engine.shape import center_column, row_wedges, row_width
from piechart.style import Styler, paint

if TYPE_CHECKING:
    from piechart.chart import DataPoint

logger = logging.getLogger(__name__)


def rasterize(
    config: ChartConfig,
    points: Sequence[DataPoint],
    styler: Styler = paint,
) -> Iterator[str]:
    """Validate the data and return an iterator over the chart's rows.

    Validation runs before the iterator is returned, so contract errors
    surface before the first row is produced.
    """
    total = check_values(points)
    partition = data_angles(total, points)
    logger.debug(
        "Rasterizing %d points: radius=%d aspect_ratio=%d legend=%s",
        len(points),
        config.radius,
        config.aspect_ratio,
        config.show_legend,
    )
    return _rows(config, points, styler, value_shares(points), partition)


def _rows(
    config: ChartConfig,
    points: Sequence[DataPoint],
    styler: Styler,
    shares: NDArray[np.float64],
    partition: NDArray[np.float64],
) -> Iterator[str]:
    radius = config.radius
    aspect_ratio = config.aspect_ratio
    center_x = center_column(radius, aspect_ratio)
    anchors = anchor_rows(len(points)) if config.show_legend else {}

    # Each glyph is styled once per draw, not once per pixel
    glyphs = [styler(p.color, p.fill) for p in points]

    for y in range(-radius, radius + 1):
        width = row_width(radius, y, aspect_ratio)
        parts = [" " * (center_x - width)]
        parts.extend(glyphs[i] for i in row_wedges(partition, y, width))

        if config.show_legend:
            parts.append(legend_padding(center_x, width))
            idx = anchors.get(y)
            if idx is not None:
                parts.append(format_label(points[idx], float(shares[idx]), styler))

        yield "".join(parts)
