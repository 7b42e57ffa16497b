"""Legend placement — one entry per data point beside the circle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from piechart.style import Styler, paint

if TYPE_CHECKING:
    from piechart.chart import DataPoint

# Columns between the widest possible row and the legend text
LEGEND_GAP = 2


def anchor_rows(count: int) -> dict[int, int]:
    """Map scanline y → data point index.

    Entries sit two scanlines apart, centered on y=0, first point on top.
    Anchors beyond the chart's radius are never visited by the raster.
    """
    last = count - 1
    return {i * 2 - last: i for i in range(count)}


def legend_padding(center_x: int, width: int) -> str:
    """Spaces from the end of a row body to the legend column."""
    return " " * (center_x - width + LEGEND_GAP)


def format_label(point: DataPoint, share: float, styler: Styler = paint) -> str:
    """Legend entry; share is the point's fraction of the total."""
    fill = styler(point.color, point.fill)
    return f"{fill} {point.label} {share * 100.0:.2f}%"
