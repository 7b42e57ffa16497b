"""Pie chart raster engine."""

from piechart.engine.config import ChartConfig
from piechart.engine.partition import check_values, data_angles
from piechart.engine.raster import rasterize

__all__ = [
    "ChartConfig",
    "check_values",
    "data_angles",
    "rasterize",
]
