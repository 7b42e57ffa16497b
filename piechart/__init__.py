"""Pie charts rendered as monospaced, optionally colored text."""

from piechart.chart import Chart, DataPoint
from piechart.engine.config import ChartConfig
from piechart.exceptions import ChartContractError, PieChartError, WedgeLookupError
from piechart.style import Color, Fixed, Rgb, paint, plain

__all__ = [
    "Chart",
    "ChartConfig",
    "ChartContractError",
    "Color",
    "DataPoint",
    "Fixed",
    "PieChartError",
    "Rgb",
    "WedgeLookupError",
    "paint",
    "plain",
]
