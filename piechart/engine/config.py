"""Chart configuration — shape and legend options for one or more draws."""

from __future__ import annotations

from dataclasses import dataclass

from piechart.exceptions import ChartContractError

DEFAULT_RADIUS = 8
DEFAULT_ASPECT_RATIO = 2


@dataclass
class ChartConfig:
    """Controls the raster size and whether the side legend is drawn."""

    # Vertical radius in scanlines; the chart is 2*radius + 1 rows tall
    radius: int = DEFAULT_RADIUS

    # Horizontal stretch for non-square character cells (cell height / width)
    aspect_ratio: int = DEFAULT_ASPECT_RATIO

    show_legend: bool = False

    def __post_init__(self) -> None:
        validate_radius(self.radius)
        validate_aspect_ratio(self.aspect_ratio)


def validate_radius(radius: int) -> None:
    if radius < 0:
        raise ChartContractError(f"radius must be non-negative, got {radius}")


def validate_aspect_ratio(aspect_ratio: int) -> None:
    if aspect_ratio <= 0:
        raise ChartContractError(
            f"aspect ratio has to be greater than zero, got {aspect_ratio}"
        )
