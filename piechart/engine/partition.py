"""Angle partition — cumulative wedge boundaries in degrees.

Point i owns the half-open interval (boundary[i-1], boundary[i]], with an
implicit boundary of 0 before the first point. The last boundary closes the
circle at 360 up to floating-point rounding.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from piechart.exceptions import ChartContractError

if TYPE_CHECKING:
    from piechart.chart import DataPoint

FULL_CIRCLE_DEG = 360.0


def total_value(points: Sequence[DataPoint]) -> float:
    return float(sum(p.value for p in points))


def check_values(points: Sequence[DataPoint]) -> float:
    """Validate the numeric preconditions and return the total.

    The total may be ``inf`` when finite values overflow on summing;
    ``value_shares`` and ``data_angles`` still give exact proportions then.

    Raises:
        ChartContractError: empty data, a negative or non-finite value,
            or a total that is not strictly positive.
    """
    if not points:
        raise ChartContractError("chart data cannot be empty")
    for i, p in enumerate(points):
        try:
            value = float(p.value)
        except (OverflowError, TypeError, ValueError) as e:
            raise ChartContractError(
                f"value of data point {i} ({p.label!r}) is not a usable number: {e}"
            ) from e
        if not math.isfinite(value) or value < 0:
            raise ChartContractError(
                f"value of data point {i} ({p.label!r}) must be finite and non-negative, got {p.value}"
            )
    total = total_value(points)
    if total <= 0:
        raise ChartContractError("sum of chart values must be greater than zero")
    return total


def value_shares(points: Sequence[DataPoint]) -> NDArray[np.float64]:
    """Each point's fraction of the total.

    Values are divided by the largest one before summing, so the sum
    cannot overflow.
    """
    values = np.fromiter((p.value for p in points), dtype=np.float64, count=len(points))
    scaled = values / values.max()
    return scaled / scaled.sum()


def data_angles(total: float, points: Sequence[DataPoint]) -> NDArray[np.float64]:
    """Running sum of each point's share of the circle, in input order."""
    if not math.isfinite(total):
        return np.cumsum(value_shares(points) * FULL_CIRCLE_DEG)
    shares = np.fromiter((p.value for p in points), dtype=np.float64, count=len(points))
    return np.cumsum(shares / total * FULL_CIRCLE_DEG)
