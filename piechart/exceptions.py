"""Error taxonomy for chart rendering.

Contract violations are caller bugs and are raised before any output is
written. Sink failures are not wrapped: the sink's own ``OSError`` reaches
the caller unchanged.
"""

from __future__ import annotations


class PieChartError(Exception):
    """Base class for all piechart errors."""


class ChartContractError(PieChartError, ValueError):
    """Invalid configuration or data passed by the caller."""


class WedgeLookupError(PieChartError, RuntimeError):
    """A pixel angle fell outside the angle partition."""

    def __init__(self, query: float, last_boundary: float) -> None:
        self.query = query
        self.last_boundary = last_boundary
        super().__init__(
            f"No wedge covers query angle {query:.6f} (last boundary {last_boundary:.6f})"
        )
