"""Public chart API — data points, builder-style chart, draw entry points."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Sequence, TextIO

from piechart.engine.config import ChartConfig, validate_aspect_ratio, validate_radius
from piechart.engine.raster import rasterize
from piechart.exceptions import ChartContractError
from piechart.style import AnyColor, Styler, paint, plain

if TYPE_CHECKING:
    from piechart.config import Settings

logger = logging.getLogger(__name__)

# Bytes collected before each write to the sink
_BUFFER_SIZE = 8 * 1024


@dataclass(frozen=True)
class DataPoint:
    """One labeled slice of the chart."""

    label: str
    value: float
    color: AnyColor | None = None
    # Single display character used for every pixel of the wedge
    fill: str = "•"

    def __post_init__(self) -> None:
        try:
            value = float(self.value)
        except (OverflowError, TypeError, ValueError) as e:
            raise ChartContractError(
                f"value of {self.label!r} is not a usable number: {e}"
            ) from e
        object.__setattr__(self, "value", value)
        if len(self.fill) != 1:
            raise ChartContractError(
                f"fill must be a single character, got {self.fill!r}"
            )


class _BufferedSink:
    """Collects encoded rows and writes them to the sink in large chunks."""

    def __init__(self, sink: BinaryIO, size: int = _BUFFER_SIZE) -> None:
        self._sink = sink
        self._size = size
        self._buf = bytearray()

    def write_line(self, line: str) -> None:
        self._buf += line.encode("utf-8")
        self._buf += b"\n"
        if len(self._buf) >= self._size:
            self._drain()

    def _drain(self) -> None:
        if self._buf:
            self._sink.write(bytes(self._buf))
            self._buf.clear()

    def close(self) -> None:
        self._drain()
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()


class _TextSink:
    """Binary view of a text stream that has no underlying buffer.

    Chunks from _BufferedSink always end on a row boundary, so each one
    decodes on its own.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> int:
        self._stream.write(data.decode("utf-8"))
        return len(data)

    def flush(self) -> None:
        self._stream.flush()


class Chart:
    """Builder for pie charts rendered as text.

    Usage:
        Chart().radius(9).aspect_ratio(2).legend(True).draw(data)
    """

    def __init__(self, config: ChartConfig | None = None, styler: Styler = paint) -> None:
        self._config = config or ChartConfig()
        self.styler = styler

    @classmethod
    def from_settings(cls, settings: Settings, styler: Styler | None = None) -> Chart:
        config = ChartConfig(
            radius=settings.piechart_default_radius,
            aspect_ratio=settings.piechart_default_aspect_ratio,
            show_legend=settings.piechart_default_legend,
        )
        if styler is None:
            styler = paint if settings.piechart_color else plain
        return cls(config, styler)

    @property
    def config(self) -> ChartConfig:
        return self._config

    def radius(self, radius: int) -> Chart:
        validate_radius(radius)
        self._config.radius = radius
        return self

    def aspect_ratio(self, aspect_ratio: int) -> Chart:
        validate_aspect_ratio(aspect_ratio)
        self._config.aspect_ratio = aspect_ratio
        return self

    def legend(self, legend: bool) -> Chart:
        self._config.show_legend = legend
        return self

    def render(self, data: Sequence[DataPoint]) -> list[str]:
        """Return the chart rows without writing anywhere."""
        return list(rasterize(self._config, data, self.styler))

    def draw(self, data: Sequence[DataPoint]) -> None:
        """Draw to standard output.

        Text-only streams (notebooks, a replaced io.StringIO) get decoded rows.
        """
        buffer = getattr(sys.stdout, "buffer", None)
        self.draw_into(buffer if buffer is not None else _TextSink(sys.stdout), data)

    def draw_into(self, sink: BinaryIO, data: Sequence[DataPoint]) -> None:
        """Draw into a binary sink, one newline-terminated UTF-8 row at a time.

        Raises:
            ChartContractError: invalid data, before anything is written.
            OSError: whatever the sink raises; rows already written stay written.
        """
        rows = rasterize(self._config, data, self.styler)
        out = _BufferedSink(sink)
        count = 0
        for row in rows:
            out.write_line(row)
            count += 1
        out.close()
        logger.debug("Drew %d rows for %d points", count, len(data))
