"""Shared test fixtures."""

from __future__ import annotations

import pytest

from piechart.chart import DataPoint


def dummy_data(n: int, fill: str = " ") -> list[DataPoint]:
    return [DataPoint(label="", value=1.0, color=None, fill=fill) for _ in range(n)]


class FailingSink:
    """Binary sink that accepts ``accept`` writes, then raises."""

    def __init__(self, accept: int = 0) -> None:
        self.accept = accept
        self.written: list[bytes] = []

    def write(self, data: bytes) -> int:
        if len(self.written) >= self.accept:
            raise OSError("sink closed")
        self.written.append(data)
        return len(data)

    def flush(self) -> None:
        pass


@pytest.fixture
def single_star() -> list[DataPoint]:
    return [DataPoint(label="all", value=1.0, color=None, fill="*")]


@pytest.fixture
def two_halves() -> list[DataPoint]:
    return [
        DataPoint(label="a", value=1.0, fill="a"),
        DataPoint(label="b", value=1.0, fill="b"),
    ]
