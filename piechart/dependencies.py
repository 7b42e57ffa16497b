"""FastAPI dependency injection."""

from __future__ import annotations

from piechart.config import settings


def get_settings():
    return settings
