"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    piechart_log_level: str = "info"

    # Chart defaults for the HTTP surface and Chart.from_settings
    piechart_default_radius: int = Field(default=8, ge=0)
    piechart_default_aspect_ratio: int = Field(default=2, gt=0)
    piechart_default_legend: bool = False
    piechart_color: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
