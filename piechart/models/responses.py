"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class RenderResponse(BaseModel):
    rows: list[str] = Field(default_factory=list)
    text: str = ""
    row_count: int = 0
