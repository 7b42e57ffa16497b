"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from piechart.style import parse_color


class DataPointIn(BaseModel):
    label: str = Field(..., description="Legend label")
    value: float = Field(..., ge=0, description="Slice value (non-negative)")
    color: str | None = Field(
        default=None,
        description='Color name ("red"), palette index ("208") or hex ("#ff8800")',
    )
    fill: str = Field(default="•", min_length=1, max_length=1, description="Fill glyph")

    @field_validator("color")
    @classmethod
    def _known_color(cls, v: str | None) -> str | None:
        if v is not None:
            parse_color(v)
        return v


class RenderRequest(BaseModel):
    data: list[DataPointIn] = Field(..., min_length=1, description="Chart slices in drawing order")
    radius: int | None = Field(default=None, ge=0, description="Radius in scanlines")
    aspect_ratio: int | None = Field(default=None, gt=0, description="Horizontal stretch factor")
    legend: bool | None = Field(default=None, description="Draw the side legend")
    color: bool | None = Field(default=None, description="Emit ANSI color escapes")
