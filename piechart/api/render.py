"""POST /api/render — draw a chart and return its rows."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from piechart.chart import Chart, DataPoint
from piechart.config import Settings
from piechart.dependencies import get_settings
from piechart.exceptions import ChartContractError
from piechart.models.requests import RenderRequest
from piechart.models.responses import RenderResponse
from piechart.style import paint, parse_color, plain

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(
    req: RenderRequest,
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    try:
        chart = Chart.from_settings(settings)
        if req.color is not None:
            chart.styler = paint if req.color else plain
        if req.radius is not None:
            chart.radius(req.radius)
        if req.aspect_ratio is not None:
            chart.aspect_ratio(req.aspect_ratio)
        if req.legend is not None:
            chart.legend(req.legend)

        data = [
            DataPoint(
                label=d.label,
                value=d.value,
                color=parse_color(d.color) if d.color else None,
                fill=d.fill,
            )
            for d in req.data
        ]
        rows = chart.render(data)
    except ChartContractError as e:
        logger.warning("Render rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return RenderResponse(
        rows=rows,
        text="".join(f"{row}\n" for row in rows),
        row_count=len(rows),
    )
