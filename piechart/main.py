"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from piechart.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.piechart_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="piechart",
        description="Pie charts rendered as monospaced terminal text",
        version="0.1.0",
    )

    from piechart.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
