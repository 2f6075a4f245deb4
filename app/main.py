from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from app.web import router as web_router
from logging_config import configure_logging
from services.dashboard import build_default_refresher


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    refresher = build_default_refresher()
    refresher.trigger()
    try:
        yield
    finally:
        await refresher.close()
        build_default_refresher.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Soil Trends Dashboard",
        description="Daily averages of soil moisture, temperature and humidity readings.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    app.include_router(web_router)
    return app

app = create_app()
