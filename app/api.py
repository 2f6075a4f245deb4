"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.schemas import ChartResponse
from services.dashboard import ChartRefresher, build_default_refresher

router = APIRouter()


def get_refresher() -> ChartRefresher:
    return build_default_refresher()


@router.get(
    "/chart",
    response_model=ChartResponse,
    summary="Daily averages of the most recent days.",
)
async def get_chart(
    refresher: ChartRefresher = Depends(get_refresher),
) -> ChartResponse:
    return ChartResponse.from_refresher(refresher)


@router.post(
    "/chart/refresh",
    response_model=ChartResponse,
    summary="Fetch readings again and recompute the daily averages.",
)
async def refresh_chart(
    refresher: ChartRefresher = Depends(get_refresher),
) -> ChartResponse:
    await refresher.refresh()
    return ChartResponse.from_refresher(refresher)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /chart for data and /ui for the chart."}
