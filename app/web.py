from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from services.chart import CHART_TITLE, build_chart_config
from services.dashboard import ChartRefresher, build_default_refresher


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_refresher() -> ChartRefresher:
    return build_default_refresher()


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_chart", response_class=HTMLResponse)
async def ui_chart(
    request: Request,
    refresher: ChartRefresher = Depends(get_refresher),
) -> HTMLResponse:
    series = refresher.series
    loading = series is None or series.is_empty
    return templates.TemplateResponse(
        request,
        "ui/chart.html",
        {
            "title": CHART_TITLE,
            "loading": loading,
            "chart_config": None if loading else build_chart_config(series),
            "error": refresher.last_error,
        },
    )
