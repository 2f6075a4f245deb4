from __future__ import annotations

from typing import Iterable, Sequence

import typer

from services.aggregator import DailyAverage, SeriesOutput
from services.chart import CHART_TITLE

_COLUMNS = ("day", "soil_moisture_%", "temperature_c", "humidity_%")


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_rows(rows: Iterable[Sequence[str]]) -> None:
    typer.echo("  ".join(f"{name:>16}" for name in _COLUMNS))
    for row in rows:
        typer.echo("  ".join(f"{cell:>16}" for cell in row))


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def render_series(series: SeriesOutput) -> None:
    echo_heading(CHART_TITLE)
    if series.is_empty:
        typer.echo("No data available.")
        return
    echo_rows(
        (label, _fmt(moisture), _fmt(temperature), _fmt(humidity))
        for label, moisture, temperature, humidity in zip(
            series.labels, series.soil_moisture, series.temperature, series.humidity
        )
    )


def render_daily_averages(averages: Sequence[DailyAverage]) -> None:
    echo_heading("Daily Averages")
    if not averages:
        typer.echo("No data available.")
        return
    echo_rows(
        (
            item.day.isoformat(),
            _fmt(item.avg_soil_moisture),
            _fmt(item.avg_temperature),
            _fmt(item.avg_humidity),
        )
        for item in averages
    )
