from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import fetch_readings
from cli.config import CLIConfig, load_config
from cli.render import render_daily_averages, render_series
from services.aggregator import DailyAggregator


@dataclass
class CLIState:
    config: CLIConfig
    aggregator: DailyAggregator


app = typer.Typer(
    help="Daily soil moisture, temperature and humidity trends from a readings endpoint.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1, message="CLI state is uninitialized.")
    return state


@app.callback()
def main(
    ctx: typer.Context,
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Readings endpoint URL (defaults to READINGS_ENDPOINT_URL env).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the readings endpoint.",
    ),
) -> None:
    """Entry point for the CLI."""
    ctx.obj = CLIState(
        config=load_config(endpoint=endpoint, timeout=timeout),
        aggregator=DailyAggregator(),
    )


@app.command("chart")
def chart_command(
    ctx: typer.Context,
    window: Optional[int] = typer.Option(
        None,
        "--window",
        "-w",
        min=1,
        help="Number of most recent days to show (defaults to CHART_WINDOW_DAYS env or 7).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the series as JSON."),
) -> None:
    """Show daily averages for the most recent days, oldest first."""
    state = _get_state(ctx)
    window_size = window if window is not None else state.config.window_size
    readings = fetch_readings(state.config)
    series = state.aggregator.aggregate(readings, window_size=window_size)

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "labels": list(series.labels),
                    "soil_moisture": list(series.soil_moisture),
                    "temperature": list(series.temperature),
                    "humidity": list(series.humidity),
                }
            )
        )
        return
    render_series(series)


@app.command("days")
def days_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the averages as JSON."),
) -> None:
    """List the daily averages of every day present in the readings."""
    state = _get_state(ctx)
    averages = state.aggregator.daily_averages(fetch_readings(state.config))

    if as_json:
        typer.echo(
            json.dumps(
                [
                    {
                        "date": item.day.isoformat(),
                        "avg_soil_moisture": item.avg_soil_moisture,
                        "avg_temperature": item.avg_temperature,
                        "avg_humidity": item.avg_humidity,
                    }
                    for item in averages
                ]
            )
        )
        return
    render_daily_averages(averages)
