from __future__ import annotations

import asyncio
from typing import List

import typer

from cli.config import CLIConfig
from models.records import RawReading
from services.fetcher import FetchError, ReadingsFetcher


async def _fetch(config: CLIConfig) -> List[RawReading]:
    async with ReadingsFetcher(config.endpoint, timeout=config.timeout) as fetcher:
        return await fetcher.fetch()


def fetch_readings(config: CLIConfig) -> List[RawReading]:
    """Fetch readings synchronously, turning fetch failures into a CLI exit."""
    try:
        return asyncio.run(_fetch(config))
    except FetchError as exc:
        typer.secho(
            f"Could not fetch readings from {exc.endpoint}: {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1) from exc
