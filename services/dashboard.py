"""Refresh cycle for the soil trends chart."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from services.aggregator import DEFAULT_WINDOW_SIZE, DailyAggregator, SeriesOutput
from services.fetcher import FetchError, ReadingsFetcher
from settings import get_settings

logger = logging.getLogger(__name__)


class ChartRefresher:
    """Owns the chart state and coordinates overlapping refreshes.

    Each call to :meth:`trigger` starts a new generation. Any refresh still
    in flight is cancelled, and only the latest generation may replace
    ``series``. Once :meth:`close` has run, no further state is applied.
    """

    def __init__(
        self,
        fetcher: ReadingsFetcher,
        aggregator: DailyAggregator,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        if window_size < 1:
            raise ValueError(f"window_size must be a positive integer, got {window_size}.")
        self.fetcher = fetcher
        self.aggregator = aggregator
        self.window_size = window_size
        self.series: Optional[SeriesOutput] = None
        self.last_error: Optional[str] = None
        self.refreshed_at: Optional[datetime] = None
        self._generation = 0
        self._task: Optional[asyncio.Task[Optional[SeriesOutput]]] = None
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def generation(self) -> int:
        return self._generation

    def trigger(self) -> asyncio.Task[Optional[SeriesOutput]]:
        """Start a refresh on the running loop, superseding any pending one."""
        if not self._active:
            raise RuntimeError("Chart refresher has been closed.")
        self._cancel_pending()
        self._generation += 1
        task = asyncio.get_running_loop().create_task(self._refresh(self._generation))
        self._task = task
        return task

    async def refresh(self) -> Optional[SeriesOutput]:
        """Trigger a refresh and wait until the newest one has settled."""
        self.trigger()
        while self._active and self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self.series

    async def close(self) -> None:
        if not self._active:
            return
        self._active = False
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
        await self.fetcher.aclose()

    def _cancel_pending(self) -> None:
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        logger.info(
            "Cancelling stale chart refresh",
            extra={"generation": self._generation},
        )

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    async def _refresh(self, generation: int) -> Optional[SeriesOutput]:
        try:
            readings = await self.fetcher.fetch()
        except FetchError as exc:
            logger.error(
                "Failed to fetch sensor readings",
                extra={
                    "endpoint": exc.endpoint,
                    "status_code": exc.status_code,
                    "reason": str(exc),
                    "generation": generation,
                },
            )
            if self._is_current(generation):
                self.last_error = str(exc)
            return self.series

        series = self.aggregator.aggregate(readings, window_size=self.window_size)
        if not self._is_current(generation):
            logger.info("Discarding stale chart refresh", extra={"generation": generation})
            return series

        self.series = series
        self.last_error = None
        self.refreshed_at = datetime.now(timezone.utc)
        logger.info(
            "Chart refreshed",
            extra={
                "generation": generation,
                "reading_count": len(readings),
                "day_count": len(series),
            },
        )
        return series


@lru_cache
def build_default_refresher() -> ChartRefresher:
    """Factory that wires the refresher from environment settings."""
    settings = get_settings()
    fetcher = ReadingsFetcher(settings.readings_endpoint, timeout=settings.fetch_timeout)
    return ChartRefresher(
        fetcher=fetcher,
        aggregator=DailyAggregator(),
        window_size=settings.window_days,
    )
