"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from services.dashboard import ChartRefresher


class ChartStatus(str, Enum):
    """Display states of the chart exposed via the API."""

    loading = "loading"
    empty = "empty"
    ready = "ready"


class ChartResponse(BaseModel):
    """Daily averages window, index-aligned with ``labels`` and oldest first."""

    status: ChartStatus
    labels: List[str] = Field(default_factory=list, description="Day labels formatted as dd/mm.")
    soil_moisture: List[float] = Field(default_factory=list)
    temperature: List[float] = Field(default_factory=list)
    humidity: List[float] = Field(default_factory=list)
    refreshed_at: Optional[datetime] = None
    error: Optional[str] = Field(
        default=None, description="Reason the most recent refresh failed, if it did."
    )

    @classmethod
    def from_refresher(cls, refresher: ChartRefresher) -> "ChartResponse":
        series = refresher.series
        if series is None:
            return cls(status=ChartStatus.loading, error=refresher.last_error)
        return cls(
            status=ChartStatus.empty if series.is_empty else ChartStatus.ready,
            labels=list(series.labels),
            soil_moisture=list(series.soil_moisture),
            temperature=list(series.temperature),
            humidity=list(series.humidity),
            refreshed_at=refresher.refreshed_at,
            error=refresher.last_error,
        )
