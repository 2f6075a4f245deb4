"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True, slots=True)
class RawReading:
    """A single soil sensor sample as delivered by the readings endpoint."""

    timestamp: datetime
    soil_moisture: float
    temperature: float
    humidity: float

    @property
    def utc_day(self) -> date:
        """Calendar date of the sample in UTC; naive timestamps are taken as UTC."""
        stamp = self.timestamp
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return stamp.astimezone(timezone.utc).date()
