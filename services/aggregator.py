"""Daily aggregation of soil sensor readings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from statistics import fmean
from typing import Dict, Iterable, List, Tuple

from models.records import RawReading

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 7


def format_day_label(day: date) -> str:
    """Render a date as ``dd/mm`` without the year."""
    return f"{day.day:02d}/{day.month:02d}"


@dataclass(frozen=True, slots=True)
class DailyAverage:
    """Mean of each measurement over the readings of one UTC day."""

    day: date
    avg_soil_moisture: float
    avg_temperature: float
    avg_humidity: float

    @property
    def label(self) -> str:
        return format_day_label(self.day)


@dataclass(slots=True)
class DayBucket:
    """Measurements collected for one UTC calendar day."""

    day: date
    soil_moisture: List[float] = field(default_factory=list)
    temperature: List[float] = field(default_factory=list)
    humidity: List[float] = field(default_factory=list)

    def add(self, reading: RawReading) -> None:
        self.soil_moisture.append(reading.soil_moisture)
        self.temperature.append(reading.temperature)
        self.humidity.append(reading.humidity)

    def __len__(self) -> int:
        return len(self.soil_moisture)

    def average(self) -> DailyAverage:
        return DailyAverage(
            day=self.day,
            avg_soil_moisture=fmean(self.soil_moisture),
            avg_temperature=fmean(self.temperature),
            avg_humidity=fmean(self.humidity),
        )


@dataclass(frozen=True)
class SeriesOutput:
    """Chart-ready series; all sequences are index-aligned and oldest first."""

    labels: Tuple[str, ...] = ()
    soil_moisture: Tuple[float, ...] = ()
    temperature: Tuple[float, ...] = ()
    humidity: Tuple[float, ...] = ()

    @classmethod
    def from_averages(cls, averages: Iterable[DailyAverage]) -> "SeriesOutput":
        ordered = list(averages)
        return cls(
            labels=tuple(item.label for item in ordered),
            soil_moisture=tuple(item.avg_soil_moisture for item in ordered),
            temperature=tuple(item.avg_temperature for item in ordered),
            humidity=tuple(item.avg_humidity for item in ordered),
        )

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def __len__(self) -> int:
        return len(self.labels)


class DailyAggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def group(self, readings: Iterable[RawReading]) -> Dict[date, DayBucket]:
        buckets: Dict[date, DayBucket] = {}
        for reading in readings:
            day = reading.utc_day
            bucket = buckets.get(day)
            if bucket is None:
                bucket = buckets[day] = DayBucket(day=day)
            bucket.add(reading)
        return buckets

    def daily_averages(self, readings: Iterable[RawReading]) -> List[DailyAverage]:
        """Average every day present in ``readings``, oldest first."""
        buckets = self.group(readings)
        return [buckets[day].average() for day in sorted(buckets)]

    def aggregate(
        self,
        readings: Iterable[RawReading],
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> SeriesOutput:
        """Return the daily averages of the ``window_size`` most recent days."""
        if window_size < 1:
            raise ValueError(f"window_size must be a positive integer, got {window_size}.")

        buckets = self.group(readings)
        averages = [bucket.average() for bucket in buckets.values()]
        averages.sort(key=lambda item: item.day, reverse=True)
        window = averages[:window_size]
        window.reverse()

        logger.debug(
            "Aggregated readings into daily averages",
            extra={"day_count": len(buckets), "window_size": window_size},
        )
        return SeriesOutput.from_averages(window)
