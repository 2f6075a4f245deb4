"""Validation of raw reading records returned by the readings endpoint."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List

from models.records import RawReading

logger = logging.getLogger(__name__)

MEASUREMENT_FIELDS = ("soil_moisture", "temperature", "humidity")

# Far beyond any sensor range; keeps daily sums clear of float overflow.
MAX_MEASUREMENT_MAGNITUDE = 1e9


class MalformedRecordError(ValueError):
    """Raised when a record cannot be turned into a ``RawReading``."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class RecordError:
    """A record that was skipped, identified by its position in the payload."""

    record_index: int
    reason: str


@dataclass
class ParseReport:
    readings: List[RawReading] = field(default_factory=list)
    errors: List[RecordError] = field(default_factory=list)


def parse_timestamp(value: str) -> datetime:
    candidate = value.strip()
    if not candidate:
        raise ValueError("Timestamp is empty.")

    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise ValueError("Invalid timestamp format") from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed.astimezone(timezone.utc)


def _parse_measurement(record: dict[str, Any], name: str) -> float:
    raw = record.get(name)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise MalformedRecordError(f"missing {name}")
    # bool is an int subclass; true/false are never measurements.
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise MalformedRecordError(f"invalid numeric value for {name}")
    try:
        value = float(raw)
    except ValueError as exc:
        raise MalformedRecordError(f"invalid numeric value for {name}") from exc
    if not math.isfinite(value) or abs(value) > MAX_MEASUREMENT_MAGNITUDE:
        raise MalformedRecordError(f"invalid numeric value for {name}")
    return value


def parse_record(record: Any) -> RawReading:
    """Build a reading from one JSON record or raise ``MalformedRecordError``."""
    if not isinstance(record, dict):
        raise MalformedRecordError("record is not an object")

    created_at = record.get("created_at")
    if created_at is None or (isinstance(created_at, str) and not created_at.strip()):
        raise MalformedRecordError("missing created_at")
    if not isinstance(created_at, str):
        raise MalformedRecordError("invalid timestamp")
    try:
        timestamp = parse_timestamp(created_at)
    except ValueError as exc:
        raise MalformedRecordError("invalid timestamp") from exc

    soil_moisture, temperature, humidity = (
        _parse_measurement(record, name) for name in MEASUREMENT_FIELDS
    )
    return RawReading(
        timestamp=timestamp,
        soil_moisture=soil_moisture,
        temperature=temperature,
        humidity=humidity,
    )


def parse_records(records: Iterable[Any]) -> ParseReport:
    """Parse every record, skipping and logging the malformed ones."""
    report = ParseReport()
    for index, record in enumerate(records):
        try:
            report.readings.append(parse_record(record))
        except MalformedRecordError as exc:
            report.errors.append(RecordError(record_index=index, reason=exc.reason))
            logger.warning(
                "Skipping malformed reading",
                extra={"record_index": index, "reason": exc.reason},
            )
    return report
