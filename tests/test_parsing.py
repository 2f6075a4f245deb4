from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from models.records import RawReading
from services.parsing import MalformedRecordError, parse_record, parse_records


def _record(**overrides):
    record = {
        "created_at": "2024-01-01T10:00:00Z",
        "soil_moisture": 41.5,
        "temperature": 19.0,
        "humidity": 63,
    }
    record.update(overrides)
    return record


def test_parse_record_success() -> None:
    reading = parse_record(_record())

    assert reading == RawReading(
        timestamp=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
        soil_moisture=41.5,
        temperature=19.0,
        humidity=63.0,
    )


def test_parse_record_accepts_numeric_strings_and_offsets() -> None:
    reading = parse_record(
        _record(created_at="2024-01-01T01:00:00+02:00", soil_moisture="45.20", humidity=" 70 ")
    )

    assert reading.timestamp == datetime(2023, 12, 31, 23, 0, tzinfo=timezone.utc)
    assert reading.soil_moisture == 45.2
    assert reading.humidity == 70.0


def test_parse_record_treats_naive_timestamp_as_utc() -> None:
    reading = parse_record(_record(created_at="2024-01-01T10:00:00"))

    assert reading.timestamp.tzinfo is timezone.utc


@pytest.mark.parametrize(
    ("record", "reason"),
    [
        (["not", "a", "dict"], "record is not an object"),
        (_record(created_at=None), "missing created_at"),
        (_record(created_at="  "), "missing created_at"),
        (_record(created_at="yesterday"), "invalid timestamp"),
        (_record(created_at=1704103200), "invalid timestamp"),
        (_record(soil_moisture=None), "missing soil_moisture"),
        (_record(temperature="warm"), "invalid numeric value for temperature"),
        (_record(humidity=True), "invalid numeric value for humidity"),
        (_record(humidity=float("nan")), "invalid numeric value for humidity"),
        (_record(soil_moisture=[1, 2]), "invalid numeric value for soil_moisture"),
    ],
)
def test_parse_record_rejects_malformed_records(record, reason: str) -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_record(record)

    assert exc_info.value.reason == reason


def test_parse_record_missing_key() -> None:
    record = _record()
    del record["humidity"]

    with pytest.raises(MalformedRecordError, match="missing humidity"):
        parse_record(record)


def test_parse_records_skips_and_logs_malformed(caplog: pytest.LogCaptureFixture) -> None:
    records = [
        _record(),
        _record(created_at="invalid"),
        "garbage",
        _record(created_at="2024-01-02T00:00:00Z", temperature="21.5"),
    ]

    with caplog.at_level(logging.WARNING, logger="services.parsing"):
        report = parse_records(records)

    assert len(report.readings) == 2
    assert [error.record_index for error in report.errors] == [1, 2]
    assert {error.reason for error in report.errors} == {
        "invalid timestamp",
        "record is not an object",
    }
    skipped = [record for record in caplog.records if record.getMessage() == "Skipping malformed reading"]
    assert [record.record_index for record in skipped] == [1, 2]


def test_parse_records_rejects_out_of_range_measurements() -> None:
    records = [
        _record(soil_moisture=1e308),
        _record(soil_moisture="1e308"),
        _record(temperature=-1e12),
        _record(created_at="2024-01-01T11:00:00Z", soil_moisture=44.0),
    ]

    report = parse_records(records)

    assert [reading.soil_moisture for reading in report.readings] == [44.0]
    assert [error.reason for error in report.errors] == [
        "invalid numeric value for soil_moisture",
        "invalid numeric value for soil_moisture",
        "invalid numeric value for temperature",
    ]
