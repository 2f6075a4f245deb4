from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.fetcher",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Fetched sensor readings",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys_in_order() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    line = formatter.format(
        _record(reading_count=12, endpoint="http://sensors.test/", unrelated="ignored")
    )

    assert line == "Fetched sensor readings | endpoint=http://sensors.test/ reading_count=12"


def test_formatter_skips_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    assert formatter.format(_record(status_code=None)) == "Fetched sensor readings"


def test_formatter_custom_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["generation"])

    line = formatter.format(_record(generation=3, day_count=7))

    assert line == "Fetched sensor readings | generation=3"
