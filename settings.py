from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_ENDPOINT_ENV = "READINGS_ENDPOINT_URL"
_WINDOW_DAYS_ENV = "CHART_WINDOW_DAYS"
_FETCH_TIMEOUT_ENV = "FETCH_TIMEOUT_SECONDS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_ENDPOINT = "http://localhost:8000/backendapi/payload/"
DEFAULT_WINDOW_DAYS = 7
DEFAULT_FETCH_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    readings_endpoint: str
    window_days: int
    fetch_timeout: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_positive_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        readings_endpoint=_read_str_env(_ENDPOINT_ENV, DEFAULT_ENDPOINT),
        window_days=_read_positive_int(_WINDOW_DAYS_ENV, DEFAULT_WINDOW_DAYS),
        fetch_timeout=_read_positive_float(_FETCH_TIMEOUT_ENV, DEFAULT_FETCH_TIMEOUT),
        log_level=_read_log_level("INFO"),
    )
