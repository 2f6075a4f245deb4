from __future__ import annotations

import asyncio
from typing import Iterable

from cli.config import load_config
from services.dashboard import build_default_refresher
from settings import DEFAULT_ENDPOINT, get_settings


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("READINGS_ENDPOINT_URL", "http://sensors.test/payload/")
    monkeypatch.setenv("CHART_WINDOW_DAYS", "14")
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    caches = (get_settings, build_default_refresher)
    _clear_caches(caches)

    settings = get_settings()
    refresher = build_default_refresher()

    try:
        assert settings.readings_endpoint == "http://sensors.test/payload/"
        assert settings.window_days == 14
        assert settings.fetch_timeout == 2.5
        assert settings.log_level == "DEBUG"
        assert refresher.window_size == 14
        assert refresher.fetcher.endpoint == "http://sensors.test/payload/"
    finally:
        asyncio.run(refresher.close())
        _clear_caches(caches)


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("READINGS_ENDPOINT_URL", "   ")
    monkeypatch.setenv("CHART_WINDOW_DAYS", "-2")
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "soon")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.readings_endpoint == DEFAULT_ENDPOINT
        assert settings.window_days == 7
        assert settings.fetch_timeout == 30.0
    finally:
        get_settings.cache_clear()


def test_cli_options_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("READINGS_ENDPOINT_URL", "http://from-env.test/")
    monkeypatch.setenv("CHART_WINDOW_DAYS", "3")
    get_settings.cache_clear()

    try:
        from_env = load_config()
        explicit = load_config(endpoint="http://explicit.test/", timeout=1.0, window_size=5)
    finally:
        get_settings.cache_clear()

    assert from_env.endpoint == "http://from-env.test/"
    assert from_env.window_size == 3
    assert explicit.endpoint == "http://explicit.test/"
    assert explicit.timeout == 1.0
    assert explicit.window_size == 5
