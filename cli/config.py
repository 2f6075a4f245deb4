from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from settings import (
    DEFAULT_ENDPOINT,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_WINDOW_DAYS,
    get_settings,
)


@dataclass(frozen=True)
class CLIConfig:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_FETCH_TIMEOUT
    window_size: int = DEFAULT_WINDOW_DAYS


def load_config(
    endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
    window_size: Optional[int] = None,
) -> CLIConfig:
    """Merge explicit CLI options over the environment-driven settings."""
    settings = get_settings()
    return CLIConfig(
        endpoint=(endpoint or settings.readings_endpoint).strip(),
        timeout=timeout if timeout is not None and timeout > 0 else settings.fetch_timeout,
        window_size=window_size if window_size is not None else settings.window_days,
    )
