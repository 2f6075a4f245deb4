"""HTTP retrieval of raw soil readings."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import List, Optional, Type

import httpx

from models.records import RawReading
from services.parsing import parse_records

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the readings endpoint cannot deliver a usable payload."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class ReadingsFetcher:
    """Minimal async client for the readings endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "ReadingsFetcher":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self) -> List[RawReading]:
        try:
            response = await self._client.get(self.endpoint)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise FetchError(
                f"Readings endpoint responded with status {status_code}.",
                endpoint=self.endpoint,
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise FetchError(
                f"Request to readings endpoint failed: {exc!r}",
                endpoint=self.endpoint,
            ) from exc
        except httpx.InvalidURL as exc:
            # Not a RequestError subclass; raised before any request is sent.
            raise FetchError(
                f"Readings endpoint URL is invalid: {exc}",
                endpoint=self.endpoint,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(
                "Readings endpoint returned a body that is not valid JSON.",
                endpoint=self.endpoint,
                status_code=response.status_code,
            ) from exc

        if not isinstance(payload, list):
            raise FetchError(
                "Readings endpoint returned an unexpected payload; expected a JSON array.",
                endpoint=self.endpoint,
                status_code=response.status_code,
            )

        report = parse_records(payload)
        logger.info(
            "Fetched sensor readings",
            extra={
                "endpoint": self.endpoint,
                "reading_count": len(report.readings),
                "skipped_count": len(report.errors) or None,
            },
        )
        return report.readings
