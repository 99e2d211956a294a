"""Sequential fallback fetch over mirrored radio-browser endpoints.

Endpoints are tried strictly one after another.  Each attempt is bounded by
``timeout_seconds``; on timeout the in-flight request is cancelled and the
next mirror is tried.  The first response that is HTTP-success, valid JSON
and a non-empty array wins and is truncated to ``max_records``.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from ..core.errors import (
    AllEndpointsFailedError,
    EndpointAttempt,
    mark_accepted,
    mark_failed,
)
from .parser import station_records, truncate_records

log = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 300
DEFAULT_USER_AGENT = "RadioGlobe/1.0"


@dataclass(frozen=True)
class FetchResult:
    records: list[dict[str, Any]]
    attempts: list[EndpointAttempt]

    @property
    def accepted_endpoint(self) -> str | None:
        for attempt in self.attempts:
            if attempt.accepted:
                return attempt.endpoint
        return None


async def fetch_stations(
    endpoints: Sequence[str],
    timeout_seconds: float,
    max_records: int = DEFAULT_MAX_RECORDS,
    client: httpx.AsyncClient | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchResult:
    if client is None:
        async with httpx.AsyncClient(
            headers={"User-Agent": user_agent}, follow_redirects=True
        ) as owned_client:
            return await _fetch_in_order(
                owned_client, endpoints, timeout_seconds, max_records
            )
    return await _fetch_in_order(client, endpoints, timeout_seconds, max_records)


async def _fetch_in_order(
    client: httpx.AsyncClient,
    endpoints: Sequence[str],
    timeout_seconds: float,
    max_records: int,
) -> FetchResult:
    attempts: list[EndpointAttempt] = []
    last_error: BaseException | None = None

    for endpoint in endpoints:
        log.info("Trying station endpoint %s", endpoint)
        try:
            records = await asyncio.wait_for(
                _fetch_records(client, endpoint, timeout_seconds),
                timeout=timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            last_error = exc
            attempts.append(
                mark_failed(endpoint, f"timed out after {timeout_seconds:g}s")
            )
            log.warning("Endpoint %s timed out after %.1fs", endpoint, timeout_seconds)
            continue
        except (httpx.HTTPError, ValueError) as exc:
            last_error = exc
            attempts.append(mark_failed(endpoint, _describe(exc)))
            log.warning("Endpoint %s failed: %s", endpoint, _describe(exc))
            continue

        kept = truncate_records(records, max_records)
        attempts.append(mark_accepted(endpoint, len(kept)))
        log.info(
            "Endpoint %s returned %d records, keeping %d",
            endpoint,
            len(records),
            len(kept),
        )
        return FetchResult(records=kept, attempts=attempts)

    raise AllEndpointsFailedError(attempts, last_error) from last_error


async def _fetch_records(
    client: httpx.AsyncClient, endpoint: str, timeout_seconds: float
) -> list[dict[str, Any]]:
    response = await client.get(endpoint, timeout=timeout_seconds)
    response.raise_for_status()
    return station_records(response.json())


def _describe(exc: BaseException) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    if isinstance(exc, httpx.TimeoutException):
        return "timed out"
    return str(exc) or exc.__class__.__name__
