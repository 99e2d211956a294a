from __future__ import annotations

import asyncio

import httpx
import pytest

from radioglobe.core.errors import AllEndpointsFailedError
from radioglobe.ingest.radio_browser_client import fetch_stations

FIRST = "https://one.example/json/stations?limit=1000"
SECOND = "https://two.example/json/stations?limit=1000"
THIRD = "https://three.example/json/stations?limit=1000"


def _records(count: int) -> list[dict[str, object]]:
    return [{"name": f"Radio {index}", "url": f"http://r/{index}"} for index in range(count)]


def _run(handler, endpoints: list[str], timeout: float = 0.2, **kwargs):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_stations(endpoints, timeout, client=client, **kwargs)

    return asyncio.run(go())


def test_fetch_stations_falls_through_to_third_endpoint() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "one.example":
            return httpx.Response(500)
        if request.url.host == "two.example":
            await asyncio.sleep(5)
        return httpx.Response(200, json=_records(50))

    result = _run(handler, [FIRST, SECOND, THIRD], timeout=0.05)

    assert len(result.records) == 50
    assert [attempt.accepted for attempt in result.attempts] == [False, False, True]
    assert result.attempts[0].reason == "HTTP 500"
    assert "timed out" in result.attempts[1].reason
    assert result.accepted_endpoint == THIRD


def test_fetch_stations_stops_at_first_success() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=_records(3))

    result = _run(handler, [FIRST, SECOND])

    assert seen == [FIRST]
    assert len(result.attempts) == 1


def test_fetch_stations_truncates_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_records(500))

    result = _run(handler, [FIRST])

    assert len(result.records) == 300
    assert result.attempts[0].record_count == 300


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json=[]),
        httpx.Response(200, json={"stations": []}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(404),
    ],
)
def test_fetch_stations_skips_unusable_payload(response: httpx.Response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "one.example":
            return response
        return httpx.Response(200, json=_records(2))

    result = _run(handler, [FIRST, SECOND])

    assert result.accepted_endpoint == SECOND
    assert not result.attempts[0].accepted


def test_fetch_stations_recovers_from_transport_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "one.example":
            raise httpx.ReadTimeout("read timed out", request=request)
        return httpx.Response(200, json=_records(1))

    result = _run(handler, [FIRST, SECOND])

    assert result.attempts[0].reason == "timed out"
    assert result.accepted_endpoint == SECOND


def test_fetch_stations_raises_when_all_endpoints_fail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "one.example":
            return httpx.Response(503)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AllEndpointsFailedError) as excinfo:
        _run(handler, [FIRST, SECOND])

    assert [attempt.endpoint for attempt in excinfo.value.attempts] == [FIRST, SECOND]
    assert isinstance(excinfo.value.last_error, httpx.ConnectError)
    assert excinfo.value.__cause__ is excinfo.value.last_error


def test_fetch_stations_without_endpoints_fails() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_records(1))

    with pytest.raises(AllEndpointsFailedError) as excinfo:
        _run(handler, [])

    assert excinfo.value.attempts == []
    assert excinfo.value.last_error is None
