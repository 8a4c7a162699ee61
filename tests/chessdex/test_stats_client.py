"""Tests for the Chess.com stats client using ``httpx.MockTransport``."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from chessdex.exceptions import StatsUnavailableError
from chessdex.schemas.error import ErrorType
from chessdex.services.stats_client import ChessComClient
from chessdex.settings import AppSettings


@pytest.mark.asyncio
async def test_fetch_stats_requests_lowercase_username(
    make_transport, make_client, blitz_only_payload: dict[str, Any]
) -> None:
    transport = make_transport(json=blitz_only_payload)

    async with make_client(transport) as client:
        stats = await client.fetch_stats("Hikaru")

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.chess.com/pub/player/hikaru/stats"
    assert request.headers["User-Agent"].startswith("chessdex/")
    assert stats.chess_blitz is not None
    assert stats.chess_blitz.last is not None
    assert stats.chess_blitz.last.rating == 1500
    assert stats.chess_bullet is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type"),
    [(404, ErrorType.NOT_FOUND), (410, ErrorType.HTTP_ERROR), (500, ErrorType.HTTP_ERROR)],
)
async def test_unsuccessful_status_raises(
    make_transport, make_client, status: int, error_type: ErrorType
) -> None:
    transport = make_transport(status=status, json={"code": 0, "message": "nope"})

    async with make_client(transport) as client:
        with pytest.raises(StatsUnavailableError) as excinfo:
            await client.fetch_stats("doesnotexist123")

    assert excinfo.value.error_type is error_type
    assert excinfo.value.status_code == status
    assert excinfo.value.username == "doesnotexist123"
    assert len(transport.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exc", "error_type"),
    [
        (httpx.ReadTimeout("timed out"), ErrorType.TIMEOUT_ERROR),
        (httpx.ConnectError("connection refused"), ErrorType.NETWORK_ERROR),
    ],
)
async def test_transport_failures_raise_without_retry(
    make_transport, make_client, exc: Exception, error_type: ErrorType
) -> None:
    transport = make_transport(exc=exc)

    async with make_client(transport) as client:
        with pytest.raises(StatsUnavailableError) as excinfo:
            await client.fetch_stats("doesnotexist123")

    assert excinfo.value.error_type is error_type
    assert len(transport.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"<html>maintenance</html>", b"[1, 2, 3]", b'"hikaru"'])
async def test_malformed_bodies_raise_invalid_response(
    make_transport, make_client, content: bytes
) -> None:
    async with make_client(make_transport(content=content)) as client:
        with pytest.raises(StatsUnavailableError) as excinfo:
            await client.fetch_stats("hikaru")

    assert excinfo.value.error_type is ErrorType.INVALID_RESPONSE


@pytest.mark.asyncio
async def test_unexpected_field_types_are_read_as_missing(make_transport, make_client) -> None:
    payload = {
        "chess_bullet": "unavailable",
        "chess_blitz": {"last": {"rating": "1500?"}, "record": {"win": 3, "loss": "x"}},
        "chess_rapid": {"last": [], "record": None},
    }

    async with make_client(make_transport(json=payload)) as client:
        stats = await client.fetch_stats("hikaru")

    assert stats.chess_bullet is None
    assert stats.chess_blitz is not None
    assert stats.chess_blitz.last is not None
    assert stats.chess_blitz.last.rating is None
    assert stats.chess_blitz.record is not None
    assert (stats.chess_blitz.record.win, stats.chess_blitz.record.loss) == (3, 0)
    assert stats.chess_rapid is not None
    assert stats.chess_rapid.last is None and stats.chess_rapid.record is None


@pytest.mark.asyncio
async def test_username_too_long_for_a_url_raises_invalid_request(
    make_transport, make_client
) -> None:
    transport = make_transport(json={})

    async with make_client(transport) as client:
        with pytest.raises(StatsUnavailableError) as excinfo:
            await client.fetch_stats("a" * 70000)

    assert excinfo.value.error_type is ErrorType.INVALID_REQUEST
    assert transport.requests == []


@pytest.mark.asyncio
async def test_profile_url_is_lowercase_and_quoted(settings: AppSettings) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200))

    async with ChessComClient(settings, transport=transport) as client:
        assert client.profile_url("Hikaru") == "https://www.chess.com/member/hikaru"
        assert client.profile_url("odd/name") == "https://www.chess.com/member/odd%2Fname"
