"""Shared fixtures for the Chessdex test suite.

``tests.conftest`` is imported by pytest before any test module, which we use to
put the repository root on ``sys.path`` and to provide the doubles most tests
need: an in-memory key-value store, explicit settings, and an httpx transport
that serves canned stats payloads.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from tests import _prefer_checkout

_prefer_checkout()

from chessdex.services.stats_client import ChessComClient  # noqa: E402
from chessdex.settings import AppSettings  # noqa: E402
from chessdex.storage import MemoryStore  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """``MockTransport`` that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Settings pointing at the public API with storage under ``tmp_path``."""

    return AppSettings(
        api_base_url="https://api.chess.com/pub",
        profile_base_url="https://www.chess.com/member",
        storage_path=tmp_path / "local_storage.json",
        log_level="DEBUG",
    )


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def blitz_only_payload() -> dict[str, Any]:
    """Stats with a single blitz block and unrelated extra keys."""

    return {
        "chess_blitz": {
            "last": {"rating": 1500, "date": 1700000000, "rd": 45},
            "best": {"rating": 1620, "date": 1690000000},
            "record": {"win": 10, "loss": 5, "draw": 2},
        },
        "tactics": {"highest": {"rating": 2100}},
        "fide": 0,
    }


@pytest.fixture
def full_payload() -> dict[str, Any]:
    return {
        "chess_daily": {},
        "chess_rapid": {
            "last": {"rating": 1810},
            "record": {"win": 120, "loss": 80, "draw": 9},
        },
        "chess_bullet": {
            "last": {"rating": 2050},
            "record": {"win": 300, "loss": 250, "draw": 20},
        },
        "chess_blitz": {
            "last": {"rating": 1999},
            "record": {"win": 45, "loss": 40, "draw": 3},
        },
    }


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with ``status`` and ``json``."""

    def _factory(
        *,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        exc: Exception | None = None,
    ) -> RecordingTransport:
        def _handler(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json if json is not None else {})

        return RecordingTransport(_handler)

    return _factory


@pytest.fixture
def make_client(
    settings: AppSettings,
) -> Callable[[httpx.AsyncBaseTransport], ChessComClient]:
    def _factory(transport: httpx.AsyncBaseTransport) -> ChessComClient:
        return ChessComClient(settings, transport=transport)

    return _factory
