"""Async client for the public Chess.com player stats endpoint."""

from __future__ import annotations

import logging
from types import TracebackType
from urllib.parse import quote

import httpx

from chessdex.exceptions import StatsUnavailableError
from chessdex.schemas.error import ErrorType
from chessdex.schemas.stats import ChessStats
from chessdex.settings import AppSettings

logger = logging.getLogger(__name__)


def _path_segment(username: str) -> str:
    """Lowercase ``username`` and quote it as a single URL path segment."""

    return quote(username.lower(), safe="")


class ChessComClient:
    """Issue one unauthenticated GET per lookup; never retries."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        client_kwargs: dict[str, object] = {
            "headers": {
                "User-Agent": settings.user_agent,
                "Accept": "application/json",
            },
            "transport": transport,
            "follow_redirects": True,
        }
        if settings.http_timeout_seconds is not None:
            client_kwargs["timeout"] = settings.http_timeout_seconds
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ChessComClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def stats_url(self, username: str) -> str:
        return self._settings.stats_url_template.format(username=_path_segment(username))

    def profile_url(self, username: str) -> str:
        return f"{self._settings.profile_base_url}/{_path_segment(username)}"

    async def fetch_stats(self, username: str) -> ChessStats:
        """Return parsed stats or raise :class:`StatsUnavailableError`."""

        url = self.stats_url(username)
        try:
            response = await self._client.get(url)
        except httpx.InvalidURL as exc:
            raise StatsUnavailableError(
                username, ErrorType.INVALID_REQUEST, str(exc)
            ) from exc
        except httpx.TimeoutException as exc:
            raise StatsUnavailableError(
                username, ErrorType.TIMEOUT_ERROR, str(exc) or "request timed out"
            ) from exc
        except httpx.HTTPError as exc:
            raise StatsUnavailableError(
                username, ErrorType.NETWORK_ERROR, str(exc) or type(exc).__name__
            ) from exc

        if not response.is_success:
            error_type = (
                ErrorType.NOT_FOUND
                if response.status_code == httpx.codes.NOT_FOUND
                else ErrorType.HTTP_ERROR
            )
            raise StatsUnavailableError(
                username,
                error_type,
                response.reason_phrase,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise StatsUnavailableError(
                username, ErrorType.INVALID_RESPONSE, "body is not JSON"
            ) from exc

        if not isinstance(payload, dict):
            raise StatsUnavailableError(
                username, ErrorType.INVALID_RESPONSE, "body is not a JSON object"
            )

        stats = ChessStats.model_validate(payload)

        logger.debug("Fetched stats for %s from %s", username, url)
        return stats


__all__ = ["ChessComClient"]
