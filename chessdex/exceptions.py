"""Exceptions raised across the Chessdex service boundary."""

from __future__ import annotations

from chessdex.schemas.error import ErrorType


class StatsUnavailableError(Exception):
    """Stats for ``username`` could not be fetched or decoded."""

    def __init__(
        self,
        username: str,
        error_type: ErrorType,
        detail: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        self.username = username
        self.error_type = error_type
        self.detail = detail
        self.status_code = status_code
        message = f"Stats unavailable for {username!r} ({error_type.value})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = ["StatsUnavailableError"]
