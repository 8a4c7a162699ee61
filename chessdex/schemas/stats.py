"""Pydantic models mirroring the Chess.com ``/player/<name>/stats`` payload.

Every field is read leniently: a value of the wrong shape is treated as
missing rather than failing validation, so any JSON object parses.
"""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ModeId = Literal["bullet", "blitz", "rapid", "daily"]

# Display order of the rating rows. The payload key for each mode is the mode
# identifier prefixed with ``chess_``.
MODE_ORDER: Final[tuple[ModeId, ...]] = ("bullet", "blitz", "rapid", "daily")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


class LastRating(BaseModel):
    """Most recent rating snapshot for a single mode."""

    model_config = ConfigDict(extra="allow")

    rating: int | float | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def _unusable_rating_to_none(cls, value: Any) -> Any:
        return value if _is_number(value) else None


class GameRecord(BaseModel):
    """Win/loss/draw totals for a single mode."""

    model_config = ConfigDict(extra="allow")

    win: int = 0
    loss: int = 0
    draw: int = 0

    @field_validator("win", "loss", "draw", mode="before")
    @classmethod
    def _unusable_count_to_zero(cls, value: Any) -> int:
        if _is_number(value) and float(value).is_integer():
            return int(value)
        return 0


class ModeStats(BaseModel):
    """Per-time-control block; both halves are optional in the API."""

    model_config = ConfigDict(extra="allow")

    last: LastRating | None = None
    record: GameRecord | None = None

    @field_validator("last", "record", mode="before")
    @classmethod
    def _non_object_to_none(cls, value: Any) -> Any:
        return _mapping_or_none(value)


class ChessStats(BaseModel):
    """Subset of the stats payload rendered by the stats view.

    Unrelated keys such as ``fide`` or ``tactics`` are accepted and ignored.
    """

    model_config = ConfigDict(extra="allow")

    chess_bullet: ModeStats | None = Field(None, description="Bullet games")
    chess_blitz: ModeStats | None = Field(None, description="Blitz games")
    chess_rapid: ModeStats | None = Field(None, description="Rapid games")
    chess_daily: ModeStats | None = Field(None, description="Correspondence games")

    @field_validator("chess_bullet", "chess_blitz", "chess_rapid", "chess_daily", mode="before")
    @classmethod
    def _non_object_to_none(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    def mode(self, mode_id: ModeId) -> ModeStats | None:
        """Return the block for ``mode_id`` or ``None`` when absent."""

        return getattr(self, f"chess_{mode_id}")


__all__ = [
    "ChessStats",
    "GameRecord",
    "LastRating",
    "MODE_ORDER",
    "ModeId",
    "ModeStats",
]
