"""Display rows produced by the views and consumed by the renderers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from chessdex.schemas.stats import ModeId

SearchAction = Literal["view_stats", "favourite", "unfavourite", "move_up", "move_down"]
SearchRowKind = Literal["favourite", "candidate"]

FAVOURITE_ACTIONS: tuple[SearchAction, ...] = (
    "view_stats",
    "unfavourite",
    "move_up",
    "move_down",
)
CANDIDATE_ACTIONS: tuple[SearchAction, ...] = ("view_stats", "favourite")


class SearchRow(BaseModel):
    """One entry in the search list: a stored favourite or the typed candidate."""

    title: str = Field(..., description="Username exactly as stored or typed")
    kind: SearchRowKind
    icon: str
    accessory: str | None = Field(None, description="Right-aligned tag text")
    actions: tuple[SearchAction, ...]


class RatingRow(BaseModel):
    """One time-control row in the stats view."""

    mode: ModeId
    title: str = Field(..., description='Formatted as "<Label>: <rating>"')
    record: str = Field(..., description='"<w>W / <l>L / <d>D" or "No games"')
    icon: str
    profile_url: str


__all__ = [
    "CANDIDATE_ACTIONS",
    "FAVOURITE_ACTIONS",
    "RatingRow",
    "SearchAction",
    "SearchRow",
    "SearchRowKind",
]
