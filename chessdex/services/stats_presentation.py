"""Project a :class:`ChessStats` payload onto the fixed set of rating rows."""

from __future__ import annotations

from typing import Final

from chessdex.schemas.rows import RatingRow
from chessdex.schemas.stats import MODE_ORDER, ChessStats, ModeId, ModeStats

RATING_PLACEHOLDER: Final = "N/A"
NO_GAMES: Final = "No games"

MODE_LABELS: Final[dict[ModeId, str]] = {
    "bullet": "Bullet",
    "blitz": "Blitz",
    "rapid": "Rapid",
    "daily": "Daily",
}
MODE_ICONS: Final[dict[ModeId, str]] = {
    "bullet": "🚀",
    "blitz": "⚡",
    "rapid": "⏱",
    "daily": "☀",
}


def format_rating(mode: ModeStats) -> str:
    if mode.last is None or mode.last.rating is None:
        return RATING_PLACEHOLDER
    rating = mode.last.rating
    # JSON numbers such as ``1500.0`` display as whole ratings.
    if isinstance(rating, float) and rating.is_integer():
        return str(int(rating))
    return str(rating)


def format_record(mode: ModeStats) -> str:
    if mode.record is None:
        return NO_GAMES
    record = mode.record
    return f"{record.win}W / {record.loss}L / {record.draw}D"


def build_rating_rows(stats: ChessStats, profile_url: str) -> list[RatingRow]:
    """Return one row per mode present in ``stats``, in display order.

    Every row opens the same ``profile_url``.
    """

    rows: list[RatingRow] = []
    for mode_id in MODE_ORDER:
        mode = stats.mode(mode_id)
        if mode is None:
            continue
        rows.append(
            RatingRow(
                mode=mode_id,
                title=f"{MODE_LABELS[mode_id]}: {format_rating(mode)}",
                record=format_record(mode),
                icon=MODE_ICONS[mode_id],
                profile_url=profile_url,
            )
        )
    return rows


__all__ = [
    "MODE_ICONS",
    "MODE_LABELS",
    "NO_GAMES",
    "RATING_PLACEHOLDER",
    "build_rating_rows",
    "format_rating",
    "format_record",
]
