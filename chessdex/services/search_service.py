from __future__ import annotations

from collections.abc import Sequence

from chessdex.schemas.rows import CANDIDATE_ACTIONS, FAVOURITE_ACTIONS, SearchRow
from chessdex.services.favourites import filter_favourites

FAVOURITE_ICON = "⭐"
CANDIDATE_ICON = "👤"
FAVOURITE_ACCESSORY = "Favourite"
SEARCH_PLACEHOLDER = "Search Chess.com username..."


def show_typed_candidate(filtered: Sequence[str], query: str) -> bool:
    """Return ``True`` when the raw query deserves its own row.

    Whitespace-only queries never do; a favourite equal to the query (ignoring
    case) suppresses the row as well.
    """

    if not query.strip():
        return False
    lowered = query.lower()
    return not any(name.lower() == lowered for name in filtered)


def build_search_rows(favourites: Sequence[str], query: str) -> list[SearchRow]:
    """Return favourite rows matching ``query`` followed by the typed candidate."""

    filtered = filter_favourites(favourites, query)
    rows = [
        SearchRow(
            title=name,
            kind="favourite",
            icon=FAVOURITE_ICON,
            accessory=FAVOURITE_ACCESSORY,
            actions=FAVOURITE_ACTIONS,
        )
        for name in filtered
    ]
    if show_typed_candidate(filtered, query):
        rows.append(
            SearchRow(
                title=query,
                kind="candidate",
                icon=CANDIDATE_ICON,
                actions=CANDIDATE_ACTIONS,
            )
        )
    return rows


__all__ = [
    "SEARCH_PLACEHOLDER",
    "build_search_rows",
    "show_typed_candidate",
]
