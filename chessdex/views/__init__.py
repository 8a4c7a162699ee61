"""View controllers holding explicit state for the search list and stats detail."""

from chessdex.views.search_view import SearchView, SearchViewState
from chessdex.views.stats_view import StatsStatus, StatsView, StatsViewState

__all__ = [
    "SearchView",
    "SearchViewState",
    "StatsStatus",
    "StatsView",
    "StatsViewState",
]
