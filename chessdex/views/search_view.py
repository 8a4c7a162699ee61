"""Search/list view merging the typed query with the favourites list."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessdex.schemas.rows import SearchAction, SearchRow
from chessdex.services.favourites import MoveDirection
from chessdex.services.favourites_service import FavouritesService
from chessdex.services.search_service import build_search_rows
from chessdex.views.stats_view import StatsView


@dataclass(frozen=True)
class SearchViewState:
    query: str = ""
    favourites: tuple[str, ...] = field(default_factory=tuple)

    @property
    def rows(self) -> list[SearchRow]:
        return build_search_rows(self.favourites, self.query)


def with_query(state: SearchViewState, query: str) -> SearchViewState:
    return replace(state, query=query)


def with_favourites(state: SearchViewState, favourites: list[str]) -> SearchViewState:
    return replace(state, favourites=tuple(favourites))


class SearchView:
    """Controller for the search list.

    The favourites section stays empty until the load spawned by
    :meth:`mount` completes.
    """

    def __init__(
        self,
        favourites: FavouritesService,
        stats_view_factory: Callable[[str], StatsView],
    ) -> None:
        self._favourites = favourites
        self._stats_view_factory = stats_view_factory
        self._state = SearchViewState()
        self._load_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> SearchViewState:
        return self._state

    @property
    def rows(self) -> list[SearchRow]:
        return self._state.rows

    def mount(self) -> asyncio.Task[None]:
        if self._load_task is None:
            self._load_task = asyncio.get_running_loop().create_task(self._load())
        return self._load_task

    async def ready(self) -> SearchViewState:
        await self.mount()
        return self._state

    def set_query(self, query: str) -> SearchViewState:
        self._state = with_query(self._state, query)
        return self._state

    def toggle_favourite(self, name: str) -> SearchViewState:
        self._state = with_favourites(self._state, self._favourites.toggle(name))
        return self._state

    def move_favourite(self, name: str, direction: MoveDirection) -> SearchViewState:
        self._state = with_favourites(
            self._state, self._favourites.move(name, direction)
        )
        return self._state

    def open_stats(self, name: str) -> StatsView:
        """Create and mount the stats view for ``name``."""

        view = self._stats_view_factory(name)
        view.mount()
        return view

    def perform(self, row: SearchRow, action: SearchAction) -> StatsView | None:
        """Run ``action`` for ``row``; only ``view_stats`` returns a view."""

        if action not in row.actions:
            raise ValueError(f"Action {action!r} is not available for {row.title!r}")
        if action == "view_stats":
            return self.open_stats(row.title)
        if action in ("favourite", "unfavourite"):
            self.toggle_favourite(row.title)
        elif action == "move_up":
            self.move_favourite(row.title, "up")
        elif action == "move_down":
            self.move_favourite(row.title, "down")
        return None

    async def close(self) -> None:
        """Wait for outstanding favourites writes."""

        await self._favourites.flush()

    async def _load(self) -> None:
        self._state = with_favourites(self._state, await self._favourites.load())


__all__ = [
    "SearchView",
    "SearchViewState",
    "with_favourites",
    "with_query",
]
