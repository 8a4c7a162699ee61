"""Stats detail view: ``Loading -> Loaded(stats) | NotFound``."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

import click

from chessdex.exceptions import StatsUnavailableError
from chessdex.schemas.error import ErrorType
from chessdex.schemas.rows import RatingRow
from chessdex.schemas.stats import ChessStats, ModeId
from chessdex.services.stats_client import ChessComClient
from chessdex.services.stats_presentation import build_rating_rows

logger = logging.getLogger(__name__)

EMPTY_TITLE = "No stats found"


class StatsStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StatsViewState:
    """Immutable snapshot of one stats view."""

    username: str
    status: StatsStatus = StatsStatus.LOADING
    stats: ChessStats | None = None
    error_type: ErrorType | None = None

    @property
    def is_settled(self) -> bool:
        return self.status is not StatsStatus.LOADING


def loading(username: str) -> StatsViewState:
    return StatsViewState(username=username)


def loaded(state: StatsViewState, stats: ChessStats) -> StatsViewState:
    return replace(state, status=StatsStatus.LOADED, stats=stats, error_type=None)


def not_found(state: StatsViewState, error_type: ErrorType) -> StatsViewState:
    return replace(state, status=StatsStatus.NOT_FOUND, stats=None, error_type=error_type)


class StatsView:
    """Fetch and present one player's ratings.

    :meth:`mount` spawns the single fetch for this instance. Every failure ends
    in :attr:`StatsStatus.NOT_FOUND`; nothing escapes to the caller.
    """

    def __init__(
        self,
        username: str,
        client: ChessComClient,
        *,
        launcher: Callable[[str], object] = click.launch,
    ) -> None:
        self._client = client
        self._launcher = launcher
        self._state = loading(username)
        self._task: asyncio.Task[None] | None = None
        self._discarded = False

    @property
    def state(self) -> StatsViewState:
        return self._state

    @property
    def username(self) -> str:
        return self._state.username

    @property
    def section_title(self) -> str:
        return f"Ratings for {self.username}"

    @property
    def empty_description(self) -> str:
        return f'Could not fetch stats for "{self.username}".'

    @property
    def profile_url(self) -> str:
        return self._client.profile_url(self.username)

    @property
    def rows(self) -> list[RatingRow]:
        if self._state.stats is None:
            return []
        return build_rating_rows(self._state.stats, self.profile_url)

    def mount(self) -> asyncio.Task[None]:
        """Start the fetch; repeated calls return the same task."""

        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._fetch())
        return self._task

    async def settled(self) -> StatsViewState:
        """Mount if needed and wait for the fetch to finish."""

        await self.mount()
        return self._state

    def discard(self) -> None:
        """Detach the view; a fetch finishing later leaves the state untouched."""

        self._discarded = True

    def open_profile(self, mode: ModeId | None = None) -> str:
        """Open the player profile in the browser and return the URL.

        ``mode`` selects a rendered row; every row points at the same profile.
        """

        url = self.profile_url
        if mode is not None:
            row = next((row for row in self.rows if row.mode == mode), None)
            if row is None:
                raise LookupError(f"No {mode} rating row for {self.username}")
            url = row.profile_url
        self._launcher(url)
        return url

    async def _fetch(self) -> None:
        try:
            stats = await self._client.fetch_stats(self.username)
        except StatsUnavailableError as exc:
            logger.warning("%s", exc)
            self._apply(not_found(self._state, exc.error_type))
        else:
            self._apply(loaded(self._state, stats))

    def _apply(self, state: StatsViewState) -> None:
        if self._discarded:
            logger.debug("Dropping stats result for discarded view of %s", self.username)
            return
        self._state = state


__all__ = [
    "EMPTY_TITLE",
    "StatsStatus",
    "StatsView",
    "StatsViewState",
    "loaded",
    "loading",
    "not_found",
]
