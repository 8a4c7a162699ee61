"""In-memory favourites list with fire-and-forget persistence.

Responsibilities delegated to collaborators:
* :class:`FavouritesPersistence` – ``load``/``save`` against the key-value store.
* :mod:`chessdex.services.favourites.ordering` – pure ``toggle``/``move``
  transformations.

:class:`FavouritesService` keeps the current list in memory. Mutations update
that copy synchronously, hand it back to the caller for rendering, and schedule
a background save. :meth:`FavouritesService.flush` waits for outstanding saves.
"""

from __future__ import annotations

import asyncio
import logging

from chessdex.services.favourites import (
    FavouritesPersistence,
    MoveDirection,
    move_favourite,
    toggle_favourite,
)
from chessdex.storage import KeyValueStore

logger = logging.getLogger(__name__)


class FavouritesService:
    """Own the current favourites list for one view."""

    def __init__(self, *, persistence: FavouritesPersistence) -> None:
        self._persistence = persistence
        self._favourites: list[str] = []
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def favourites(self) -> list[str]:
        return list(self._favourites)

    async def load(self) -> list[str]:
        """Replace the in-memory list with the persisted one."""

        self._favourites = await self._persistence.load()
        logger.debug("Loaded %d favourites", len(self._favourites))
        return self.favourites

    def toggle(self, name: str) -> list[str]:
        """Add or remove ``name`` and persist in the background."""

        self._favourites = toggle_favourite(self._favourites, name)
        self._schedule_save()
        return self.favourites

    def move(self, name: str, direction: MoveDirection) -> list[str]:
        """Swap ``name`` with its neighbour and persist in the background."""

        self._favourites = move_favourite(self._favourites, name, direction)
        self._schedule_save()
        return self.favourites

    async def flush(self) -> None:
        """Wait for every scheduled save to finish."""

        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _schedule_save(self) -> None:
        snapshot = list(self._favourites)
        task = asyncio.get_running_loop().create_task(self._persist(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _persist(self, snapshot: list[str]) -> None:
        try:
            await self._persistence.save(snapshot)
        except Exception:
            logger.exception("Failed to persist %d favourites", len(snapshot))


def build_favourites_service(store: KeyValueStore) -> FavouritesService:
    """Wire the service together for a given store."""

    return FavouritesService(persistence=FavouritesPersistence(store))


__all__ = ["FavouritesService", "build_favourites_service"]
