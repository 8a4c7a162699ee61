"""Key-value persistence for the favourites list."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from chessdex.storage import KeyValueStore

logger = logging.getLogger(__name__)

FAVOURITES_KEY = "favouritePlayers"


class FavouritesPersistence:
    """Read and write the favourites list as a JSON array under one slot."""

    def __init__(self, store: KeyValueStore, *, key: str = FAVOURITES_KEY) -> None:
        self._store = store
        self._key = key

    async def load(self) -> list[str]:
        """Return the stored list, or an empty list when absent or unreadable."""

        raw = await self._store.get(self._key)
        if not raw:
            return []

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored favourites are not valid JSON; starting empty")
            return []

        if not isinstance(payload, list) or not all(
            isinstance(item, str) for item in payload
        ):
            logger.warning("Stored favourites are not a list of usernames; starting empty")
            return []
        return payload

    async def save(self, favourites: Sequence[str]) -> None:
        """Overwrite the slot with the full list."""

        await self._store.set(self._key, json.dumps(list(favourites)))


__all__ = ["FAVOURITES_KEY", "FavouritesPersistence"]
