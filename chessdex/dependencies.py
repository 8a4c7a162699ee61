"""Wiring for the CLI: settings, store, API client factory and browser launcher.

Keeping construction here lets tests hand the CLI an :class:`AppContext` built
from in-memory doubles instead of the real file store and network client.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import click
from rich.console import Console

from chessdex.services.favourites_service import (
    FavouritesService,
    build_favourites_service,
)
from chessdex.services.stats_client import ChessComClient
from chessdex.settings import AppSettings
from chessdex.storage import JsonFileStore, KeyValueStore
from chessdex.views.search_view import SearchView
from chessdex.views.stats_view import StatsView


@dataclass
class AppContext:
    settings: AppSettings
    store: KeyValueStore
    client_factory: Callable[[], ChessComClient]
    launcher: Callable[[str], object] = click.launch
    console: Console = field(default_factory=Console)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> AppContext:
        return cls(
            settings=settings,
            store=JsonFileStore(settings.storage_path),
            client_factory=lambda: ChessComClient(settings),
        )

    def favourites_service(self) -> FavouritesService:
        return build_favourites_service(self.store)

    def stats_view(self, username: str, client: ChessComClient) -> StatsView:
        return StatsView(username, client, launcher=self.launcher)

    def search_view(self, client: ChessComClient) -> SearchView:
        return SearchView(
            self.favourites_service(),
            lambda username: self.stats_view(username, client),
        )


__all__ = ["AppContext"]
