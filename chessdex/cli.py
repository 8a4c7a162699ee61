"""Command-line entry point for Chessdex."""

from __future__ import annotations

import asyncio
import logging
from typing import cast

import click
from rich.markup import escape

from chessdex.dependencies import AppContext
from chessdex.render import render_search, render_stats
from chessdex.schemas.rows import SearchAction
from chessdex.schemas.stats import MODE_ORDER, ModeId
from chessdex.services.favourites import MoveDirection
from chessdex.services.search_service import SEARCH_PLACEHOLDER
from chessdex.settings import AppSettings, get_settings
from chessdex.views.search_view import SearchView
from chessdex.views.stats_view import StatsStatus, StatsView

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

BROWSE_HELP = (
    "Type a username to filter favourites. Commands: "
    ":s N view stats, :f N favourite/unfavourite, :u N move up, :d N move down, "
    ":o MODE open profile from the last stats view, :q quit."
)

# ``None`` resolves to favourite or unfavourite depending on the row.
_ROW_COMMANDS: dict[str, SearchAction | None] = {
    "s": "view_stats",
    "f": None,
    "u": "move_up",
    "d": "move_down",
}


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(level=settings.log_level_numeric, format=LOG_FORMAT)


def _print_favourites(app: AppContext, favourites: list[str]) -> None:
    if not favourites:
        app.console.print("[dim]No favourites.[/dim]")
        return
    for position, name in enumerate(favourites, start=1):
        app.console.print(f"{position}. {escape(name)}")


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Look up Chess.com ratings and manage favourite players."""

    if ctx.obj is None:
        ctx.obj = AppContext.from_settings(get_settings())
    _configure_logging(ctx.obj.settings)


@cli.command()
@click.argument("query", default="")
@click.pass_obj
def search(app: AppContext, query: str) -> None:
    """List favourites matching QUERY, plus QUERY itself when it is new."""

    asyncio.run(_search(app, query))


async def _search(app: AppContext, query: str) -> None:
    async with app.client_factory() as client:
        view = app.search_view(client)
        await view.ready()
        view.set_query(query)
        app.console.print(render_search(view.rows, query))


@cli.command()
@click.argument("username")
@click.option(
    "--open",
    "open_profile",
    is_flag=True,
    help="Open the player's profile in the browser once stats load.",
)
@click.pass_obj
def stats(app: AppContext, username: str, open_profile: bool) -> None:
    """Show bullet, blitz, rapid and daily ratings for USERNAME."""

    asyncio.run(_stats(app, username, open_profile))


async def _stats(app: AppContext, username: str, open_profile: bool) -> None:
    async with app.client_factory() as client:
        view = app.stats_view(username, client)
        await view.settled()
        app.console.print(render_stats(view))
        if open_profile and view.state.status is StatsStatus.LOADED:
            view.open_profile()


@cli.command()
@click.argument("username")
@click.pass_obj
def favourite(app: AppContext, username: str) -> None:
    """Add USERNAME to favourites, or remove it when already present."""

    _print_favourites(app, asyncio.run(_toggle(app, username)))


async def _toggle(app: AppContext, username: str) -> list[str]:
    service = app.favourites_service()
    await service.load()
    updated = service.toggle(username)
    await service.flush()
    return updated


@cli.command()
@click.argument("username")
@click.argument("direction", type=click.Choice(["up", "down"]))
@click.pass_obj
def move(app: AppContext, username: str, direction: str) -> None:
    """Move favourite USERNAME one place up or down."""

    _print_favourites(app, asyncio.run(_move(app, username, direction)))


async def _move(app: AppContext, username: str, direction: str) -> list[str]:
    service = app.favourites_service()
    await service.load()
    updated = service.move(username, cast(MoveDirection, direction))
    await service.flush()
    return updated


@cli.command()
@click.pass_obj
def browse(app: AppContext) -> None:
    """Interactive search list with stats drill-down."""

    asyncio.run(_browse(app))


async def _browse(app: AppContext) -> None:
    async with app.client_factory() as client:
        view = app.search_view(client)
        await view.ready()
        app.console.print(f"[dim]{BROWSE_HELP}[/dim]")
        try:
            await _browse_loop(app, view)
        finally:
            await view.close()


async def _browse_loop(app: AppContext, view: SearchView) -> None:
    last_stats: StatsView | None = None

    while True:
        app.console.print(render_search(view.rows, view.state.query))
        line = await asyncio.to_thread(
            click.prompt, SEARCH_PLACEHOLDER, default="", show_default=False
        )
        if not line.startswith(":"):
            view.set_query(line)
            continue

        command, _, argument = line[1:].partition(" ")
        argument = argument.strip()
        if command == "q":
            return
        if command == "o":
            _open_from_stats(app, last_stats, argument)
            continue
        if command not in _ROW_COMMANDS:
            app.console.print(f"[red]Unknown command :{escape(command)}[/red]")
            continue

        rows = view.rows
        if not argument.isdigit() or not 1 <= int(argument) <= len(rows):
            app.console.print(f"[red]Pick a row between 1 and {len(rows)}[/red]")
            continue
        row = rows[int(argument) - 1]

        chosen = _ROW_COMMANDS[command]
        if chosen is None:
            chosen = "unfavourite" if row.kind == "favourite" else "favourite"
        if chosen not in row.actions:
            app.console.print(f"[red]{escape(row.title)} cannot {chosen}[/red]")
            continue

        stats_view = view.perform(row, chosen)
        if stats_view is not None:
            if last_stats is not None:
                last_stats.discard()
            await stats_view.settled()
            app.console.print(render_stats(stats_view))
            last_stats = stats_view


def _open_from_stats(app: AppContext, view: StatsView | None, mode: str) -> None:
    if view is None or view.state.status is not StatsStatus.LOADED:
        app.console.print("[red]No loaded stats to open a profile from[/red]")
        return
    selected: ModeId | None = None
    if mode:
        selected = next((mode_id for mode_id in MODE_ORDER if mode_id == mode), None)
        if selected is None:
            app.console.print(f"[red]Mode must be one of {', '.join(MODE_ORDER)}[/red]")
            return
    try:
        url = view.open_profile(selected)
    except LookupError as exc:
        app.console.print(f"[red]{escape(str(exc))}[/red]")
        return
    app.console.print(f"Opened {url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
