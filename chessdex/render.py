"""Rich renderables for the search list and the stats view."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from chessdex.schemas.rows import SearchRow
from chessdex.services.search_service import SEARCH_PLACEHOLDER
from chessdex.views.stats_view import EMPTY_TITLE, StatsStatus, StatsView

_ACTION_LABELS = {
    "view_stats": "s: View Stats",
    "favourite": "f: Favourite Player",
    "unfavourite": "f: Unfavourite Player",
    "move_up": "u: Move Up",
    "move_down": "d: Move Down",
}


def render_search(rows: Sequence[SearchRow], query: str) -> RenderableType:
    title = f"Search: {escape(query)}" if query else SEARCH_PLACEHOLDER
    if not rows:
        return Panel("[dim]No favourites yet. Type a username to look one up.[/dim]", title=title)

    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Player")
    table.add_column("", style="yellow")
    table.add_column("Actions", style="dim")
    for index, row in enumerate(rows, start=1):
        table.add_row(
            str(index),
            f"{row.icon} {escape(row.title)}",
            row.accessory or "",
            ", ".join(_ACTION_LABELS[action] for action in row.actions),
        )
    return table


def render_stats(view: StatsView) -> RenderableType:
    state = view.state
    if state.status is StatsStatus.LOADING:
        return Panel(f"[dim]Viewing stats for {escape(view.username)}...[/dim]")
    if state.status is StatsStatus.NOT_FOUND:
        return Panel(
            f"🔍 [bold]{EMPTY_TITLE}[/bold]\n{escape(view.empty_description)}",
            border_style="red",
        )

    table = Table(title=escape(view.section_title))
    table.add_column("Rating", style="bold")
    table.add_column("Record")
    table.add_column("Profile", style="cyan")
    for row in view.rows:
        table.add_row(f"{row.icon} {row.title}", row.record, row.profile_url)
    return table


__all__ = ["render_search", "render_stats"]
