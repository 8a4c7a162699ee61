"""Pure list transformations for the favourites list.

Every helper returns a new list and never mutates its input. Usernames are
compared case-insensitively throughout; the stored casing is whatever the user
first typed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

MoveDirection = Literal["up", "down"]


def find_index(favourites: Sequence[str], name: str) -> int:
    """Return the position of ``name`` ignoring case, or ``-1``."""

    lowered = name.lower()
    return next(
        (index for index, entry in enumerate(favourites) if entry.lower() == lowered),
        -1,
    )


def contains(favourites: Sequence[str], name: str) -> bool:
    return find_index(favourites, name) != -1


def toggle_favourite(favourites: Sequence[str], name: str) -> list[str]:
    """Remove ``name`` when present, otherwise append it at the end.

    Re-adding a removed name appends it, so a remove/add pair loses the
    original position.
    """

    lowered = name.lower()
    if contains(favourites, name):
        return [entry for entry in favourites if entry.lower() != lowered]
    return [*favourites, name]


def move_favourite(
    favourites: Sequence[str], name: str, direction: MoveDirection
) -> list[str]:
    """Swap ``name`` with its neighbour in ``direction``.

    Unknown names and moves past either end leave the order untouched.
    """

    updated = list(favourites)
    index = find_index(updated, name)
    if index == -1:
        return updated

    if direction == "up" and index > 0:
        updated[index - 1], updated[index] = updated[index], updated[index - 1]
    elif direction == "down" and index < len(updated) - 1:
        updated[index + 1], updated[index] = updated[index], updated[index + 1]
    return updated


def filter_favourites(favourites: Sequence[str], query: str) -> list[str]:
    """Return favourites containing ``query`` as a case-insensitive substring."""

    needle = query.lower()
    return [entry for entry in favourites if needle in entry.lower()]


__all__ = [
    "MoveDirection",
    "contains",
    "filter_favourites",
    "find_index",
    "move_favourite",
    "toggle_favourite",
]
