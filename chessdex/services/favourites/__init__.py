"""Favourites domain components split by responsibility.

``ordering`` holds the pure list transformations, ``persistence`` moves the
list in and out of the key-value store.
"""

from .ordering import (
    MoveDirection,
    contains,
    filter_favourites,
    move_favourite,
    toggle_favourite,
)
from .persistence import FAVOURITES_KEY, FavouritesPersistence

__all__ = [
    "FAVOURITES_KEY",
    "FavouritesPersistence",
    "MoveDirection",
    "contains",
    "filter_favourites",
    "move_favourite",
    "toggle_favourite",
]
