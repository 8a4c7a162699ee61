"""Chessdex: Chess.com player lookup with a locally persisted favourites list."""

__version__ = "0.1.0"

__all__ = ["__version__"]
