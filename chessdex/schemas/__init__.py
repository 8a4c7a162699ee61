"""Pydantic schemas shared across services, views and the CLI."""

from chessdex.schemas.error import ErrorType
from chessdex.schemas.rows import RatingRow, SearchRow
from chessdex.schemas.stats import MODE_ORDER, ChessStats, ModeStats

__all__ = [
    "ChessStats",
    "ErrorType",
    "MODE_ORDER",
    "ModeStats",
    "RatingRow",
    "SearchRow",
]
