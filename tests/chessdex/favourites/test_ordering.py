"""Properties of the pure favourites list transformations."""

from __future__ import annotations

import pytest

from chessdex.services.favourites import (
    contains,
    filter_favourites,
    move_favourite,
    toggle_favourite,
)

FAVOURITES = ["Hikaru", "MagnusCarlsen", "DanielNaroditsky", "GothamChess"]


def test_toggle_appends_new_name_with_typed_casing() -> None:
    assert toggle_favourite(FAVOURITES, "FabianoCaruana") == [
        *FAVOURITES,
        "FabianoCaruana",
    ]


def test_toggle_removes_existing_name_ignoring_case() -> None:
    assert toggle_favourite(FAVOURITES, "magnuscarlsen") == [
        "Hikaru",
        "DanielNaroditsky",
        "GothamChess",
    ]


@pytest.mark.parametrize("name", ["FabianoCaruana", "alireza2003", "x"])
def test_double_toggle_of_absent_name_is_identity(name: str) -> None:
    assert toggle_favourite(toggle_favourite(FAVOURITES, name), name) == FAVOURITES


def test_double_toggle_of_present_name_moves_it_to_the_end() -> None:
    once = toggle_favourite(FAVOURITES, "hikaru")
    twice = toggle_favourite(once, "hikaru")

    assert twice == ["MagnusCarlsen", "DanielNaroditsky", "GothamChess", "hikaru"]


def test_toggle_never_creates_case_insensitive_duplicates() -> None:
    updated = toggle_favourite(FAVOURITES, "HIKARU")

    assert not contains(updated, "hikaru")
    assert len({name.lower() for name in updated}) == len(updated)


def test_toggle_does_not_mutate_input() -> None:
    original = list(FAVOURITES)
    toggle_favourite(original, "someone")

    assert original == FAVOURITES


@pytest.mark.parametrize("name", ["MagnusCarlsen", "danielnaroditsky"])
def test_move_up_then_down_restores_order(name: str) -> None:
    moved = move_favourite(FAVOURITES, name, "up")

    assert moved != FAVOURITES
    assert move_favourite(moved, name, "down") == FAVOURITES


def test_move_swaps_only_the_neighbour() -> None:
    assert move_favourite(FAVOURITES, "DanielNaroditsky", "up") == [
        "Hikaru",
        "DanielNaroditsky",
        "MagnusCarlsen",
        "GothamChess",
    ]


@pytest.mark.parametrize(
    ("name", "direction"),
    [("hikaru", "up"), ("GOTHAMCHESS", "down"), ("nobody", "up"), ("nobody", "down")],
)
def test_move_at_boundary_or_unknown_is_noop(name: str, direction: str) -> None:
    assert move_favourite(FAVOURITES, name, direction) == FAVOURITES  # type: ignore[arg-type]


def test_move_single_entry_list_is_noop() -> None:
    assert move_favourite(["solo"], "solo", "down") == ["solo"]


def test_filter_by_empty_query_returns_everything_in_order() -> None:
    assert filter_favourites(FAVOURITES, "") == FAVOURITES


def test_filter_is_unanchored_and_case_insensitive() -> None:
    assert filter_favourites(FAVOURITES, "CHESS") == ["GothamChess"]
    assert filter_favourites(FAVOURITES, "a") == [
        "Hikaru",
        "MagnusCarlsen",
        "DanielNaroditsky",
        "GothamChess",
    ]


def test_filter_uses_raw_query_including_whitespace() -> None:
    assert filter_favourites(FAVOURITES, " ") == []
