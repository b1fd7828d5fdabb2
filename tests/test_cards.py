"""Tests covering card construction, mutation and rendering."""

from __future__ import annotations

import copy
import io

import pytest
from rich.console import Console

from deckart.cards import (
    Card,
    CardError,
    InvalidCardData,
    InvalidRank,
    InvalidSuit,
    NullSource,
    Suit,
    rank_valid,
    suit_valid,
)


@pytest.mark.parametrize("suit", list(Suit))
@pytest.mark.parametrize("rank", range(1, 14))
def test_construct_valid_cards(rank: int, suit: Suit) -> None:
    card = Card(rank, suit)
    assert card.rank == rank
    assert card.suit is suit


@pytest.mark.parametrize("rank", [0, 14, -1, 100, True, 1.0, "1", None])
def test_construct_rejects_invalid_rank(rank: object) -> None:
    with pytest.raises(InvalidRank):
        Card(rank, Suit.SPADE)  # type: ignore[arg-type]


@pytest.mark.parametrize("suit", ["X", "H", "HEART", "", None, 3])
def test_construct_rejects_invalid_suit(suit: object) -> None:
    with pytest.raises(InvalidSuit):
        Card(5, suit)  # type: ignore[arg-type]


def test_invalid_data_errors_share_a_base() -> None:
    assert issubclass(InvalidRank, InvalidCardData)
    assert issubclass(InvalidSuit, InvalidCardData)
    assert issubclass(InvalidCardData, CardError)
    assert issubclass(NullSource, CardError)
    assert issubclass(CardError, ValueError)


def test_glyph_suit_is_normalised() -> None:
    card = Card(12, "♦")
    assert card.suit is Suit.DIAMOND


def test_default_card_is_ace_of_hearts() -> None:
    card = Card()
    assert card.rank == 1
    assert card.suit is Suit.HEART
    assert str(card) == "A ♥"


def test_from_card_duplicates_without_sharing() -> None:
    original = Card(7, Suit.CLUB)
    duplicate = Card.from_card(original)
    assert duplicate == original
    assert duplicate is not original

    assert duplicate.set_rank(8)
    assert original.rank == 7


def test_copy_module_uses_card_copy() -> None:
    original = Card(9, Suit.SPADE)
    duplicate = copy.copy(original)
    assert duplicate == original
    assert duplicate is not original


def test_from_card_rejects_missing_source() -> None:
    with pytest.raises(NullSource):
        Card.from_card(None)


def test_from_card_rejects_non_card() -> None:
    with pytest.raises(InvalidCardData):
        Card.from_card("A ♥")  # type: ignore[arg-type]


def test_set_rank_applies_only_valid_values() -> None:
    card = Card(3, Suit.HEART)
    assert card.set_rank(13)
    assert (card.rank, card.suit) == (13, Suit.HEART)

    for bad in (0, 14, -1):
        assert not card.set_rank(bad)
    assert (card.rank, card.suit) == (13, Suit.HEART)


def test_set_suit_applies_only_valid_values() -> None:
    card = Card(3, Suit.HEART)
    assert card.set_suit(Suit.CLUB)
    assert (card.rank, card.suit) == (3, Suit.CLUB)

    assert not card.set_suit("?")
    assert (card.rank, card.suit) == (3, Suit.CLUB)


def test_set_suit_accepts_glyph_string() -> None:
    card = Card(3, Suit.HEART)
    assert card.set_suit("♠")
    assert card.suit is Suit.SPADE


def test_set_all_accepts_glyph_string() -> None:
    card = Card()
    assert card.set_all(3, "♣")
    assert card.rank == 3
    assert card.suit is Suit.CLUB


@pytest.mark.parametrize(
    ("rank", "suit"),
    [
        (0, Suit.SPADE),
        (14, Suit.SPADE),
        (5, "x"),
        (20, "x"),
    ],
)
def test_set_all_is_atomic(rank: int, suit: object) -> None:
    card = Card(2, Suit.DIAMOND)
    assert not card.set_all(rank, suit)  # type: ignore[arg-type]
    assert card.rank == 2
    assert card.suit is Suit.DIAMOND


def test_set_all_applies_both_fields() -> None:
    card = Card()
    assert card.set_all(11, Suit.SPADE)
    assert (card.rank, card.suit) == (11, Suit.SPADE)


@pytest.mark.parametrize(
    ("rank", "expected"),
    [
        (1, "A"),
        (11, "J"),
        (12, "Q"),
        (13, "K"),
        (5, "5"),
        (10, "10"),
    ],
)
def test_display_rank(rank: int, expected: str) -> None:
    assert Card(rank, Suit.CLUB).display_rank() == expected


def test_str_uses_display_rank_and_glyph() -> None:
    assert str(Card(10, Suit.SPADE)) == "10 ♠"
    assert str(Card(12, Suit.DIAMOND)) == "Q ♦"


def test_equality_is_structural() -> None:
    first = Card(4, Suit.HEART)
    second = Card(4, Suit.HEART)
    assert first == first
    assert first == second
    assert second == first
    assert first != Card(5, Suit.HEART)
    assert first != Card(4, Suit.SPADE)


@pytest.mark.parametrize("other", [None, "4 ♥", 4, (4, Suit.HEART)])
def test_equality_with_non_card_is_false(other: object) -> None:
    assert Card(4, Suit.HEART) != other


def test_cards_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Card())


def test_render_art_ace_of_hearts() -> None:
    expected = "\n".join(
        [
            "-------",
            "|♥   ♥|",
            "| A   |",
            "|♥   ♥|",
            "-------",
        ]
    )
    assert Card(1, Suit.HEART).render_art() == expected


def test_render_art_two_character_rank() -> None:
    lines = Card(10, Suit.SPADE).render_art().split("\n")
    assert len(lines) == 5
    assert lines[1] == "|♠   ♠|"
    assert lines[2] == "|10  |"
    assert not Card(10, Suit.SPADE).render_art().endswith("\n")


def test_print_card_writes_art() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=40, color_system=None)
    Card(13, Suit.CLUB).print_card(console)
    assert buffer.getvalue() == Card(13, Suit.CLUB).render_art() + "\n"


def test_validation_helpers() -> None:
    assert rank_valid(1) and rank_valid(13)
    assert not rank_valid(0) and not rank_valid(14) and not rank_valid(False)
    assert all(suit_valid(suit) for suit in Suit)
    assert suit_valid("♠")
    assert not suit_valid("S")


def test_repr_mentions_fields() -> None:
    assert repr(Card(2, Suit.CLUB)) == "Card(rank=2, suit=<Suit.CLUB: '♣'>)"
