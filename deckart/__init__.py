"""Top-level package for the deckart playing-card renderer."""

from . import cards, deck
from .cards import Card, CardError, InvalidCardData, InvalidRank, InvalidSuit, NullSource, Suit
from .deck import generate_deck

__all__ = [
    "Card",
    "CardError",
    "InvalidCardData",
    "InvalidRank",
    "InvalidSuit",
    "NullSource",
    "Suit",
    "cards",
    "deck",
    "generate_deck",
]
