"""Deterministic assembly of the standard 52-card deck."""

from __future__ import annotations

import logging
from typing import Final, Iterator

from .cards import MAX_RANK, MIN_RANK, Card, Suit

logger = logging.getLogger(__name__)

SUIT_ORDER: Final[tuple[Suit, ...]] = (Suit.HEART, Suit.DIAMOND, Suit.CLUB, Suit.SPADE)
RANKS: Final[range] = range(MIN_RANK, MAX_RANK + 1)
CARDS_PER_SUIT: Final[int] = len(RANKS)
DECK_SIZE: Final[int] = len(SUIT_ORDER) * CARDS_PER_SUIT


def iter_full_deck() -> Iterator[Card]:
    """Yield every card suit by suit, ranks ascending within each suit."""

    for suit in SUIT_ORDER:
        for rank in RANKS:
            yield Card(rank, suit)


def generate_deck() -> list[Card]:
    """Return the 52 cards in deck order.

    Position ``i`` holds ``SUIT_ORDER[i // 13]`` with rank ``i % 13 + 1``.
    """

    deck = list(iter_full_deck())
    logger.debug("Generated deck of %d cards", len(deck))
    return deck


__all__ = ["CARDS_PER_SUIT", "DECK_SIZE", "RANKS", "SUIT_ORDER", "generate_deck", "iter_full_deck"]
