"""Card abstractions and validation helpers for a standard 52-card deck."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final

from rich.console import Console

logger = logging.getLogger(__name__)

MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 13
FACE_LABELS: Final[dict[int, str]] = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Suit(str, Enum):
    """Enumeration of the four suits, valued by their display glyph."""

    HEART = "♥"
    DIAMOND = "♦"
    CLUB = "♣"
    SPADE = "♠"

    @property
    def glyph(self) -> str:
        return self.value


DEFAULT_RANK: Final[int] = 1
DEFAULT_SUIT: Final[Suit] = Suit.HEART


class CardError(ValueError):
    """Base class for card construction failures."""


class InvalidCardData(CardError):
    """Raised when a card would be built from an invalid rank or suit."""


class InvalidRank(InvalidCardData):
    """Raised when a rank falls outside ``1..13``."""


class InvalidSuit(InvalidCardData):
    """Raised when a suit is not one of the four enumerated suits."""


class NullSource(CardError):
    """Raised when copying from a card that does not exist."""


def rank_valid(rank: Any) -> bool:
    """Return ``True`` when ``rank`` is an integer between 1 and 13."""

    if isinstance(rank, bool) or not isinstance(rank, int):
        return False
    return MIN_RANK <= rank <= MAX_RANK


def _coerce_suit(suit: Any) -> Suit | None:
    if isinstance(suit, Suit):
        return suit
    if not isinstance(suit, str):
        return None
    try:
        return Suit(suit)
    except ValueError:
        return None


def suit_valid(suit: Any) -> bool:
    """Return ``True`` for a ``Suit`` member or one of the four suit glyphs."""

    return _coerce_suit(suit) is not None


class Card:
    """Value object describing one physical playing card.

    The rank is stored as an integer (1 is the Ace, 11-13 are the Jack, Queen
    and King) and only shown as a face label on output. Every mutation goes
    through a checked setter, so a card can never hold an invalid rank or suit.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: int = DEFAULT_RANK, suit: Suit | str = DEFAULT_SUIT) -> None:
        if not rank_valid(rank):
            raise InvalidRank(f"invalid card rank {rank!r}; expected {MIN_RANK}-{MAX_RANK}")
        normalised = _coerce_suit(suit)
        if normalised is None:
            raise InvalidSuit(f"invalid card suit {suit!r}")
        self._rank: int = rank
        self._suit: Suit = normalised

    @classmethod
    def from_card(cls, original: Card | None) -> Card:
        """Return an independent copy of ``original``."""

        if original is None:
            raise NullSource("cannot copy a card that does not exist")
        if not isinstance(original, Card):
            raise InvalidCardData(f"cannot copy {type(original).__name__} as a card")
        return cls(original.rank, original.suit)

    def __copy__(self) -> Card:
        return Card.from_card(self)

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def set_rank(self, rank: int) -> bool:
        """Apply ``rank`` if valid and report whether the card changed."""

        if not rank_valid(rank):
            logger.debug("Rejected rank %r for %s", rank, self)
            return False
        self._rank = rank
        return True

    def set_suit(self, suit: Suit | str) -> bool:
        """Apply ``suit`` if valid and report whether the card changed."""

        normalised = _coerce_suit(suit)
        if normalised is None:
            logger.debug("Rejected suit %r for %s", suit, self)
            return False
        self._suit = normalised
        return True

    def set_all(self, rank: int, suit: Suit | str) -> bool:
        """Apply both fields together; nothing changes unless both are valid."""

        normalised = _coerce_suit(suit)
        if not rank_valid(rank) or normalised is None:
            logger.debug("Rejected rank %r / suit %r for %s", rank, suit, self)
            return False
        self._rank = rank
        self._suit = normalised
        return True

    def display_rank(self) -> str:
        """Return the label printed on the card face (A, 2-10, J, Q, K)."""

        return FACE_LABELS.get(self._rank, str(self._rank))

    def render_art(self) -> str:
        """Return a five line ASCII box for the card, without a trailing newline."""

        label = self.display_rank()
        # one-character labels sit one column in from the border
        value = f" {label}   " if len(label) == 1 else f"{label}  "
        glyph = self._suit.glyph
        return "\n".join(
            (
                "-------",
                f"|{glyph}   {glyph}|",
                f"|{value}|",
                f"|{glyph}   {glyph}|",
                "-------",
            )
        )

    def print_card(self, console: Console | None = None) -> None:
        """Print the ASCII art for this card."""

        target = console or Console()
        target.print(self.render_art(), markup=False, highlight=False, soft_wrap=True)

    def __str__(self) -> str:
        return f"{self.display_rank()} {self._suit.glyph}"

    def __repr__(self) -> str:
        return f"Card(rank={self._rank!r}, suit={self._suit!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit is other._suit

    __hash__ = None  # type: ignore[assignment]


__all__ = [
    "Card",
    "CardError",
    "DEFAULT_RANK",
    "DEFAULT_SUIT",
    "InvalidCardData",
    "InvalidRank",
    "InvalidSuit",
    "MAX_RANK",
    "MIN_RANK",
    "NullSource",
    "Suit",
    "rank_valid",
    "suit_valid",
]
