"""Rendering helpers that lay out a deck as console text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from rich.console import Console

from ..cards import Card
from ..deck import CARDS_PER_SUIT, generate_deck

ART_HEIGHT = 5


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Layout options for printing a deck."""

    cards_per_row: int = CARDS_PER_SUIT
    separator: str = " "
    condensed_header: str = "Basic Deck Output:"
    art_header: str = "Hacker Challenge - ASCII Art Deck:"
    show_condensed: bool = True
    show_art: bool = True

    def __post_init__(self) -> None:
        if self.cards_per_row < 1:
            raise ValueError("cards_per_row must be positive")


DEFAULT_CONFIG = RenderConfig()


def _chunks(deck: Sequence[Card], size: int) -> Iterator[Sequence[Card]]:
    for start in range(0, len(deck), size):
        yield deck[start : start + size]


def condensed_lines(deck: Sequence[Card], config: RenderConfig = DEFAULT_CONFIG) -> list[str]:
    """Return one line of ``"<rank> <suit>"`` tokens per row of cards."""

    return [
        config.separator.join(str(card) for card in row)
        for row in _chunks(deck, config.cards_per_row)
    ]


def art_lines(deck: Sequence[Card], config: RenderConfig = DEFAULT_CONFIG) -> list[str]:
    """Return the ASCII art for ``deck`` with each row's cards side by side."""

    lines: list[str] = []
    for row in _chunks(deck, config.cards_per_row):
        pieces = [card.render_art().split("\n") for card in row]
        for line_index in range(ART_HEIGHT):
            joined = config.separator.join(piece[line_index] for piece in pieces)
            lines.append(joined.rstrip())
    return lines


def _emit(console: Console, line: str) -> None:
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_condensed(
    deck: Sequence[Card],
    console: Console,
    config: RenderConfig = DEFAULT_CONFIG,
) -> None:
    for line in condensed_lines(deck, config):
        _emit(console, line)


def print_art(
    deck: Sequence[Card],
    console: Console,
    config: RenderConfig = DEFAULT_CONFIG,
) -> None:
    for line in art_lines(deck, config):
        _emit(console, line)


def render_deck(console: Console, config: RenderConfig = DEFAULT_CONFIG) -> list[Card]:
    """Generate a fresh deck and print the enabled sections to ``console``."""

    deck = generate_deck()
    if config.show_condensed:
        _emit(console, config.condensed_header)
        print_condensed(deck, console, config)
    if config.show_condensed and config.show_art:
        _emit(console, "")
    if config.show_art:
        _emit(console, config.art_header)
        print_art(deck, console, config)
    return deck


__all__ = [
    "ART_HEIGHT",
    "DEFAULT_CONFIG",
    "RenderConfig",
    "art_lines",
    "condensed_lines",
    "print_art",
    "print_condensed",
    "render_deck",
]
