"""The 52-card deck."""

from __future__ import annotations

import random
from collections.abc import Iterable

from blackjack.card import Card

SUITS = ("Corazones", "Diamantes", "Tréboles", "Picas")
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


class EmptyDeckError(IndexError):
    """Raised when a card is dealt from an empty deck."""


def _points(rank: str) -> int:
    if rank == "A":
        return 11
    if rank in ("J", "Q", "K"):
        return 10
    return int(rank)


class Deck:
    """A deck dealt from its top, which is the end of the card list."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        if cards is None:
            cards = (Card(suit, rank, _points(rank)) for suit in SUITS for rank in RANKS)
        self._cards: list[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        (rng or random.Random()).shuffle(self._cards)

    def deal(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("No hay más cartas en el mazo")
        return self._cards.pop()

    def remaining(self) -> int:
        return len(self._cards)