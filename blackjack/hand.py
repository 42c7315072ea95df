"""A hand of cards and its blackjack scoring."""

from __future__ import annotations

from collections.abc import Iterator

from blackjack.card import Card


class Hand:
    """The cards held by one participant during a round."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def value(self) -> int:
        """Best total, counting aces as 1 instead of 11 while over 21."""
        total = sum(card.points for card in self._cards)
        aces = sum(1 for card in self._cards if card.is_ace)
        while total > 21 and aces:
            total -= 10
            aces -= 1
        return total

    def is_blackjack(self) -> bool:
        """True for exactly two cards: an ace and a ten-point card."""
        if len(self._cards) != 2:
            return False
        has_ace = any(card.is_ace for card in self._cards)
        has_ten = any(not card.is_ace and card.points == 10 for card in self._cards)
        return has_ace and has_ten

    def is_bust(self) -> bool:
        return self.value() > 21

    def render(self) -> str:
        """Return every card drawn, followed by the hand total."""
        parts = [card.render() for card in self._cards]
        parts.append(f"Valor total: {self.value()}")
        return "\n".join(parts)

    def clear(self) -> None:
        self._cards.clear()