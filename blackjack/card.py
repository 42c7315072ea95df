"""Playing cards."""

from __future__ import annotations

from dataclasses import dataclass

_BORDER = "+-----------+"


@dataclass(frozen=True)
class Card:
    """A single card: its suit, its face rank and its blackjack points."""

    suit: str
    rank: str
    points: int

    @property
    def is_ace(self) -> bool:
        return self.rank == "A"

    def render(self) -> str:
        """Return the card drawn as a small text box."""
        return "\n".join(
            [
                _BORDER,
                f"| {self.rank:<2}        |",
                "|           |",
                f"| {self.suit:<9}|",
                _BORDER,
            ]
        )