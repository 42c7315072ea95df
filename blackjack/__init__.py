"""A console blackjack game for several players against an automatic dealer."""

__version__ = "0.1.0"
__all__ = ["card", "console", "deck", "game", "hand", "player"]