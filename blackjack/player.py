"""Players and the dealer."""

from __future__ import annotations

import math

from blackjack.card import Card
from blackjack.console import Console
from blackjack.hand import Hand


def format_money(amount: float) -> str:
    return f"{amount:g}"


class Player:
    """A participant with a name, a balance, a current bet and a hand."""

    def __init__(self, name: str, money: float, console: Console | None = None) -> None:
        self.name = name
        self.money = float(money)
        self.bet = 0.0
        self.hand = Hand()
        self.console = console or Console()

    def add_money(self, amount: float) -> None:
        self.money += amount

    def place_bet(self) -> float:
        """Ask until a bet between zero (exclusive) and the balance is given."""
        self.console.say(f"\n{self.name}, tu saldo es: ${format_money(self.money)}")
        while True:
            answer = self.console.ask("¿Cuánto deseas apostar? ")
            try:
                amount = float(answer.strip())
            except ValueError:
                amount = math.nan
            if math.isfinite(amount) and 0 < amount <= self.money:
                break
            self.console.say("Apuesta inválida. Intenta de nuevo.")
        self.bet = amount
        self.money -= amount
        self.console.say(f"Has apostado ${format_money(amount)}. Suerte!")
        return self.bet

    def wants_card(self) -> bool:
        answer = self.console.ask(f"{self.name}, ¿quieres otra carta? (s/n): ")
        return answer.strip()[:1] in ("s", "S")

    def receive(self, card: Card) -> None:
        self.hand.add(card)

    def hand_value(self) -> int:
        return self.hand.value()

    def has_blackjack(self) -> bool:
        return self.hand.is_blackjack()

    def is_bust(self) -> bool:
        return self.hand.is_bust()

    def _hand_text(self) -> str:
        return f"\n{self.name} tiene:\n{self.hand.render()}"

    def show_hand(self) -> None:
        self.console.say(self._hand_text())

    def clear_hand(self) -> None:
        self.hand.clear()


class Dealer(Player):
    """The house: draws automatically below 17 and never runs out of money."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__("Crupier", 1e9, console)

    def show_initial(self) -> None:
        self.console.say(f"\n{self.name} muestra:")
        if not self.is_bust() and not self.has_blackjack() and self.hand_value() > 0:
            self.console.say("[Carta 1]: " + self._hand_text())
        else:
            self.console.say("[Carta oculta]")

    def wants_card(self) -> bool:
        return self.hand_value() < 17