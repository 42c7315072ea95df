"""Rounds of blackjack between several players and the dealer."""

from __future__ import annotations

import argparse
import random

from blackjack.console import Console
from blackjack.deck import Deck
from blackjack.player import Dealer, Player, format_money

STARTING_MONEY = 100.0


class GameOver(Exception):
    """Raised when every player has run out of money."""


class Game:
    """A table of players against one dealer."""

    def __init__(
        self,
        num_players: int = 2,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console or Console()
        self.rng = rng or random.Random()
        self.players: list[Player] = []
        for number in range(1, num_players + 1):
            name = self.console.ask(f"Ingrese el nombre del jugador {number}: ")
            self.players.append(Player(name, STARTING_MONEY, self.console))
        self.dealer = Dealer(self.console)
        self.deck = Deck()

    def play_round(self) -> None:
        """Play one full round; raise GameOver when no player has money left."""
        self.deck = Deck()
        self.deck.shuffle(self.rng)
        self.request_bets()
        self.deal_initial()
        self.play_turns()
        self.dealer_turn()
        self.settle()
        self.console.say(self.results_table())

        for player in self.players:
            player.clear_hand()
        self.dealer.clear_hand()

        remaining = []
        for player in self.players:
            if player.money <= 0:
                self.console.say(f"{player.name} se ha quedado sin dinero y abandona el juego.")
            else:
                remaining.append(player)
        self.players = remaining

        if not self.players:
            self.console.say("Todos los jugadores se han quedado sin dinero. Fin del juego.")
            raise GameOver("all players are out of money")

    def request_bets(self) -> None:
        for player in self.players:
            player.place_bet()

    def deal_initial(self) -> None:
        for player in self.players:
            player.receive(self.deck.deal())
            player.receive(self.deck.deal())
        self.dealer.receive(self.deck.deal())
        for player in self.players:
            player.show_hand()
        self.dealer.show_initial()

    def play_turns(self) -> None:
        for player in self.players:
            while not player.is_bust() and player.wants_card():
                self.console.say(f"{player.name} pide carta.")
                player.receive(self.deck.deal())
                player.show_hand()
                if player.is_bust():
                    self.console.say(f"{player.name} se ha pasado de 21.")

    def dealer_turn(self) -> None:
        self.console.say("\nTurno del Crupier:")
        self.dealer.receive(self.deck.deal())
        while self.dealer.wants_card():
            self.console.say("Crupier pide carta...")
            self.dealer.receive(self.deck.deal())
            self.dealer.show_hand()
        if self.dealer.is_bust():
            self.console.say("El Crupier se ha pasado de 21.")
        else:
            self.console.say(f"El Crupier se planta con {self.dealer.hand_value()}.")

    def settle(self) -> None:
        """Compare every hand with the dealer's and pay out the bets."""
        dealer = self.dealer
        dealer_value = dealer.hand_value()
        say = self.console.say
        for player in self.players:
            bet = player.bet
            value = player.hand_value()
            if player.is_bust() and dealer.is_bust():
                say(f"{player.name} y el Crupier se pasaron. Empate.")
                say(f"Se retornan ${format_money(bet)}")
                player.add_money(bet)
            elif player.is_bust():
                say(f"{player.name} pierde (se pasó).")
                say(f"Perdio ${format_money(bet)}")
            elif dealer.is_bust():
                say(f"{player.name} gana (crupier se pasó).")
                player.add_money(2 * bet)
                say(f"Gano ${format_money(2 * bet)}")
            elif player.has_blackjack() and not dealer.has_blackjack():
                say(f"{player.name} gana con Blackjack!")
                player.add_money(2 * bet)
                say(f"Gano ${format_money(2 * bet)}")
            elif value > dealer_value:
                say(f"{player.name} gana.")
                player.add_money(2 * bet)
                say(f"Gano ${format_money(2 * bet)}")
            elif value < dealer_value:
                say(f"{player.name} pierde.")
                say(f"Perdio ${format_money(bet)}")
            else:
                say(f"{player.name} empata con el crupier.")
                say(f"Empato, se retornan ${format_money(bet)}")
                player.add_money(bet)

    def results_table(self) -> str:
        """Return the table of points and outcome for every player."""
        dealer = self.dealer
        dealer_value = dealer.hand_value()
        lines = [
            f"{'Jugador':<15}{'Puntos':<10}{'Estado':<10}",
            "--------------------------------------",
        ]
        for player in self.players:
            value = player.hand_value()
            if player.is_bust():
                state = "Se pasó"
            elif player.has_blackjack():
                state = "Blackjack"
            elif not dealer.is_bust() and value == dealer_value:
                state = "Empate"
            elif value < dealer_value and not dealer.is_bust():
                state = "Perdió"
            else:
                state = "Ganó"
            lines.append(f"{player.name:<15}{value:<10}{state:<10}")
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="blackjack", description="Blackjack de consola.")
    parser.add_argument("--players", type=int, default=2, help="número de jugadores")
    args = parser.parse_args(argv)

    console = Console()
    try:
        game = Game(args.players, console)
        while True:
            game.play_round()
            answer = console.ask("\n¿Jugar otra ronda? (s/n): ")
            if answer.strip()[:1] not in ("s", "S"):
                break
    except (GameOver, EOFError):
        pass
    return 0