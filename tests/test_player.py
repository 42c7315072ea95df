import io

import pytest

from blackjack.card import Card
from blackjack.console import Console
from blackjack.player import Dealer, Player

ACE = Card("Picas", "A", 11)
KING = Card("Picas", "K", 10)
SIX = Card("Picas", "6", 6)
SEVEN = Card("Picas", "7", 7)


def _console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_place_bet_valid():
    console, out = _console("25\n")
    player = Player("Ana", 100, console)
    assert player.place_bet() == 25
    assert player.bet == 25
    assert player.money == 100 - 25
    assert "Ana, tu saldo es: $100" in out.getvalue()
    assert "Has apostado $25. Suerte!" in out.getvalue()


@pytest.mark.parametrize("bad", ["abc", "0", "-5", "150", "nan", "inf"])
def test_place_bet_rejects_invalid_then_accepts(bad):
    console, out = _console(f"{bad}\n10\n")
    player = Player("Ana", 100, console)
    assert player.place_bet() == 10
    assert out.getvalue().count("Apuesta inválida. Intenta de nuevo.") == 1


def test_place_bet_whole_balance():
    console, _ = _console("100\n")
    player = Player("Ana", 100, console)
    player.place_bet()
    assert player.money == 0


def test_place_bet_without_input_raises():
    console, _ = _console("")
    with pytest.raises(EOFError):
        Player("Ana", 100, console).place_bet()


@pytest.mark.parametrize("answer,expected", [("s", True), ("S", True), ("si", True), ("n", False), ("", False)])
def test_wants_card(answer, expected):
    console, out = _console(f"{answer}\n")
    assert Player("Ana", 100, console).wants_card() is expected
    assert "Ana, ¿quieres otra carta? (s/n): " in out.getvalue()


def test_hand_queries_and_clear():
    player = Player("Ana", 100, _console()[0])
    player.receive(ACE)
    player.receive(KING)
    assert player.hand_value() == 21
    assert player.has_blackjack()
    assert not player.is_bust()
    player.clear_hand()
    assert player.hand_value() == 0


def test_add_money():
    player = Player("Ana", 100, _console()[0])
    player.add_money(20)
    assert player.money == 120


def test_show_hand():
    console, out = _console()
    player = Player("Ana", 100, console)
    player.receive(KING)
    player.show_hand()
    assert "Ana tiene:" in out.getvalue()
    assert "Valor total: 10" in out.getvalue()


def test_dealer_defaults():
    dealer = Dealer(_console()[0])
    assert dealer.name == "Crupier"
    assert dealer.money == 1e9


def test_dealer_draws_below_seventeen():
    dealer = Dealer(_console()[0])
    dealer.receive(KING)
    dealer.receive(SIX)
    assert dealer.wants_card()
    dealer.clear_hand()
    dealer.receive(KING)
    dealer.receive(SEVEN)
    assert not dealer.wants_card()


def test_dealer_show_initial_with_card():
    console, out = _console()
    dealer = Dealer(console)
    dealer.receive(KING)
    dealer.show_initial()
    assert "Crupier muestra:" in out.getvalue()
    assert "[Carta 1]: " in out.getvalue()


def test_dealer_show_initial_hidden():
    console, out = _console()
    dealer = Dealer(console)
    dealer.show_initial()
    assert "[Carta oculta]" in out.getvalue()