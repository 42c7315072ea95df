import pytest

from blackjack.card import Card


def test_render_layout():
    lines = Card("Corazones", "A", 11).render().split("\n")
    assert lines[0] == "+-----------+"
    assert lines[1] == "| A         |"
    assert lines[2] == "|           |"
    assert lines[3] == "| Corazones|"
    assert lines[4] == "+-----------+"


def test_two_digit_rank_fits():
    lines = Card("Picas", "10", 10).render().split("\n")
    assert lines[1].startswith("| 10 ")
    assert lines[3] == "| Picas    |"


def test_is_ace():
    assert Card("Picas", "A", 11).is_ace
    assert not Card("Picas", "K", 10).is_ace


def test_cards_compare_by_value():
    assert Card("Picas", "Q", 10) == Card("Picas", "Q", 10)
    with pytest.raises(AttributeError):
        Card("Picas", "Q", 10).rank = "K"  # type: ignore[misc]