# blackjack

A blackjack game played in the terminal. Several players sit at the table
against an automatic dealer, and each player starts with $100. The game's
prompts and messages are in Spanish.

## Installing

    pip install .

## Playing

    blackjack

By default two players take part. To choose another number:

    blackjack --players 3

The game first asks for each player's name. Every round then goes like this:

1. A fresh 52-card deck is shuffled.
2. Each player places a bet. It must be a number greater than zero and no more
   than their balance. Anything else is refused, and the question is asked
   again.
3. Each player gets two cards and the dealer gets one, which is shown.
4. In turn, each player is asked whether they want another card. An answer
   starting with `s` or `S` takes a card, and any other answer stands. A
   player who goes over 21 is bust and takes no more cards.
5. The dealer takes a second card and keeps drawing while the hand is worth
   less than 17.
6. Bets are settled:
   - if both the player and the dealer are bust, the bet is returned;
   - a bust player loses the bet;
   - otherwise, if the dealer is bust, or the player has a blackjack and the
     dealer does not, or the player's total is higher, the player is paid
     twice the bet;
   - a lower total loses the bet, and an equal total returns it.
7. A results table lists every player's points and outcome.

Aces count as 11, or as 1 while 11 would take the hand over 21. Jacks, queens
and kings count as 10. A blackjack is exactly two cards: an ace and a
ten-point card.

After each round, any player with no money left leaves the table. The game
ends when you answer anything other than `s` or `S` to "¿Jugar otra ronda?",
when every player has run out of money, or when input ends.

## Using the package

The modules can also be used on their own:

- `blackjack.card.Card`: a frozen dataclass with `suit`, `rank` and `points`;
  `render()` returns the card drawn as a small text box.
- `blackjack.hand.Hand`: `add(card)`, `value()`, `is_blackjack()`,
  `is_bust()`, `render()` and `clear()`; it can be iterated and has a length.
- `blackjack.deck.Deck`: a 52-card deck, or one built from any cards given to
  it. `shuffle(rng)` takes an optional `random.Random`; `deal()` takes the top
  card and raises `EmptyDeckError` when the deck is empty; `remaining()`
  counts the cards left.
- `blackjack.console.Console`: `ask(prompt)` and `say(text)` over any pair of
  text streams, standard input and output by default. `ask` raises `EOFError`
  when input runs out.
- `blackjack.player.Player` and `blackjack.player.Dealer`: a player's name,
  money, bet and hand, with `place_bet()`, `wants_card()`, `receive(card)`,
  `show_hand()` and the rest. The dealer draws on its own below 17.
- `blackjack.game.Game`: `play_round()` plays a whole round and raises
  `GameOver` when no player has money left. `results_table()` returns the
  table as text. `Game` accepts a `Console` and a `random.Random`, so a game
  can be scripted or made repeatable.

## What it does not do

There is no splitting, doubling down, insurance or surrender. A blackjack pays
the same as any other win. The deck is replaced with a new one every round.
Balances are not saved between games.

## Running the tests

    pip install ".[test]"
    pytest