"""Pytest fixtures for blackjack table tests."""

from random import Random

import pytest

from core.cards import Card, Deck
from core.hand import Hand
from core.game import BlackjackGame


def make_cards(spec: str) -> list[Card]:
    """Parse a space separated card list like 'AS 10H KD'."""
    return [Card.from_string(token) for token in spec.split()]


def make_hand(spec: str) -> Hand:
    """Build a hand from a card list string."""
    hand = Hand()
    for card in make_cards(spec):
        hand.add_card(card)
    return hand


def stack_deck(game: BlackjackGame, spec: str) -> None:
    """Arrange the game's deck so the listed cards come off the top in order.

    The deal order is player, dealer (hole), player, dealer, then draws.
    """
    game.deck._cards = list(reversed(make_cards(spec)))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS 6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S 6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S 6H KC")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


@pytest.fixture
def recorded_events(game):
    """List collecting every event the game emits."""
    events = []
    game.subscribe(events.append)
    return events


@pytest.fixture
def cards():
    """Factory parsing 'AS 10H KD' style card lists."""
    return make_cards


@pytest.fixture
def hand():
    """Factory building a hand from a card list string."""
    return make_hand


@pytest.fixture
def stacked_game(rng):
    """Factory for a game whose deck deals the listed cards first."""

    def _make(spec: str) -> BlackjackGame:
        g = BlackjackGame(rng=rng)
        stack_deck(g, spec)
        return g

    return _make
