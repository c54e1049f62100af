"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand, RoundOutcome, resolve_round

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "RoundOutcome",
    "resolve_round",
]
