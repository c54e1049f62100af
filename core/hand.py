"""Hand evaluation and round resolution for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            total += card.value
            if card.is_ace:
                aces += 1

        # Reduce aces from 11 to 1 as needed
        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def is_twenty_one(self) -> bool:
        """Check if the hand totals exactly 21."""
        return self.value == BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 with 2 cards).

        Informational only: a natural resolves like any other 21.
        """
        return len(self.cards) == 2 and self.is_twenty_one

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        if self.is_soft:
            return f"{cards_str} (soft {self.value})"
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


class RoundOutcome(Enum):
    """How a round ended, from the player's point of view."""

    PLAYER_BUST = "BUST! You lose."
    DEALER_BUST = "Dealer BUSTS! You Win!"
    PLAYER_WINS = "You Win!"
    DEALER_WINS = "Dealer Wins."
    PUSH = "Push (Tie)."

    @property
    def message(self) -> str:
        """Text shown to the player."""
        return self.value

    @property
    def is_win(self) -> bool:
        return self in (RoundOutcome.DEALER_BUST, RoundOutcome.PLAYER_WINS)

    @property
    def is_loss(self) -> bool:
        return self in (RoundOutcome.PLAYER_BUST, RoundOutcome.DEALER_WINS)


def resolve_round(player_hand: Hand, dealer_hand: Hand) -> RoundOutcome:
    """
    Compare player and dealer hands.

    A player bust loses even if the dealer would also bust. Naturals get
    no special treatment; totals are compared as-is.
    """
    if player_hand.is_busted:
        return RoundOutcome.PLAYER_BUST

    if dealer_hand.is_busted:
        return RoundOutcome.DEALER_BUST

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return RoundOutcome.PLAYER_WINS
    if dealer_value > player_value:
        return RoundOutcome.DEALER_WINS
    return RoundOutcome.PUSH
