"""Tests for Hand evaluation and round resolution."""

import pytest
from hypothesis import given, strategies as st

from core.cards import Card, Rank, Suit
from core.hand import Hand, RoundOutcome, resolve_round


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=6):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards=cards)


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_hard_hand_value(self, hard_16_hand):
        """Test hard hand value calculation."""
        assert hard_16_hand.value == 16
        assert not hard_16_hand.is_soft

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_blackjack(self, blackjack_hand):
        """Test blackjack detection."""
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.is_twenty_one
        assert blackjack_hand.value == 21

    def test_three_card_21_is_not_blackjack(self, hand):
        seven_seven_seven = hand("7S 7H 7C")
        assert seven_seven_seven.value == 21
        assert seven_seven_seven.is_twenty_one
        assert not seven_seven_seven.is_blackjack

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_soft_to_hard_transition(self, hand):
        """Test ace switching from 11 to 1."""
        h = hand("AS 6H")
        assert h.value == 17
        assert h.is_soft

        h.add_card(Card(Rank.TEN, Suit.CLUBS))
        assert h.value == 17
        assert not h.is_soft

    @pytest.mark.parametrize(
        "cards, expected",
        [
            ("AS AH", 12),
            ("AS AH AD", 13),
            ("AS AH 9C", 21),
            ("AS AH AD AC", 14),
            ("AS KH", 21),
            ("AS 5H 5D", 21),
            ("AS 9H 5D", 15),
            ("KS QH 2D", 22),
            ("JS QH", 20),
        ],
    )
    def test_values(self, hand, cards, expected):
        assert hand(cards).value == expected

    def test_clear(self, blackjack_hand):
        blackjack_hand.clear()
        assert len(blackjack_hand) == 0
        assert blackjack_hand.value == 0

    def test_str_marks_bust_and_soft(self, bust_hand, soft_17_hand):
        assert "BUST" in str(bust_hand)
        assert "soft 17" in str(soft_17_hand)

    @given(hand_strategy())
    def test_value_never_below_hard_total(self, h):
        """Aces count at least 1 and the total never exceeds 21 while an ace can drop."""
        hard_total = sum(1 if c.is_ace else c.value for c in h.cards)
        assert h.value >= hard_total
        if h.value > 21:
            assert h.value == hard_total

    @given(hand_strategy())
    def test_soft_hands_are_not_busted(self, h):
        if h.is_soft:
            assert h.value <= 21


class TestResolveRound:
    """Tests for comparing finished hands."""

    def test_player_bust_loses_even_if_dealer_busts(self, hand):
        outcome = resolve_round(hand("10S 6H KC"), hand("10D 6C QH"))
        assert outcome == RoundOutcome.PLAYER_BUST

    def test_dealer_bust(self, hand):
        assert resolve_round(hand("10S 8H"), hand("10D 6C QH")) == RoundOutcome.DEALER_BUST

    def test_higher_total_wins(self, hand):
        assert resolve_round(hand("10S 9H"), hand("10D 7C")) == RoundOutcome.PLAYER_WINS

    def test_lower_total_loses(self, hand):
        assert resolve_round(hand("10S 7H"), hand("10D 9C")) == RoundOutcome.DEALER_WINS

    def test_equal_totals_push(self, hand):
        assert resolve_round(hand("10S 8H"), hand("9D 9C")) == RoundOutcome.PUSH

    def test_natural_pushes_against_multi_card_21(self, hand):
        assert resolve_round(hand("AS KH"), hand("7D 7C 7H")) == RoundOutcome.PUSH

    def test_outcome_messages(self):
        assert RoundOutcome.PLAYER_BUST.message == "BUST! You lose."
        assert RoundOutcome.DEALER_BUST.message == "Dealer BUSTS! You Win!"
        assert RoundOutcome.PLAYER_WINS.message == "You Win!"
        assert RoundOutcome.DEALER_WINS.message == "Dealer Wins."
        assert RoundOutcome.PUSH.message == "Push (Tie)."

    def test_outcome_classification(self):
        assert RoundOutcome.DEALER_BUST.is_win
        assert RoundOutcome.PLAYER_WINS.is_win
        assert RoundOutcome.PLAYER_BUST.is_loss
        assert RoundOutcome.DEALER_WINS.is_loss
        assert not RoundOutcome.PUSH.is_win
        assert not RoundOutcome.PUSH.is_loss
