"""Blackjack game engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from config import GameConfig
from core.cards import Card, Deck
from core.hand import Hand, RoundOutcome, resolve_round
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState
from core.statistics.scoreboard import Scoreboard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSnapshot:
    """Snapshot of the table for rendering.

    ``dealer_score`` is None while the hole card is hidden.
    """

    state: GameState
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card, ...]
    hole_card_hidden: bool
    player_score: int
    dealer_score: int | None
    outcome: RoundOutcome | None
    wins: int
    losses: int
    busts: int
    pushes: int
    can_hit: bool
    can_stand: bool
    can_start_round: bool


class BlackjackGame:
    """
    Blackjack game engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_round", "source": ["idle", "round_over"], "dest": "player_turn"},
        {"trigger": "player_draws", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "reveal_dealer", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_draws", "source": "dealer_turn", "dest": "dealer_turn"},
        {"trigger": "conclude", "source": ["player_turn", "dealer_turn"], "dest": "round_over"},
    ]

    def __init__(
        self,
        rules: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
        """
        self.rules = rules or GameConfig()
        self.deck = Deck(rng=rng)
        self.deck.shuffle()

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.scoreboard = Scoreboard()
        self.outcome: RoundOutcome | None = None
        self.hole_card_hidden = False
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _reject(self, action: str) -> bool:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} now",
            state=self.state.name,
        )
        logger.debug("Rejected %s in state %s", action, self.state.name)
        return False

    def start_round(self) -> bool:
        """
        Clear the table and deal a new round.

        Returns:
            True if a round was dealt
        """
        if self.state not in (GameState.IDLE, GameState.ROUND_OVER):
            return self._reject("start a new round")

        self.player_hand.clear()
        self.dealer_hand.clear()
        self.outcome = None
        self.hole_card_hidden = True
        self.begin_round()

        # Deal: player, dealer (face down), player, dealer
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_score=self.player_hand.value,
        )
        logger.debug("Round dealt: player %s", self.player_hand)

        # A two-card 21 ends the round without a dealer turn
        if self.player_hand.is_twenty_one:
            self._reveal_hole_card()
            self._resolve_round()

        return True

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card, reshuffled = self.deck.deal()
        if reshuffled:
            self.events.emit_new(EventType.DECK_SHUFFLED)
            logger.debug("Deck exhausted, reshuffled")

        hand.add_card(card)
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card if face_up else None,
            face_up=face_up,
            hand="dealer" if is_dealer else "player",
            hand_value=None if is_dealer and self.hole_card_hidden else hand.value,
        )
        return card

    def _reveal_hole_card(self) -> None:
        if not self.hole_card_hidden:
            return
        self.hole_card_hidden = False
        self.events.emit_new(
            EventType.HOLE_CARD_REVEALED,
            card=self.dealer_hand.cards[0],
            hand_value=self.dealer_hand.value,
        )

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            return self._reject("hit")

        self.player_draws()
        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self._reveal_hole_card()
            self._resolve_round()

        return True

    def stand(self) -> bool:
        """Player stands; the dealer's turn begins."""
        if self.state != GameState.PLAYER_TURN:
            return self._reject("stand")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.reveal_dealer()
        self._reveal_hole_card()

        if not self.dealer_should_hit:
            self._finish_dealer()
        return True

    @property
    def dealer_should_hit(self) -> bool:
        """Dealer draws below the stand threshold, soft or hard alike."""
        return self.dealer_hand.value < self.rules.dealer_stands_on

    def dealer_step(self) -> Card | None:
        """
        Dealer draws one card.

        The round resolves as soon as the dealer reaches the stand
        threshold, so callers can pace draws with a timer and stop once
        the state leaves DEALER_TURN.

        Returns:
            The card drawn, or None if it is not the dealer's turn
        """
        if self.state != GameState.DEALER_TURN:
            self._reject("deal to the dealer")
            return None

        if not self.dealer_should_hit:
            self._finish_dealer()
            return None

        self.dealer_draws()
        card = self._deal_card_to_hand(self.dealer_hand)
        self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if not self.dealer_should_hit:
            self._finish_dealer()
        return card

    def play_dealer(self) -> list[Card]:
        """Run the whole dealer turn without pauses."""
        drawn = []
        while self.state == GameState.DEALER_TURN:
            card = self.dealer_step()
            if card is not None:
                drawn.append(card)
        return drawn

    def _finish_dealer(self) -> None:
        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)
        self._resolve_round()

    def _resolve_round(self) -> RoundOutcome:
        """Decide the outcome and update the scoreboard."""
        outcome = resolve_round(self.player_hand, self.dealer_hand)
        self.outcome = outcome
        self.scoreboard.record(outcome)
        self.conclude()

        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            message=outcome.message,
            player_score=self.player_hand.value,
            dealer_score=self.dealer_hand.value,
            **self.scoreboard.as_dict(),
        )
        logger.info(
            "%s player=%d dealer=%d (W%d L%d B%d)",
            outcome.message,
            self.player_hand.value,
            self.dealer_hand.value,
            self.scoreboard.wins,
            self.scoreboard.losses,
            self.scoreboard.busts,
        )
        return outcome

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_start_round(self) -> bool:
        """Check if a new round may be dealt."""
        return self.state in (GameState.IDLE, GameState.ROUND_OVER)

    def snapshot(self) -> TableSnapshot:
        """Get a read-only view of the table."""
        return TableSnapshot(
            state=self.state,
            player_cards=tuple(self.player_hand.cards),
            dealer_cards=tuple(self.dealer_hand.cards),
            hole_card_hidden=self.hole_card_hidden,
            player_score=self.player_hand.value,
            dealer_score=None if self.hole_card_hidden else self.dealer_hand.value,
            outcome=self.outcome,
            wins=self.scoreboard.wins,
            losses=self.scoreboard.losses,
            busts=self.scoreboard.busts,
            pushes=self.scoreboard.pushes,
            can_hit=self.can_hit,
            can_stand=self.can_stand,
            can_start_round=self.can_start_round,
        )
