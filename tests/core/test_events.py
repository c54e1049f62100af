"""Tests for the event emitter and state transitions."""

from core.game import EventEmitter, EventType, GameEvent, GameState
from core.game.state import is_valid_transition


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_subscriber_only_sees_its_type(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_HIT, hand_value=15)
        emitter.emit_new(EventType.PLAYER_STAND)

        assert len(received) == 1
        assert received[0].data == {"hand_value": 15}

    def test_catch_all_subscriber(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)

        emitter.emit_new(EventType.PLAYER_HIT)
        emitter.emit_new(EventType.ROUND_ENDED)

        assert [e.event_type for e in received] == [EventType.PLAYER_HIT, EventType.ROUND_ENDED]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.PLAYER_HIT)

        assert emitter.unsubscribe(received.append, EventType.PLAYER_HIT)
        assert not emitter.unsubscribe(received.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_HIT)
        assert received == []

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.DECK_SHUFFLED)

        assert emitter.history == [event]
        emitter.clear_history()
        assert emitter.history == []

    def test_event_str(self):
        event = GameEvent(EventType.PLAYER_HIT, {"hand_value": 12})
        assert str(event) == "PLAYER_HIT: {'hand_value': 12}"


class TestStateTransitions:
    """Tests for the allowed state transitions."""

    def test_valid_transitions(self):
        assert is_valid_transition(GameState.IDLE, GameState.PLAYER_TURN)
        assert is_valid_transition(GameState.PLAYER_TURN, GameState.DEALER_TURN)
        assert is_valid_transition(GameState.PLAYER_TURN, GameState.ROUND_OVER)
        assert is_valid_transition(GameState.DEALER_TURN, GameState.ROUND_OVER)
        assert is_valid_transition(GameState.ROUND_OVER, GameState.PLAYER_TURN)

    def test_invalid_transitions(self):
        assert not is_valid_transition(GameState.IDLE, GameState.DEALER_TURN)
        assert not is_valid_transition(GameState.DEALER_TURN, GameState.PLAYER_TURN)
        assert not is_valid_transition(GameState.ROUND_OVER, GameState.DEALER_TURN)
