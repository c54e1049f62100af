"""Game engine and state management."""

from core.game.events import GameEvent, EventType, EventEmitter
from core.game.state import GameState
from core.game.engine import BlackjackGame, TableSnapshot

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "BlackjackGame",
    "TableSnapshot",
]
