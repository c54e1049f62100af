"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: IDLE → PLAYER_TURN → DEALER_TURN → ROUND_OVER → PLAYER_TURN ...
    """

    # Before the first deal
    IDLE = auto()

    # Player may hit or stand
    PLAYER_TURN = auto()

    # Hole card revealed, dealer drawing to 17
    DEALER_TURN = auto()

    # Outcome decided, waiting for a new game
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.IDLE: [GameState.PLAYER_TURN],
    # ROUND_OVER directly on a natural 21 or a bust
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.DEALER_TURN, GameState.ROUND_OVER],
    GameState.DEALER_TURN: [GameState.DEALER_TURN, GameState.ROUND_OVER],
    GameState.ROUND_OVER: [GameState.PLAYER_TURN],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
