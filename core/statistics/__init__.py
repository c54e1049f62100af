"""Session statistics for blackjack."""

from core.statistics.scoreboard import Scoreboard

__all__ = [
    "Scoreboard",
]
