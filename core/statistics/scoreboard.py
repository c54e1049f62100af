"""Running win/loss tally for a play session."""

from dataclasses import asdict, dataclass

from core.hand import RoundOutcome


@dataclass
class Scoreboard:
    """Statistics from the current session.

    Busts are tallied apart from losses, so a round lost by busting only
    increments ``busts``.
    """

    wins: int = 0
    losses: int = 0
    busts: int = 0
    pushes: int = 0

    @property
    def rounds_played(self) -> int:
        """Number of resolved rounds."""
        return self.wins + self.losses + self.busts + self.pushes

    @property
    def win_rate(self) -> float:
        """Fraction of resolved rounds won (0.0 before any round)."""
        if self.rounds_played == 0:
            return 0.0
        return self.wins / self.rounds_played

    def record(self, outcome: RoundOutcome) -> None:
        """Count one resolved round."""
        if outcome == RoundOutcome.PLAYER_BUST:
            self.busts += 1
        elif outcome.is_win:
            self.wins += 1
        elif outcome.is_loss:
            self.losses += 1
        else:
            self.pushes += 1

    def reset(self) -> None:
        """Zero all counters."""
        self.wins = 0
        self.losses = 0
        self.busts = 0
        self.pushes = 0

    def as_dict(self) -> dict[str, int]:
        """Counters as a plain dict, for events and display."""
        return asdict(self)
