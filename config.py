"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from core.hand import BLACKJACK


def _parse_bool(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or empty means an unseeded RNG."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class GameConfig:
    """Table rules."""

    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        if not 0 < self.dealer_stands_on <= BLACKJACK:
            raise ValueError(f"dealer_stands_on must be between 1 and {BLACKJACK}")


@dataclass(frozen=True)
class SoundConfig:
    """Audio configuration."""

    enabled: bool = field(default_factory=lambda: _parse_bool("BLACKJACK_SOUND", "true"))
    volume: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_VOLUME", "0.8"))
    )
    sample_rate: int = 44100

    def __post_init__(self) -> None:
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError("Volume must be between 0 and 1")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _parse_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    seed: int | None = field(default_factory=_parse_seed)
    dealer_delay: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_DEALER_DELAY", "0.6"))
    )

    game: GameConfig = field(default_factory=GameConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)

    def __post_init__(self) -> None:
        if self.dealer_delay < 0:
            raise ValueError("Dealer delay cannot be negative")


# Global configuration instance
config = AppConfig()
