"""Configuration constants for the PyGame blackjack table."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from core.hand import RoundOutcome
from pygame_ui.utils.math_utils import hex_to_rgb


@dataclass(frozen=True)
class Colors:
    """Color palette for the blackjack UI."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (34, 87, 59)
    FELT_DARK: Tuple[int, int, int] = (25, 65, 44)

    # Card faces
    CARD_WHITE: Tuple[int, int, int] = (255, 255, 255)
    CARD_BORDER: Tuple[int, int, int] = hex_to_rgb("#ccc")
    CARD_RED: Tuple[int, int, int] = hex_to_rgb("#d40000")
    CARD_BLACK: Tuple[int, int, int] = hex_to_rgb("#222")

    # Card back
    CARD_BACK: Tuple[int, int, int] = hex_to_rgb("#b71c1c")
    CARD_BACK_PATTERN: Tuple[int, int, int] = hex_to_rgb("#d32f2f")

    # Round messages
    MESSAGE_GOLD: Tuple[int, int, int] = hex_to_rgb("#d4af37")
    MESSAGE_RED: Tuple[int, int, int] = hex_to_rgb("#ff4444")
    MESSAGE_GREEN: Tuple[int, int, int] = hex_to_rgb("#4CAF50")
    MESSAGE_WHITE: Tuple[int, int, int] = hex_to_rgb("#fff")

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)
    GOLD: Tuple[int, int, int] = (255, 200, 87)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (60, 70, 90)
    BUTTON_HOVER: Tuple[int, int, int] = (80, 95, 120)
    BUTTON_PRESSED: Tuple[int, int, int] = (45, 55, 70)
    BUTTON_DISABLED: Tuple[int, int, int] = (50, 50, 55)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (35, 38, 48)
    PANEL_BORDER: Tuple[int, int, int] = (60, 65, 80)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 960
    SCREEN_HEIGHT: int = 640
    TARGET_FPS: int = 60

    # Cards and sprite sheet grid
    CARD_WIDTH: int = 80
    CARD_HEIGHT: int = 112
    SPRITE_COLUMNS: int = 13
    SPRITE_ROWS: int = 5

    # Layout
    HAND_SPACING: int = 90
    DECK_POSITION: Tuple[int, int] = (80, 90)
    DEALER_HAND_Y: int = 150
    PLAYER_HAND_Y: int = 390
    CENTER_X: int = SCREEN_WIDTH // 2
    CENTER_Y: int = SCREEN_HEIGHT // 2

    # UI Elements
    BUTTON_WIDTH: int = 140
    BUTTON_HEIGHT: int = 48
    BUTTON_CORNER_RADIUS: int = 6
    BUTTON_ROW_Y: int = 560
    PANEL_PADDING: int = 12
    PANEL_CORNER_RADIUS: int = 12


@dataclass(frozen=True)
class AnimationConfig:
    """Animation timing constants."""

    # Durations (in seconds)
    CARD_DEAL_DURATION: float = 0.3
    CARD_DEAL_STAGGER: float = 0.12
    MESSAGE_FADE_DURATION: float = 0.25


@dataclass(frozen=True)
class OutcomeStyle:
    """How a round result is presented."""

    color: Tuple[int, int, int]
    sound: str


def _outcome_styles() -> Dict[RoundOutcome, OutcomeStyle]:
    colors = Colors()
    return {
        RoundOutcome.PLAYER_BUST: OutcomeStyle(colors.MESSAGE_RED, "lose"),
        RoundOutcome.DEALER_BUST: OutcomeStyle(colors.MESSAGE_GREEN, "win"),
        RoundOutcome.PLAYER_WINS: OutcomeStyle(colors.MESSAGE_GREEN, "win"),
        RoundOutcome.DEALER_WINS: OutcomeStyle(colors.MESSAGE_RED, "lose"),
        RoundOutcome.PUSH: OutcomeStyle(colors.MESSAGE_WHITE, "chip"),
    }


@dataclass(frozen=True)
class Presentation:
    """Per-outcome message colour and sound."""

    outcomes: Dict[RoundOutcome, OutcomeStyle] = field(default_factory=_outcome_styles)

    def style_for(self, outcome: RoundOutcome) -> OutcomeStyle:
        return self.outcomes[outcome]


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
ANIMATION = AnimationConfig()
PRESENTATION = Presentation()
