"""Core systems for the blackjack table UI."""

from pygame_ui.core.animation import Tween, TweenManager, EaseType
from pygame_ui.core.sound_manager import SoundManager, get_sound_manager, play_sound

__all__ = [
    "Tween",
    "TweenManager",
    "EaseType",
    "SoundManager",
    "get_sound_manager",
    "play_sound",
]
