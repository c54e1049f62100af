"""Sound manager for game audio effects."""

import logging
from typing import Dict, Optional

import pygame

from config import SoundConfig
from pygame_ui.core.sound_generator import SOUND_GENERATORS, to_pcm_bytes
from pygame_ui.utils.math_utils import clamp

logger = logging.getLogger(__name__)


class SoundManager:
    """Synthesizes the game's effects and plays them through pygame.mixer.

    Gracefully handles a missing audio device by staying silent.
    """

    def __init__(self, settings: Optional[SoundConfig] = None):
        """Initialize the sound manager.

        Args:
            settings: Audio settings (read from the environment if None)
        """
        settings = settings or SoundConfig()
        self._enabled = settings.enabled
        self._master_volume = settings.volume
        self._sample_rate = settings.sample_rate
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    @property
    def initialized(self) -> bool:
        """Check if the mixer is running and sounds are loaded."""
        return self._initialized

    def init(self) -> bool:
        """Start the mixer and build every sound.

        Returns:
            True if audio is available
        """
        if self._initialized:
            return True

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self._sample_rate, size=-16, channels=1, buffer=512)
            frequency, _size, channels = pygame.mixer.get_init()
            self._load_sounds(frequency, channels)
        except pygame.error as e:
            logger.warning("Sound initialization failed, disabling sound: %s", e)
            self._sounds.clear()
            self._enabled = False
            return False

        self._initialized = True
        return True

    def _load_sounds(self, frequency: int, channels: int) -> None:
        """Render each effect at the mixer's own rate and channel count."""
        for name, generator in SOUND_GENERATORS.items():
            sound = pygame.mixer.Sound(buffer=to_pcm_bytes(generator(frequency), channels))
            sound.set_volume(self._master_volume)
            self._sounds[name] = sound

    def play(self, name: str) -> bool:
        """Play a sound effect.

        Returns:
            True if the sound started playing
        """
        if not self._enabled:
            return False
        if not self._initialized and not self.init():
            return False

        sound = self._sounds.get(name)
        if sound is None:
            logger.debug("Unknown sound: %s", name)
            return False
        sound.play()
        return True

    @property
    def enabled(self) -> bool:
        """Check if sound is enabled."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        """Enable or disable sound."""
        self._enabled = value

    def toggle(self) -> bool:
        """Toggle sound on/off. Returns new state."""
        self._enabled = not self._enabled
        if not self._enabled:
            self.stop_all()
        return self._enabled

    @property
    def volume(self) -> float:
        """Get master volume."""
        return self._master_volume

    @volume.setter
    def volume(self, value: float) -> None:
        """Set master volume (0.0 to 1.0)."""
        self._master_volume = clamp(value, 0.0, 1.0)
        for sound in self._sounds.values():
            sound.set_volume(self._master_volume)

    def stop_all(self) -> None:
        """Stop all playing sounds."""
        if self._initialized:
            pygame.mixer.stop()


# Global sound manager instance
_sound_manager: Optional[SoundManager] = None


def get_sound_manager() -> SoundManager:
    """Get the global sound manager instance."""
    global _sound_manager
    if _sound_manager is None:
        _sound_manager = SoundManager()
    return _sound_manager


def play_sound(name: str) -> bool:
    """Convenience function to play a sound."""
    return get_sound_manager().play(name)
