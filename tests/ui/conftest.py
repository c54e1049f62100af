"""Pytest fixtures for pygame UI tests, run headless."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from config import SoundConfig  # noqa: E402
from pygame_ui.core.sound_manager import SoundManager  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialize pygame once with dummy video and audio drivers."""
    pygame.display.init()
    pygame.font.init()
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()


@pytest.fixture
def screen():
    """Off-screen surface the size of the window."""
    from pygame_ui.config import DIMENSIONS

    return pygame.Surface((DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT))


class RecordingSoundManager(SoundManager):
    """Sound manager that records requests instead of touching the mixer."""

    def __init__(self):
        super().__init__(SoundConfig(enabled=True, volume=0.5))
        self.played = []

    def play(self, name: str) -> bool:
        if not self.enabled:
            return False
        self.played.append(name)
        return True


@pytest.fixture
def sounds():
    """Sound manager capturing played effect names."""
    return RecordingSoundManager()
