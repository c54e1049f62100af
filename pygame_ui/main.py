"""Main entry point for the pygame blackjack table."""

import logging
import sys
from random import Random

import pygame

from config import AppConfig, config
from core.game.engine import BlackjackGame
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.sound_manager import SoundManager
from pygame_ui.scenes.table_scene import TableScene

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self, settings: AppConfig = config):
        """Initialize the application."""
        logging.basicConfig(
            level=logging.DEBUG if settings.debug else settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        # Mono 16-bit output, matching the synthesized buffers
        pygame.mixer.pre_init(settings.sound.sample_rate, -16, 1, 512)
        pygame.init()
        pygame.display.set_caption("Blackjack")

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        rng = Random(settings.seed) if settings.seed is not None else None
        if settings.seed is not None:
            logger.info("Using seed %d", settings.seed)

        self.sounds = SoundManager(settings.sound)
        self.sounds.init()

        self.scene = TableScene(
            game=BlackjackGame(rules=settings.game, rng=rng),
            sounds=self.sounds,
            dealer_delay=settings.dealer_delay,
        )
        self.scene.on_enter()

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue
            self.scene.handle_event(event)

        if self.scene.quit_requested:
            self.running = False

    def update(self, dt: float) -> None:
        """Update application state.

        Args:
            dt: Delta time in seconds
        """
        self.scene.update(dt)

    def draw(self) -> None:
        """Render the application."""
        self.screen.fill(COLORS.FELT_GREEN)
        self.scene.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.update(dt)
            self.draw()

        self.scene.on_exit()
        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
