"""Blackjack table scene - driven by the core engine's events."""

import logging
from typing import List, Optional

import pygame

from config import config
from core.game.engine import BlackjackGame
from core.game.events import EventType, GameEvent
from core.game.state import GameState

from pygame_ui.config import ANIMATION, COLORS, DIMENSIONS, PRESENTATION
from pygame_ui.core.sound_manager import SoundManager, get_sound_manager
from pygame_ui.components.button import ActionButton
from pygame_ui.components.card import CardGroup, CardSprite
from pygame_ui.components.panel import InfoPanel, MessageOverlay
from pygame_ui.scenes.base_scene import BaseScene

logger = logging.getLogger(__name__)


class TableScene(BaseScene):
    """The single blackjack table: dealer row, player row, controls."""

    def __init__(
        self,
        game: Optional[BlackjackGame] = None,
        sounds: Optional[SoundManager] = None,
        dealer_delay: Optional[float] = None,
    ):
        super().__init__()
        self.game = game or BlackjackGame(rules=config.game)
        self.sounds = sounds or get_sound_manager()
        self.dealer_delay = config.dealer_delay if dealer_delay is None else dealer_delay

        self.dealer_cards = CardGroup(DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_HAND_Y)
        self.player_cards = CardGroup(DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_HAND_Y)
        self.deck_sprite = CardSprite(
            x=DIMENSIONS.DECK_POSITION[0], y=DIMENSIONS.DECK_POSITION[1], face_up=False
        )

        self.message = MessageOverlay()
        self.stats_panel = InfoPanel(DIMENSIONS.SCREEN_WIDTH - 180, 20, width=160, title="SCORE")
        self.buttons: List[ActionButton] = []
        self.hit_button: Optional[ActionButton] = None
        self.stand_button: Optional[ActionButton] = None
        self.new_game_button: Optional[ActionButton] = None

        # Seconds until the dealer's next draw
        self._dealer_timer = 0.0
        # Cards dealt this frame, for staggering their slide-in
        self._deals_this_frame = 0
        self._subscribed = False

        self._label_font: Optional[pygame.font.Font] = None
        self._hint_font: Optional[pygame.font.Font] = None

    def on_enter(self) -> None:
        """Wire up engine events and deal the first round."""
        super().on_enter()

        if not self._subscribed:
            self.game.subscribe(self._on_card_dealt, EventType.CARD_DEALT)
            self.game.subscribe(self._on_hole_card_revealed, EventType.HOLE_CARD_REVEALED)
            self.game.subscribe(self._on_round_started, EventType.ROUND_STARTED)
            self.game.subscribe(self._on_card_drawn, EventType.PLAYER_HIT)
            self.game.subscribe(self._on_card_drawn, EventType.DEALER_HITS)
            self.game.subscribe(self._on_round_ended, EventType.ROUND_ENDED)
            self._subscribed = True

        self._setup_buttons()
        self._update_stats_panel()

        if self.game.can_start_round:
            self._on_new_game()

    def _setup_buttons(self) -> None:
        y = DIMENSIONS.BUTTON_ROW_Y
        spacing = DIMENSIONS.BUTTON_WIDTH + 30

        self.hit_button = ActionButton(
            DIMENSIONS.CENTER_X - spacing,
            y,
            "HIT",
            hotkey="H",
            on_click=self._on_hit,
            bg_color=(60, 100, 60),
            hover_color=(80, 130, 80),
        )
        self.stand_button = ActionButton(
            DIMENSIONS.CENTER_X,
            y,
            "STAND",
            hotkey="S",
            on_click=self._on_stand,
            bg_color=(100, 60, 60),
            hover_color=(130, 80, 80),
        )
        self.new_game_button = ActionButton(
            DIMENSIONS.CENTER_X + spacing,
            y,
            "NEW GAME",
            hotkey="N",
            on_click=self._on_new_game,
            bg_color=(100, 80, 40),
            hover_color=(130, 100, 60),
        )
        self.buttons = [self.hit_button, self.stand_button, self.new_game_button]
        self._update_button_states()

    def _update_button_states(self) -> None:
        if self.hit_button:
            self.hit_button.set_enabled(self.game.can_hit)
        if self.stand_button:
            self.stand_button.set_enabled(self.game.can_stand)
        if self.new_game_button:
            self.new_game_button.set_enabled(self.game.can_start_round)

    def _update_stats_panel(self) -> None:
        board = self.game.scoreboard
        self.stats_panel.set_content(
            [
                ("Wins", str(board.wins)),
                ("Losses", str(board.losses)),
                ("Busts", str(board.busts)),
                ("Pushes", str(board.pushes)),
            ]
        )

    # Engine events

    def _on_card_dealt(self, event: GameEvent) -> None:
        sprite = CardSprite(
            card=event.data["card"],
            x=DIMENSIONS.DECK_POSITION[0],
            y=DIMENSIONS.DECK_POSITION[1],
            face_up=event.data["face_up"],
        )
        group = self.dealer_cards if event.data["hand"] == "dealer" else self.player_cards
        group.add(sprite, delay=self._deals_this_frame * ANIMATION.CARD_DEAL_STAGGER)
        self._deals_this_frame += 1

    def _on_hole_card_revealed(self, event: GameEvent) -> None:
        if self.dealer_cards.cards:
            self.dealer_cards.cards[0].reveal(event.data["card"])

    def _on_round_started(self, event: GameEvent) -> None:
        self.sounds.play("card")

    def _on_card_drawn(self, event: GameEvent) -> None:
        self.sounds.play("card")

    def _on_round_ended(self, event: GameEvent) -> None:
        outcome = event.data["outcome"]
        style = PRESENTATION.style_for(outcome)
        self.message.show(outcome.message, style.color)
        self.sounds.play(style.sound)
        self._update_stats_panel()
        self._update_button_states()

    # Player actions

    def _on_new_game(self) -> None:
        if not self.game.can_start_round:
            return
        self.sounds.play("chip")
        self.message.hide()
        self.dealer_cards.clear()
        self.player_cards.clear()
        self.game.start_round()
        self._update_button_states()

    def _on_hit(self) -> None:
        self.game.hit()
        self._update_button_states()

    def _on_stand(self) -> None:
        if self.game.stand() and self.game.state == GameState.DEALER_TURN:
            self._dealer_timer = self.dealer_delay
        self._update_button_states()

    def handle_event(self, event: pygame.event.Event) -> bool:
        for button in self.buttons:
            if button.handle_event(event):
                return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_h and self.hit_button:
                return self.hit_button.click()
            if event.key == pygame.K_s and self.stand_button:
                return self.stand_button.click()
            if event.key in (pygame.K_n, pygame.K_SPACE, pygame.K_RETURN) and self.new_game_button:
                return self.new_game_button.click()
            if event.key == pygame.K_m:
                enabled = self.sounds.toggle()
                logger.info("Sound %s", "on" if enabled else "off")
                return True
            if event.key == pygame.K_ESCAPE:
                self.request_quit()
                return True

        return False

    def update(self, dt: float) -> None:
        self._deals_this_frame = 0

        # Pace the dealer: one card per delay interval
        if self.game.state == GameState.DEALER_TURN:
            self._dealer_timer -= dt
            if self._dealer_timer <= 0:
                self.game.dealer_step()
                self._dealer_timer = self.dealer_delay

        self._update_button_states()
        self.dealer_cards.update(dt)
        self.player_cards.update(dt)
        self.message.update(dt)

    @property
    def label_font(self) -> pygame.font.Font:
        if self._label_font is None:
            self._label_font = pygame.font.Font(None, 36)
        return self._label_font

    @property
    def hint_font(self) -> pygame.font.Font:
        if self._hint_font is None:
            self._hint_font = pygame.font.Font(None, 22)
        return self._hint_font

    def score_labels(self) -> tuple[str, str]:
        """Player and dealer score captions; the dealer's shows '?' while hidden."""
        snapshot = self.game.snapshot()
        dealer = "?" if snapshot.dealer_score is None else str(snapshot.dealer_score)
        return f"Player: {snapshot.player_score}", f"Dealer: {dealer}"

    def _draw_felt(self, surface: pygame.Surface) -> None:
        surface.fill(COLORS.FELT_GREEN)
        for x in range(0, DIMENSIONS.SCREEN_WIDTH, 40):
            pygame.draw.line(surface, COLORS.FELT_DARK, (x, 0), (x, DIMENSIONS.SCREEN_HEIGHT), 1)
        for y in range(0, DIMENSIONS.SCREEN_HEIGHT, 40):
            pygame.draw.line(surface, COLORS.FELT_DARK, (0, y), (DIMENSIONS.SCREEN_WIDTH, y), 1)

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_felt(surface)
        self.deck_sprite.draw(surface)

        self.dealer_cards.draw(surface)
        self.player_cards.draw(surface)

        player_label, dealer_label = self.score_labels()
        dealer_text = self.label_font.render(dealer_label, True, COLORS.GOLD)
        surface.blit(
            dealer_text,
            dealer_text.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_HAND_Y - 85)),
        )
        player_text = self.label_font.render(player_label, True, COLORS.GOLD)
        surface.blit(
            player_text,
            player_text.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_HAND_Y + 85)),
        )

        self.stats_panel.draw(surface)
        for button in self.buttons:
            button.draw(surface)

        self.message.draw(surface)

        sound_state = "ON" if self.sounds.enabled else "OFF"
        hint = self.hint_font.render(
            f"M: Sound ({sound_state}) | ESC: Quit", True, COLORS.TEXT_MUTED
        )
        surface.blit(
            hint, hint.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.SCREEN_HEIGHT - 14))
        )
