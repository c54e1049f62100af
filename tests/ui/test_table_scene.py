"""Tests for the table scene wiring engine events to the screen."""

import pygame
import pytest

from core.game import GameState
from core.hand import RoundOutcome
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.scenes.table_scene import TableScene


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="")


@pytest.fixture
def table(stacked_game, sounds):
    """Factory for an entered table scene over a stacked deck."""

    def _make(spec: str) -> TableScene:
        scene = TableScene(game=stacked_game(spec), sounds=sounds, dealer_delay=0.6)
        scene.on_enter()
        return scene

    return _make


class TestRoundFlow:
    """Tests for a round played through the scene."""

    def test_enter_deals_a_round(self, table, sounds):
        scene = table("10S 9H 7C 8D")

        assert scene.game.state == GameState.PLAYER_TURN
        assert len(scene.player_cards) == 2
        assert len(scene.dealer_cards) == 2
        assert not scene.dealer_cards.cards[0].face_up
        assert scene.dealer_cards.cards[1].face_up
        assert sounds.played == ["chip", "card"]

    def test_buttons_follow_state(self, table):
        scene = table("10S 9H 7C 8D")

        assert scene.hit_button.enabled
        assert scene.stand_button.enabled
        assert not scene.new_game_button.enabled

    def test_score_labels_hide_dealer(self, table):
        scene = table("10S 9H 7C 8D")
        assert scene.score_labels() == ("Player: 17", "Dealer: ?")

    def test_hit_key(self, table, sounds):
        scene = table("10S 9H 2C 8D 5H")

        assert scene.handle_event(key(pygame.K_h))

        assert len(scene.player_cards) == 3
        assert sounds.played[-1] == "card"

    def test_bust_reveals_and_announces(self, table, sounds):
        scene = table("10S 9H 6C 8D KH")

        scene.handle_event(key(pygame.K_h))

        assert scene.game.outcome == RoundOutcome.PLAYER_BUST
        assert scene.dealer_cards.cards[0].face_up
        assert scene.message.visible
        assert scene.message.text == "BUST! You lose."
        assert scene.message.color == COLORS.MESSAGE_RED
        assert sounds.played == ["chip", "card", "card", "lose"]
        assert ("Busts", "1") in scene.stats_panel.content_lines
        assert scene.new_game_button.enabled
        assert not scene.hit_button.enabled

    def test_dealer_draws_are_paced(self, table, sounds):
        scene = table("10S 9H 8C 5D 7H")

        scene.handle_event(key(pygame.K_s))
        assert scene.game.state == GameState.DEALER_TURN
        assert scene.score_labels() == ("Player: 18", "Dealer: 14")

        scene.update(0.5)
        assert len(scene.dealer_cards) == 2

        scene.update(0.2)
        assert len(scene.dealer_cards) == 3
        assert scene.game.outcome == RoundOutcome.DEALER_WINS
        assert scene.message.text == "Dealer Wins."
        assert sounds.played[-2:] == ["card", "lose"]

    def test_natural_resolves_on_enter(self, table, sounds):
        scene = table("AS 9H KC 8D")

        assert scene.game.state == GameState.ROUND_OVER
        assert scene.message.text == "You Win!"
        assert scene.message.color == COLORS.MESSAGE_GREEN
        assert sounds.played == ["chip", "card", "win"]

    def test_push_plays_chip(self, table, sounds):
        scene = table("10S 10H 8C 8D")

        scene.handle_event(key(pygame.K_s))

        assert scene.message.text == "Push (Tie)."
        assert scene.message.color == COLORS.MESSAGE_WHITE
        assert sounds.played[-1] == "chip"
        assert ("Pushes", "1") in scene.stats_panel.content_lines

    def test_new_game_only_after_round(self, table):
        scene = table("10S 9H 7C 8D 10C 9D 7S 8H")

        assert not scene.handle_event(key(pygame.K_n))
        assert len(scene.player_cards) == 2

        scene.handle_event(key(pygame.K_s))
        assert scene.game.state == GameState.ROUND_OVER

        assert scene.handle_event(key(pygame.K_SPACE))
        assert scene.game.state == GameState.PLAYER_TURN
        assert len(scene.player_cards) == 2
        assert len(scene.dealer_cards) == 2

    def test_new_game_hides_message(self, table):
        scene = table("10S 9H 6C 8D KH 10C 9D 7S 8H")
        scene.handle_event(key(pygame.K_h))
        assert scene.message.visible

        scene.handle_event(key(pygame.K_RETURN))

        assert scene.game.state == GameState.PLAYER_TURN
        assert not scene.message.visible


class TestInput:
    """Tests for mouse and keyboard handling."""

    def test_mouse_click_hits(self, table):
        scene = table("10S 9H 2C 8D 5H")
        center = scene.hit_button.rect.center

        scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=center, button=1))
        scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=center, button=1))

        assert len(scene.player_cards) == 3

    def test_mute_toggle(self, table, sounds):
        scene = table("10S 9H 7C 8D")

        assert scene.handle_event(key(pygame.K_m))
        assert not sounds.enabled

        scene.handle_event(key(pygame.K_h))
        assert sounds.played == ["chip", "card"]

    def test_escape_requests_quit(self, table):
        scene = table("10S 9H 7C 8D")
        assert scene.handle_event(key(pygame.K_ESCAPE))
        assert scene.quit_requested

    def test_unhandled_key(self, table):
        scene = table("10S 9H 7C 8D")
        assert not scene.handle_event(key(pygame.K_q))


class TestRendering:
    """Tests for animation and drawing."""

    def test_cards_slide_into_place(self, table):
        scene = table("10S 9H 7C 8D")

        scene.update(2.0)

        for i, sprite in enumerate(scene.player_cards.cards):
            assert sprite.position == pytest.approx(scene.player_cards.slot_position(i))
        assert scene.dealer_cards.cards[0].y == pytest.approx(DIMENSIONS.DEALER_HAND_Y)

    def test_deal_is_staggered(self, table):
        scene = table("10S 9H 7C 8D")

        scene.update(0.05)

        first, second = scene.player_cards.cards
        assert first.position != second.position

    def test_draw_runs(self, table, screen):
        scene = table("10S 9H 8C 5D 7H")
        scene.draw(screen)
        scene.handle_event(key(pygame.K_s))
        scene.update(1.0)
        scene.draw(screen)
