"""Card sprites drawn from the procedural sprite sheet."""

from typing import List, Optional, Tuple

import pygame

from core.cards import Card
from pygame_ui.config import ANIMATION, DIMENSIONS
from pygame_ui.core.animation import EaseType, TweenManager
from pygame_ui.components.sprite_sheet import CardSpriteSheet, get_sprite_sheet


class CardSprite:
    """A card on the table, positioned by its center.

    A sprite without a card (or with ``face_up`` False) shows the card back.
    """

    def __init__(
        self,
        card: Optional[Card] = None,
        x: float = 0,
        y: float = 0,
        face_up: bool = True,
        sheet: Optional[CardSpriteSheet] = None,
    ):
        self.card = card
        self.x = x
        self.y = y
        self.face_up = face_up and card is not None
        self._sheet = sheet
        self.tween_manager = TweenManager()

    @property
    def sheet(self) -> CardSpriteSheet:
        if self._sheet is None:
            self._sheet = get_sprite_sheet()
        return self._sheet

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def is_animating(self) -> bool:
        return self.tween_manager.is_animating

    @property
    def pending_delay(self) -> float:
        """Seconds before a queued move starts (0 once moving)."""
        return self.tween_manager.pending_delay

    @property
    def rect(self) -> pygame.Rect:
        """Screen rectangle of the card."""
        rect = pygame.Rect(0, 0, DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
        rect.center = (int(self.x), int(self.y))
        return rect

    def reveal(self, card: Card) -> None:
        """Turn the card face up, showing ``card``."""
        self.card = card
        self.face_up = True

    def animate_to(
        self,
        x: float,
        y: float,
        duration: Optional[float] = None,
        delay: float = 0.0,
        ease_type: EaseType = EaseType.EASE_OUT_BACK,
    ) -> "CardSprite":
        """Slide the card to a new center position.

        Returns:
            Self for chaining
        """
        if duration is None:
            duration = ANIMATION.CARD_DEAL_DURATION
        self.tween_manager.clear()
        self.tween_manager.create(self, "x", x, duration, ease_type, delay=delay)
        self.tween_manager.create(self, "y", y, duration, ease_type, delay=delay)
        return self

    def update(self, dt: float) -> None:
        self.tween_manager.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        if self.face_up and self.card is not None:
            image = self.sheet.card_surface(self.card)
        else:
            image = self.sheet.back_surface()
        surface.blit(image, self.rect.topleft)


class CardGroup:
    """A row of cards laid out around a center line."""

    def __init__(self, center_x: float, y: float, spacing: float = DIMENSIONS.HAND_SPACING):
        self.center_x = center_x
        self.y = y
        self.spacing = spacing
        self.cards: List[CardSprite] = []

    def __len__(self) -> int:
        return len(self.cards)

    def slot_position(self, index: int, count: Optional[int] = None) -> Tuple[float, float]:
        """Center of the card at ``index`` in a row of ``count`` cards."""
        if count is None:
            count = len(self.cards)
        start_x = self.center_x - (count - 1) * self.spacing / 2
        return (start_x + index * self.spacing, self.y)

    def add(self, card: CardSprite, delay: float = 0.0) -> None:
        """Add a card and slide the whole row into place."""
        self.cards.append(card)
        count = len(self.cards)
        for i, sprite in enumerate(self.cards):
            x, y = self.slot_position(i, count)
            if sprite is card:
                sprite.animate_to(x, y, delay=delay)
            elif sprite.is_animating:
                # Still on its way from the deck: retarget, keeping its place in the deal
                sprite.animate_to(x, y, delay=sprite.pending_delay)
            else:
                sprite.animate_to(x, y, duration=0.2, ease_type=EaseType.EASE_OUT)

    def clear(self) -> None:
        self.cards.clear()

    def update(self, dt: float) -> None:
        for card in self.cards:
            card.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for card in self.cards:
            card.draw(surface)
