"""UI components for the blackjack table."""

from pygame_ui.components.card import CardSprite, CardGroup
from pygame_ui.components.panel import Panel, InfoPanel, MessageOverlay
from pygame_ui.components.button import Button, ActionButton
from pygame_ui.components.sprite_sheet import CardSpriteSheet, get_sprite_sheet

__all__ = [
    "CardSprite",
    "CardGroup",
    "Panel",
    "InfoPanel",
    "MessageOverlay",
    "Button",
    "ActionButton",
    "CardSpriteSheet",
    "get_sprite_sheet",
]
