"""Interactive button component with hover and press states."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A clickable button, positioned by its center.

    The click callback fires on mouse release inside the button, and only
    while the button is enabled.
    """

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        width: int = DIMENSIONS.BUTTON_WIDTH,
        height: int = DIMENSIONS.BUTTON_HEIGHT,
        font_size: int = 30,
        bg_color: Optional[Tuple[int, int, int]] = None,
        hover_color: Optional[Tuple[int, int, int]] = None,
        enabled: bool = True,
    ):
        self.text = text
        self.on_click = on_click
        self.width = width
        self.height = height
        self.font_size = font_size
        self.center_x = x
        self.center_y = y

        self.bg_color = bg_color or COLORS.BUTTON_DEFAULT
        self.hover_color = hover_color or COLORS.BUTTON_HOVER
        self.pressed_color = COLORS.BUTTON_PRESSED
        self.disabled_color = COLORS.BUTTON_DISABLED

        self.enabled = enabled
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._is_pressed = False
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        """Get the button's rectangle."""
        rect = pygame.Rect(0, 0, self.width, self.height)
        rect.center = (int(self.center_x), int(self.center_y))
        return rect

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button."""
        if enabled == self.enabled:
            return
        self.enabled = enabled
        self._is_pressed = False
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def contains_point(self, point: Tuple[float, float]) -> bool:
        return self.rect.collidepoint(point)

    def click(self) -> bool:
        """Trigger the button programmatically (keyboard shortcuts).

        Returns:
            True if the callback ran
        """
        if not self.enabled or self.on_click is None:
            return False
        self.on_click()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Returns:
            True if event was consumed (clicked)
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION:
            if not self._is_pressed:
                hovered = self.contains_point(event.pos)
                self.state = ButtonState.HOVERED if hovered else ButtonState.NORMAL

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.contains_point(event.pos):
                self.state = ButtonState.PRESSED
                self._is_pressed = True

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self._is_pressed:
                self._is_pressed = False
                if self.contains_point(event.pos):
                    self.state = ButtonState.HOVERED
                    return self.click()
                self.state = ButtonState.NORMAL

        return False

    def draw(self, surface: pygame.Surface) -> None:
        if not self.enabled:
            bg_color, text_color = self.disabled_color, COLORS.TEXT_MUTED
        elif self.state == ButtonState.PRESSED:
            bg_color, text_color = self.pressed_color, COLORS.TEXT_WHITE
        elif self.state == ButtonState.HOVERED:
            bg_color, text_color = self.hover_color, COLORS.TEXT_WHITE
        else:
            bg_color, text_color = self.bg_color, COLORS.TEXT_WHITE

        rect = self.rect
        if self.state == ButtonState.PRESSED:
            rect.move_ip(0, 2)

        pygame.draw.rect(surface, bg_color, rect, border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS)
        text_surface = self.font.render(self.text, True, text_color)
        surface.blit(text_surface, text_surface.get_rect(center=rect.center))


class ActionButton(Button):
    """Button for a game action, with its keyboard shortcut shown beneath."""

    def __init__(self, x: float, y: float, text: str, hotkey: str, **kwargs):
        super().__init__(x, y, text, **kwargs)
        self.hotkey = hotkey
        self._hint_font: Optional[pygame.font.Font] = None

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)

        if self.enabled:
            if self._hint_font is None:
                self._hint_font = pygame.font.Font(None, 18)
            hint_text = self._hint_font.render(f"[{self.hotkey}]", True, COLORS.TEXT_MUTED)
            surface.blit(
                hint_text,
                hint_text.get_rect(centerx=self.rect.centerx, top=self.rect.bottom + 4),
            )
