"""Panels: rounded info boxes and the round message overlay."""

from typing import List, Optional, Tuple

import pygame

from pygame_ui.config import ANIMATION, COLORS, DIMENSIONS
from pygame_ui.core.animation import EaseType, TweenManager


class Panel:
    """A rounded rectangle panel with border and optional transparency.

    Positioned by its top-left corner.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        bg_color: Tuple[int, int, int] = COLORS.PANEL_BG,
        bg_alpha: int = 200,
        border_color: Tuple[int, int, int] = COLORS.PANEL_BORDER,
        border_width: int = 2,
        corner_radius: Optional[int] = None,
    ):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bg_color = bg_color
        self.bg_alpha = bg_alpha
        self.border_color = border_color
        self.border_width = border_width
        self.corner_radius = corner_radius or DIMENSIONS.PANEL_CORNER_RADIUS

        self._surface: Optional[pygame.Surface] = None
        self._needs_redraw = True

    @property
    def rect(self) -> pygame.Rect:
        """Get the panel's rectangle."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def set_size(self, width: float, height: float) -> None:
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            self._needs_redraw = True

    def _render(self) -> pygame.Surface:
        """Render the panel surface."""
        surface = pygame.Surface((int(self.width), int(self.height)), pygame.SRCALPHA)
        bg_rect = pygame.Rect(0, 0, int(self.width), int(self.height))
        pygame.draw.rect(
            surface, (*self.bg_color, self.bg_alpha), bg_rect, border_radius=self.corner_radius
        )

        if self.border_width > 0:
            pygame.draw.rect(
                surface,
                self.border_color,
                bg_rect,
                width=self.border_width,
                border_radius=self.corner_radius,
            )
        return surface

    def draw(self, surface: pygame.Surface) -> None:
        if self._needs_redraw or self._surface is None:
            self._surface = self._render()
            self._needs_redraw = False

        surface.blit(self._surface, (int(self.x), int(self.y)))


class InfoPanel(Panel):
    """A panel that displays labeled values, e.g. the win/loss tally."""

    LINE_HEIGHT = 22
    TITLE_HEIGHT = 28

    def __init__(self, x: float, y: float, width: float = 160, title: str = "", **kwargs):
        super().__init__(x, y, width, 80, **kwargs)
        self.title = title
        self.content_lines: List[Tuple[str, str]] = []

        self._title_font: Optional[pygame.font.Font] = None
        self._content_font: Optional[pygame.font.Font] = None

    @property
    def title_font(self) -> pygame.font.Font:
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 28)
        return self._title_font

    @property
    def content_font(self) -> pygame.font.Font:
        if self._content_font is None:
            self._content_font = pygame.font.Font(None, 24)
        return self._content_font

    def set_content(self, lines: List[Tuple[str, str]]) -> None:
        """Replace the (label, value) lines and fit the height to them."""
        self.content_lines = lines
        title_height = self.TITLE_HEIGHT if self.title else 0
        padding = DIMENSIONS.PANEL_PADDING * 2
        self.set_size(self.width, title_height + len(lines) * self.LINE_HEIGHT + padding)

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)

        y_offset = int(self.y) + DIMENSIONS.PANEL_PADDING
        if self.title:
            title_rendered = self.title_font.render(self.title, True, COLORS.GOLD)
            surface.blit(
                title_rendered,
                title_rendered.get_rect(centerx=self.rect.centerx, top=y_offset),
            )
            y_offset += self.TITLE_HEIGHT

        for label, value in self.content_lines:
            label_rendered = self.content_font.render(label, True, COLORS.TEXT_MUTED)
            surface.blit(label_rendered, (int(self.x) + DIMENSIONS.PANEL_PADDING, y_offset))

            value_rendered = self.content_font.render(value, True, COLORS.TEXT_WHITE)
            value_rect = value_rendered.get_rect(
                right=self.rect.right - DIMENSIONS.PANEL_PADDING,
                top=y_offset,
            )
            surface.blit(value_rendered, value_rect)
            y_offset += self.LINE_HEIGHT


class MessageOverlay:
    """Centered banner announcing the round result.

    Fades in on ``show`` and disappears on ``hide``.
    """

    def __init__(
        self,
        center: Tuple[int, int] = (DIMENSIONS.CENTER_X, DIMENSIONS.CENTER_Y - 20),
        font_size: int = 56,
    ):
        self.center = center
        self.font_size = font_size
        self.text = ""
        self.color: Tuple[int, int, int] = COLORS.MESSAGE_GOLD
        self.visible = False
        self.alpha = 0.0
        self.tween_manager = TweenManager()
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def show(self, text: str, color: Optional[Tuple[int, int, int]] = None) -> None:
        self.text = text
        self.color = color or COLORS.MESSAGE_GOLD
        self.visible = True
        self.tween_manager.clear()
        self.alpha = 0.0
        self.tween_manager.create(
            self, "alpha", 255.0, ANIMATION.MESSAGE_FADE_DURATION, EaseType.EASE_OUT
        )

    def hide(self) -> None:
        self.visible = False
        self.tween_manager.clear()
        self.alpha = 0.0

    def update(self, dt: float) -> None:
        self.tween_manager.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible or not self.text:
            return

        rendered = self.font.render(self.text, True, self.color)
        band = pygame.Surface(
            (rendered.get_width() + 80, rendered.get_height() + 40), pygame.SRCALPHA
        )
        band.fill((0, 0, 0, 170))
        band.blit(rendered, rendered.get_rect(center=band.get_rect().center))
        band.set_alpha(int(self.alpha))
        surface.blit(band, band.get_rect(center=self.center))
