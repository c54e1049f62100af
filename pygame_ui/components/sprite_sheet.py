"""Procedural card sprite sheet.

The whole deck is rasterized once into a single surface so no image files
ship with the game. Layout is 13 columns (ranks 2..A) by 5 rows (clubs,
diamonds, hearts, spades, then a row of card backs).
"""

import os
import sys
from typing import Dict, List, Optional, Tuple

import pygame

from core.cards import Card, Rank, Suit
from pygame_ui.config import COLORS, DIMENSIONS

RANK_COLUMNS: Dict[Rank, int] = {rank: col for col, rank in enumerate(Rank)}
SUIT_ROWS: Dict[Suit, int] = {suit: row for row, suit in enumerate(Suit)}
BACK_ROW = len(Suit)

# 5x7 rank glyphs ("10" is 8 wide)
RANK_GLYPHS: Dict[Rank, List[str]] = {
    Rank.ACE: [".###.", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"],
    Rank.TWO: [".###.", "#...#", "....#", "..##.", ".#...", "#....", "#####"],
    Rank.THREE: ["####.", "....#", "....#", ".###.", "....#", "....#", "####."],
    Rank.FOUR: ["...#.", "..##.", ".#.#.", "#..#.", "#####", "...#.", "...#."],
    Rank.FIVE: ["#####", "#....", "####.", "....#", "....#", "#...#", ".###."],
    Rank.SIX: ["..##.", ".#...", "#....", "####.", "#...#", "#...#", ".###."],
    Rank.SEVEN: ["#####", "....#", "...#.", "..#..", ".#...", ".#...", ".#..."],
    Rank.EIGHT: [".###.", "#...#", "#...#", ".###.", "#...#", "#...#", ".###."],
    Rank.NINE: [".###.", "#...#", "#...#", ".####", "....#", "...#.", ".##.."],
    Rank.TEN: [
        ".#..###.",
        "##.#...#",
        ".#.#..##",
        ".#.#.#.#",
        ".#.##..#",
        ".#.#...#",
        "###.###.",
    ],
    Rank.JACK: ["..###", "...#.", "...#.", "...#.", "...#.", "#..#.", ".##.."],
    Rank.QUEEN: [".###.", "#...#", "#...#", "#...#", "#.#.#", "#..#.", ".##.#"],
    Rank.KING: ["#...#", "#..#.", "#.#..", "##...", "#.#..", "#..#.", "#...#"],
}

# 9x9 suit glyphs
SUIT_GLYPHS: Dict[Suit, List[str]] = {
    Suit.CLUBS: [
        "...###...",
        "..#####..",
        "..#####..",
        "##.###.##",
        "#########",
        "##.###.##",
        "....#....",
        "...###...",
        "..#####..",
    ],
    Suit.DIAMONDS: [
        "....#....",
        "...###...",
        "..#####..",
        ".#######.",
        "#########",
        ".#######.",
        "..#####..",
        "...###...",
        "....#....",
    ],
    Suit.HEARTS: [
        ".##...##.",
        "####.####",
        "#########",
        "#########",
        ".#######.",
        "..#####..",
        "...###...",
        "....#....",
    ],
    Suit.SPADES: [
        "....#....",
        "...###...",
        "..#####..",
        ".#######.",
        "#########",
        "#########",
        ".##.#.##.",
        "....#....",
        "...###...",
    ],
}

# Face-card watermark opacity (10 %)
WATERMARK_ALPHA = 26


def draw_glyph(
    surface: pygame.Surface,
    glyph: List[str],
    center: Tuple[int, int],
    color: Tuple[int, ...],
    pixel_size: int = 2,
) -> pygame.Rect:
    """Draw a pixel glyph centered on a point.

    Returns:
        The rectangle covered by the glyph
    """
    width = len(glyph[0]) * pixel_size
    height = len(glyph) * pixel_size
    left = center[0] - width // 2
    top = center[1] - height // 2

    for row_idx, row in enumerate(glyph):
        for col_idx, char in enumerate(row):
            if char == "#":
                pygame.draw.rect(
                    surface,
                    color,
                    (left + col_idx * pixel_size, top + row_idx * pixel_size, pixel_size, pixel_size),
                )
    return pygame.Rect(left, top, width, height)


class CardSpriteSheet:
    """Renders and slices the card sprite sheet."""

    def __init__(
        self,
        card_width: int = DIMENSIONS.CARD_WIDTH,
        card_height: int = DIMENSIONS.CARD_HEIGHT,
    ):
        self.card_width = card_width
        self.card_height = card_height
        self.columns = len(Rank)
        self.rows = len(Suit) + 1
        self._surface: Optional[pygame.Surface] = None
        self._slices: Dict[Tuple[int, int], pygame.Surface] = {}

    @property
    def size(self) -> Tuple[int, int]:
        """Pixel size of the full sheet."""
        return (self.card_width * self.columns, self.card_height * self.rows)

    @property
    def surface(self) -> pygame.Surface:
        """The rendered sheet (generated on first access)."""
        if self._surface is None:
            self._surface = self.generate()
        return self._surface

    def generate(self) -> pygame.Surface:
        """Rasterize every card face and the back row."""
        sheet = pygame.Surface(self.size, pygame.SRCALPHA)
        sheet.fill((0, 0, 0, 0))

        for suit in Suit:
            for rank in Rank:
                self._draw_face(sheet, Card(rank, suit))

        for col in range(self.columns):
            self._draw_back(sheet, col)

        self._slices.clear()
        return sheet

    def _draw_face(self, sheet: pygame.Surface, card: Card) -> None:
        cell = self.card_rect(card)
        w, h = self.card_width, self.card_height

        pygame.draw.rect(sheet, COLORS.CARD_WHITE, cell.inflate(-4, -4))
        pygame.draw.rect(sheet, COLORS.CARD_BORDER, cell.inflate(-4, -4), width=1)

        ink = COLORS.CARD_RED if card.suit.is_red else COLORS.CARD_BLACK

        # Corner index
        draw_glyph(sheet, RANK_GLYPHS[card.rank], (cell.x + 12, cell.y + 13), ink, pixel_size=2)
        draw_glyph(sheet, SUIT_GLYPHS[card.suit], (cell.x + 12, cell.y + 29), ink, pixel_size=1)

        # Centre pip
        draw_glyph(sheet, SUIT_GLYPHS[card.suit], (cell.x + w // 2, cell.y + h // 2), ink, pixel_size=4)

        if card.rank.is_face:
            watermark = pygame.Surface((w, h), pygame.SRCALPHA)
            draw_glyph(
                watermark,
                RANK_GLYPHS[card.rank],
                (w // 2, h // 2 - 4),
                (*ink, WATERMARK_ALPHA),
                pixel_size=8,
            )
            sheet.blit(watermark, cell.topleft)

    def _draw_back(self, sheet: pygame.Surface, col: int) -> None:
        cell = self.cell_rect(col, BACK_ROW)
        pygame.draw.rect(sheet, COLORS.CARD_WHITE, cell.inflate(-4, -4))
        pygame.draw.rect(sheet, COLORS.CARD_BACK, cell.inflate(-12, -12))
        pygame.draw.circle(sheet, COLORS.CARD_BACK_PATTERN, cell.center, 20)

    def cell_rect(self, col: int, row: int) -> pygame.Rect:
        """Rectangle of one grid cell.

        Raises:
            ValueError: If the cell is outside the sheet
        """
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise ValueError(f"Cell ({col}, {row}) outside {self.columns}x{self.rows} sheet")
        return pygame.Rect(col * self.card_width, row * self.card_height, self.card_width, self.card_height)

    @staticmethod
    def grid_position(card: Card) -> Tuple[int, int]:
        """(column, row) of a card face."""
        return RANK_COLUMNS[card.rank], SUIT_ROWS[card.suit]

    def card_rect(self, card: Card) -> pygame.Rect:
        """Rectangle of a card face within the sheet."""
        return self.cell_rect(*self.grid_position(card))

    def back_rect(self, col: int = 0) -> pygame.Rect:
        """Rectangle of a card back within the sheet."""
        return self.cell_rect(col, BACK_ROW)

    def _slice(self, col: int, row: int) -> pygame.Surface:
        key = (col, row)
        if key not in self._slices:
            self._slices[key] = self.surface.subsurface(self.cell_rect(col, row))
        return self._slices[key]

    def card_surface(self, card: Card) -> pygame.Surface:
        """Face image for a card."""
        return self._slice(*self.grid_position(card))

    def back_surface(self) -> pygame.Surface:
        """Card back image."""
        return self._slice(0, BACK_ROW)

    def save(self, path: str) -> None:
        """Write the sheet to an image file (format from the extension)."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        pygame.image.save(self.surface, path)


# Global sprite sheet instance
_sprite_sheet: Optional[CardSpriteSheet] = None


def get_sprite_sheet() -> CardSpriteSheet:
    """Get the global sprite sheet instance."""
    global _sprite_sheet
    if _sprite_sheet is None:
        _sprite_sheet = CardSpriteSheet()
    return _sprite_sheet


if __name__ == "__main__":
    # Export the sheet when run directly
    CardSpriteSheet().save(sys.argv[1] if len(sys.argv) > 1 else "card_sprites.png")
