"""Window dimensions and text drawing helpers shared by the game objects."""

from __future__ import annotations

import pygame

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080

TEXT_COLOR = (255, 255, 255)


def color_to_rgb(color: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB colour into its red, green and blue parts."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def render_text(surface: pygame.Surface, font, text: str, x: int, y: int) -> pygame.Rect:
    """Draw ``text`` in white with its top-left corner at (x, y).

    Returns the area of ``surface`` that was drawn on.
    """
    rendered = font.render(text, False, TEXT_COLOR)
    return surface.blit(rendered, (x, y))