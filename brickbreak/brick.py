"""A single breakable brick."""

from __future__ import annotations

import pygame

from brickbreak.settings import color_to_rgb


class Brick:
    """A filled rectangle with a packed 0xRRGGBB colour."""

    __slots__ = ("rect", "color")

    def __init__(self, x: int, y: int, width: int, height: int, color: int) -> None:
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color

    def __repr__(self) -> str:
        return f"Brick(rect={tuple(self.rect)!r}, color={self.color:#08x})"

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the brick's rectangle on ``surface``."""
        surface.fill(color_to_rgb(self.color), self.rect)