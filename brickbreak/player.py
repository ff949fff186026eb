"""The paddle controlled by the player."""

from __future__ import annotations

import pygame

from brickbreak import settings

PADDLE_COLOR = (255, 255, 255)


class Player:
    """The paddle, with the player's lives and brick counter."""

    def __init__(self, level: int, rect) -> None:
        self.level = level
        self.rect = pygame.Rect(rect)
        self.lives = 3
        self.blocks_broken = 0
        self.move_left = 300.0
        self.move_right = 350.0

    def render(self, surface: pygame.Surface) -> None:
        """Draw the paddle as a white rectangle."""
        surface.fill(PADDLE_COLOR, self.rect)

    def move(self, delta_time: float, dx: float, dy: float) -> None:
        """Move by a velocity over ``delta_time`` seconds, kept inside the window."""
        rect = self.rect
        rect.x = int(rect.x + dx * delta_time)
        rect.y = int(rect.y + dy * delta_time)

        if rect.x < 0:
            rect.x = 0
        if rect.y < 0:
            rect.y = 0
        if rect.x + rect.w > settings.WINDOW_WIDTH:
            rect.x = settings.WINDOW_WIDTH - rect.w
        if rect.y + rect.h > settings.WINDOW_HEIGHT:
            rect.y = settings.WINDOW_HEIGHT - rect.h