"""The ball and its movement."""

from __future__ import annotations

import math

import pygame

from brickbreak import settings
from brickbreak.settings import color_to_rgb

MAX_BOUNCE_ANGLE = math.pi / 3.0
DEFAULT_SPEED = 500.0


class Ball:
    """A round ball that bounces off walls, the paddle and bricks."""

    def __init__(self, x: int, y: int, radius: int, color: int) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.color = color
        self.velocity_x = DEFAULT_SPEED
        self.velocity_y = DEFAULT_SPEED

    @property
    def rect(self) -> pygame.Rect:
        """The bounding square of the ball."""
        return pygame.Rect(self.x - self.radius, self.y - self.radius, self.radius * 2, self.radius * 2)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball as a filled circle."""
        pygame.draw.circle(surface, color_to_rgb(self.color), (self.x, self.y), self.radius)

    def move(self, delta_time: float, dx: float, dy: float, paddle_rect, player) -> bool:
        """Advance the ball by one frame.

        ``dx`` and ``dy`` accelerate the ball. When the ball falls past the
        bottom edge it is put back on the paddle, the player loses a life and
        True is returned; otherwise False.
        """
        paddle = pygame.Rect(paddle_rect)
        caught = False

        self.x += int(self.velocity_x * delta_time)
        self.y += int(self.velocity_y * delta_time)

        self.velocity_x += dx * delta_time
        self.velocity_y += dy * delta_time

        if self.x - self.radius < 0 or self.x + self.radius > settings.WINDOW_WIDTH:
            self.velocity_x = -self.velocity_x

        if self.y < 0:
            self.velocity_y = -self.velocity_y

        if self.y + self.radius > settings.WINDOW_HEIGHT:
            self.set_position(paddle.x + paddle.w // 2, paddle.y - self.radius + 5)
            player.lives -= 1
            caught = True

        if self.rect.colliderect(paddle) and self.y + self.radius > paddle.y and self.y < paddle.y + paddle.h:
            self._bounce_off(paddle)

        return caught

    def _bounce_off(self, paddle: pygame.Rect) -> None:
        center_x = paddle.x + paddle.w / 2.0
        normalized = (self.x - center_x) / (paddle.w / 2.0)
        angle = normalized * MAX_BOUNCE_ANGLE
        speed = math.hypot(self.velocity_x, self.velocity_y)
        self.velocity_x = speed * math.sin(angle)
        self.velocity_y = -speed * math.cos(angle)

    def set_position(self, x: int, y: int) -> None:
        """Place the ball's centre at (x, y)."""
        self.x = x
        self.y = y

    def set_velocity(self, dx: float = DEFAULT_SPEED, dy: float = DEFAULT_SPEED) -> None:
        """Set the ball's velocity in pixels per second."""
        self.velocity_x = dx
        self.velocity_y = dy