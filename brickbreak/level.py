"""Brick layouts and brick collisions."""

from __future__ import annotations

import random

import pygame

from brickbreak import settings
from brickbreak.brick import Brick

COLUMNS = 10
BASE_ROWS = 5
SPACING_X = 8
SPACING_Y = 5
MARGIN_X = 50
MARGIN_Y = 50
BRICK_HEIGHT = 20
SPEEDUP_EVERY = 5
SPEEDUP_FACTOR = 1.05


def generate_color(rng: random.Random) -> int:
    """Return a random packed 0xRRGGBB colour."""
    r = rng.randrange(256)
    g = rng.randrange(256)
    b = rng.randrange(256)
    return (r << 16) | (g << 8) | b


def build_bricks(level_number: int, rng: random.Random) -> list[Brick]:
    """Lay out the bricks for a level: more rows on each level, rows in two alternating colours."""
    rows = BASE_ROWS + level_number
    total_spacing_x = (COLUMNS - 1) * SPACING_X
    brick_width = (settings.WINDOW_WIDTH - 2 * MARGIN_X - total_spacing_x) // COLUMNS
    colors = (generate_color(rng), generate_color(rng))
    return [
        Brick(
            MARGIN_X + col * (brick_width + SPACING_X),
            MARGIN_Y + row * (BRICK_HEIGHT + SPACING_Y),
            brick_width,
            BRICK_HEIGHT,
            colors[row % 2],
        )
        for row in range(rows)
        for col in range(COLUMNS)
    ]


class Level:
    """The bricks of the current level and the level counter."""

    def __init__(self, level_number: int = 1, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.level_number = level_number
        self.bricks = build_bricks(level_number, self.rng)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every remaining brick."""
        for brick in self.bricks:
            brick.draw(surface)

    def reset(self, ball) -> None:
        """Advance to the next level and put the ball back at its start."""
        if ball is not None:
            ball.set_position(settings.WINDOW_WIDTH // 2, settings.WINDOW_HEIGHT - 28)
            ball.set_velocity(500.0, 500.0)
        self.level_number += 1
        self.bricks = build_bricks(self.level_number, self.rng)

    def is_complete(self) -> bool:
        """True when no bricks are left."""
        return not self.bricks

    def remove_brick(self, ball_rect, ball, player) -> Brick | None:
        """Break the first brick the ball touches and bounce the ball off it.

        Every fifth broken brick speeds up the paddle and the ball. Returns the
        broken brick, or None if the ball touched nothing.
        """
        ball_rect = pygame.Rect(ball_rect)
        for index, brick in enumerate(self.bricks):
            if ball_rect.colliderect(brick.rect):
                del self.bricks[index]
                player.blocks_broken += 1
                if ball is not None:
                    self._bounce(ball, brick.rect)
                if not self.bricks:
                    self.reset(ball)
                return brick

            if player.blocks_broken == SPEEDUP_EVERY:
                player.blocks_broken = 0
                player.move_left *= SPEEDUP_FACTOR
                player.move_right *= SPEEDUP_FACTOR
                if ball is not None:
                    ball.set_velocity(ball.velocity_x * SPEEDUP_FACTOR, ball.velocity_y * SPEEDUP_FACTOR)
        return None

    @staticmethod
    def _bounce(ball, brick_rect: pygame.Rect) -> None:
        if ball.x < brick_rect.x or ball.x > brick_rect.x + brick_rect.w:
            ball.set_velocity(-ball.velocity_x, ball.velocity_y)
        else:
            ball.set_velocity(ball.velocity_x, -ball.velocity_y)