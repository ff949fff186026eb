"""The game loop: input handling, per-frame updates and drawing."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable

import pygame

from brickbreak import settings
from brickbreak.ball import Ball
from brickbreak.level import Level
from brickbreak.player import Player
from brickbreak.settings import render_text

MAX_DELTA = 0.05
FALLBACK_DELTA = 0.016
LAUNCH_SPEED = 500.0
LAUNCH_LIFT = 5
STARTING_LIVES = 3
BACKGROUND_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)
SMALL_FONT_SIZE = 24
BIG_FONT_SIZE = 64
FRAME_RATE = 60

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


def clamp_delta(delta_time: float) -> float:
    """Replace an overly long frame time with a nominal 60 fps step."""
    return FALLBACK_DELTA if delta_time > MAX_DELTA else delta_time


def _any_down(keys, codes: Iterable[int]) -> bool:
    return any(keys[code] for code in codes)


class Game:
    """The state of one game: paddle, ball, bricks and the game-over flag."""

    def __init__(self, rng: random.Random | None = None) -> None:
        width, height = settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT
        self.player = Player(1, pygame.Rect(width // 2 - 150, height - 20, 300, 20))
        self.ball = Ball(width // 2, height - 28, 10, 0xFFFFFFFF)
        self.level = Level(1, rng)
        self.running = True
        self.caught = False
        self.game_over = False

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Stop the game on a quit request or the Escape key."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def collision_detection(self) -> None:
        """Mark the ball as caught while it touches the paddle."""
        self.caught = self.player.rect.colliderect(self.ball.rect)

    def handle_movement(self, keys, delta_time: float) -> None:
        """Apply the held keys: steer the paddle, launch the ball, restart."""
        if _any_down(keys, LEFT_KEYS):
            self.player.move(delta_time, -self.player.move_left, 0)
        elif _any_down(keys, RIGHT_KEYS):
            self.player.move(delta_time, self.player.move_right, 0)

        if keys[pygame.K_SPACE] and self.caught:
            self.ball.set_position(self.ball.x, self.ball.y - LAUNCH_LIFT)
            self.ball.set_velocity(0, -LAUNCH_SPEED)

        if keys[pygame.K_r] and self.game_over:
            self.restart()

    def restart(self) -> None:
        """Start over from the first level with full lives."""
        self.level.level_number = 0
        self.level.reset(self.ball)
        self.player.lives = STARTING_LIVES
        self.caught = True
        self.game_over = False

    def update(self, delta_time: float) -> None:
        """Advance the game by one frame."""
        if self.player.lives <= 0:
            self.game_over = True
            return
        self.level.remove_brick(self.ball.rect, self.ball, self.player)
        if self.ball.move(delta_time, 0, 0, self.player.rect, self.player):
            self.caught = True

    def render(self, surface: pygame.Surface, font, big_font) -> None:
        """Draw the current frame, including the level and lives counters."""
        surface.fill(BACKGROUND_COLOR)
        if self.player.lives <= 0:
            surface.fill(GAME_OVER_COLOR)
            cx, cy = settings.WINDOW_WIDTH // 2, settings.WINDOW_HEIGHT // 2
            render_text(surface, big_font, "Game Over", cx - 160, cy - 100)
            render_text(surface, font, "Press R to restart", cx - 100, cy + 10)
            render_text(surface, font, "Press ESC to exit", cx - 100, cy + 40)
        else:
            self.level.draw(surface)
            self.player.render(surface)
            self.ball.draw(surface)

        render_text(surface, font, f"Level: {self.level.level_number}", 10, 10)
        render_text(surface, font, f"Lives: {self.player.lives}", 10, 40)


def run() -> None:
    """Open a borderless window and play until the player quits."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), pygame.NOFRAME
        )
        pygame.display.set_caption("Brick Break")
        font = pygame.font.Font(None, SMALL_FONT_SIZE)
        big_font = pygame.font.Font(None, BIG_FONT_SIZE)
        clock = pygame.time.Clock()
        game = Game()

        while game.running:
            delta_time = clamp_delta(clock.tick(FRAME_RATE) / 1000.0)
            game.handle_events(pygame.event.get())
            game.handle_movement(pygame.key.get_pressed(), delta_time)
            game.collision_detection()
            game.update(delta_time)
            game.render(screen, font, big_font)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="brickbreak",
        description="Break every brick with the ball. Arrows or A/D move, Space launches, "
        "R restarts after game over, Esc quits.",
    )
    parser.parse_args(argv)
    run()
    return 0