import math

import pygame
import pytest

from brickbreak.ball import Ball
from brickbreak.player import Player
from brickbreak.settings import WINDOW_HEIGHT, WINDOW_WIDTH, color_to_rgb


@pytest.fixture
def paddle():
    return pygame.Rect(WINDOW_WIDTH // 2 - 150, WINDOW_HEIGHT - 20, 300, 20)


@pytest.fixture
def player(paddle):
    return Player(1, paddle)


def test_initial_velocity():
    ball = Ball(100, 100, 10, 0xFFFFFF)
    assert (ball.velocity_x, ball.velocity_y) == (500.0, 500.0)


def test_rect_is_bounding_square():
    ball = Ball(100, 200, 10, 0xFFFFFF)
    assert ball.rect == pygame.Rect(90, 190, 20, 20)


def test_set_position_moves_rect():
    ball = Ball(100, 200, 10, 0xFFFFFF)
    ball.set_position(300, 400)
    assert (ball.x, ball.y) == (300, 400)
    assert ball.rect.center == (300, 400)


def test_set_velocity_defaults():
    ball = Ball(100, 200, 10, 0xFFFFFF)
    ball.set_velocity(1.0, 2.0)
    assert (ball.velocity_x, ball.velocity_y) == (1.0, 2.0)
    ball.set_velocity()
    assert (ball.velocity_x, ball.velocity_y) == (500.0, 500.0)


def test_move_advances_by_velocity(player):
    ball = Ball(500, 500, 10, 0xFFFFFF)
    ball.set_velocity(100.0, -200.0)
    caught = ball.move(0.5, 0.0, 0.0, (0, 0, 1, 1), player)
    assert caught is False
    assert (ball.x, ball.y) == (550, 400)


def test_move_applies_acceleration(player):
    ball = Ball(500, 500, 10, 0xFFFFFF)
    ball.set_velocity(0.0, 0.0)
    ball.move(0.5, 10.0, -20.0, (0, 0, 1, 1), player)
    assert (ball.velocity_x, ball.velocity_y) == (5.0, -10.0)


def test_bounces_off_left_wall(player):
    ball = Ball(5, 500, 10, 0xFFFFFF)
    ball.set_velocity(-100.0, 0.0)
    ball.move(0.0, 0.0, 0.0, (0, 0, 1, 1), player)
    assert ball.velocity_x == 100.0


def test_bounces_off_ceiling(player):
    ball = Ball(500, -1, 10, 0xFFFFFF)
    ball.set_velocity(0.0, -100.0)
    ball.move(0.0, 0.0, 0.0, (0, 0, 1, 1), player)
    assert ball.velocity_y == 100.0


def test_falling_out_costs_a_life(paddle, player):
    ball = Ball(300, WINDOW_HEIGHT - 5, 10, 0xFFFFFF)
    ball.set_velocity(0.0, 0.0)
    caught = ball.move(0.0, 0.0, 0.0, paddle, player)
    assert caught is True
    assert player.lives == 2
    assert (ball.x, ball.y) == (paddle.x + paddle.w // 2, paddle.y - ball.radius + 5)


def test_center_hit_goes_straight_up(paddle, player):
    ball = Ball(paddle.centerx, paddle.y - 5, 10, 0xFFFFFF)
    ball.set_velocity(0.0, 100.0)
    ball.move(0.0, 0.0, 0.0, paddle, player)
    assert ball.velocity_x == pytest.approx(0.0)
    assert ball.velocity_y == pytest.approx(-100.0)


def test_edge_hit_keeps_speed_and_deflects(paddle, player):
    ball = Ball(paddle.right - 10, paddle.y - 5, 10, 0xFFFFFF)
    ball.set_velocity(30.0, 40.0)
    ball.move(0.0, 0.0, 0.0, paddle, player)
    assert ball.velocity_x > 0
    assert ball.velocity_y < 0
    assert math.hypot(ball.velocity_x, ball.velocity_y) == pytest.approx(50.0)
    assert abs(math.atan2(ball.velocity_x, -ball.velocity_y)) <= math.pi / 3 + 1e-9


def test_left_side_hit_deflects_left(paddle, player):
    ball = Ball(paddle.x + 20, paddle.y - 5, 10, 0xFFFFFF)
    ball.set_velocity(0.0, 100.0)
    ball.move(0.0, 0.0, 0.0, paddle, player)
    assert ball.velocity_x < 0
    assert ball.velocity_y < 0


def test_draw_paints_center():
    surface = pygame.Surface((40, 40))
    surface.fill((0, 0, 0))
    ball = Ball(20, 20, 5, 0x00FF00)
    ball.draw(surface)
    assert surface.get_at((20, 20))[:3] == color_to_rgb(0x00FF00)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)