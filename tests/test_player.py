import pygame
import pytest

from brickbreak.player import PADDLE_COLOR, Player
from brickbreak.settings import WINDOW_HEIGHT, WINDOW_WIDTH


@pytest.fixture
def player():
    return Player(1, (WINDOW_WIDTH // 2 - 150, WINDOW_HEIGHT - 20, 300, 20))


def test_defaults(player):
    assert player.lives == 3
    assert player.blocks_broken == 0
    assert player.move_left == 300.0
    assert player.move_right == 350.0
    assert player.level == 1


def test_move_right(player):
    start = player.rect.x
    player.move(0.5, 100.0, 0.0)
    assert player.rect.x == start + 50
    assert player.rect.y == WINDOW_HEIGHT - 20


def test_move_truncates_toward_zero(player):
    start = player.rect.x
    player.move(0.01, 50.0, 0.0)
    assert player.rect.x == start


def test_clamped_at_left_edge(player):
    player.move(10.0, -player.move_left, 0.0)
    assert player.rect.x == 0


def test_clamped_at_right_edge(player):
    player.move(10.0, player.move_right, 0.0)
    assert player.rect.right == WINDOW_WIDTH


def test_clamped_vertically(player):
    player.move(10.0, 0.0, 500.0)
    assert player.rect.bottom == WINDOW_HEIGHT
    player.move(10.0, 0.0, -5000.0)
    assert player.rect.y == 0


def test_render_paints_paddle():
    surface = pygame.Surface((50, 50))
    surface.fill((0, 0, 0))
    paddle = Player(1, (5, 5, 10, 4))
    paddle.render(surface)
    assert surface.get_at((5, 5))[:3] == PADDLE_COLOR
    assert surface.get_at((15, 5))[:3] == (0, 0, 0)