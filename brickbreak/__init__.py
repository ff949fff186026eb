"""A brick-breaking arcade game built on pygame: paddle, ball, bricks and game loop."""

__version__ = "0.1.0"