# brickbreak

A small brick-breaking arcade game built on pygame. You steer a paddle along the
bottom of the screen and keep a ball in play. The ball knocks out the rows of
coloured bricks above you.

## Installing

```
pip install .
```

## Playing

```
brickbreak
```

The game opens a borderless 1920×1080 window. It takes no options other than `--help`.

| Key                 | Action                                   |
|---------------------|------------------------------------------|
| Left / A            | Move the paddle left                     |
| Right / D           | Move the paddle right                    |
| Space               | Launch the ball while it touches the paddle |
| R                   | Restart after a game over                |
| Esc                 | Quit                                     |

The current level and the remaining lives are shown in the top-left corner.

## Rules

- You start with three lives. Each time the ball falls past the bottom edge, you
  lose a life and the ball is put back on the paddle.
- Where the ball hits the paddle sets its bounce angle. A hit at the paddle's edge
  sends it off at 60° from vertical. A hit in the middle sends it straight up.
- A ball that hits a brick breaks it. The ball bounces off sideways if its centre
  is beside the brick, and vertically otherwise.
- Each level has `5 + level` rows of ten bricks. Alternate rows share one of two
  random colours.
- Once five bricks have been broken, the ball and the paddle both get 5% faster,
  and the count starts again.
- When the last brick falls, the next level is built and the ball goes back to
  its starting point.
- When no lives are left the screen turns red. Press R to start again from level 1
  with three lives.

## What it does not do

The game keeps no score and no high-score table. It plays no sound, and it has no
menu or pause screen.

## Using the pieces

You can use the game objects on their own, for example in tests or behind a
different front end:

```python
import random

from brickbreak.ball import Ball
from brickbreak.level import Level, build_bricks
from brickbreak.player import Player

bricks = build_bricks(1, random.Random(0))
print(len(bricks))  # 60 bricks on level 1

level = Level(1, random.Random(0))
player = Player(1, (810, 1060, 300, 20))
ball = Ball(960, 1052, 10, 0xFFFFFF)
broken = level.remove_brick(ball.rect, ball, player)  # None if nothing was hit
lost_life = ball.move(0.016, 0, 0, player.rect, player)
```

- `brickbreak.settings` holds `WINDOW_WIDTH` and `WINDOW_HEIGHT`. It also has
  `color_to_rgb` for packed `0xRRGGBB` colours and `render_text`.
- `brickbreak.brick.Brick` is a coloured `pygame.Rect`.
- `brickbreak.player.Player` is the paddle. It holds the lives, the broken-brick
  counter and the paddle speeds.
- `brickbreak.ball.Ball` is the ball. It has `move`, `set_position` and
  `set_velocity`.
- `brickbreak.level.Level` holds the bricks and the level number. It has `reset`,
  `is_complete` and `remove_brick`. `generate_color` and `build_bricks` lay out a
  level.
- `brickbreak.game.Game` holds the whole game state. To drive a frame by hand, call
  its `handle_events`, `handle_movement`, `collision_detection`, `update` and
  `render` methods. `restart` starts over from level 1.
- `brickbreak.game.clamp_delta` replaces frame times over 0.05 s with 0.016 s.
- `brickbreak.game.run()` runs the interactive loop. `brickbreak.game.main()` is the
  command-line entry point.

## Development

```
pip install -e ".[test]"
pytest
```