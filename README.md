# snakegrid

A snake game played on a 20 × 20 grid whose outer ring is a wall. The snake
moves one cell per second. Steer it with the keyboard and eat the fruit to
grow. If it runs into the wall or into its own body or tail, the board is
reset to the starting snake and a new fruit.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, reads the keyboard and draws
the board.

## Playing

```
snakegrid [--sheet PATH] [--seed N]
```

- `--sheet` is the sprite sheet image to load. The default is
  `spritesheet.png` in the current directory. The game uses 64 × 64 tiles from
  it for the head, body, tail and fruit, and scales each tile into a 50 × 50
  cell of a 1000 × 1000 window.
- `--seed` seeds the random number generator that places the fruit.

Controls:

| Key | Direction |
|-----|-----------|
| W   | up        |
| A   | left      |
| S   | down      |
| D   | right     |

The snake starts at the left of the board, facing right, and does not move
until a key is pressed. A does not start it, because the snake faces right
and cannot turn back on itself. A turn is accepted only at a right angle to
the current heading, and only after the head has moved since the previous
turn. Close the window to quit.

## Using the model

The game logic does not need a window:

```python
import random

from snakegrid.game import Game
from snakegrid.model import Direction

game = Game(random.Random(1))
game.tick(1.0)               # first step; the snake has no heading yet
game.press(Direction.RIGHT)  # start moving right
died = game.tick(1.0)        # one step of movement
print(game.snake.head, died)
```

`Game.press(direction)` takes one frame's key input. Pass
`Direction.NOTCHANGED` when no key was pressed. `Game.tick(dt)` advances time
by `dt` seconds. The first call makes a step straight away, and after that a
step is made each time one more second has built up. It returns `True` if the
snake died during that call and the board was reset.

The modules:

- `snakegrid.model` holds the data types `Direction`, `GameTexture`, `Vec2`,
  `Cell`, `SnakeData` and `GameState`, and the helpers `is_horizontal` and
  `is_vertical`.
- `snakegrid.board.Board` is the grid, indexed by `Vec2` or by an `(x, y)`
  tuple. It places the starting snake (`init_snake`), drops fruit on a random
  free cell (`place_fruit`), clears the drawing (`clear_graphics`) and resets
  everything after a crash (`refresh`). A board must be at least 11 cells on
  a side.
- `snakegrid.movement` turns the snake (`update_snake_dir`), moves the head
  (`update_head_pos`), checks for collisions (`head_touches_body_or_border`)
  and fruit (`has_head_eaten`), moves each segment in the direction stored in
  its cell (`collect_body`), adds a segment at the tail after fruit is eaten,
  and redraws the snake (`put_snake_on_map`).
- `snakegrid.render` picks the sprite-sheet tile for each cell
  (`sprite_source`), maps pygame key codes to directions
  (`direction_from_key`) and draws the board onto a pygame surface
  (`draw_board`).

## What it does not do

There is no score, high-score table, pause or menu. A crash is logged as
"snake died" at info level, and the game goes on from the starting position.

## Running the tests

```
pip install ".[test]"
pytest
```