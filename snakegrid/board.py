"""The square playing field and the operations on it."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from .model import Cell, GameState, GameTexture, SnakeData, Vec2

log = logging.getLogger(__name__)

DEFAULT_SIZE = 20
START_TAIL = Vec2(3, 9)
START_BODY = Vec2(4, 9)
START_HEAD = Vec2(5, 9)
_MIN_SIZE = START_HEAD.y + 2


class Board:
    """A size x size grid of cells, indexed by (x, y), with a one-cell border."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < _MIN_SIZE:
            raise ValueError(f"board size must be at least {_MIN_SIZE}, got {size}")
        self.size = size
        last = size - 1
        self._grid = [
            [
                Cell(pos=Vec2(x, y), is_border=x in (0, last) or y in (0, last))
                for y in range(size)
            ]
            for x in range(size)
        ]

    def __getitem__(self, pos: Vec2 | tuple[int, int]) -> Cell:
        x, y = (pos.x, pos.y) if isinstance(pos, Vec2) else pos
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"position ({x}, {y}) is off the board")
        return self._grid[x][y]

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, column by column."""
        for column in self._grid:
            yield from column

    def clear_graphics(self) -> None:
        """Erase everything but fruit; turning marks are dropped on empty cells."""
        for cell in self.cells():
            if cell.texture is GameTexture.NONE:
                cell.head_changed_direction = False
            if cell.texture is not GameTexture.FRUIT:
                cell.texture = GameTexture.NONE

    def place_fruit(self, state: GameState, rng: random.Random | None = None) -> None:
        """Put a fruit on a random empty cell unless one is already placed."""
        if state.is_fruit_placed:
            return
        source = random if rng is None else rng
        span = self.size - 3
        if not any(
            cell.texture is GameTexture.NONE
            and 1 <= cell.pos.x <= span
            and 1 <= cell.pos.y <= span
            for cell in self.cells()
        ):
            raise RuntimeError("no free cell left for a fruit")
        while not state.is_fruit_placed:
            x = 1 + source.randrange(span)
            y = 1 + source.randrange(span)
            cell = self._grid[x][y]
            if cell.texture is GameTexture.NONE:
                state.has_head_eaten_fruit = False
                cell.texture = GameTexture.FRUIT
                state.is_fruit_placed = True
                log.debug("fruit placed at (%d, %d)", x, y)

    def init_snake(self, snake: SnakeData) -> None:
        """Draw the starting snake and point the head at its cell."""
        self[START_TAIL].texture = GameTexture.TAIL
        self[START_BODY].texture = GameTexture.BODY
        self[START_HEAD].texture = GameTexture.HEAD
        snake.head = self[START_HEAD].pos

    def refresh(
        self, snake: SnakeData, state: GameState, rng: random.Random | None = None
    ) -> None:
        """Start over: reset the state, wipe the board, redraw the snake and a fruit."""
        state.reset()
        for cell in self.cells():
            cell.texture = GameTexture.NONE
            cell.future_dir = cell.future_dir.NOTCHANGED
            cell.head_changed_direction = False
        self.init_snake(snake)
        self.place_fruit(state, rng)