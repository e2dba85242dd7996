"""Rules that move the snake across the board."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .board import Board
from .model import (
    Direction,
    GameState,
    GameTexture,
    SnakeData,
    Vec2,
    is_horizontal,
    is_vertical,
)

_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


def _step(pos: Vec2, direction: Direction) -> Vec2:
    dx, dy = _OFFSETS.get(direction, (0, 0))
    return Vec2(pos.x + dx, pos.y + dy)


@dataclass(frozen=True)
class BodyPart:
    """A body or tail segment's next position and look."""

    pos: Vec2
    texture: GameTexture


def can_movement_be_updated(state: GameState) -> bool:
    """True when a new, perpendicular heading may be taken now."""
    current, future = state.current_direction, state.future_direction
    parallel = (is_horizontal(current) and is_horizontal(future)) or (
        is_vertical(current) and is_vertical(future)
    )
    return (
        future is not Direction.NOTCHANGED
        and not parallel
        and state.is_head_pos_updated
        and state.init_movement
    )


def head_touches_body_or_border(board: Board, snake: SnakeData) -> bool:
    """True when the head sits on the border or on its own body or tail."""
    cell = board[snake.head]
    return cell.is_border or cell.texture in (GameTexture.TAIL, GameTexture.BODY)


def has_head_eaten(board: Board, snake: SnakeData) -> bool:
    """True when the head sits on the fruit."""
    return board[snake.head].texture is GameTexture.FRUIT


def update_snake_dir(snake: SnakeData, state: GameState) -> None:
    """Take the pending direction as the heading."""
    state.current_direction = state.future_direction
    snake.head_changed_direction = True
    state.is_head_pos_updated = False


def update_head_pos(snake: SnakeData, state: GameState, board: Board) -> None:
    """Mark the head's cell with the heading, then move the head one cell."""
    cell = board[snake.head]
    cell.future_dir = state.current_direction
    if snake.head_changed_direction:
        cell.head_changed_direction = True
    snake.head = _step(snake.head, state.current_direction)


def collect_body(board: Board, state: GameState) -> list[BodyPart]:
    """Return the body and tail segments moved along their cells' directions.

    After a fruit has been eaten the tail stays where it is and a new body
    segment takes the tail's next position, and a new fruit is requested.
    """
    parts: list[BodyPart] = []
    for cell in board.cells():
        if cell.texture not in (GameTexture.BODY, GameTexture.TAIL):
            continue
        moved = _step(cell.pos, cell.future_dir)
        if state.has_head_eaten_fruit and cell.texture is GameTexture.TAIL:
            parts.append(BodyPart(cell.pos, GameTexture.TAIL))
            parts.append(BodyPart(moved, GameTexture.BODY))
            state.is_fruit_placed = False
        else:
            parts.append(BodyPart(moved, cell.texture))
    return parts


def put_snake_on_map(
    board: Board,
    parts: list[BodyPart],
    snake: SnakeData,
    state: GameState,
    rng: random.Random | None = None,
) -> None:
    """Redraw the snake from its head and segments, then ensure a fruit exists."""
    board.clear_graphics()
    board[snake.head].texture = GameTexture.HEAD
    for part in parts:
        board[part.pos].texture = part.texture
    board.place_fruit(state, rng)