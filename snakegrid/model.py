"""Core data types shared by the board and the movement rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameTexture(Enum):
    """What a cell shows."""

    NONE = 0
    HEAD = 1
    BODY = 2
    TAIL = 3
    FRUIT = 4


class Direction(Enum):
    """A heading of the snake; NOTCHANGED means no heading or no key press."""

    NOTCHANGED = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


def is_horizontal(direction: Direction) -> bool:
    """Return True for LEFT and RIGHT."""
    return direction in (Direction.LEFT, Direction.RIGHT)


def is_vertical(direction: Direction) -> bool:
    """Return True for UP and DOWN."""
    return direction in (Direction.UP, Direction.DOWN)


@dataclass(frozen=True)
class Vec2:
    """An integer grid position."""

    x: int
    y: int


@dataclass
class Cell:
    """One square of the board."""

    pos: Vec2
    texture: GameTexture = GameTexture.NONE
    future_dir: Direction = Direction.NOTCHANGED
    is_border: bool = False
    head_changed_direction: bool = False


@dataclass
class SnakeData:
    """Where the snake's head is and whether it has turned."""

    head: Vec2 = field(default_factory=lambda: Vec2(0, 0))
    head_changed_direction: bool = False


@dataclass
class GameState:
    """Flags and directions that drive one game."""

    is_head_pos_updated: bool = False
    init_movement: bool = False
    has_head_eaten_fruit: bool = False
    is_fruit_placed: bool = False
    current_direction: Direction = Direction.NOTCHANGED
    future_direction: Direction = Direction.NOTCHANGED

    def reset(self) -> None:
        """Clear the flags and the pending direction; the current heading is kept."""
        self.init_movement = False
        self.is_head_pos_updated = False
        self.has_head_eaten_fruit = False
        self.is_fruit_placed = False
        self.future_direction = Direction.NOTCHANGED