"""Drawing the board with pygame and reading direction keys."""

from __future__ import annotations

import pygame

from .board import Board
from .model import Cell, Direction, GameState, GameTexture

CELL_SIZE = 50
TILE_SIZE = 64
BORDER_COLOR = pygame.Color(0, 117, 44)
BACKGROUND_COLOR = pygame.Color(245, 245, 245)

Rect = tuple[int, int, int, int]


def _tile(col: int, row: int) -> Rect:
    return (col, row, TILE_SIZE, TILE_SIZE)


_HEAD_TILES = {
    Direction.LEFT: _tile(192, 64),
    Direction.NOTCHANGED: _tile(256, 0),
    Direction.RIGHT: _tile(256, 0),
    Direction.UP: _tile(192, 0),
    Direction.DOWN: _tile(256, 64),
}

_BODY_TILES = {
    Direction.NOTCHANGED: _tile(64, 0),
    Direction.LEFT: _tile(64, 0),
    Direction.RIGHT: _tile(64, 0),
    Direction.UP: _tile(128, 64),
    Direction.DOWN: _tile(128, 64),
}

_TAIL_TILES = {
    Direction.LEFT: _tile(192, 192),
    Direction.RIGHT: _tile(256, 128),
    Direction.NOTCHANGED: _tile(256, 128),
    Direction.UP: _tile(192, 128),
    Direction.DOWN: _tile(256, 192),
}

_FRUIT_TILE = _tile(0, 192)

_KEY_DIRECTIONS = {
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
}


def sprite_source(cell: Cell, state: GameState) -> Rect | None:
    """Return the sprite-sheet rectangle for a cell, or None if it shows nothing.

    The head follows the game's current heading; body and tail follow the
    direction stored in their own cell.
    """
    if cell.texture is GameTexture.HEAD:
        return _HEAD_TILES[state.current_direction]
    if cell.texture is GameTexture.BODY:
        return _BODY_TILES[cell.future_dir]
    if cell.texture is GameTexture.TAIL:
        return _TAIL_TILES[cell.future_dir]
    if cell.texture is GameTexture.FRUIT:
        return _FRUIT_TILE
    return None


def direction_from_key(key: int) -> Direction:
    """Map a pygame key code to a direction; other keys give NOTCHANGED."""
    return _KEY_DIRECTIONS.get(key, Direction.NOTCHANGED)


def draw_board(
    surface: pygame.Surface, board: Board, state: GameState, sheet: pygame.Surface
) -> None:
    """Draw every cell's sprite, then paint the border cells over it."""
    for cell in board.cells():
        target = pygame.Rect(
            cell.pos.x * CELL_SIZE, cell.pos.y * CELL_SIZE, CELL_SIZE, CELL_SIZE
        )
        source = sprite_source(cell, state)
        if source is not None:
            tile = sheet.subsurface(pygame.Rect(source))
            surface.blit(pygame.transform.scale(tile, target.size), target.topleft)
        if cell.is_border:
            surface.fill(BORDER_COLOR, target)