"""The game loop: one Game object driven by key presses and elapsed time."""

from __future__ import annotations

import argparse
import logging
import random

from .board import DEFAULT_SIZE, START_BODY, START_TAIL, Board
from .model import Direction, GameState, SnakeData
from .movement import (
    can_movement_be_updated,
    collect_body,
    has_head_eaten,
    head_touches_body_or_border,
    put_snake_on_map,
    update_head_pos,
    update_snake_dir,
)

log = logging.getLogger(__name__)

STEP_INTERVAL = 1.0


class Game:
    """A running game on a fresh board with the starting snake and a fruit."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng
        self.board = Board(DEFAULT_SIZE)
        self.snake = SnakeData()
        self.state = GameState()
        self.board.init_snake(self.snake)
        self.state.reset()
        self.board.place_fruit(self.state, self.rng)
        self.skip_timer = 0.0

    def press(self, direction: Direction) -> None:
        """Feed one frame's key input; NOTCHANGED means no key this frame.

        The first key other than LEFT starts the snake moving right.
        """
        state = self.state
        if not state.init_movement:
            state.future_direction = direction
            if direction not in (Direction.NOTCHANGED, Direction.LEFT):
                state.init_movement = True
                self.board[START_TAIL].future_dir = Direction.RIGHT
                self.board[START_BODY].future_dir = Direction.RIGHT
        state.future_direction = direction
        if can_movement_be_updated(state):
            update_snake_dir(self.snake, state)

    def tick(self, dt: float) -> bool:
        """Advance time by dt seconds; step the snake when due.

        Returns True if the snake died during this call and the game restarted.
        """
        self.skip_timer -= dt
        if self.skip_timer > 0:
            return False
        died = False
        update_head_pos(self.snake, self.state, self.board)
        self.state.is_head_pos_updated = True
        if head_touches_body_or_border(self.board, self.snake):
            self.board.refresh(self.snake, self.state, self.rng)
            log.info("snake died")
            died = True
        if has_head_eaten(self.board, self.snake):
            self.state.has_head_eaten_fruit = True
        parts = collect_body(self.board, self.state)
        put_snake_on_map(self.board, parts, self.snake, self.state, self.rng)
        self.skip_timer += STEP_INTERVAL
        return died


_KEY_PRIORITY = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until it is closed."""
    import pygame

    from .render import BACKGROUND_COLOR, CELL_SIZE, direction_from_key, draw_board

    parser = argparse.ArgumentParser(prog="snakegrid", description="Play snake.")
    parser.add_argument("--sheet", default="spritesheet.png", help="sprite sheet image")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    pygame.init()
    try:
        side = game.board.size * CELL_SIZE
        screen = pygame.display.set_mode((side, side))
        pygame.display.set_caption("Snake")
        sheet = pygame.image.load(args.sheet).convert_alpha()
        clock = pygame.time.Clock()
        running = True
        while running:
            pressed = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    pressed.add(direction_from_key(event.key))
            if not running:
                break
            direction = next(
                (d for d in _KEY_PRIORITY if d in pressed), Direction.NOTCHANGED
            )
            dt = clock.tick(60) / 1000.0
            game.press(direction)
            game.tick(dt)
            screen.fill(BACKGROUND_COLOR)
            draw_board(screen, game.board, game.state, sheet)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0