import random

import pytest

from snakegrid.board import Board
from snakegrid.model import Direction, GameState, GameTexture, SnakeData, Vec2


def _textures(board, texture):
    return [cell.pos for cell in board.cells() if cell.texture is texture]


def test_cells_cover_whole_board_with_matching_positions():
    board = Board()
    cells = list(board.cells())
    assert len(cells) == board.size * board.size
    assert all(board[cell.pos] is cell for cell in cells)
    assert len({cell.pos for cell in cells}) == len(cells)


def test_border_is_outer_ring():
    board = Board()
    last = board.size - 1
    for cell in board.cells():
        on_edge = cell.pos.x in (0, last) or cell.pos.y in (0, last)
        assert cell.is_border is on_edge


def test_new_board_is_empty():
    board = Board()
    assert all(cell.texture is GameTexture.NONE for cell in board.cells())


def test_index_by_tuple_and_vec2_agree():
    board = Board()
    assert board[3, 9] is board[Vec2(3, 9)]


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (20, 0), (0, 20), Vec2(25, 3)])
def test_index_off_board_raises(pos):
    board = Board()
    with pytest.raises(IndexError):
        board[pos]
    assert board[0, 0].pos == Vec2(0, 0)
    assert board[19, 19].pos == Vec2(19, 19)


def test_too_small_board_rejected():
    with pytest.raises(ValueError):
        Board(5)


def test_init_snake_places_start_snake():
    board = Board()
    snake = SnakeData()
    board.init_snake(snake)
    assert board[3, 9].texture is GameTexture.TAIL
    assert board[4, 9].texture is GameTexture.BODY
    assert board[5, 9].texture is GameTexture.HEAD
    assert snake.head == Vec2(5, 9)


def test_clear_graphics_keeps_fruit_only():
    board = Board()
    board.init_snake(SnakeData())
    board[10, 10].texture = GameTexture.FRUIT
    board.clear_graphics()
    assert _textures(board, GameTexture.FRUIT) == [Vec2(10, 10)]
    assert _textures(board, GameTexture.HEAD) == []
    assert _textures(board, GameTexture.BODY) == []
    assert _textures(board, GameTexture.TAIL) == []


def test_clear_graphics_drops_turn_mark_only_on_empty_cells():
    board = Board()
    board[4, 9].texture = GameTexture.BODY
    board[4, 9].head_changed_direction = True
    board[8, 8].head_changed_direction = True
    board.clear_graphics()
    assert board[4, 9].head_changed_direction is True
    assert board[8, 8].head_changed_direction is False


def test_place_fruit_puts_one_fruit_inside_range():
    board = Board()
    board.init_snake(SnakeData())
    state = GameState(has_head_eaten_fruit=True)
    board.place_fruit(state, random.Random(7))
    fruits = _textures(board, GameTexture.FRUIT)
    assert len(fruits) == 1
    assert 1 <= fruits[0].x <= 17 and 1 <= fruits[0].y <= 17
    assert state.is_fruit_placed is True
    assert state.has_head_eaten_fruit is False


def test_place_fruit_never_overwrites_snake():
    for seed in range(30):
        board = Board()
        board.init_snake(SnakeData())
        board.place_fruit(GameState(), random.Random(seed))
        assert len(_textures(board, GameTexture.HEAD)) == 1
        assert len(_textures(board, GameTexture.BODY)) == 1
        assert len(_textures(board, GameTexture.TAIL)) == 1


def test_place_fruit_does_nothing_when_already_placed():
    board = Board()
    state = GameState(is_fruit_placed=True)
    board.place_fruit(state, random.Random(1))
    assert _textures(board, GameTexture.FRUIT) == []


def test_place_fruit_without_room_raises():
    board = Board()
    for cell in board.cells():
        cell.texture = GameTexture.BODY
    with pytest.raises(RuntimeError):
        board.place_fruit(GameState(), random.Random(1))


def test_refresh_restores_start():
    board = Board()
    snake = SnakeData(head=Vec2(12, 12))
    state = GameState(init_movement=True, is_head_pos_updated=True, is_fruit_placed=True)
    board[12, 12].texture = GameTexture.HEAD
    board[12, 12].future_dir = Direction.UP
    board[12, 12].head_changed_direction = True
    board.refresh(snake, state, random.Random(3))
    assert snake.head == Vec2(5, 9)
    assert board[12, 12].future_dir is Direction.NOTCHANGED
    assert board[12, 12].head_changed_direction is False
    assert _textures(board, GameTexture.HEAD) == [Vec2(5, 9)]
    assert len(_textures(board, GameTexture.FRUIT)) == 1
    assert state.init_movement is False
    assert state.is_head_pos_updated is False
    assert state.is_fruit_placed is True