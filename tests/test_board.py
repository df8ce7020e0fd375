import numpy as np
import pytest

from xenzia.board import encode_board, segment_orientations
from xenzia.config import GameConfig
from xenzia.game import SnakeGame


def test_encode_board_channels():
    game = SnakeGame(GameConfig(grid_size=(5, 6), seed=1))
    game.food = (4, 5)
    board = encode_board(game)
    assert board.shape == (3, 6, 5)
    assert board.dtype == np.float32
    assert board[0].sum() == 3
    assert board[0, 0, 0] == 1.0 and board[0, 2, 0] == 1.0
    assert board[1, 2, 0] == 1.0 and board[1].sum() == 1
    assert board[2, 5, 4] == 1.0 and board[2].sum() == 1


def test_encode_board_without_food():
    game = SnakeGame(GameConfig(grid_size=(5, 5)))
    assert encode_board(game)[2].sum() == 0


def test_straight_snake_orientations():
    assert segment_orientations([(0, 2), (0, 1), (0, 0)]) == [
        "head_up",
        "body_vertical",
        "tail_down",
    ]
    assert segment_orientations([(1, 0), (2, 0), (3, 0)]) == [
        "head_left",
        "body_horizontal",
        "tail_right",
    ]


def test_corner_orientations():
    assert segment_orientations([(1, 1), (0, 1), (0, 0)]) == [
        "head_right",
        "body_bottomright",
        "tail_down",
    ]
    assert segment_orientations([(0, 0), (1, 0), (1, 1), (2, 1)]) == [
        "head_left",
        "body_topleft",
        "body_bottomright",
        "tail_right",
    ]


def test_orientations_reject_gaps():
    with pytest.raises(ValueError):
        segment_orientations([(0, 3), (0, 1)])
