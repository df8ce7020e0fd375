from __future__ import annotations

from typing import List, Sequence

import numpy as np

from xenzia.game import SnakeGame, Vec2

_SIDE_NAMES = {
    (0, 1): "up",
    (0, -1): "down",
    (-1, 0): "left",
    (1, 0): "right",
}


def encode_board(game: SnakeGame) -> np.ndarray:
    """3-channel board: body, head, food. Row index is the y coordinate."""
    h, w = game.grid.height, game.grid.width
    # Channel 0: every segment
    # Channel 1: head only
    # Channel 2: food
    board = np.zeros((3, h, w), dtype=np.float32)

    for x, y in game.snake:
        if 0 <= x < w and 0 <= y < h:
            board[0, y, x] = 1.0

    head_x, head_y = game.snake.head
    if 0 <= head_x < w and 0 <= head_y < h:
        board[1, head_y, head_x] = 1.0

    if game.food is not None:
        food_x, food_y = game.food
        board[2, food_y, food_x] = 1.0

    return board


def _side(frm: Vec2, to: Vec2) -> str:
    delta = (to[0] - frm[0], to[1] - frm[1])
    try:
        return _SIDE_NAMES[delta]
    except KeyError:
        raise ValueError(f"Segments {frm} and {to} are not adjacent") from None


def segment_orientations(segments: Sequence[Vec2]) -> List[str]:
    """Sprite name for every segment, derived from its neighbours.

    Head and tail point away from the body (``head_up``, ``tail_down``).
    Straight pieces are ``body_vertical``/``body_horizontal``; corners are
    named after the two sides they connect, e.g. ``body_topleft``.
    """
    if len(segments) < 2:
        raise ValueError("Need at least 2 segments")

    names = ["head_" + _side(segments[1], segments[0])]
    for i in range(1, len(segments) - 1):
        sides = {_side(segments[i], segments[i - 1]), _side(segments[i], segments[i + 1])}
        if sides == {"up", "down"}:
            names.append("body_vertical")
        elif sides == {"left", "right"}:
            names.append("body_horizontal")
        else:
            vertical = "top" if "up" in sides else "bottom"
            horizontal = "left" if "left" in sides else "right"
            names.append(f"body_{vertical}{horizontal}")
    names.append("tail_" + _side(segments[-2], segments[-1]))
    return names
