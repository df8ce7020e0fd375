from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

WINDOW_SIZE = 700
GRID_SIZE = 28
CELL_SIZE = WINDOW_SIZE // GRID_SIZE
MOVEMENT_STEP = 1.0 / 9.0  # seconds per movement tick
FOOD_STEP = 2.0  # seconds per food tick
BACKGROUND = (175, 215, 70)


@dataclass
class GameConfig:
    grid_size: Tuple[int, int] = (GRID_SIZE, GRID_SIZE)
    movement_step: float = MOVEMENT_STEP
    food_step: float = FOOD_STEP
    origin: Tuple[int, int] = (0, 0)  # tail cell of the canonical snake
    initial_length: int = 3
    cell_size: int = CELL_SIZE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        width, height = self.grid_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be positive, got {width}x{height}")
        if self.initial_length < 2:
            raise ValueError("Snake needs at least 2 segments")
        ox, oy = self.origin
        if not (0 <= ox < width and 0 <= oy and oy + self.initial_length <= height):
            raise ValueError(
                f"Snake of length {self.initial_length} at {self.origin} "
                f"does not fit a {width}x{height} grid"
            )
        if self.movement_step <= 0 or self.food_step <= 0:
            raise ValueError("Tick periods must be positive")
