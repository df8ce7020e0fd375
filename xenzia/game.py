from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Deque, Iterable, Iterator, List, Optional, Set, Tuple

from xenzia.config import GameConfig

logger = logging.getLogger(__name__)

Vec2 = Tuple[int, int]


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


class Direction(Enum):
    # y grows upwards
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Vec2:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other: Direction) -> bool:
        return self.opposite is other


class Collision(Enum):
    SELF = "self"
    BOUNDARY = "boundary"


@dataclass(frozen=True)
class GridConfig:
    width: int
    height: int

    @property
    def cells(self) -> int:
        return self.width * self.height

    def contains(self, pos: Vec2) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height


class Snake:
    """Ordered body segments, head first, plus the heading applied last tick."""

    def __init__(self, segments: Iterable[Vec2], direction: Direction = Direction.UP) -> None:
        self.segments: Deque[Vec2] = deque(segments)
        if len(self.segments) < 2:
            raise ValueError("Snake needs at least 2 segments")
        self.direction = direction

    @classmethod
    def canonical(cls, origin: Vec2 = (0, 0), length: int = 3) -> Snake:
        """Vertical snake with its tail on ``origin``, facing up."""
        ox, oy = origin
        return cls(((ox, oy + i) for i in reversed(range(length))), Direction.UP)

    @property
    def head(self) -> Vec2:
        return self.segments[0]

    @property
    def tail(self) -> Vec2:
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.segments)

    def occupied(self) -> Set[Vec2]:
        return set(self.segments)

    def advance(self, direction: Direction, grow: bool = False) -> Vec2:
        """Shift the body one cell along ``direction`` without any checks.

        Every segment takes its predecessor's old cell. With ``grow`` the old
        tail cell is kept, so the body is one segment longer.
        """
        new_head = add_pos(self.head, direction.delta)
        self.direction = direction
        self.segments.appendleft(new_head)
        if not grow:
            self.segments.pop()
        return new_head


class DirectionIntent:
    """Latched heading for the next movement tick.

    Proposals are validated against the direction applied on the last tick,
    never against the pending value, so two quick turns cannot chain into a
    reversal.
    """

    def __init__(self, initial: Direction = Direction.UP) -> None:
        self.applied = initial
        self.pending = initial

    def set(self, proposed: Direction) -> bool:
        if proposed.is_reverse_of(self.applied):
            logger.debug("Ignoring reversal %s while moving %s", proposed.name, self.applied.name)
            return False
        self.pending = proposed
        return True

    def consume(self) -> Direction:
        self.applied = self.pending
        return self.applied

    def reset(self, direction: Direction = Direction.UP) -> None:
        self.applied = direction
        self.pending = direction


def resolve_direction(current: Direction, proposed: Direction) -> Direction:
    return current if proposed.is_reverse_of(current) else proposed


def next_head(snake: Snake, direction: Direction) -> Vec2:
    return add_pos(snake.head, resolve_direction(snake.direction, direction).delta)


def step(snake: Snake, direction: Direction, grow: bool = False) -> Tuple[Snake, Vec2]:
    """Advance ``snake`` in place and return it with its new head.

    A reversal of the current heading is replaced by the current heading.
    """
    direction = resolve_direction(snake.direction, direction)
    new_head = snake.advance(direction, grow=grow)
    return snake, new_head


def check_collision(snake: Snake, grid: GridConfig) -> Optional[Collision]:
    head = snake.head
    if not grid.contains(head):
        return Collision.BOUNDARY
    if head in islice(snake.segments, 1, None):
        return Collision.SELF
    return None


class FoodSpawner:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.random = random.Random(seed)

    def spawn(self, occupied: Set[Vec2], grid: GridConfig) -> Optional[Vec2]:
        """Rejection-sample a free cell; ``None`` when the grid is full."""
        taken = sum(1 for pos in occupied if grid.contains(pos))
        if taken >= grid.cells:
            return None
        while True:
            cell = (self.random.randrange(grid.width), self.random.randrange(grid.height))
            if cell not in occupied:
                return cell


@dataclass
class TickResult:
    head: Vec2
    segments: List[Vec2]
    ate_food: bool
    game_over: bool
    collision: Optional[Collision] = None
    won: bool = False
    score: int = 0


class SnakeGame:
    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.grid = GridConfig(*self.config.grid_size)
        self.spawner = FoodSpawner(self.config.seed)

        self.snake = Snake.canonical(self.config.origin, self.config.initial_length)
        self.intent = DirectionIntent()
        self.food: Optional[Vec2] = None
        self.score = 0
        self.high_score = 0
        self.won = False

        self.reset()

    def reset(self) -> None:
        self.snake = Snake.canonical(self.config.origin, self.config.initial_length)
        self.intent.reset(Direction.UP)
        self.food = None
        self.score = 0
        self.won = False

    def set_direction_intent(self, direction: Direction) -> bool:
        return self.intent.set(direction)

    def current_food_position(self) -> Optional[Vec2]:
        return self.food

    def on_movement_tick(self) -> TickResult:
        if self.won:
            return self._result(ate_food=False, game_over=False)

        direction = self.intent.consume()
        ate_food = self.food is not None and next_head(self.snake, direction) == self.food
        step(self.snake, direction, grow=ate_food)

        collision = check_collision(self.snake, self.grid)
        if collision is not None:
            final_score = self.score
            logger.info("Game over (%s collision) with score %d", collision.value, final_score)
            self.reset()
            return self._result(ate_food=False, game_over=True, collision=collision, score=final_score)

        if ate_food:
            self.food = None
            self.score += 1
            self.high_score = max(self.high_score, self.score)
            if len(self.snake) >= self.grid.cells:
                self.won = True
                logger.info("Snake fills the grid, game won with score %d", self.score)

        return self._result(ate_food=ate_food, game_over=False)

    def on_food_tick(self) -> Optional[Vec2]:
        if self.won or self.food is not None:
            return None

        food = self.spawner.spawn(self.snake.occupied(), self.grid)
        if food is None:
            self.won = True
            logger.info("No free cell for food, game won with score %d", self.score)
            return None

        self.food = food
        logger.debug("Food spawned at %s", food)
        return food

    def _result(
        self,
        ate_food: bool,
        game_over: bool,
        collision: Optional[Collision] = None,
        score: Optional[int] = None,
    ) -> TickResult:
        return TickResult(
            head=self.snake.head,
            segments=list(self.snake),
            ate_food=ate_food,
            game_over=game_over,
            collision=collision,
            won=self.won,
            score=self.score if score is None else score,
        )
