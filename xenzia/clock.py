from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from xenzia.game import SnakeGame, TickResult, Vec2


@dataclass
class ClockUpdate:
    movements: List[TickResult] = field(default_factory=list)
    food_spawns: List[Vec2] = field(default_factory=list)


class SimulationClock:
    """Drives the movement and food ticks of a game at fixed rates.

    The host loop calls ``update`` with elapsed wall time; every tick that
    became due is run in time order, movement before food on ties.
    """

    def __init__(
        self,
        game: SnakeGame,
        movement_step: Optional[float] = None,
        food_step: Optional[float] = None,
    ) -> None:
        self.game = game
        self.movement_step = movement_step if movement_step is not None else game.config.movement_step
        self.food_step = food_step if food_step is not None else game.config.food_step
        if self.movement_step <= 0 or self.food_step <= 0:
            raise ValueError("Tick periods must be positive")
        self.reset()

    def reset(self) -> None:
        self.elapsed = 0.0
        self.next_movement = self.movement_step
        self.next_food = self.food_step

    def update(self, dt: float) -> ClockUpdate:
        if dt < 0:
            raise ValueError(f"Elapsed time cannot be negative: {dt}")
        self.elapsed += dt
        update = ClockUpdate()

        while min(self.next_movement, self.next_food) <= self.elapsed:
            if self.next_movement <= self.next_food:
                update.movements.append(self.game.on_movement_tick())
                self.next_movement += self.movement_step
            else:
                food = self.game.on_food_tick()
                if food is not None:
                    update.food_spawns.append(food)
                self.next_food += self.food_step

        return update
