from __future__ import annotations

import argparse
import logging

import pygame

from xenzia.clock import SimulationClock
from xenzia.config import CELL_SIZE, FOOD_STEP, GRID_SIZE, MOVEMENT_STEP, GameConfig
from xenzia.game import Direction, SnakeGame
from xenzia.render import Renderer

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake Xenzia")
    parser.add_argument("--grid", type=int, nargs=2, default=(GRID_SIZE, GRID_SIZE))
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE)
    parser.add_argument("--move-step", type=float, default=MOVEMENT_STEP, help="Seconds per movement tick")
    parser.add_argument("--food-step", type=float, default=FOOD_STEP, help="Seconds per food tick")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", action="store_true", help="Log game events")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = GameConfig(
        grid_size=tuple(args.grid),
        movement_step=args.move_step,
        food_step=args.food_step,
        cell_size=args.cell_size,
        seed=args.seed,
    )
    game = SnakeGame(config)
    renderer = Renderer(game)
    clock = SimulationClock(game)
    frame_clock = pygame.time.Clock()

    games = 1
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in KEY_DIRECTIONS:
                    game.set_direction_intent(KEY_DIRECTIONS[event.key])
                elif event.key == pygame.K_r and game.won:
                    game.reset()
                    clock.reset()
                    games += 1

        dt = frame_clock.tick(args.fps) / 1000.0
        update = clock.update(dt)
        games += sum(1 for result in update.movements if result.game_over)
        renderer.draw()

    renderer.close()
    print(f"Games played: {games}  Best score: {game.high_score}")


if __name__ == "__main__":
    main()
