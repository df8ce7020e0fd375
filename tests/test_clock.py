import pytest

from xenzia.clock import SimulationClock
from xenzia.config import GameConfig
from xenzia.game import SnakeGame


def make_clock(seed=5):
    game = SnakeGame(GameConfig(grid_size=(10, 10), movement_step=0.5, food_step=2.0, seed=seed))
    return game, SimulationClock(game)


def test_movement_ticks_at_fixed_rate():
    game, clock = make_clock()
    update = clock.update(1.0)
    assert len(update.movements) == 2
    assert update.food_spawns == []
    assert game.snake.head == (0, 4)


def test_small_steps_accumulate():
    game, clock = make_clock()
    for _ in range(3):
        assert clock.update(0.125).movements == []
    assert len(clock.update(0.125).movements) == 1


def test_food_tick_runs_on_its_own_slower_rate():
    game, clock = make_clock()
    update = clock.update(2.0)
    assert len(update.movements) == 4
    assert len(update.food_spawns) == 1
    assert game.current_food_position() == update.food_spawns[0]
    assert update.food_spawns[0] not in game.snake.occupied()


def test_food_tick_skipped_while_food_exists():
    game, clock = make_clock()
    game.food = (9, 0)
    update = clock.update(2.0)
    assert update.food_spawns == []
    assert game.current_food_position() == (9, 0)


def test_reset_restarts_schedule():
    game, clock = make_clock()
    clock.update(0.4)
    clock.reset()
    assert clock.update(0.4).movements == []


def test_negative_dt_raises():
    _, clock = make_clock()
    with pytest.raises(ValueError):
        clock.update(-0.1)


def test_movement_runs_before_food_on_same_instant():
    game, clock = make_clock()
    # the fourth movement tick, due together with the food tick at t=2.0, eats this
    game.food = (0, 6)
    update = clock.update(2.0)
    assert update.movements[-1].ate_food
    assert len(update.food_spawns) == 1
    assert game.current_food_position() == update.food_spawns[0]


@pytest.mark.parametrize("kwargs", [{"movement_step": 0}, {"food_step": 0}, {"food_step": -1.0}])
def test_non_positive_periods_raise(kwargs):
    game = SnakeGame(GameConfig(grid_size=(10, 10)))
    with pytest.raises(ValueError):
        SimulationClock(game, **kwargs)
