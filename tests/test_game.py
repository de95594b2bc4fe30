from collections import deque
from dataclasses import replace

import pytest

from snakegrid.bonus import BonusFood
from snakegrid.config import INITIAL_SNAKE, GameConfig
from snakegrid.direction import DIRECTIONS
from snakegrid.game import Game
from snakegrid.grid import in_bounds
from snakegrid.status import GameStatus


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


def make_game(seed: int = 123, **kwargs):
    clock = FakeClock()
    return Game(seed=seed, clock=clock, **kwargs), clock


def test_idle_until_started():
    game, _ = make_game()
    before = game.snapshot()
    assert before.status is GameStatus.IDLE
    game.tick()
    assert game.snapshot() is before


def test_start_runs_and_notifies():
    game, _ = make_game()
    events = []
    game.add_listener(lambda previous, state: events.append((previous, state.status)))
    game.start()
    assert game.status is GameStatus.RUNNING
    assert events == [(GameStatus.IDLE, GameStatus.RUNNING)]


def test_pause_toggle():
    game, _ = make_game()
    game.toggle_pause()
    assert game.status is GameStatus.IDLE

    game.start()
    game.toggle_pause()
    assert game.status is GameStatus.PAUSED
    frozen = game.snapshot()
    game.tick()
    assert game.snapshot().snake == frozen.snake

    game.toggle_pause()
    assert game.status is GameStatus.RUNNING
    game.tick()
    assert game.snapshot().snake[0] == (2, 3)


def test_reversal_request_is_ignored():
    game, _ = make_game()
    game.start()
    game.set_direction(DIRECTIONS["UP"])
    game.tick()
    state = game.snapshot()
    assert state.snake[0] == (2, 3)
    assert state.direction == (0, 1)


def test_latest_accepted_intent_wins():
    game, _ = make_game()
    game.start()
    game.set_direction(DIRECTIONS["LEFT"])
    game.set_direction(DIRECTIONS["RIGHT"])
    game.set_direction(DIRECTIONS["UP"])  # reversal of the current heading, dropped
    game.tick()
    assert game.snapshot().snake[0] == (3, 2)


def test_turns_are_checked_against_last_move():
    game, _ = make_game()
    game.start()
    game.tick()  # heading down, head at (2, 3)
    game.set_direction(DIRECTIONS["RIGHT"])
    game.tick()
    game.set_direction(DIRECTIONS["LEFT"])
    game.tick()
    state = game.snapshot()
    assert state.status is GameStatus.RUNNING
    assert state.snake[0] == (4, 3)


def test_invalid_direction_raises():
    game, _ = make_game()
    with pytest.raises(ValueError):
        game.set_direction((0, 0))
    with pytest.raises(ValueError):
        game.set_direction((2, 0))


def test_wall_ends_game_and_start_resets():
    game, _ = make_game()
    events = []
    game.add_listener(lambda previous, state: events.append(state.status))
    game.start()
    for _ in range(20):
        game.tick()
        if game.status is GameStatus.GAME_OVER:
            break
    over = game.snapshot()
    assert over.status is GameStatus.GAME_OVER
    assert over.snake[0] == (2, 9)
    assert events[-1] is GameStatus.GAME_OVER

    game.tick()
    assert game.snapshot() is over
    game.set_direction(DIRECTIONS["LEFT"])
    game.toggle_pause()
    assert game.snapshot() is over

    game.start()
    state = game.snapshot()
    assert state.status is GameStatus.RUNNING
    assert state.snake == INITIAL_SNAKE
    assert state.direction == (0, 1)
    assert state.score == 0
    assert state.food_count == 0
    assert state.bonus_food is None
    assert state.food not in state.snake


def test_bonus_expires_on_wall_clock_even_when_paused():
    game, clock = make_game()
    game.start()
    game._state = replace(game.snapshot(), bonus_food=BonusFood((7, 0), expires_at=6000))
    game.toggle_pause()

    clock.now = 5999
    assert game.poll().bonus_food is not None
    clock.now = 6000
    state = game.poll()
    assert state.bonus_food is None
    assert state.status is GameStatus.PAUSED


def test_expired_bonus_cannot_be_eaten():
    game, clock = make_game()
    game.start()
    game._state = replace(game.snapshot(), food=(9, 9), bonus_food=BonusFood((2, 3), expires_at=6000))
    clock.now = 6000
    result = game.tick()
    assert not result.ate_bonus
    assert result.state.score == 0
    assert result.state.bonus_food is None
    assert len(result.state.snake) == 2


def test_eaten_bonus_preempts_expiry():
    game, clock = make_game()
    game.start()
    game._state = replace(game.snapshot(), food=(9, 9), bonus_food=BonusFood((2, 3), expires_at=6000))
    clock.now = 200
    result = game.tick()
    assert result.ate_bonus
    assert result.state.score == 5
    clock.now = 7000
    assert game.poll().score == 5
    assert game.snapshot().bonus_food is None


def test_restart_clears_pending_bonus():
    game, clock = make_game()
    game.start()
    game._state = replace(game.snapshot(), bonus_food=BonusFood((7, 0), expires_at=6000))
    game.start()
    assert game.snapshot().bonus_food is None
    clock.now = 6000
    assert game.poll().bonus_food is None


def test_full_board_ends_run():
    config = GameConfig(grid_size=2, initial_snake=((0, 0), (0, 1)), initial_direction=(1, 0))
    game, _ = make_game(config=config)
    game.start()
    game._state = replace(game.snapshot(), snake=((0, 0), (0, 1), (1, 1)), food=(1, 0))
    result = game.tick()
    assert not result.ate_food
    assert game.status is GameStatus.GAME_OVER


def test_removed_listener_is_not_called():
    game, _ = make_game()
    events = []
    listener = lambda previous, state: events.append(state.status)
    game.add_listener(listener)
    game.start()
    game.remove_listener(listener)
    game.toggle_pause()
    assert events == [GameStatus.RUNNING]


def next_move_towards_food(state):
    """First step of a shortest path from the head to the food, avoiding the body."""
    head = state.snake[0]
    blocked = set(state.snake)
    parents = {head: None}
    queue = deque([head])
    while queue:
        cell = queue.popleft()
        if cell == state.food:
            while parents[cell] != head:
                cell = parents[cell]
            return cell[0] - head[0], cell[1] - head[1]
        for dx, dy in DIRECTIONS.values():
            nxt = (cell[0] + dx, cell[1] + dy)
            if in_bounds(nxt) and nxt not in blocked and nxt not in parents:
                parents[nxt] = cell
                queue.append(nxt)
    return None


def test_fifth_food_spawns_bonus_that_expires():
    game, clock = make_game(seed=7)
    game.start()

    for _ in range(500):
        state = game.snapshot()
        if state.food_count == 5:
            break
        move = next_move_towards_food(state)
        assert move is not None
        game.set_direction(move)
        clock.now += 200
        result = game.tick()
        assert result.state.status is GameStatus.RUNNING
        if result.state.food_count < 5:
            assert result.state.bonus_food is None

    state = game.snapshot()
    assert state.food_count == 5
    assert state.score == 5
    assert len(state.snake) == 7
    assert state.bonus_food is not None
    assert state.bonus_food.expires_at == clock.now + 6000
    assert state.bonus_food.position not in state.snake
    assert state.bonus_food.position != state.food

    clock.now = state.bonus_food.expires_at - 1
    assert game.poll().bonus_food is not None
    clock.now = state.bonus_food.expires_at
    after = game.poll()
    assert after.bonus_food is None
    assert after.score == 5
