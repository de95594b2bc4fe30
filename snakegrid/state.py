from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from snakegrid.bonus import BonusFood
from snakegrid.config import DEFAULT_CONFIG, GameConfig
from snakegrid.food import place
from snakegrid.grid import Vec2, in_bounds
from snakegrid.status import GameStatus


# encode_grid channel indices
BODY_CHANNEL = 0
HEAD_CHANNEL = 1
FOOD_CHANNEL = 2
BONUS_CHANNEL = 3

@dataclass(frozen=True)
class GameState:
    """Everything a run owns. Replaced as a whole on every change."""

    snake: Tuple[Vec2, ...]  # head at index 0
    direction: Vec2
    food: Vec2
    bonus_food: Optional[BonusFood]
    score: int
    food_count: int
    status: GameStatus

    @property
    def head(self) -> Vec2:
        return self.snake[0]


def initial_state(
    rng: Optional[random.Random] = None,
    config: GameConfig = DEFAULT_CONFIG,
    status: GameStatus = GameStatus.IDLE,
) -> GameState:
    snake = tuple(config.initial_snake)
    return GameState(
        snake=snake,
        direction=config.initial_direction,
        food=place(set(snake), rng, config.grid_size),
        bonus_food=None,
        score=0,
        food_count=0,
        status=status,
    )


def encode_grid(state: GameState, size: int = DEFAULT_CONFIG.grid_size) -> np.ndarray:
    """Board as a (4, size, size) array: body, head, food, bonus channels."""
    grid = np.zeros((4, size, size), dtype=np.float32)

    for x, y in state.snake:
        if in_bounds((x, y), size):
            grid[BODY_CHANNEL, y, x] = 1.0

    head_x, head_y = state.head
    if in_bounds(state.head, size):
        grid[HEAD_CHANNEL, head_y, head_x] = 1.0

    food_x, food_y = state.food
    grid[FOOD_CHANNEL, food_y, food_x] = 1.0

    if state.bonus_food is not None:
        bonus_x, bonus_y = state.bonus_food.position
        grid[BONUS_CHANNEL, bonus_y, bonus_x] = 1.0

    return grid
