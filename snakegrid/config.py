from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# ----- Board -----
GRID_SIZE = 10

# ----- Timing (ms) -----
TICK_MS = 200
BONUS_LIFETIME_MS = 6000

# ----- Scoring -----
FOOD_SCORE = 1
BONUS_SCORE = 5
BONUS_EVERY = 5  # a bonus appears on every 5th normal food

# ----- Start position -----
INITIAL_SNAKE: Tuple[Tuple[int, int], ...] = ((2, 2), (2, 1))
INITIAL_DIRECTION: Tuple[int, int] = (0, 1)


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    bonus_every: int = BONUS_EVERY
    bonus_lifetime_ms: int = BONUS_LIFETIME_MS
    food_score: int = FOOD_SCORE
    bonus_score: int = BONUS_SCORE
    initial_snake: Tuple[Tuple[int, int], ...] = INITIAL_SNAKE
    initial_direction: Tuple[int, int] = INITIAL_DIRECTION


DEFAULT_CONFIG = GameConfig()
