"""One-tick state transition for the snake simulation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from snakegrid import bonus
from snakegrid.config import DEFAULT_CONFIG, GameConfig
from snakegrid.food import place
from snakegrid.grid import Vec2, add_pos, in_bounds
from snakegrid.state import GameState
from snakegrid.status import GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    state: GameState
    ate_food: bool = False
    ate_bonus: bool = False
    collision: bool = False
    bonus_spawned: bool = False


def step(
    state: GameState,
    direction: Optional[Vec2] = None,
    now_ms: int = 0,
    rng: Optional[random.Random] = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> StepResult:
    """Advance ``state`` by one tick.

    ``direction`` is the heading already filtered by the direction gate;
    ``None`` keeps the current one. ``now_ms`` stamps the deadline of a
    bonus spawned on this tick. Raises ``BoardFull`` if food cannot be
    placed after the snake grows.
    """
    if state.status is not GameStatus.RUNNING:
        return StepResult(state=state)

    heading = direction or state.direction
    new_head = add_pos(state.head, heading)

    if not in_bounds(new_head, config.grid_size) or new_head in state.snake:
        logger.info("Snake crashed at %s with score %d", new_head, state.score)
        return StepResult(
            state=replace(state, status=GameStatus.GAME_OVER),
            collision=True,
        )

    body = (new_head,) + state.snake

    if new_head == state.food:
        occupied = set(body)
        if state.bonus_food is not None:
            occupied.add(state.bonus_food.position)
        food = place(occupied, rng, config.grid_size)
        food_count = state.food_count + 1
        bonus_food = state.bonus_food
        spawned = False
        if bonus.should_spawn(food_count, config.bonus_every):
            bonus_food = bonus.spawn(
                body, food, now_ms, rng, config.bonus_lifetime_ms, config.grid_size
            )
            spawned = True
        return StepResult(
            state=replace(
                state,
                snake=body,
                direction=heading,
                food=food,
                bonus_food=bonus_food,
                score=state.score + config.food_score,
                food_count=food_count,
            ),
            ate_food=True,
            bonus_spawned=spawned,
        )

    if state.bonus_food is not None and new_head == state.bonus_food.position:
        logger.info("Bonus food eaten at %s", new_head)
        return StepResult(
            state=replace(
                state,
                snake=body,
                direction=heading,
                bonus_food=None,
                score=state.score + config.bonus_score,
            ),
            ate_bonus=True,
        )

    return StepResult(state=replace(state, snake=body[:-1], direction=heading))
