"""Bonus food: spawned on every Nth food, gone after a fixed lifetime."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from snakegrid.config import BONUS_EVERY, BONUS_LIFETIME_MS, GRID_SIZE
from snakegrid.food import place
from snakegrid.grid import Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BonusFood:
    position: Vec2
    expires_at: int  # ms on the game clock

    def expired(self, now_ms: int) -> bool:
        return now_ms >= self.expires_at


def should_spawn(food_count: int, every: int = BONUS_EVERY) -> bool:
    return food_count > 0 and food_count % every == 0


def spawn(
    snake: Iterable[Vec2],
    food: Vec2,
    now_ms: int,
    rng: Optional[random.Random] = None,
    lifetime_ms: int = BONUS_LIFETIME_MS,
    size: int = GRID_SIZE,
) -> BonusFood:
    """Place a bonus away from the snake and the current food.

    The returned instance carries its own deadline, so handing it to the
    state replaces any previous bonus together with its expiry.
    """
    occupied = set(snake)
    occupied.add(food)
    position = place(occupied, rng, size)
    logger.info("Bonus food spawned at %s (expires at %d ms)", position, now_ms + lifetime_ms)
    return BonusFood(position=position, expires_at=now_ms + lifetime_ms)


def expire(bonus: Optional[BonusFood], now_ms: int) -> Optional[BonusFood]:
    """Return ``None`` once the bonus deadline has passed."""
    if bonus is not None and bonus.expired(now_ms):
        logger.info("Bonus food at %s expired", bonus.position)
        return None
    return bonus
