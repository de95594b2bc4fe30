from __future__ import annotations

import logging
from typing import Optional, Tuple

from snakegrid.grid import Vec2

logger = logging.getLogger(__name__)

DIRECTIONS = {
    "UP": (0, -1),
    "RIGHT": (1, 0),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
}

SWIPE_THRESHOLD_PX = 30


def is_direction(vec: Vec2) -> bool:
    return tuple(vec) in DIRECTIONS.values()


def opposite(a: Vec2, b: Vec2) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def accept(current: Vec2, requested: Vec2) -> Vec2:
    """Return the heading to use after ``requested`` arrives.

    Both are unit grid vectors, so a request on the current axis is either
    a repeat (kept as is) or a reversal into the neck (dropped).
    """
    if opposite(current, requested):
        logger.debug("Rejected reversal %s while heading %s", requested, current)
        return current
    return requested


def swipe_direction(
    start: Tuple[int, int],
    end: Tuple[int, int],
    threshold: int = SWIPE_THRESHOLD_PX,
) -> Optional[Vec2]:
    """Map a drag from ``start`` to ``end`` (pixels) onto a grid direction.

    The longer axis wins; drags shorter than ``threshold`` on that axis
    give ``None``. Screen y grows downwards, like the board.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) > abs(dy):
        if dx > threshold:
            return DIRECTIONS["RIGHT"]
        if dx < -threshold:
            return DIRECTIONS["LEFT"]
        return None
    if dy > threshold:
        return DIRECTIONS["DOWN"]
    if dy < -threshold:
        return DIRECTIONS["UP"]
    return None
