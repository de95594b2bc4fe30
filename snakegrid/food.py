"""Random placement of food on free cells."""

from __future__ import annotations

import random
from typing import AbstractSet, Optional

from snakegrid.config import GRID_SIZE
from snakegrid.grid import Vec2


class BoardFull(RuntimeError):
    """Raised when every cell is occupied and no food can be placed."""


def place(
    occupied: AbstractSet[Vec2],
    rng: Optional[random.Random] = None,
    size: int = GRID_SIZE,
) -> Vec2:
    """Pick a uniformly random cell that is not in ``occupied``.

    Uses rejection sampling; ``occupied`` may contain cells outside the
    board, only the in-bounds ones count towards a full board.
    """
    rng = rng or random.Random()
    taken = sum(1 for x, y in occupied if 0 <= x < size and 0 <= y < size)
    if taken >= size * size:
        raise BoardFull(f"no free cell left on a {size}x{size} board")

    while True:
        pos = (rng.randrange(size), rng.randrange(size))
        if pos not in occupied:
            return pos
