from __future__ import annotations

from typing import Iterator, Tuple

from snakegrid.config import GRID_SIZE

Vec2 = Tuple[int, int]


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def in_bounds(pos: Vec2, size: int = GRID_SIZE) -> bool:
    x, y = pos
    return 0 <= x < size and 0 <= y < size


def all_cells(size: int = GRID_SIZE) -> Iterator[Vec2]:
    for y in range(size):
        for x in range(size):
            yield x, y
