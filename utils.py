# utils.py
import random
from typing import Optional, Tuple

import constants as const


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Returns an independent random source, seeded when a seed is given."""
    return random.Random(seed)


def step_delta(
    start: Tuple[int, int], end: Tuple[int, int]
) -> Tuple[int, int]:
    """Signed (row, col) difference from start to end."""
    return end[0] - start[0], end[1] - start[1]


def direction_of(start: Tuple[int, int], end: Tuple[int, int]) -> Optional[str]:
    """
    Names the unit move taking start to end (one of the const.DIR_* values).
    Returns None if the two points are not exactly one step apart on one axis.
    """
    delta = step_delta(start, end)
    for direction, dir_delta in const.DIRECTION_DELTAS.items():
        if dir_delta == delta:
            return direction
    return None


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    dr, dc = step_delta(a, b)
    return abs(dr) + abs(dc)
