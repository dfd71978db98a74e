"""
Phase-keyed spawn pattern libraries.

Each library turns the current phase into an ordered list of
``(lane_index, step_index)`` pairs. ``step_index`` is later multiplied by
the spawner's pattern spacing and applied along the runner's forward axis.

Patterns built from fixed lane tables drop entries that do not fit the
configured lane count instead of remapping them, so patterns thin out
silently on narrow roads.
"""

from __future__ import annotations

import random
from typing import Iterable, Protocol

from .constants import COIN_COMPLEX_LANES, COIN_DIAMOND_LANES, OBSTACLE_COMPLEX_LANES
from .models import PatternStep


def keep_in_range(steps: Iterable[PatternStep], number_of_lanes: int) -> list[PatternStep]:
    """Drop steps whose lane does not exist, preserving order."""
    return [(lane, step) for lane, step in steps if 0 <= lane < number_of_lanes]


def draw_count(rng, min_count: int, max_count: int) -> int:
    """Uniform pattern size; an inverted range collapses to ``min_count``."""
    return rng.randint(min_count, max(min_count, max_count))


class PatternLibrary(Protocol):
    def generate(self, phase: int, number_of_lanes: int, min_count: int, max_count: int,
                 rng: random.Random | None = None) -> list[PatternStep]: ...


class CoinPatterns:
    """Coin layouts: line (1), zigzag (2), diamond (3), complex (4+)."""

    def generate(self, phase: int, number_of_lanes: int, min_count: int, max_count: int,
                 rng: random.Random | None = None) -> list[PatternStep]:
        rng = rng or random
        if phase <= 1:
            return self.line(number_of_lanes, draw_count(rng, min_count, max_count), rng)
        if phase == 2:
            return self.zigzag(number_of_lanes, draw_count(rng, min_count, max_count))
        if phase == 3:
            return self.diamond(number_of_lanes)
        return self.complex(number_of_lanes, draw_count(rng, min_count, max_count))

    def line(self, number_of_lanes: int, count: int,
             rng: random.Random | None = None) -> list[PatternStep]:
        if number_of_lanes <= 0:
            return []
        lane = (rng or random).randrange(number_of_lanes)
        return [(lane, i) for i in range(count)]

    def zigzag(self, number_of_lanes: int, count: int) -> list[PatternStep]:
        if number_of_lanes <= 0:
            return []
        return [(i % number_of_lanes, i) for i in range(count)]

    def diamond(self, number_of_lanes: int) -> list[PatternStep]:
        return keep_in_range(((lane, i) for i, lane in enumerate(COIN_DIAMOND_LANES)),
                             number_of_lanes)

    def complex(self, number_of_lanes: int, count: int) -> list[PatternStep]:
        table = COIN_COMPLEX_LANES
        return keep_in_range(((table[i % len(table)], i) for i in range(count)),
                             number_of_lanes)


class ObstaclePatterns:
    """Obstacle layouts: row (1), alternating (2), wall (3), complex (4+)."""

    def generate(self, phase: int, number_of_lanes: int, min_count: int, max_count: int,
                 rng: random.Random | None = None) -> list[PatternStep]:
        rng = rng or random
        if phase <= 1:
            return self.row(number_of_lanes, draw_count(rng, min_count, max_count), rng)
        if phase == 2:
            return self.alternating(number_of_lanes)
        if phase == 3:
            return self.wall(number_of_lanes)
        # Whole table every time; obstacle bursts ignore the drawn count.
        return self.complex(number_of_lanes)

    def row(self, number_of_lanes: int, count: int,
            rng: random.Random | None = None) -> list[PatternStep]:
        """``count`` side-by-side obstacles in adjacent lanes, capped at the lane count."""
        count = min(count, number_of_lanes)
        if count <= 0:
            return []
        start = (rng or random).randint(0, number_of_lanes - count)
        return [(start + i, 0) for i in range(count)]

    def alternating(self, number_of_lanes: int) -> list[PatternStep]:
        return [(lane, 0) for lane in range(0, number_of_lanes, 2)]

    def wall(self, number_of_lanes: int) -> list[PatternStep]:
        return [(lane, 0) for lane in range(number_of_lanes)]

    def complex(self, number_of_lanes: int) -> list[PatternStep]:
        return keep_in_range(((lane, i) for i, lane in enumerate(OBSTACLE_COMPLEX_LANES)),
                             number_of_lanes)
