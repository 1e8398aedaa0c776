"""
physics/noise.py - Seeded 1D gradient noise.

Smooth variation bounded by [-1, 1] for the wind model. The
permutation table is shuffled once from a linear congruential sequence
and never changes afterwards, so a seed always replays the same wind.
"""

from __future__ import annotations
from typing import Tuple
import math

TABLE_SIZE = 256

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF


def build_permutation(seed: int) -> Tuple[int, ...]:
    """Fisher-Yates shuffle of 0..255 driven by an LCG, doubled to 512 entries."""
    table = list(range(TABLE_SIZE))
    for i in range(TABLE_SIZE - 1, 0, -1):
        seed = (seed * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        j = seed % (i + 1)
        table[i], table[j] = table[j], table[i]
    return tuple(table + table)


def fade(t: float) -> float:
    """Quintic fade 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def grad(hash_value: int, x: float) -> float:
    return x if hash_value & 1 == 0 else -x


class NoiseGenerator:
    """1D gradient noise with a fixed permutation table."""

    def __init__(self, seed: int = 42):
        self.seed = int(seed)
        self._permutation = build_permutation(self.seed)

    @property
    def permutation(self) -> Tuple[int, ...]:
        return self._permutation

    def noise1d(self, x: float) -> float:
        floor_x = math.floor(x)
        xi = floor_x & 255
        xf = x - floor_x

        u = fade(xf)
        a = self._permutation[xi]
        b = self._permutation[xi + 1]

        ga = grad(a, xf)
        gb = grad(b, xf - 1)
        return ga + u * (gb - ga)
