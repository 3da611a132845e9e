"""
Seeded Random Source
--------------------
Every random choice in a round (tile draw, large/small mix, target digits)
goes through one `RandomSource`, so a round can be replayed from its seed.

Usage (example):
    from rng import create_rng
    rng = create_rng(42)
    rng.next_int(1, 9)
    rng.shuffle([1, 1, 2, 2])
"""

import logging
import os
import random

logger = logging.getLogger(__name__)


def mint_seed() -> str:
    """Fresh seed from the OS entropy source."""
    return os.urandom(8).hex()


class RandomSource:
    def __init__(self, seed=None):
        if seed is None:
            seed = mint_seed()
        if not isinstance(seed, (int, str)) or isinstance(seed, bool):
            raise TypeError(f"seed must be an int or str, got {type(seed).__name__}")
        self.seed = seed
        self._random = random.Random(seed)

    def __repr__(self):
        return f"RandomSource(seed={self.seed!r})"

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def shuffle(self, items) -> list:
        """Fisher–Yates shuffle into a new list; `items` is left untouched."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.next_int(0, i)
            out[i], out[j] = out[j], out[i]
        return out


def create_rng(seed=None) -> RandomSource:
    rng = RandomSource(seed)
    logger.debug("Created random source with seed %r", rng.seed)
    return rng
