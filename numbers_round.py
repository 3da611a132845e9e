"""
Numbers Round Generator
-----------------------
Deals the six tiles for a round and rolls its three-digit target.

Usage (example):
    from rng import create_rng
    from numbers_round import generate_round, roll_target
    rng = create_rng(42)
    round_spec = generate_round(2, rng)
    first, second, third, target = roll_target(rng)
"""

import itertools
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

import config
from errors import InvalidConfiguration
from numbers_solver import compute_best_solution

logger = logging.getLogger(__name__)

LARGE = "large"
SMALL = "small"
RESULT = "result"


@dataclass(frozen=True)
class Tile:
    id: str
    value: int
    kind: str
    revealed: bool = False


class TargetRoll(NamedTuple):
    first: int
    second: int
    third: int
    target: int


@dataclass(frozen=True)
class RoundSpec:
    tiles: tuple
    large_count: int
    seed: object = None

    @property
    def values(self) -> list:
        return [tile.value for tile in self.tiles]

    def to_payload(self, target: int) -> dict:
        return {"tiles": self.values, "target": target, "seed": self.seed}


def _draw(rng, pool, count: int, label: str) -> list:
    if count > len(pool):
        raise InvalidConfiguration(f"the {label} pool has {len(pool)} tiles, cannot draw {count}")
    return rng.shuffle(pool)[:count]


def generate_round(large_count: int, rng) -> RoundSpec:
    """Draw `large_count` large tiles and fill the rest of the six from the small pool."""
    if not isinstance(large_count, int) or isinstance(large_count, bool):
        raise InvalidConfiguration(f"large count must be a whole number, got {large_count!r}")
    if not 0 <= large_count <= config.MAX_LARGE:
        raise InvalidConfiguration(f"large count must be between 0 and {config.MAX_LARGE}, got {large_count}")

    small_count = config.TILE_COUNT - large_count
    larges = _draw(rng, config.LARGE_POOL, large_count, LARGE)
    smalls = _draw(rng, config.SMALL_POOL, small_count, SMALL)

    drawn = rng.shuffle([(n, LARGE) for n in larges] + [(n, SMALL) for n in smalls])
    counter = itertools.count(1)
    tiles = tuple(Tile(id=f"t{next(counter)}", value=value, kind=kind) for value, kind in drawn)

    logger.debug("Dealt %s large round: %s", large_count, [t.value for t in tiles])
    return RoundSpec(tiles=tiles, large_count=large_count, seed=rng.seed)


def roll_target(rng) -> TargetRoll:
    """Roll the target digit by digit. The digits are final once returned."""
    first = rng.next_int(1, 9)
    second = rng.next_int(0, 9)
    third = rng.next_int(0, 9)
    return TargetRoll(first, second, third, 100 * first + 10 * second + third)


def random_large_count(rng) -> int:
    return rng.next_int(0, config.MAX_LARGE)


def new_solvable_round(rng, large_count: Optional[int] = None, attempts: Optional[int] = None):
    """
    Deal rounds until the solver can hit the target exactly.

    Returns (round_spec, target_roll, best). A large count of None picks a
    fresh one for every deal. After `attempts` deals without an exact answer
    the last deal is returned with its closest answer.
    """
    attempts = config.SOLVABLE_ROUND_ATTEMPTS if attempts is None else attempts
    if attempts < 1:
        raise InvalidConfiguration(f"attempts must be at least 1, got {attempts}")

    for attempt in range(1, attempts + 1):
        count = random_large_count(rng) if large_count is None else large_count
        round_spec = generate_round(count, rng)
        target_roll = roll_target(rng)
        best = compute_best_solution(round_spec.values, target_roll.target)
        if best.diff == 0:
            logger.debug("Solvable round found after %d deal(s)", attempt)
            return round_spec, target_roll, best

    logger.warning("No exactly solvable round in %d deals; keeping the last one (off by %d)", attempts, best.diff)
    return round_spec, target_roll, best
