#!/usr/bin/env python3
"""
Countdown Numbers Game Solver
-----------------------------
Provides `compute_best_solution(tiles, target)`, which returns the reachable
value closest to the target together with one expression that makes it.

Every subset of the tiles is searched, so the answer is the true best, even
when it uses fewer than all six tiles.

Usage (example):
    from numbers_solver import compute_best_solution
    best = compute_best_solution([100, 75, 50, 25, 6, 3], 952)
    print(best.value, best.diff, best.expr)
"""

import logging
import time
from typing import NamedTuple, Optional

import config
from rules import format_expression, is_positive_int, legal_steps

logger = logging.getLogger(__name__)


class BestSolution(NamedTuple):
    value: int
    expr: str
    diff: int


def _reachable_sets(tiles, target):
    """
    Build the value -> expression table for every tile subset.

    reachable[mask] maps each value the tiles in `mask` can make to the
    first expression found for it. Masks are built in increasing order, so
    each split reads two finished, smaller masks. Returns the table and, if
    the target turned up on the way, the mask it was found in.
    """
    n = len(tiles)
    full = 1 << n
    limit = config.MAX_REACHABLE_VALUE
    steps_for, fmt = legal_steps, format_expression
    reachable = [None] * full
    reachable[0] = {}

    for i, value in enumerate(tiles):
        reachable[1 << i] = {value: str(value)}

    for mask in range(1, full):
        if reachable[mask] is not None:
            if target in reachable[mask]:
                return reachable, mask
            continue

        out = {}
        a = (mask - 1) & mask
        while a > 0:
            b = mask ^ a
            if a <= b:
                for va, ea in reachable[a].items():
                    for vb, eb in reachable[b].items():
                        for value, op, swapped in steps_for(va, vb):
                            if value in out or not 0 < value <= limit:
                                continue
                            out[value] = fmt(eb, op, ea) if swapped else fmt(ea, op, eb)
            a = (a - 1) & mask

        reachable[mask] = out
        if target in out:
            return reachable, mask

    return reachable, None


def compute_best_solution(tiles, target: int) -> Optional[BestSolution]:
    """
    Closest reachable value to `target` using any subset of `tiles`.

    Ties go to the value found first (lowest mask, then insertion order).
    Returns None for an empty tile list.
    """
    tiles = list(tiles)
    if not tiles:
        return None
    for value in tiles:
        if not is_positive_int(value) or value > config.MAX_REACHABLE_VALUE:
            raise ValueError(f"tile values must be whole numbers in 1..{config.MAX_REACHABLE_VALUE}, got {value!r}")

    started = time.perf_counter()
    reachable, hit_mask = _reachable_sets(tiles, target)

    if hit_mask is not None:
        best = BestSolution(target, reachable[hit_mask][target], 0)
    else:
        best = None
        for table in reachable[1:]:
            for value, expr in table.items():
                diff = abs(target - value)
                if best is None or diff < best.diff:
                    best = BestSolution(value, expr, diff)

    logger.debug(
        "Solved %s -> %s: best %s (diff %s) in %.1f ms",
        tiles, target, best.value, best.diff,
        (time.perf_counter() - started) * 1000.0,
    )
    return best


def solve_numbers(target, numbers):
    """
    Solve a Countdown numbers puzzle.
    Returns dict: { target, difference, results: [(value, expression)] }
    """
    best = compute_best_solution(numbers, target)
    if best is None:
        return {"target": target, "difference": None, "results": []}
    return {
        "target": target,
        "difference": best.diff,
        "results": [(best.value, best.expr)],
    }


# Optional: run standalone for testing
if __name__ == "__main__":
    target = 952
    numbers = [100, 75, 50, 25, 6, 3]
    best = compute_best_solution(numbers, target)
    print(f"Closest result differs from {target} by {best.diff}:\n")
    print(f"{best.value} = {best.expr}")
