"""
Numbers Round Play Session
--------------------------
Holds the working tiles of one round while a player combines them, and
settles the round when they lock in an answer or run out of time.

Every step goes through `rules.apply_operation` before anything changes, so
a rejected step leaves the tiles exactly as they were.

Usage (example):
    from rng import create_rng
    from numbers_game import NumbersGame
    game = NumbersGame.start(create_rng(7), large_count=2)
    game.reveal_all()
    a, b = game.tiles[:2]
    tile = game.operate(a.id, b.id, "+")
    result = game.lock_in(tile.id)
"""

import itertools
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Optional

from errors import InvalidSelection
from numbers_round import RESULT, Tile, generate_round, roll_target
from numbers_solver import BestSolution, compute_best_solution
from rules import apply_operation, score_for_diff

logger = logging.getLogger(__name__)


@dataclass
class RoundRecord:
    ts: int
    tiles: list
    target: int
    steps: list
    user_value: Optional[int]
    best_value: Optional[int]
    points: int

    def to_dict(self) -> dict:
        return {
            "ts": self.ts,
            "tiles": list(self.tiles),
            "target": self.target,
            "steps": list(self.steps),
            "userValue": self.user_value,
            "bestValue": self.best_value,
            "points": self.points,
        }


@dataclass
class RoundResult:
    value: Optional[int]
    diff: Optional[int]
    points: int
    best: Optional[BestSolution]
    record: RoundRecord = field(repr=False)


class NumbersGame:
    def __init__(self, round_spec, target_roll):
        self.round = round_spec
        self.target_roll = target_roll
        self.target = target_roll.target
        self.tiles = list(round_spec.tiles)
        self.steps = []
        self.result = None
        self._undo = [(list(self.tiles), [])]
        self._ids = itertools.count(len(round_spec.tiles) + 1)

    @classmethod
    def start(cls, rng, large_count: int):
        return cls(generate_round(large_count, rng), roll_target(rng))

    @property
    def ended(self) -> bool:
        return self.result is not None

    def reveal_all(self):
        self.tiles = [replace(tile, revealed=True) for tile in self.tiles]
        if len(self._undo) == 1:
            self._undo[0] = (list(self.tiles), [])

    def tile(self, tile_id: str) -> Tile:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        raise InvalidSelection(f"no tile {tile_id!r} in play")

    def _playable(self, tile_id: str) -> Tile:
        if self.ended:
            raise InvalidSelection("the round has ended")
        tile = self.tile(tile_id)
        if not tile.revealed:
            raise InvalidSelection(f"tile {tile_id!r} is not revealed yet")
        return tile

    # --- Player actions ---
    def operate(self, first_id: str, second_id: str, op) -> Tile:
        """Combine two tiles into one result tile."""
        if first_id == second_id:
            raise InvalidSelection("choose two different tiles")
        first = self._playable(first_id)
        second = self._playable(second_id)

        step = apply_operation(first.value, second.value, op)

        made = Tile(id=f"t{next(self._ids)}", value=step.value, kind=RESULT, revealed=True)
        self.tiles = [t for t in self.tiles if t.id not in (first_id, second_id)] + [made]
        self.steps.append(step.expr)
        self._undo.append((list(self.tiles), list(self.steps)))
        return made

    def undo(self) -> bool:
        if self.ended or len(self._undo) < 2:
            return False
        self._undo.pop()
        tiles, steps = self._undo[-1]
        self.tiles, self.steps = list(tiles), list(steps)
        return True

    def reset(self) -> bool:
        if self.ended or len(self._undo) < 2:
            return False
        del self._undo[1:]
        tiles, steps = self._undo[0]
        self.tiles, self.steps = list(tiles), list(steps)
        return True

    # --- Ending the round ---
    def _finish(self, value: Optional[int]) -> RoundResult:
        best = compute_best_solution(self.round.values, self.target)
        if value is None:
            diff, points = None, 0
        else:
            diff = abs(self.target - value)
            points = score_for_diff(diff)
        record = RoundRecord(
            ts=int(time.time() * 1000),
            tiles=self.round.values,
            target=self.target,
            steps=list(self.steps),
            user_value=value,
            best_value=best.value if best else None,
            points=points,
        )
        self.result = RoundResult(value=value, diff=diff, points=points, best=best, record=record)
        logger.info("Round over: target %s, value %s, best %s, %s points",
                    self.target, value, record.best_value, points)
        return self.result

    def lock_in(self, tile_id: str) -> RoundResult:
        tile = self._playable(tile_id)
        return self._finish(tile.value)

    def time_up(self) -> RoundResult:
        if self.ended:
            raise InvalidSelection("the round has ended")
        return self._finish(None)
