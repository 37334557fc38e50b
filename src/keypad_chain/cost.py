"""
Recursive cost evaluation through a chain of directional controllers.

Depth 0 is the numeric keypad on the door. Every depth above it is a robot
standing at a directional keypad, and `max_depth` is the keypad the operator
presses directly. The cost of pressing `cur` after `prev` at some depth only
depends on (depth, prev, cur), so that triple is the cache key.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import DepthError
from .paths import enumerate_paths
from .topology import DIRECTIONAL_CONTROLLER, NUMERIC_CONTROLLER, Controller, Move

logger = logging.getLogger(__name__)

CacheKey = tuple[int, str, str]


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class CostEvaluator:
    """
    Minimal operator presses needed to produce a sequence at a given depth.

    One evaluator owns one cache. Passing `lock` makes it safe to call
    `minimal_cost` from several threads at once; values for a key are the
    same whichever thread computes them, so inserts never overwrite.
    """

    def __init__(
        self,
        max_depth: int,
        numeric: Controller = NUMERIC_CONTROLLER,
        directional: Controller = DIRECTIONAL_CONTROLLER,
        cache: Optional[dict[CacheKey, int]] = None,
        lock: Optional[threading.Lock] = None,
    ):
        if max_depth < 0:
            raise DepthError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self.numeric = numeric
        self.directional = directional
        self.cache: dict[CacheKey, int] = {} if cache is None else cache
        self.lock = lock
        self.stats = CacheStats()

    @property
    def cache_size(self) -> int:
        return len(self.cache)

    def controller_at(self, depth: int) -> Controller:
        """Numeric keypad at depth 0, directional everywhere else."""
        self._check_depth(depth)
        return self.numeric if depth == 0 else self.directional

    def minimal_cost(self, sequence: str, depth: int = 0) -> int:
        """
        Minimal operator presses to make the arm at `depth` type `sequence`.

        The arm starts resting on the activate key. An empty sequence costs 0.

        Raises:
            DepthError: if depth is outside 0..max_depth
            UnknownSymbolError: if the sequence uses a key the depth's
                controller does not have
        """
        self._check_depth(depth)
        total = 0
        prev = Move.ACTIVATE.value
        for cur in sequence:
            total += self.pair_cost(prev, cur, depth)
            prev = cur
        return total

    def pair_cost(self, prev: str, cur: str, depth: int) -> int:
        """Cost of pressing `cur` at `depth` when the arm rests on `prev`."""
        key = (depth, prev, cur)
        cached = self.cache.get(key)
        if cached is not None:
            self._count(hit=True)
            return cached

        self._count(hit=False)
        candidates = self.candidates(prev, cur, depth)
        if depth == self.max_depth:
            cost = min(len(path) for path in candidates)
        else:
            cost = min(self.minimal_cost(path, depth + 1) for path in candidates)

        return self._store(key, cost)

    def candidates(self, prev: str, cur: str, depth: int) -> frozenset[str]:
        return enumerate_paths(self.controller_at(depth), prev, cur)

    def _count(self, hit: bool) -> None:
        if self.lock is None:
            self._bump(hit)
            return
        with self.lock:
            self._bump(hit)

    def _bump(self, hit: bool) -> None:
        if hit:
            self.stats.hits += 1
        else:
            self.stats.misses += 1

    def _store(self, key: CacheKey, cost: int) -> int:
        if self.lock is None:
            return self.cache.setdefault(key, cost)
        with self.lock:
            return self.cache.setdefault(key, cost)

    def _check_depth(self, depth: int) -> None:
        if not 0 <= depth <= self.max_depth:
            raise DepthError(f"depth {depth} outside 0..{self.max_depth}")


def minimal_cost(sequence: str, depth: int, max_depth: int) -> int:
    """One-off evaluation with a fresh cache."""
    return CostEvaluator(max_depth).minimal_cost(sequence, depth)
