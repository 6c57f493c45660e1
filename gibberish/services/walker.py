"""
Rank-biased random walk over RankedNeighbors.

Each step draws x in [0, 1), rejecting draws below ``threshold`` so the
accepted value leans toward 1, then picks ``candidates[floor(x * n)]``.
Since candidates are ordered by ascending count, this favors the most
frequent neighbors without building a cumulative distribution.

Two loops are bounded by fixed ceilings:
- threshold rejection: after MAX_DRAW_ATTEMPTS draws the last one is used
- self-loop avoidance: after MAX_SELF_LOOP_ATTEMPTS picks the walker takes
  the highest-ranked candidate other than ``current``, or the self-loop
  itself when that is the only neighbor
"""
from __future__ import annotations

import logging
import math
import random
from itertools import islice
from typing import Iterator, Mapping, Optional, Sequence

from .normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.75
MAX_DRAW_ATTEMPTS = 30
MAX_SELF_LOOP_ATTEMPTS = 30


def clamp_threshold(value: Optional[float]) -> float:
    """Return ``value`` if it lies in [0, 1], otherwise DEFAULT_THRESHOLD."""
    if value is None:
        return DEFAULT_THRESHOLD
    try:
        value = float(value)
    except (TypeError, ValueError):
        return DEFAULT_THRESHOLD
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        logger.debug(f"[Walker] Threshold {value} out of range, using {DEFAULT_THRESHOLD}")
        return DEFAULT_THRESHOLD
    return value


def clamp_stubbornness(value: Optional[int]) -> int:
    if not value or value < 0:
        return 0
    return min(int(value), MAX_SELF_LOOP_ATTEMPTS - 1)


class RandomWalker(Iterator[str]):
    """
    Unbounded lazy token stream starting after ``seed``.

    The seed is only the initial ``current`` and is never emitted. Once
    ``current`` has no entry in ``neighbors`` the walker is exhausted for good.
    The walker holds ``neighbors`` without copying it; many walkers can share
    one RankedNeighbors.
    """

    def __init__(
        self,
        neighbors: Mapping[str, Sequence[str]],
        seed: str,
        threshold: Optional[float] = DEFAULT_THRESHOLD,
        rng: Optional[random.Random] = None,
        stubbornness: int = 0,
    ):
        """
        Args:
            neighbors: RankedNeighbors (or any token -> ascending list mapping)
            seed: Starting token, normalized before use
            threshold: Rejection threshold in [0, 1]; out-of-range falls back to 0.75
            rng: Random source, defaults to a fresh ``random.Random()``
            stubbornness: Picks to reject unconditionally before accepting one
        """
        self.neighbors = neighbors
        self.current = normalize(seed)
        self.threshold = clamp_threshold(threshold)
        self.rng = rng if rng is not None else random.Random()
        self.stubbornness = clamp_stubbornness(stubbornness)
        self.exhausted = False

    def _draw(self) -> float:
        x = self.rng.random()
        for _ in range(MAX_DRAW_ATTEMPTS - 1):
            if x >= self.threshold:
                break
            x = self.rng.random()
        return x

    def _fallback(self, candidates: Sequence[str]) -> str:
        for candidate in reversed(candidates):
            if candidate != self.current:
                return candidate
        return candidates[-1]

    def __iter__(self) -> "RandomWalker":
        return self

    def __next__(self) -> str:
        if self.exhausted:
            raise StopIteration

        attempts = 0
        while True:
            x = self._draw()
            candidates = self.neighbors.get(self.current)
            if not candidates:
                self.exhausted = True
                raise StopIteration

            attempts += 1
            picked = candidates[min(int(x * len(candidates)), len(candidates) - 1)]

            if attempts >= MAX_SELF_LOOP_ATTEMPTS:
                if picked == self.current:
                    picked = self._fallback(candidates)
                break
            if attempts <= self.stubbornness:
                continue
            if picked != self.current:
                break

        self.current = picked
        return picked


def walk(
    neighbors: Mapping[str, Sequence[str]],
    seed: str,
    count: int,
    threshold: Optional[float] = DEFAULT_THRESHOLD,
    rng: Optional[random.Random] = None,
    stubbornness: int = 0,
) -> list:
    """Take at most ``count`` tokens from a fresh walker."""
    walker = RandomWalker(neighbors, seed, threshold=threshold, rng=rng, stubbornness=stubbornness)
    return list(islice(walker, max(0, count)))
