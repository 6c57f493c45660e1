"""
Gibberish pipeline: lines -> TransitionTable -> RankedNeighbors -> walk.

Ties the normalizer, transition counting, neighbor ranking and the random
walker together for the CLI and the HTTP router.
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from .ranking import RankedNeighbors
from .transitions import GranularityMode, TransitionTable
from .walker import DEFAULT_THRESHOLD, walk

logger = logging.getLogger(__name__)


def parse_mode(mode) -> GranularityMode:
    """Accept a GranularityMode or its string value."""
    return GranularityMode(mode)


def train_from_lines(lines: Iterable[str], mode=GranularityMode.WORD) -> RankedNeighbors:
    """Count transitions over ``lines`` and rank every token's neighbors."""
    mode = parse_mode(mode)
    table = TransitionTable.from_lines(lines, mode)
    ranked = RankedNeighbors.build(table)
    logger.debug(
        f"[Gibberish] Trained {mode.value} model: {len(ranked)} tokens, "
        f"{table.total_transitions} transitions"
    )
    return ranked


def seed_token(seed: str, mode=GranularityMode.WORD) -> str:
    """Reduce a seed to one unit of the given mode (first character in char mode)."""
    if parse_mode(mode) == GranularityMode.CHAR:
        return seed[:1]
    words = seed.split()
    return words[0] if words else ""


def generate(
    ranked: RankedNeighbors,
    seed: str,
    count: int,
    threshold: Optional[float] = DEFAULT_THRESHOLD,
    mode=GranularityMode.WORD,
    rng: Optional[random.Random] = None,
    stubbornness: int = 0,
) -> List[str]:
    """
    Walk ``ranked`` from ``seed`` and return at most ``count`` tokens.

    Fewer tokens are returned when the walk reaches a token without
    neighbors; an unknown seed yields an empty list.
    """
    tokens = walk(
        ranked,
        seed_token(seed, mode),
        count,
        threshold=threshold,
        rng=rng,
        stubbornness=stubbornness,
    )
    if len(tokens) < count:
        logger.debug(f"[Gibberish] Walk ended early after {len(tokens)}/{count} tokens")
    return tokens


def render(tokens: Iterable[str], mode=GranularityMode.WORD) -> str:
    """Join words with spaces, or concatenate characters."""
    if parse_mode(mode) == GranularityMode.CHAR:
        return "".join(tokens)
    return " ".join(tokens)
