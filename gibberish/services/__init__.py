"""
Gibberish services: normalization, transition counting, neighbor ranking
and the rank-biased random walk.
"""
from .normalizer import normalize, normalize_char
from .transitions import GranularityMode, TransitionTable, cyclic_pairs, tokenize
from .ranking import RankedNeighbors, build_ranked_neighbors
from .walker import (
    DEFAULT_THRESHOLD,
    MAX_DRAW_ATTEMPTS,
    MAX_SELF_LOOP_ATTEMPTS,
    RandomWalker,
    clamp_threshold,
    walk,
)
from .gibberish import generate, render, train_from_lines

__all__ = [
    "normalize",
    "normalize_char",
    "GranularityMode",
    "TransitionTable",
    "cyclic_pairs",
    "tokenize",
    "RankedNeighbors",
    "build_ranked_neighbors",
    "DEFAULT_THRESHOLD",
    "MAX_DRAW_ATTEMPTS",
    "MAX_SELF_LOOP_ATTEMPTS",
    "RandomWalker",
    "clamp_threshold",
    "walk",
    "generate",
    "render",
    "train_from_lines",
]
