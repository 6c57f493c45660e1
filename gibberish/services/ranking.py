"""
Ranked neighbors: a read-only view derived once from a TransitionTable.

Each token maps to its distinct neighbors ordered by ascending count, so the
least frequent neighbor comes first and the most frequent comes last. The
walker biases its picks toward the tail of these lists; reversing the order
here without reversing that bias changes what gets generated.
"""
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from .transitions import TransitionTable


class RankedNeighbors(Mapping):
    """Immutable token -> tuple of neighbors (ascending by observed count)."""

    def __init__(self, ranked: Mapping[str, Tuple[str, ...]]):
        self._ranked = MappingProxyType({token: tuple(nbrs) for token, nbrs in ranked.items()})

    @classmethod
    def build(cls, table: TransitionTable) -> "RankedNeighbors":
        ranked: Dict[str, Tuple[str, ...]] = {}
        for token, next_counts in table.items():
            # sorted() is stable: ties keep the table's insertion order
            ordered = sorted(next_counts.items(), key=lambda item: item[1])
            ranked[token] = tuple(neighbor for neighbor, _ in ordered)
        return cls(ranked)

    def __getitem__(self, token: str) -> Tuple[str, ...]:
        return self._ranked[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranked)

    def __len__(self) -> int:
        return len(self._ranked)

    def __repr__(self) -> str:
        return f"RankedNeighbors({dict(self._ranked)!r})"

    def to_dict(self) -> Dict[str, list]:
        return {token: list(nbrs) for token, nbrs in self._ranked.items()}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent, sort_keys=True)


def build_ranked_neighbors(table: TransitionTable) -> RankedNeighbors:
    return RankedNeighbors.build(table)
