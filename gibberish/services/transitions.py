"""
Transition table: counts how often each token is immediately followed by
another. Pairing is cyclic within each input line, so the last unit of a
line is paired with the first one instead of being dropped.
"""
from __future__ import annotations

from collections import Counter, defaultdict
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Tuple

from .normalizer import normalize


class GranularityMode(str, Enum):
    """Whether tokens are whitespace-delimited words or single characters."""
    WORD = "word"
    CHAR = "char"


def tokenize(line: str, mode: str = GranularityMode.WORD) -> List[str]:
    """Split a line into normalized units for the given granularity mode."""
    line = line.rstrip("\r\n")
    if mode == GranularityMode.CHAR:
        units = list(line)
    else:
        units = line.split()
    return [normalize(unit) for unit in units]


def cyclic_pairs(units: List[str]) -> Iterator[Tuple[str, str]]:
    """Pair each unit with its successor, wrapping the last back to the first."""
    if not units:
        return iter(())
    return zip(units, units[1:] + units[:1])


class TransitionTable:
    """
    Token -> (neighbor -> count) mapping.

    Counts only ever grow. A key exists only once at least one neighbor
    has been observed for it.
    """

    def __init__(self):
        self.counts: Dict[str, Counter] = defaultdict(Counter)

    def update(self, token: str, neighbor: str):
        """Record one observation of ``neighbor`` following ``token``."""
        self.counts[token][neighbor] += 1

    def ingest_line(self, line: str, mode: str = GranularityMode.WORD) -> int:
        """
        Add every cyclic pair of a line to the table.

        Embedded line breaks start a new line; pairs never cross them.

        Returns:
            Number of transitions recorded
        """
        recorded = 0
        for part in line.splitlines():
            for token, neighbor in cyclic_pairs(tokenize(part, mode)):
                self.update(token, neighbor)
                recorded += 1
        return recorded

    @classmethod
    def from_lines(cls, lines: Iterable[str], mode: str = GranularityMode.WORD) -> "TransitionTable":
        table = cls()
        for line in lines:
            table.ingest_line(line, mode)
        return table

    def neighbors(self, token: str) -> Dict[str, int]:
        return dict(self.counts.get(token, {}))

    def count(self, token: str, neighbor: str) -> int:
        return self.counts.get(token, {}).get(neighbor, 0)

    @property
    def total_transitions(self) -> int:
        return sum(sum(c.values()) for c in self.counts.values())

    def items(self):
        return self.counts.items()

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __len__(self) -> int:
        return len(self.counts)
