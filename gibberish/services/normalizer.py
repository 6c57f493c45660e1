"""
Token normalization.

Every code point is folded with NFKD compatibility decomposition followed by
lowercasing, keeping only the first resulting code point. Full-width,
accented and upper-case variants of a letter collapse to one token.
"""
from __future__ import annotations

import unicodedata


def normalize_char(ch: str) -> str:
    """Fold a single code point to its canonical form."""
    folded = unicodedata.normalize("NFKD", ch).lower()
    return folded[0] if folded else ch


def normalize(unit: str) -> str:
    """
    Fold a textual unit (character or word) code point by code point.

    Args:
        unit: A single character or a whitespace-free word

    Returns:
        Canonical form with the same number of code points as ``unit``
    """
    return "".join(normalize_char(ch) for ch in unit)
