"""
strsim.distance — edit distance and similarity metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    Prefix,
)

__all__ = [
    "DamerauLevenshtein",
    "Hamming",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "OSA",
    "Prefix",
]
