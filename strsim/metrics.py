"""
strsim.metrics — one flat function per metric.

Thin aliases over :mod:`strsim.distance`; the keyword-only ``processor`` and
``score_cutoff`` options of the metric modules are available here too.
"""

from __future__ import annotations

from .distance.DamerauLevenshtein import (
    distance as damerau_levenshtein,
    normalized_similarity as normalized_damerau_levenshtein,
)
from .distance.Hamming import distance as hamming
from .distance.Jaro import similarity as jaro
from .distance.JaroWinkler import similarity as jaro_winkler
from .distance.Levenshtein import (
    distance as levenshtein,
    normalized_similarity as normalized_levenshtein,
)
from .distance.OSA import distance as osa_distance

__all__ = [
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
]
