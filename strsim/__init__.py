"""
strsim — string similarity metrics in pure Python.

Hamming, Jaro, Jaro-Winkler, Levenshtein, optimal string alignment and
Damerau-Levenshtein. A "character" is one unicode scalar value: no
grapheme clustering, case folding or normalization is applied unless a
``processor`` is passed explicitly.
"""

from __future__ import annotations

import logging

from . import distance, metrics, process, utils
from .errors import DifferentLengthArgs, StrSimError
from .metrics import (
    damerau_levenshtein,
    hamming,
    jaro,
    jaro_winkler,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    osa_distance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"

__all__ = [
    "distance",
    "metrics",
    "process",
    "utils",
    "DifferentLengthArgs",
    "StrSimError",
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "__version__",
]
