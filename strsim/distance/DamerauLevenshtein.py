"""
strsim.distance.DamerauLevenshtein — unrestricted Damerau-Levenshtein distance.

Transposed substrings may be edited again afterwards, so unlike OSA this is
a true metric and satisfies the triangle inequality.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence

from strsim._utils import (
    DISTANCE_ATTRS,
    NORMALIZED_DISTANCE_ATTRS,
    NORMALIZED_SIMILARITY_ATTRS,
    SIMILARITY_ATTRS,
    add_scorer_attrs,
    distance_cutoff,
    is_none,
    norm_distance_cutoff,
    norm_similarity_cutoff,
    preprocess,
    similarity_cutoff,
)
from strsim.distance.Prefix import split_on_common_prefix


def _damerau_levenshtein(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    _, s1, s2, _ = split_on_common_prefix(s1, s2)
    len1 = len(s1)
    len2 = len(s2)
    if not len1:
        return len2
    if not len2:
        return len1

    # flat (len1 + 2) x (len2 + 2) table; row and column 0 hold a border no
    # real distance reaches, so a missing last occurrence needs no branch
    width = len2 + 2
    max_distance = len1 + len2
    table = [0] * ((len1 + 2) * width)
    table[0] = max_distance
    for i in range(len1 + 1):
        table[(i + 1) * width] = max_distance
        table[(i + 1) * width + 1] = i
    for j in range(len2 + 1):
        table[j + 1] = max_distance
        table[width + j + 1] = j

    last_row: dict[Hashable, int] = {}
    last_row_get = last_row.get

    for i in range(1, len1 + 1):
        ch1 = s1[i - 1]
        db = 0
        row = i * width
        next_row = row + width
        for j in range(1, len2 + 1):
            ch2 = s2[j - 1]
            k = last_row_get(ch2, 0)
            l = db  # noqa: E741

            substitution = table[row + j]
            if ch1 == ch2:
                db = j
            else:
                substitution += 1
            insertion = table[row + j + 1] + 1
            deletion = table[next_row + j] + 1
            transposition = table[k * width + l] + (i - k - 1) + 1 + (j - l - 1)

            table[next_row + j + 1] = min(substitution, insertion, deletion, transposition)

        last_row[ch1] = i

    return table[(len1 + 1) * width + len2 + 1]


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Damerau-Levenshtein distance.

    Parameters
    ----------
    s1 : Sequence[Hashable]
        First string to compare.
    s2 : Sequence[Hashable]
        Second string to compare.
    processor: callable, optional
        Optional callable that is used to preprocess the strings before
        comparing them. Default is None, which deactivates this behaviour.
    score_cutoff : int, optional
        Maximum distance between s1 and s2, that is
        considered as a result. If the distance is bigger than score_cutoff,
        score_cutoff + 1 is returned instead.

    Returns
    -------
    distance : int

    Examples
    --------
    >>> from strsim.distance import DamerauLevenshtein
    >>> DamerauLevenshtein.distance("ca", "abc")
    2
    """
    s1, s2 = preprocess(s1, s2, processor)
    return distance_cutoff(_damerau_levenshtein(s1, s2), score_cutoff)


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the Damerau-Levenshtein similarity, ``max(len1, len2) - distance``."""
    s1, s2 = preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _damerau_levenshtein(s1, s2)
    return similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates ``distance / max(len1, len2)``; 0.0 for two empty sequences."""
    if is_none(s1) or is_none(s2):
        return 1.0

    s1, s2 = preprocess(s1, s2, processor)
    maximum = max(len(s1), len(s2))
    norm_dist = _damerau_levenshtein(s1, s2) / maximum if maximum else 0.0
    return norm_distance_cutoff(norm_dist, score_cutoff)


def normalized_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates ``1 - distance / max(len1, len2)`` in the range [0, 1].

    Two empty sequences are identical and score 1.0.
    """
    if is_none(s1) or is_none(s2):
        return 0.0

    norm_sim = 1.0 - normalized_distance(s1, s2, processor=processor)
    return norm_similarity_cutoff(norm_sim, score_cutoff)


add_scorer_attrs(distance, DISTANCE_ATTRS)
add_scorer_attrs(similarity, SIMILARITY_ATTRS)
add_scorer_attrs(normalized_distance, NORMALIZED_DISTANCE_ATTRS)
add_scorer_attrs(normalized_similarity, NORMALIZED_SIMILARITY_ATTRS)

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
