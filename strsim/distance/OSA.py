"""
strsim.distance.OSA — optimal string alignment (restricted edit) distance.

Like Damerau-Levenshtein, but every substring may be edited at most once, so
a transposed pair cannot be edited further. This makes OSA violate the
triangle inequality: ``OSA("ca", "abc") == 3`` while the unrestricted
distance is 2.
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


def _osa(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    _, s1, s2, _ = split_on_common_prefix(s1, s2)
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    len2 = len(s2)
    prev_two = list(range(len2 + 1))
    prev = list(range(len2 + 1))
    curr = [0] * (len2 + 1)

    for i, ch1 in enumerate(s1):
        curr[0] = i + 1
        for j, ch2 in enumerate(s2):
            cost = ch1 != ch2
            dist = min(curr[j] + 1, prev[j + 1] + 1, prev[j] + cost)
            # transpositions never reach back into the trimmed prefix
            if i and j and cost and ch1 == s2[j - 1] and ch2 == s1[i - 1]:
                dist = min(dist, prev_two[j - 1] + 1)
            curr[j + 1] = dist

        prev_two, prev, curr = prev, curr, prev_two

    return prev[len2]


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the optimal string alignment (OSA) distance.

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
    >>> from strsim.distance import OSA
    >>> OSA.distance("ca", "abc")
    3
    """
    s1, s2 = preprocess(s1, s2, processor)
    return distance_cutoff(_osa(s1, s2), score_cutoff)


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the OSA similarity, ``max(len1, len2) - distance``."""
    s1, s2 = preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _osa(s1, s2)
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
    norm_dist = _osa(s1, s2) / maximum if maximum else 0.0
    return norm_distance_cutoff(norm_dist, score_cutoff)


def normalized_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates ``1 - normalized_distance``."""
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
