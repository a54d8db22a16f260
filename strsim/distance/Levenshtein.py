"""strsim.distance.Levenshtein"""

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


def _levenshtein(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    _, s1, s2, _ = split_on_common_prefix(s1, s2)
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # one row of the DP table, column 0 is implied by the outer index
    cache = list(range(1, len(s2) + 1))
    result = 0
    for i, ch1 in enumerate(s1):
        result = i + 1
        diag = i
        for j, ch2 in enumerate(s2):
            substitution = diag + (ch1 != ch2)
            diag = cache[j]
            result = min(result + 1, diag + 1, substitution)
            cache[j] = result

    return result


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the minimum number of insertions, deletions, and substitutions
    required to change one sequence into the other.

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
    >>> from strsim.distance import Levenshtein
    >>> Levenshtein.distance("kitten", "sitting")
    3
    """
    s1, s2 = preprocess(s1, s2, processor)
    return distance_cutoff(_levenshtein(s1, s2), score_cutoff)


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the Levenshtein similarity, ``max(len1, len2) - distance``."""
    s1, s2 = preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _levenshtein(s1, s2)
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
    norm_dist = _levenshtein(s1, s2) / maximum if maximum else 0.0
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

    Examples
    --------
    >>> from strsim.distance import Levenshtein
    >>> round(Levenshtein.normalized_similarity("kitten", "sitting"), 5)
    0.57143
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
