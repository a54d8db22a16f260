"""strsim.distance.Jaro"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence

from strsim._utils import (
    NORMALIZED_DISTANCE_ATTRS,
    NORMALIZED_SIMILARITY_ATTRS,
    add_scorer_attrs,
    is_none,
    norm_distance_cutoff,
    norm_similarity_cutoff,
    preprocess,
)


def _jaro(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> float:
    len1 = len(s1)
    len2 = len(s2)

    if (len1 == 0) != (len2 == 0):
        return 0.0
    if s1 == s2:
        return 1.0
    # max(1, 1) // 2 - 1 would give a negative window
    if len1 == 1 and len2 == 1:
        return 0.0

    search_range = max(len1, len2) // 2 - 1
    s2_consumed = [False] * len2
    matches = 0
    transpositions = 0
    last_match_index = 0

    for i, ch1 in enumerate(s1):
        lower = max(0, i - search_range)
        upper = min(len2, i + search_range + 1)
        for j in range(lower, upper):
            if not s2_consumed[j] and ch1 == s2[j]:
                s2_consumed[j] = True
                matches += 1
                if j < last_match_index:
                    transpositions += 1
                last_match_index = j
                break

    if not matches:
        return 0.0

    return (matches / len1 + matches / len2 + (matches - transpositions) / matches) / 3.0


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro similarity.

    Characters match when they are equal and no further apart than
    ``max(len1, len2) // 2 - 1`` positions; each character of s2 can be
    matched once. A match found before the previous match position counts
    as a transposition.

    Parameters
    ----------
    s1 : Sequence[Hashable]
        First string to compare.
    s2 : Sequence[Hashable]
        Second string to compare.
    processor: callable, optional
        Optional callable that is used to preprocess the strings before
        comparing them. Default is None, which deactivates this behaviour.
    score_cutoff : float, optional
        Optional argument for a score threshold as a float between 0 and 1.0.
        For similarity < score_cutoff 0 is returned instead.

    Returns
    -------
    similarity : float
        similarity between s1 and s2 as a float between 0 and 1.0.
        Exactly one empty input gives 0.0, two empty inputs give 1.0.

    Examples
    --------
    >>> from strsim.distance import Jaro
    >>> round(Jaro.similarity("martha", "marhta"), 3)
    0.944
    """
    if is_none(s1) or is_none(s2):
        return 0.0

    s1, s2 = preprocess(s1, s2, processor)
    return norm_similarity_cutoff(_jaro(s1, s2), score_cutoff)


def normalized_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Same as :func:`similarity`, the Jaro score is already normalized."""
    return similarity(s1, s2, processor=processor, score_cutoff=score_cutoff)


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the Jaro distance, ``1 - similarity``."""
    if is_none(s1) or is_none(s2):
        return 1.0

    s1, s2 = preprocess(s1, s2, processor)
    return norm_distance_cutoff(1.0 - _jaro(s1, s2), score_cutoff)


def normalized_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Same as :func:`distance`."""
    return distance(s1, s2, processor=processor, score_cutoff=score_cutoff)


add_scorer_attrs(distance, NORMALIZED_DISTANCE_ATTRS)
add_scorer_attrs(similarity, NORMALIZED_SIMILARITY_ATTRS)
add_scorer_attrs(normalized_distance, NORMALIZED_DISTANCE_ATTRS)
add_scorer_attrs(normalized_similarity, NORMALIZED_SIMILARITY_ATTRS)

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
