"""strsim.distance.Hamming"""

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
from strsim.errors import DifferentLengthArgs


def _hamming(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    if len(s1) != len(s2):
        raise DifferentLengthArgs(len(s1), len(s2))
    return sum(ch1 != ch2 for ch1, ch2 in zip(s1, s2))


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Hamming distance, the number of positions at which the
    two sequences differ.

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

    Raises
    ------
    DifferentLengthArgs
        If s1 and s2 do not contain the same number of scalar values.

    Examples
    --------
    >>> from strsim.distance import Hamming
    >>> Hamming.distance("hamming", "hammers")
    3
    """
    s1, s2 = preprocess(s1, s2, processor)
    return distance_cutoff(_hamming(s1, s2), score_cutoff)


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the Hamming similarity, ``len - distance``."""
    s1, s2 = preprocess(s1, s2, processor)
    sim = len(s1) - _hamming(s1, s2)
    return similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates ``distance / len`` in the range [0, 1]."""
    if is_none(s1) or is_none(s2):
        return 1.0

    s1, s2 = preprocess(s1, s2, processor)
    dist = _hamming(s1, s2)
    norm_dist = dist / len(s1) if s1 else 0.0
    return norm_distance_cutoff(norm_dist, score_cutoff)


def normalized_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates ``1 - normalized_distance`` in the range [0, 1]."""
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
