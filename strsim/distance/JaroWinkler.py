"""strsim.distance.JaroWinkler"""

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
from strsim.distance.Jaro import _jaro
from strsim.distance.Prefix import common_prefix_length


def _jaro_winkler(
    s1: Sequence[Hashable], s2: Sequence[Hashable], prefix_weight: float
) -> float:
    if not 0.0 <= prefix_weight <= 1.0:
        raise ValueError(f"prefix_weight must be between 0.0 and 1.0, got {prefix_weight}")

    sim = _jaro(s1, s2)
    # the prefix is not capped at four characters
    prefix_len = common_prefix_length(s1, s2)
    sim += prefix_weight * prefix_len * (1.0 - sim)
    return min(sim, 1.0)


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro-Winkler similarity.

    The Jaro similarity is boosted by ``prefix_weight`` for every element of
    the common prefix, without limit on the prefix length. The result is
    clamped to 1.0.

    Parameters
    ----------
    s1 : Sequence[Hashable]
        First string to compare.
    s2 : Sequence[Hashable]
        Second string to compare.
    prefix_weight : float, optional
        Weight used for the common prefix of the two strings.
        Has to be between 0 and 1. Default is 0.1.
    processor: callable, optional
        Optional callable that is used to preprocess the strings before
        comparing them. Default is None, which deactivates this behaviour.
    score_cutoff : float, optional
        Optional argument for a score threshold as a float between 0 and 1.0.
        For similarity < score_cutoff 0 is returned instead.

    Returns
    -------
    similarity : float
        similarity between s1 and s2 as a float between 0 and 1.0

    Raises
    ------
    ValueError
        If prefix_weight is outside the range [0.0, 1.0].

    Examples
    --------
    >>> from strsim.distance import JaroWinkler
    >>> round(JaroWinkler.similarity("cheeseburger", "cheese fries"), 3)
    0.911
    """
    if is_none(s1) or is_none(s2):
        return 0.0

    s1, s2 = preprocess(s1, s2, processor)
    return norm_similarity_cutoff(_jaro_winkler(s1, s2, prefix_weight), score_cutoff)


def normalized_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Same as :func:`similarity`."""
    return similarity(
        s1, s2, prefix_weight=prefix_weight, processor=processor, score_cutoff=score_cutoff
    )


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the Jaro-Winkler distance, ``1 - similarity``."""
    if is_none(s1) or is_none(s2):
        return 1.0

    s1, s2 = preprocess(s1, s2, processor)
    norm_dist = 1.0 - _jaro_winkler(s1, s2, prefix_weight)
    return norm_distance_cutoff(norm_dist, score_cutoff)


def normalized_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Same as :func:`distance`."""
    return distance(
        s1, s2, prefix_weight=prefix_weight, processor=processor, score_cutoff=score_cutoff
    )


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
