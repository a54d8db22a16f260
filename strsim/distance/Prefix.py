"""
strsim.distance.Prefix — common-prefix splitting and the Prefix metric.

The edit-distance engines call :func:`split_on_common_prefix` before building
their tables: a shared leading run is never edited, so dropping it shrinks the
dynamic program without changing the result.
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


def common_prefix_length(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    """Number of leading elements shared by *s1* and *s2*."""
    count = 0
    for ch1, ch2 in zip(s1, s2):
        if ch1 != ch2:
            break
        count += 1
    return count


def split_on_common_prefix(
    s1: Sequence[Hashable], s2: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable], Sequence[Hashable], int]:
    """Split both sequences after their longest common prefix.

    Returns ``(prefix, s1_suffix, s2_suffix, prefix_len)``, where
    ``prefix_len`` counts scalar values so callers need not re-count.

    >>> split_on_common_prefix("kitten", "kites")
    ('kit', 'ten', 'es', 3)
    """
    prefix_len = common_prefix_length(s1, s2)
    return s1[:prefix_len], s1[prefix_len:], s2[prefix_len:], prefix_len


def similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the prefix similarity, i.e. the length of the common prefix.

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
        If the similarity is smaller than score_cutoff, 0 is returned instead.

    Returns
    -------
    similarity : int
    """
    s1, s2 = preprocess(s1, s2, processor)
    return similarity_cutoff(common_prefix_length(s1, s2), score_cutoff)


def distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the prefix distance, ``max(len1, len2) - similarity``."""
    s1, s2 = preprocess(s1, s2, processor)
    dist = max(len(s1), len(s2)) - common_prefix_length(s1, s2)
    return distance_cutoff(dist, score_cutoff)


def normalized_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    *,
    processor: Callable[..., Sequence[Hashable]] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the prefix distance divided by ``max(len1, len2)``.

    Two empty sequences have a normalized distance of 0.
    """
    if is_none(s1) or is_none(s2):
        return 1.0

    s1, s2 = preprocess(s1, s2, processor)
    maximum = max(len(s1), len(s2))
    if not maximum:
        return 0.0
    norm_dist = (maximum - common_prefix_length(s1, s2)) / maximum
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
    "common_prefix_length",
    "split_on_common_prefix",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
