"""
strsim._utils — helpers shared by the metric modules and process.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Sequence
from typing import Any, NamedTuple


class ScorerAttrs(NamedTuple):
    """Score range a scorer advertises to :mod:`strsim.process`."""

    optimal_score: float
    worst_score: float

    @property
    def lowest_score_best(self) -> bool:
        return self.optimal_score < self.worst_score


# Attribute presets, one per kind of scorer function.
DISTANCE_ATTRS = ScorerAttrs(optimal_score=0, worst_score=math.inf)
SIMILARITY_ATTRS = ScorerAttrs(optimal_score=math.inf, worst_score=0)
NORMALIZED_DISTANCE_ATTRS = ScorerAttrs(optimal_score=0.0, worst_score=1.0)
NORMALIZED_SIMILARITY_ATTRS = ScorerAttrs(optimal_score=1.0, worst_score=0.0)


def add_scorer_attrs(func: Callable[..., Any], attrs: ScorerAttrs) -> None:
    func._strsim_scorer = attrs  # type: ignore[attr-defined]


def get_scorer_attrs(func: Callable[..., Any]) -> ScorerAttrs:
    """Return the advertised range of *func*, defaulting to a similarity in [0, 1]."""
    return getattr(func, "_strsim_scorer", NORMALIZED_SIMILARITY_ATTRS)


def is_none(s: Any) -> bool:
    if s is None:
        return True
    # NaN cells coming out of data frames
    return isinstance(s, float) and math.isnan(s)


def preprocess(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    processor: Callable[..., Sequence[Hashable]] | None,
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    if processor is not None:
        return processor(s1), processor(s2)
    return s1, s2


def distance_cutoff(dist: int, score_cutoff: int | None) -> int:
    return dist if (score_cutoff is None or dist <= score_cutoff) else score_cutoff + 1


def similarity_cutoff(sim: int, score_cutoff: int | None) -> int:
    return sim if (score_cutoff is None or sim >= score_cutoff) else 0


def norm_distance_cutoff(norm_dist: float, score_cutoff: float | None) -> float:
    return norm_dist if (score_cutoff is None or norm_dist <= score_cutoff) else 1.0


def norm_similarity_cutoff(norm_sim: float, score_cutoff: float | None) -> float:
    return norm_sim if (score_cutoff is None or norm_sim >= score_cutoff) else 0.0
