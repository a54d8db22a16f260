"""
strsim.process — apply a metric across a collection of candidate strings.

Every helper here is a plain loop over the metric functions in
:mod:`strsim.distance`; the metrics are pure, so callers that want
parallelism can split *choices* across threads or processes themselves.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Any

from ._utils import get_scorer_attrs, is_none

logger = logging.getLogger(__name__)

_Result = tuple[Any, Any, Hashable]


def _resolve_scorer(scorer: Callable[..., Any] | None) -> Callable[..., Any]:
    if scorer is not None:
        return scorer

    from .distance import JaroWinkler

    return JaroWinkler.similarity


def _iter_choices(choices: Iterable[Any] | Mapping[Hashable, Any]) -> Iterator[tuple[Hashable, Any]]:
    """Yield ``(key, choice)``: the mapping key for mappings, the position otherwise."""
    if isinstance(choices, Mapping):
        yield from choices.items()
    else:
        yield from enumerate(choices)


def _passes_cutoff(score: Any, score_cutoff: float | None, lowest_score_best: bool) -> bool:
    if score_cutoff is None:
        return True
    if lowest_score_best:
        return score <= score_cutoff
    return score >= score_cutoff


def against(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
) -> list[Any]:
    """Score *query* against every element of *choices*.

    Returns one score per choice, in input order. Errors raised by the
    scorer (e.g. :class:`~strsim.errors.DifferentLengthArgs` from Hamming)
    propagate to the caller.

    >>> from strsim import levenshtein
    >>> against("test", ["test", "test1", "test12", "test123", "", "tset"], scorer=levenshtein)
    [0, 1, 2, 3, 4, 2]
    """
    _scorer = _resolve_scorer(scorer)
    if processor is not None:
        query = processor(query)
        scores = [_scorer(query, processor(choice)) for choice in choices]
    else:
        scores = [_scorer(query, choice) for choice in choices]

    logger.debug(
        "scored %d choices with %s", len(scores), getattr(_scorer, "__qualname__", _scorer)
    )
    return scores


def extract_iter(
    query: Any,
    choices: Iterable[Any] | Mapping[Hashable, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> Iterator[_Result]:
    """Lazily yield ``(choice, score, key)`` for every choice passing *score_cutoff*.

    ``None`` choices are skipped. For distance scorers the cutoff is an
    upper bound, for similarity scorers a lower bound.
    """
    _scorer = _resolve_scorer(scorer)
    lowest_score_best = get_scorer_attrs(_scorer).lowest_score_best

    if processor is not None:
        query = processor(query)

    for key, choice in _iter_choices(choices):
        if is_none(choice):
            continue
        processed = processor(choice) if processor is not None else choice
        score = _scorer(query, processed)
        if _passes_cutoff(score, score_cutoff, lowest_score_best):
            yield choice, score, key


def extract(
    query: Any,
    choices: Iterable[Any] | Mapping[Hashable, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    limit: int | None = 5,
    score_cutoff: float | None = None,
) -> list[_Result]:
    """Return the best matches from *choices* for *query*, best first.

    Parameters
    ----------
    query:
        String to look for.
    choices:
        Iterable of candidates, or a mapping whose values are candidates.
        The third element of each result is the position, or the mapping key.
    scorer:
        Any metric function from :mod:`strsim.distance` or a custom callable
        returning a similarity. Defaults to ``JaroWinkler.similarity``.
    limit:
        Maximum number of results; ``None`` returns every match.
    score_cutoff:
        Drop results worse than this score.

    Note
    ----
    Ties keep the order of *choices*.
    """
    _scorer = _resolve_scorer(scorer)
    lowest_score_best = get_scorer_attrs(_scorer).lowest_score_best
    results = extract_iter(
        query, choices, scorer=_scorer, processor=processor, score_cutoff=score_cutoff
    )

    def by_score(result: _Result) -> Any:
        return result[1]

    if limit is None:
        best = sorted(results, key=by_score, reverse=not lowest_score_best)
    elif lowest_score_best:
        best = heapq.nsmallest(limit, results, key=by_score)
    else:
        best = heapq.nlargest(limit, results, key=by_score)

    logger.debug("extract kept %d results (limit=%s)", len(best), limit)
    return best


def extractOne(
    query: Any,
    choices: Iterable[Any] | Mapping[Hashable, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> _Result | None:
    """Return the single best match, or ``None`` when nothing passes *score_cutoff*."""
    best = extract(
        query,
        choices,
        scorer=scorer,
        processor=processor,
        limit=1,
        score_cutoff=score_cutoff,
    )
    return best[0] if best else None


def cdist(
    queries: Iterable[Any],
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    dtype: Any = None,
) -> Any:
    """Compute a pairwise score matrix of shape ``(len(queries), len(choices))``. Requires numpy."""
    try:
        import numpy as np
    except ImportError as e:
        msg = "cdist requires numpy: pip install strsim[all]"
        raise ImportError(msg) from e

    _scorer = _resolve_scorer(scorer)
    query_list = list(queries)
    choice_list = list(choices)
    if processor is not None:
        query_list = [processor(q) for q in query_list]
        choice_list = [processor(c) for c in choice_list]

    matrix = np.empty(
        (len(query_list), len(choice_list)),
        dtype=dtype if dtype is not None else np.float32,
    )
    for row, query in enumerate(query_list):
        for col, choice in enumerate(choice_list):
            matrix[row, col] = _scorer(query, choice)

    logger.debug("cdist computed a %dx%d matrix", matrix.shape[0], matrix.shape[1])
    return matrix


__all__ = ["against", "extract", "extractOne", "extract_iter", "cdist"]
