"""Property-based tests for strsim using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

import strsim
from strsim.distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    Prefix,
)
from strsim.distance.Prefix import split_on_common_prefix

# The DP engines are quadratic in pure Python; keep triples small.
short_text = st.text(max_size=12)
small_alphabet_text = st.text(alphabet="abc", max_size=8)


def _reference_levenshtein(s1: str, s2: str) -> int:
    """Textbook full-matrix Levenshtein, no prefix trimming."""
    rows = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i in range(len(s1) + 1):
        rows[i][0] = i
    for j in range(len(s2) + 1):
        rows[0][j] = j
    for i in range(1, len(s1) + 1):
        for j in range(1, len(s2) + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, rows[i - 1][j - 1] + cost)
    return rows[len(s1)][len(s2)]


def _reference_osa(s1: str, s2: str) -> int:
    """Textbook full-matrix optimal string alignment, no prefix trimming."""
    rows = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i in range(len(s1) + 1):
        rows[i][0] = i
    for j in range(len(s2) + 1):
        rows[0][j] = j
    for i in range(1, len(s1) + 1):
        for j in range(1, len(s2) + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, rows[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and s1[i - 1] == s2[j - 2] and s1[i - 2] == s2[j - 1]:
                rows[i][j] = min(rows[i][j], rows[i - 2][j - 2] + 1)
    return rows[len(s1)][len(s2)]


# ---------------------------------------------------------------------------
# Common prefix
# ---------------------------------------------------------------------------

@given(st.text(), st.text())
def test_split_reassembles_inputs(s1: str, s2: str) -> None:
    prefix, rest1, rest2, prefix_len = split_on_common_prefix(s1, s2)
    assert prefix + rest1 == s1
    assert prefix + rest2 == s2
    assert len(prefix) == prefix_len
    assert not (rest1 and rest2 and rest1[0] == rest2[0])


# ---------------------------------------------------------------------------
# Distance Properties
# ---------------------------------------------------------------------------

DISTANCE_METRICS = [
    OSA,
    DamerauLevenshtein,
    Levenshtein,
    Prefix,
]


@given(st.text())
def test_distance_identity(s: str) -> None:
    """The distance of a string to itself should be 0, and normalized metrics bounded perfectly."""
    for metric in DISTANCE_METRICS:
        assert metric.distance(s, s) == 0
        assert metric.normalized_distance(s, s) == 0.0
        assert metric.normalized_similarity(s, s) == 1.0


@given(short_text, short_text)
def test_distance_bounds(s1: str, s2: str) -> None:
    """Distances should be non-negative and normalized bounds should be [0.0, 1.0]."""
    for metric in DISTANCE_METRICS:
        dist = metric.distance(s1, s2)
        assert dist >= 0
        assert (dist == 0) == (s1 == s2)
        assert 0.0 <= metric.normalized_distance(s1, s2) <= 1.0
        assert 0.0 <= metric.normalized_similarity(s1, s2) <= 1.0


@given(short_text, short_text)
def test_normalized_similarity_is_one_only_for_equal(s1: str, s2: str) -> None:
    for score in (
        strsim.normalized_levenshtein(s1, s2),
        strsim.normalized_damerau_levenshtein(s1, s2),
    ):
        assert 0.0 <= score <= 1.0
        assert (score == 1.0) == (s1 == s2)


@given(short_text, short_text)
def test_distance_symmetry(s1: str, s2: str) -> None:
    assert Levenshtein.distance(s1, s2) == Levenshtein.distance(s2, s1)
    assert OSA.distance(s1, s2) == OSA.distance(s2, s1)
    assert DamerauLevenshtein.distance(s1, s2) == DamerauLevenshtein.distance(s2, s1)


@given(small_alphabet_text, small_alphabet_text, small_alphabet_text)
def test_levenshtein_triangle_inequality(s1: str, s2: str, s3: str) -> None:
    d12 = Levenshtein.distance(s1, s2)
    d23 = Levenshtein.distance(s2, s3)
    d13 = Levenshtein.distance(s1, s3)
    assert d13 <= d12 + d23


@given(small_alphabet_text, small_alphabet_text, small_alphabet_text)
def test_damerau_levenshtein_triangle_inequality(s1: str, s2: str, s3: str) -> None:
    d12 = DamerauLevenshtein.distance(s1, s2)
    d23 = DamerauLevenshtein.distance(s2, s3)
    d13 = DamerauLevenshtein.distance(s1, s3)
    assert d13 <= d12 + d23


@given(small_alphabet_text, small_alphabet_text)
def test_transposition_ordering(s1: str, s2: str) -> None:
    """Unrestricted transpositions never cost more than restricted ones."""
    dl = DamerauLevenshtein.distance(s1, s2)
    osa = OSA.distance(s1, s2)
    lev = Levenshtein.distance(s1, s2)
    assert dl <= osa <= lev


@given(short_text, short_text)
def test_levenshtein_matches_full_matrix(s1: str, s2: str) -> None:
    assert Levenshtein.distance(s1, s2) == _reference_levenshtein(s1, s2)


@given(small_alphabet_text, small_alphabet_text)
def test_osa_matches_full_matrix(s1: str, s2: str) -> None:
    """Prefix trimming must not change which transpositions are found."""
    assert OSA.distance(s1, s2) == _reference_osa(s1, s2)


@given(st.text(alphabet="ab", max_size=3), small_alphabet_text)
def test_damerau_levenshtein_with_shared_prefix(prefix: str, s: str) -> None:
    assert DamerauLevenshtein.distance(prefix + s, prefix + s[::-1]) == DamerauLevenshtein.distance(
        s, s[::-1]
    )


# ---------------------------------------------------------------------------
# Hamming Properties
# ---------------------------------------------------------------------------

@given(st.lists(st.tuples(st.characters(), st.characters())))
def test_hamming_counts_mismatches(pairs: list[tuple[str, str]]) -> None:
    s1 = "".join(a for a, _ in pairs)
    s2 = "".join(b for _, b in pairs)
    assert Hamming.distance(s1, s2) == sum(a != b for a, b in pairs)


@given(st.text(), st.text())
def test_hamming_unequal_lengths_raise(s1: str, s2: str) -> None:
    assume(len(s1) != len(s2))
    with pytest.raises(strsim.DifferentLengthArgs):
        strsim.hamming(s1, s2)


@given(st.text())
def test_hamming_identity(s: str) -> None:
    assert Hamming.distance(s, s) == 0
    assert Hamming.normalized_similarity(s, s) == 1.0


# ---------------------------------------------------------------------------
# Jaro / JaroWinkler Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_jaro_identity(s: str) -> None:
    assert Jaro.similarity(s, s) == 1.0
    assert JaroWinkler.similarity(s, s) == 1.0


@given(st.text(), st.text())
def test_jaro_bounds(s1: str, s2: str) -> None:
    sim = Jaro.similarity(s1, s2)
    assert 0.0 <= sim <= 1.0
    assert (sim == 1.0) == (s1 == s2)
    assert 0.0 <= JaroWinkler.similarity(s1, s2) <= 1.0


@given(st.text(), st.text())
def test_jaro_winkler_dominates_jaro(s1: str, s2: str) -> None:
    assert JaroWinkler.similarity(s1, s2) >= Jaro.similarity(s1, s2)


@given(st.text(min_size=1), st.text())
def test_jaro_one_empty_is_zero(s1: str, s2: str) -> None:
    assume(not s2)
    assert Jaro.similarity(s1, s2) == 0.0
    assert Jaro.similarity(s2, s1) == 0.0


@given(st.characters(), st.characters())
def test_jaro_single_characters(c1: str, c2: str) -> None:
    """Unequal single characters never match, guard or not."""
    expected = 1.0 if c1 == c2 else 0.0
    assert Jaro.similarity(c1, c2) == expected
    assert JaroWinkler.similarity(c1, c2) == expected


@given(st.characters(), st.text(min_size=2, max_size=4))
def test_jaro_single_character_against_longer(c: str, s: str) -> None:
    """A one-character input can still match inside the window of a longer one."""
    sim = Jaro.similarity(c, s)
    if c == s[0]:
        assert sim > 0.0
    assert sim == Jaro.similarity(s, c)
