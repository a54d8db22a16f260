"""Smoke tests for the strsim Python API surface."""

from __future__ import annotations

import pytest

import strsim
import strsim.process as process
import strsim.utils as utils
from strsim.distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    Prefix,
)


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------
def test_version() -> None:
    assert isinstance(strsim.__version__, str)
    assert strsim.__version__ != ""


# ---------------------------------------------------------------------------
# flat entry points
# ---------------------------------------------------------------------------
class TestFlatFunctions:
    def test_hamming(self) -> None:
        assert strsim.hamming("hamming", "hammers") == 3

    def test_levenshtein(self) -> None:
        assert strsim.levenshtein("kitten", "sitting") == 3

    def test_normalized_levenshtein(self) -> None:
        assert strsim.normalized_levenshtein("kitten", "sitting") == pytest.approx(
            0.57142, abs=1e-5
        )

    def test_osa_distance(self) -> None:
        assert strsim.osa_distance("ca", "abc") == 3

    def test_damerau_levenshtein(self) -> None:
        assert strsim.damerau_levenshtein("damerau", "aderua") == 3
        assert strsim.damerau_levenshtein("ca", "abc") == 2

    def test_normalized_damerau_levenshtein(self) -> None:
        assert strsim.normalized_damerau_levenshtein("levenshtein", "löwenbräu") == pytest.approx(
            0.27272, abs=1e-5
        )

    def test_jaro(self) -> None:
        assert strsim.jaro("Friedrich Nietzsche", "Jean-Paul Sartre") == pytest.approx(
            0.392, abs=1e-3
        )

    def test_jaro_winkler(self) -> None:
        assert strsim.jaro_winkler("cheeseburger", "cheese fries") == pytest.approx(
            0.911, abs=1e-3
        )

    def test_flat_functions_accept_options(self) -> None:
        assert strsim.levenshtein("Kitten", "KITTEN", processor=utils.default_process) == 0
        assert strsim.levenshtein("kitten", "sitting", score_cutoff=2) == 3


# ---------------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------------
class TestErrors:
    def test_different_length_args_is_value_error(self) -> None:
        assert issubclass(strsim.DifferentLengthArgs, ValueError)
        assert issubclass(strsim.DifferentLengthArgs, strsim.StrSimError)

    def test_different_length_args_carries_lengths(self) -> None:
        with pytest.raises(strsim.DifferentLengthArgs) as exc_info:
            strsim.hamming("ham", "hamming")
        assert exc_info.value.len1 == 3
        assert exc_info.value.len2 == 7


# ---------------------------------------------------------------------------
# utils
# ---------------------------------------------------------------------------
class TestUtils:
    def test_default_process_keeps_non_ascii_alphanumerics(self) -> None:
        assert utils.default_process(" Ünïcödé 123 ") == "ünïcödé 123"

    def test_default_process_does_not_collapse_separators(self) -> None:
        assert utils.default_process("a--b") == "a  b"

    def test_default_process_none(self) -> None:
        assert utils.default_process(None) == ""

    def test_metrics_never_normalize_implicitly(self) -> None:
        assert strsim.levenshtein("ABC", "abc") == 3


# ---------------------------------------------------------------------------
# flat entry points ↔ metric modules
# ---------------------------------------------------------------------------
class TestFlatMapping:
    @pytest.mark.parametrize(
        ("flat", "member"),
        [
            (strsim.hamming, Hamming.distance),
            (strsim.jaro, Jaro.similarity),
            (strsim.jaro_winkler, JaroWinkler.similarity),
            (strsim.levenshtein, Levenshtein.distance),
            (strsim.normalized_levenshtein, Levenshtein.normalized_similarity),
            (strsim.osa_distance, OSA.distance),
            (strsim.damerau_levenshtein, DamerauLevenshtein.distance),
            (strsim.normalized_damerau_levenshtein, DamerauLevenshtein.normalized_similarity),
        ],
    )
    def test_flat_function_is_module_member(self, flat, member) -> None:
        assert flat is member

    def test_metrics_module_matches_package_root(self) -> None:
        for name in strsim.metrics.__all__:
            assert getattr(strsim, name) is getattr(strsim.metrics, name)


# ---------------------------------------------------------------------------
# score_cutoff on every quartet member
# ---------------------------------------------------------------------------
EDIT_MODULES = [Levenshtein, OSA, DamerauLevenshtein, Prefix]


class TestScoreCutoff:
    @pytest.mark.parametrize("metric", EDIT_MODULES)
    def test_edit_metrics(self, metric) -> None:
        assert metric.distance("kitten", "sitting", score_cutoff=0) == 1
        assert metric.similarity("kitten", "sitting", score_cutoff=100) == 0
        assert metric.normalized_distance("kitten", "sitting", score_cutoff=0.0) == 1.0
        assert metric.normalized_similarity("kitten", "sitting", score_cutoff=1.0) == 0.0

    @pytest.mark.parametrize("metric", EDIT_MODULES)
    def test_cutoff_met_returns_score(self, metric) -> None:
        dist = metric.distance("kitten", "sitting")
        assert metric.distance("kitten", "sitting", score_cutoff=dist) == dist

    def test_hamming(self) -> None:
        assert Hamming.distance("karolin", "kathrin", score_cutoff=2) == 3
        assert Hamming.similarity("karolin", "kathrin", score_cutoff=5) == 0
        assert Hamming.normalized_distance("karolin", "kathrin", score_cutoff=0.1) == 1.0
        assert Hamming.normalized_similarity("karolin", "kathrin", score_cutoff=0.9) == 0.0

    @pytest.mark.parametrize("metric", [Jaro, JaroWinkler])
    def test_jaro_family(self, metric) -> None:
        assert metric.similarity("martha", "marhta", score_cutoff=0.99) == 0.0
        assert metric.distance("martha", "marhta", score_cutoff=0.0) == 1.0
        assert metric.normalized_similarity("martha", "marhta", score_cutoff=0.99) == 0.0
        assert metric.normalized_distance("martha", "marhta", score_cutoff=0.0) == 1.0


# ---------------------------------------------------------------------------
# None / NaN inputs
# ---------------------------------------------------------------------------
ALL_MODULES = [Hamming, Jaro, JaroWinkler, Levenshtein, OSA, DamerauLevenshtein, Prefix]


class TestNoneHandling:
    @pytest.mark.parametrize("metric", ALL_MODULES)
    @pytest.mark.parametrize("missing", [None, float("nan")])
    def test_normalized_scores_are_worst(self, metric, missing) -> None:
        assert metric.normalized_distance(missing, "abc") == 1.0
        assert metric.normalized_distance("abc", missing) == 1.0
        assert metric.normalized_similarity(missing, "abc") == 0.0
        assert metric.normalized_similarity("abc", missing) == 0.0

    def test_none_choices_skipped(self) -> None:
        results = list(process.extract_iter("abc", [None, "abc"], scorer=Levenshtein.distance))
        assert results == [("abc", 0, 1)]


# ---------------------------------------------------------------------------
# process
# ---------------------------------------------------------------------------
class TestProcess:
    def test_raw_similarity_scorer_sorts_descending(self) -> None:
        results = process.extract(
            "inter", ["outer", "internal", "interval", "intern"], scorer=Prefix.similarity, limit=2
        )
        assert results == [("internal", 5, 1), ("interval", 5, 2)]

    def test_scorer_errors_propagate(self) -> None:
        with pytest.raises(strsim.DifferentLengthArgs):
            process.extractOne("abc", ["abcd"], scorer=strsim.hamming)
