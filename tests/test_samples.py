"""Tests for the canned sample runs (core/samples.py)."""

from __future__ import annotations

import pytest

from twoptr.core.samples import (
    ALGORITHM_TITLES,
    ALGORITHMS,
    LIST_SAMPLES,
    PALINDROME_SAMPLES,
    TRIPLET_SAMPLES,
    SampleResult,
    run_samples,
)
from twoptr.exceptions import UnknownAlgorithmError


class TestSampleTables:
    def test_every_algorithm_has_a_title(self) -> None:
        assert set(ALGORITHM_TITLES) == set(ALGORITHMS)

    @pytest.mark.parametrize(
        ("algorithm", "expected_count"),
        [
            ("three-sum", len(TRIPLET_SAMPLES)),
            ("remove-nth", len(LIST_SAMPLES)),
            ("palindrome", len(PALINDROME_SAMPLES)),
        ],
    )
    def test_one_result_per_sample(self, algorithm: str, expected_count: int) -> None:
        results = run_samples(algorithm)
        assert len(results) == expected_count
        assert all(r.algorithm == algorithm for r in results)


class TestRunSamples:
    def test_three_sum_first_case(self) -> None:
        first = run_samples("three-sum")[0]
        assert first.arguments == "[-1, 0, 1, 2, -1, -4]"
        assert first.result == "[[-1, -1, 2], [-1, 0, 1]]"

    def test_three_sum_empty_case(self) -> None:
        empty = run_samples("three-sum")[2]
        assert empty.arguments == "[]"
        assert empty.result == "[]"

    def test_remove_nth_cases(self) -> None:
        results = run_samples("remove-nth")
        assert results[0].arguments == "1 -> 2 -> 3 -> 4 -> 5 -> nil, n=2"
        assert results[0].result == "1 -> 2 -> 3 -> 5 -> nil"
        assert results[1].result == "2 -> 3 -> 4 -> 5 -> nil"
        assert results[3].result == "nil"
        # n past the head leaves the list as it was.
        assert results[4].result == "1 -> 2 -> nil"

    def test_palindrome_cases(self) -> None:
        results = run_samples("palindrome")
        assert [(r.arguments, r.result) for r in results] == [
            ("'racecar'", "true"),
            ("'abab'", "false"),
            ("'madam'", "true"),
            ("''", "true"),
        ]

    def test_repeatable(self) -> None:
        assert run_samples("three-sum") == run_samples("three-sum")

    def test_unknown_algorithm_raises(self) -> None:
        with pytest.raises(UnknownAlgorithmError, match="bogo-sort") as exc_info:
            run_samples("bogo-sort")
        assert "three-sum" in (exc_info.value.hint or "")


class TestSampleResult:
    def test_frozen(self) -> None:
        result = SampleResult(algorithm="palindrome", arguments="'a'", result="true")
        with pytest.raises(AttributeError):
            result.result = "false"  # type: ignore[misc]
