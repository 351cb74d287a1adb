"""Canned sample runs for each algorithm.

The inputs below are the cases the algorithms were first exercised
against.  :func:`run_samples` replays them through the real
implementations and returns presentation-ready records; the CLI ``demo``
command renders those records.
"""

from __future__ import annotations

from dataclasses import dataclass

from twoptr.core.linked_list import remove_nth_from_end
from twoptr.core.models import build_list, format_list, format_triplet
from twoptr.core.palindrome import is_palindrome
from twoptr.core.triplets import find_zero_sum_triplets
from twoptr.exceptions import UnknownAlgorithmError

THREE_SUM: str = "three-sum"
REMOVE_NTH: str = "remove-nth"
PALINDROME: str = "palindrome"

ALGORITHMS: tuple[str, ...] = (THREE_SUM, REMOVE_NTH, PALINDROME)

ALGORITHM_TITLES: dict[str, str] = {
    THREE_SUM: "Zero-sum triplets",
    REMOVE_NTH: "Remove n-th node from end",
    PALINDROME: "Palindrome check",
}


# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------

TRIPLET_SAMPLES: tuple[tuple[int, ...], ...] = (
    (-1, 0, 1, 2, -1, -4),
    (0, 0, 0),
    (),
    (1, 2, -2, -1),
    (-2, 0, 1, 1, 2),
    (-4, -2, -2, -2, 0, 1, 2, 2, 2, 3, 3, 4, 4, 6, 6),
    (-5, 1, 10, -1, -2, 3, 4, -3, 0),
    (-10, 5, 2, 4, -4, -5, 0, 0),
)

LIST_SAMPLES: tuple[tuple[tuple[int, ...], int], ...] = (
    ((1, 2, 3, 4, 5), 2),
    ((1, 2, 3, 4, 5), 5),
    ((1, 2, 3, 4, 5), 1),
    ((1,), 1),
    ((1, 2), 3),
)

PALINDROME_SAMPLES: tuple[str, ...] = ("racecar", "abab", "madam", "")


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SampleResult:
    """One replayed sample, already rendered to display strings."""

    algorithm: str
    """One of :data:`ALGORITHMS`."""

    arguments: str
    """Human-readable rendering of the input."""

    result: str
    """Human-readable rendering of the output."""


# ---------------------------------------------------------------------------
# Runners
# ---------------------------------------------------------------------------

def _run_three_sum() -> list[SampleResult]:
    results: list[SampleResult] = []
    for values in TRIPLET_SAMPLES:
        triplets = find_zero_sum_triplets(values)
        results.append(
            SampleResult(
                algorithm=THREE_SUM,
                arguments=str(list(values)),
                result="[" + ", ".join(format_triplet(t) for t in triplets) + "]",
            )
        )
    return results


def _run_remove_nth() -> list[SampleResult]:
    results: list[SampleResult] = []
    for values, n in LIST_SAMPLES:
        head = build_list(values)
        before = format_list(head)
        head = remove_nth_from_end(head, n)
        results.append(
            SampleResult(
                algorithm=REMOVE_NTH,
                arguments=f"{before}, n={n}",
                result=format_list(head),
            )
        )
    return results


def _run_palindrome() -> list[SampleResult]:
    return [
        SampleResult(
            algorithm=PALINDROME,
            arguments=repr(text),
            result=str(is_palindrome(text)).lower(),
        )
        for text in PALINDROME_SAMPLES
    ]


_RUNNERS = {
    THREE_SUM: _run_three_sum,
    REMOVE_NTH: _run_remove_nth,
    PALINDROME: _run_palindrome,
}


def run_samples(algorithm: str) -> list[SampleResult]:
    """Replay the canned samples for *algorithm*.

    Raises
    ------
    UnknownAlgorithmError
        If *algorithm* is not one of :data:`ALGORITHMS`.
    """
    runner = _RUNNERS.get(algorithm)
    if runner is None:
        raise UnknownAlgorithmError(
            f"Unknown algorithm: {algorithm}",
            hint="Choose one of: " + ", ".join(ALGORITHMS),
        )
    return runner()
