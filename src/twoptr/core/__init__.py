"""Core layer — pure two-pointer algorithms and their data model.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Logging at DEBUG only.
"""

from twoptr.core.linked_list import remove_nth_from_end
from twoptr.core.models import (
    ListNode,
    Triplet,
    build_list,
    format_list,
    format_triplet,
    iter_nodes,
    list_values,
)
from twoptr.core.palindrome import is_palindrome
from twoptr.core.samples import ALGORITHMS, SampleResult, run_samples
from twoptr.core.triplets import find_zero_sum_triplets

__all__: list[str] = [
    "ALGORITHMS",
    "ListNode",
    "SampleResult",
    "Triplet",
    "build_list",
    "find_zero_sum_triplets",
    "format_list",
    "format_triplet",
    "is_palindrome",
    "iter_nodes",
    "list_values",
    "remove_nth_from_end",
    "run_samples",
]
