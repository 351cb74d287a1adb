"""Zero-sum triplet enumeration (sort + two-pointer scan).

The input is copied and sorted; the caller's sequence is never touched.
Each anchor value is used once and, after every hit, runs of equal
values are skipped on both sides, so no two emitted triplets hold the
same values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from twoptr.core.models import Triplet

_logger = logging.getLogger(__name__)


def find_zero_sum_triplets(values: Iterable[int]) -> list[Triplet]:
    """Return every distinct triplet of *values* that sums to zero.

    Triplets are ascending and listed in ascending anchor order.  Inputs
    with fewer than three elements yield an empty list.

    Runs in O(n log n) for the sort plus O(n²) for the scan.
    """
    nums = sorted(values)
    count = len(nums)
    result: list[Triplet] = []

    for i in range(count - 2):
        anchor = nums[i]
        # Everything to the right is >= anchor, so nothing can reach zero.
        if anchor > 0:
            break
        if i > 0 and anchor == nums[i - 1]:
            continue

        left, right = i + 1, count - 1
        while left < right:
            total = anchor + nums[left] + nums[right]
            if total == 0:
                result.append((anchor, nums[left], nums[right]))
                while left + 1 < right and nums[left] == nums[left + 1]:
                    left += 1
                left += 1
                while left < right - 1 and nums[right] == nums[right - 1]:
                    right -= 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1

    _logger.debug("found %d zero-sum triplet(s) among %d value(s)", len(result), count)
    return result
