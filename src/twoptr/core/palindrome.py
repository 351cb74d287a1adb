"""Front/back symmetry check over any indexable sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def is_palindrome(chars: Sequence[Any]) -> bool:
    """Return ``True`` when *chars* reads the same in both directions.

    Elements are compared as-is: no case folding, whitespace stripping or
    Unicode normalization.  An empty sequence is a palindrome.
    """
    left, right = 0, len(chars) - 1
    while left < right:
        if chars[left] != chars[right]:
            return False
        left += 1
        right -= 1
    return True
