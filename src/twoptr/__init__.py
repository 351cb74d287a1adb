"""twoptr — classic two-pointer algorithms over arrays and linked lists.

The pure algorithms live in :mod:`twoptr.core`; :mod:`twoptr.cli` is a
thin command-line harness around them.
"""

from twoptr.core.linked_list import remove_nth_from_end
from twoptr.core.models import ListNode
from twoptr.core.palindrome import is_palindrome
from twoptr.core.triplets import find_zero_sum_triplets
from twoptr.version import __version__

__all__: list[str] = [
    "ListNode",
    "__version__",
    "find_zero_sum_triplets",
    "is_palindrome",
    "remove_nth_from_end",
]
