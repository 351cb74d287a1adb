"""Removal of the n-th node from the end of a singly linked list.

Ownership
---------
The caller hands the head in and must rebind it to the returned value::

    head = remove_nth_from_end(head, 2)

The old head reference is stale after the call when the head itself was
removed.  The sentinel used internally is a local node; it never escapes.
"""

from __future__ import annotations

import logging

from twoptr.core.models import ListNode
from twoptr.exceptions import InvalidPositionError

_logger = logging.getLogger(__name__)


def remove_nth_from_end(
    head: ListNode | None,
    n: int,
    *,
    strict: bool = False,
) -> ListNode | None:
    """Unlink the *n*-th node counted from the tail (1-indexed).

    Parameters
    ----------
    head:
        First node of the chain, or ``None`` for an empty list.
    n:
        Position from the end; ``n=1`` removes the last node and ``n``
        equal to the length removes the head.
    strict:
        When ``False`` (default) an empty list, ``n <= 0`` or ``n`` larger
        than the list are no-ops and *head* is returned unchanged.  When
        ``True`` those cases raise :class:`InvalidPositionError`.

    Returns
    -------
    ListNode | None
        The new head.  ``None`` when the only node was removed.
    """
    if head is None or n <= 0:
        if strict:
            raise InvalidPositionError(
                f"Cannot remove position {n} from the end of "
                f"{'an empty list' if head is None else 'the list'}.",
                hint="Position must be between 1 and the list length.",
            )
        _logger.debug("no-op removal: empty=%s n=%d", head is None, n)
        return head

    sentinel = ListNode(0, head)
    lead = sentinel
    for step in range(n):
        if lead.next is None:
            if strict:
                raise InvalidPositionError(
                    f"Position {n} exceeds the list length ({step}).",
                    hint="Position must be between 1 and the list length.",
                )
            _logger.debug("no-op removal: list has %d node(s), n=%d", step, n)
            return head
        lead = lead.next

    trail = sentinel
    while lead.next is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[assignment]

    # lead stopped on the tail, so trail.next is the target and exists.
    trail.next = trail.next.next  # type: ignore[union-attr]
    return sentinel.next
