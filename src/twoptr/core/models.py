"""Domain models for twoptr.

``ListNode`` is deliberately *not* frozen: removing a node from a chain
means relinking ``next`` in place.  Ownership of a chain belongs to
whoever holds its head; operations that relink take the head in and hand
a (possibly different) head back.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

Triplet = tuple[int, int, int]
"""Three integers in ascending order that sum to zero."""


# ---------------------------------------------------------------------------
# Singly linked list
# ---------------------------------------------------------------------------

@dataclass(slots=True, eq=False)
class ListNode:
    """One node of a singly linked list.

    Equality is identity: two nodes holding the same value are still
    different nodes, which is what "unchanged, node-for-node" relies on.
    ``repr`` shows only the value so long chains don't recurse.
    """

    value: int
    next: ListNode | None = field(default=None, repr=False)


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a chain from *values* and return its head (``None`` if empty)."""
    sentinel = ListNode(0)
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    """Yield every node from *head* to the terminal."""
    node = head
    while node is not None:
        yield node
        node = node.next


def list_values(head: ListNode | None) -> list[int]:
    return [node.value for node in iter_nodes(head)]


# ---------------------------------------------------------------------------
# Presentation (pure string transforms)
# ---------------------------------------------------------------------------

def format_list(head: ListNode | None) -> str:
    """Render a chain as ``"1 -> 2 -> 3 -> nil"``."""
    return " -> ".join([*(str(value) for value in list_values(head)), "nil"])


def format_triplet(triplet: Triplet) -> str:
    """Render a triplet as ``"[-1, 0, 1]"``."""
    return "[" + ", ".join(str(value) for value in triplet) + "]"
