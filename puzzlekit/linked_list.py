"""Singly linked list and duplicate removal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new sorted list of the values that occur exactly once."""
    if head is None:
        return None
    counts = Counter(head)
    return from_iterable(sorted(v for v, n in counts.items() if n == 1))