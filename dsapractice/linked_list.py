"""Singly linked list exercises."""

from __future__ import annotations

import heapq
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    data: object
    next: ListNode | None = None


def _nodes(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def _values(head):
    return (node.data for node in _nodes(head))


def from_iterable(values):
    """Build a linked list from ``values`` and return its head, or None when empty."""
    anchor = ListNode(None)
    tail = anchor
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return anchor.next


def to_list(head):
    """Return the values of a linked list as a Python list."""
    return list(_values(head))


def remove_duplicates(head):
    """Unlink every node whose value was seen earlier in the list; return the head."""
    seen = set()
    previous = None
    for node in _nodes(head):
        if node.data in seen:
            previous.next = node.next
        else:
            seen.add(node.data)
            previous = node
    return head


def merge_k_sorted(heads):
    """Merge sorted linked lists into one new sorted list, leaving the inputs intact."""
    return from_iterable(heapq.merge(*(_values(head) for head in heads)))


def middle(head):
    """Return the middle node (the later one for even lengths), or None when empty."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def is_palindrome(head):
    """Tell whether the list reads the same in both directions."""
    values = to_list(head)
    return values == values[::-1]


def reverse(head):
    """Reverse the list in place and return its new head."""
    previous = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous