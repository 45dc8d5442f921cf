"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list from ``head`` onwards."""
    return [node.val for node in _nodes(head)]


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if the list is acyclic."""
    if head is None:
        return None
    slow = fast = head
    while slow.next and fast.next and fast.next.next:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val > list2.val:
            tail.next = list2
            list2 = list2.next
        else:
            tail.next = list1
            list1 = list1.next
        tail = tail.next
    tail.next = list2 if list1 is None else list1
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists into a new sorted list built from fresh nodes."""
    order = itertools.count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = ListNode(node.val)
        tail = tail.next
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(-1, head)
    current = dummy
    while current.next and current.next.next:
        first = current.next
        second = first.next
        current.next = second
        first.next = second.next
        second.next = first
        current = first
    return dummy.next


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``left``..``right`` in place.

    Raises ValueError when the positions fall outside the list.
    """
    if left < 1:
        raise ValueError("left must be at least 1")
    dummy = ListNode(-1, head)
    start = dummy
    for _ in range(left - 1):
        start = start.next
        if start is None:
            raise ValueError("left is beyond the end of the list")
    current = start.next
    for _ in range(right - left):
        if current is None or current.next is None:
            raise ValueError("right is beyond the end of the list")
        moved = current.next
        current.next = moved.next
        moved.next = start.next
        start.next = moved
    return dummy.next