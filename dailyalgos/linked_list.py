"""Singly linked lists and algorithms over them."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: ListNode | None) -> list[int]:
    """The values of an acyclic linked list, in order."""
    return [node.val for node in _nodes(head)]


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` links from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list and return its head."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Splice any number of sorted lists into one sorted list and return its head."""
    order = count()
    heap = [(head.val, next(order), head) for head in lists if head is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, smallest = heapq.heappop(heap)
        tail.next = smallest
        tail = smallest
        if smallest.next is not None:
            heapq.heappush(heap, (smallest.next.val, next(order), smallest.next))
    tail.next = None
    return dummy.next