"""Singly linked lists of integers and the problems answered over them."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise, zip_longest
from typing import Optional

#: Value of a cell that no list value reached in :func:`spiral_matrix`.
EMPTY_CELL = -1


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; None for no values."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """The values of the list from head to tail."""
    return [node.val for node in _nodes(head)]


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in place by swapping values (selection sort); return the head."""
    for node in _nodes(head):
        smallest = min(_nodes(node), key=lambda candidate: candidate.val)
        node.val, smallest.val = smallest.val, node.val
    return head


def merge_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """A new list of the sums of the runs of values that lie between zeros."""
    sums: list[int] = []
    total = 0
    for current, following in pairwise(_nodes(head)):
        total += current.val
        if following.val == 0:
            sums.append(total)
            total = 0
    return from_values(sums)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """A new sorted list merging two sorted lists; ties take from ``list1`` first."""
    return from_values(heapq.merge(to_values(list1), to_values(list2)))


def is_palindrome(head: Optional[ListNode]) -> bool:
    """True when the values read the same from both ends."""
    values = to_values(head)
    return values == values[::-1]


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """A new list with the gcd of each adjacent pair inserted between them."""
    if head is None:
        return None
    values: list[int] = []
    for current, following in pairwise(_nodes(head)):
        values.extend((current.val, math.gcd(current.val, following.val)))
    values.append(to_values(head)[-1])
    return from_values(values)


def double_it(head: Optional[ListNode]) -> Optional[ListNode]:
    """A new list of the digits of twice the number the list spells, most significant first."""
    if head is None:
        return None
    digits: list[int] = []
    carry = 0
    for digit in reversed(to_values(head)):
        carry, remainder = divmod(2 * digit + carry, 10)
        digits.append(remainder)
    if carry:
        digits.append(carry)
    return from_values(reversed(digits))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored least significant digit first; the sum is stored the same way."""
    digits: list[int] = []
    carry = 0
    for x, y in zip_longest(to_values(l1), to_values(l2), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_values(digits)


def _spiral_cells(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, left, bottom, right = 0, 0, m - 1, n - 1
    while top <= bottom and left <= right:
        yield from ((top, col) for col in range(left, right + 1))
        top += 1
        yield from ((row, right) for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            yield from ((bottom, col) for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            yield from ((row, left) for row in range(bottom, top - 1, -1))
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """An m x n matrix filled clockwise from the top left with the list's values.

    Cells that no value reaches hold -1.
    """
    matrix = [[EMPTY_CELL] * n for _ in range(m)]
    for (row, col), node in zip(_spiral_cells(m, n), _nodes(head)):
        matrix[row][col] = node.val
    return matrix