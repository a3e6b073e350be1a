"""Singly linked lists of integers and algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __str__(self) -> str:
        return " ".join(str(value) for value in list_values(self))


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    cur = head
    while cur is not None:
        yield cur
        cur = cur.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link ``values`` into a list and return its head, or ``None`` if empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """The values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed decimal digit lists.

    The sum comes back in the same least-significant-first form.
    """
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(_nodes(l1), _nodes(l2)):
        total = carry
        if a is not None:
            total += a.val
        if b is not None:
            total += b.val
        carry, digit = divmod(total, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return build_list(digits)


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """The first node shared by both lists, compared by identity, or ``None``."""
    if head_a is None or head_b is None:
        return None
    length_a = sum(1 for _ in _nodes(head_a))
    length_b = sum(1 for _ in _nodes(head_b))
    long_cur: Optional[ListNode] = head_a
    short_cur: Optional[ListNode] = head_b
    if length_b > length_a:
        long_cur, short_cur = head_b, head_a
    for _ in range(abs(length_a - length_b)):
        assert long_cur is not None
        long_cur = long_cur.next
    while long_cur is not None and short_cur is not None:
        if long_cur is short_cur:
            return long_cur
        long_cur = long_cur.next
        short_cur = short_cur.next
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following ``next`` links from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """The node where a cycle begins, or ``None`` if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            cur = head
            while cur is not slow:
                assert cur is not None and slow is not None
                cur = cur.next
                slow = slow.next
            return cur
    return None


def merge_in_between(
    list1: Optional[ListNode], a: int, b: int, list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Replace nodes ``a`` to ``b`` (zero-based, inclusive) of ``list1`` by ``list2``.

    The lists are relinked in place; ``a`` must be at least 1 and ``b`` must
    lie before the end of ``list1``.
    """
    nodes = list(_nodes(list1))
    if not 1 <= a <= b < len(nodes):
        raise ValueError(f"invalid range {a}..{b} for list of {len(nodes)} nodes")
    before, removed_tail = nodes[a - 1], nodes[b]
    before.next = list2
    tail = before
    while tail.next is not None:
        tail = tail.next
    tail.next = removed_tail.next
    removed_tail.next = None
    return list1