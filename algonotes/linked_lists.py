"""Singly linked list problems: cycles, intersections, reordering and pairing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None


def from_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def to_list(head: ListNode | None) -> list[int]:
    """Values of the list from ``head`` onwards.

    Raises ValueError if the list contains a cycle.
    """
    seen: set[ListNode] = set()
    values = []
    for node in _nodes(head):
        if node in seen:
            raise ValueError("list contains a cycle")
        seen.add(node)
        values.append(node.val)
    return values


def next_larger_nodes(head: ListNode | None) -> list[int]:
    """For each node, the value of the first later node that is strictly larger, else 0."""
    values = to_list(head)
    result = [0] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in _nodes(head))


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """The first node shared by both lists, or ``None`` if they never meet."""
    length_a, length_b = _length(head_a), _length(head_b)
    longer, shorter = (head_a, head_b) if length_a >= length_b else (head_b, head_a)
    for _ in range(abs(length_a - length_b)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer
        longer, shorter = longer.next, shorter.next
    return None


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Remove the node at index ``n // 2`` and return the head.

    A list of one node becomes empty.
    """
    if head is None or head.next is None:
        return None
    before = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        before = before.next
        fast = fast.next.next
    before.next = before.next.next
    return head


def pair_sum(head: ListNode | None) -> int:
    """Largest sum of a node and its twin (the node mirrored from the other end).

    The result is never below 0. Raises ValueError for a list of odd length.
    """
    values = to_list(head)
    size = len(values)
    if size % 2:
        raise ValueError("list length must be even")
    return max([0, *(values[i] + values[size - 1 - i] for i in range(size // 2))])


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Relink so nodes at even indices come first, then those at odd indices.

    Relative order within each group is kept; the same head is returned.
    """
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head