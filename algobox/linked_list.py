"""Singly linked lists and finding where two of them join."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; None if there are none."""
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


def to_values(head: Optional[ListNode]) -> List[Any]:
    """The values of the list in order."""
    return [node.data for node in _nodes(head)]


def length(head: Optional[ListNode]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def attach_tail(head: Optional[ListNode], other: Optional[ListNode], position: int) -> None:
    """Point the last node of ``other`` at the node at 1-based ``position`` of ``head``."""
    if other is None:
        raise ValueError("cannot attach to an empty list")
    if position < 1:
        raise IndexError("position must be at least 1")
    target = next((node for i, node in enumerate(_nodes(head), 1) if i == position), None)
    if target is None:
        raise IndexError("position past the end of the list")
    tail = other
    while tail.next is not None:
        tail = tail.next
    tail.next = target


def intersection_value(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[Any]:
    """Value of the first node shared by both lists, or None if they never meet."""
    first_length, second_length = length(first), length(second)
    if first_length < second_length:
        first, second = second, first
    for _ in range(abs(first_length - second_length)):
        first = first.next
    while first is not None and second is not None:
        if first is second:
            return first.data
        first, second = first.next, second.next
    return None