"""Singly linked list of values with in-place reversal and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList", "merge_sorted"]


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: Any
    next: Node | None = None


def _reverse_from(node: Node | None) -> Node | None:
    if node is None or node.next is None:
        return node
    head = _reverse_from(node.next)
    node.next.next = node
    node.next = None
    return head


class LinkedList:
    """Singly linked list holding ``head`` as its first node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the tail."""
        new = Node(value)
        if self.head is None:
            self.head = new
            return
        *_, last = self._nodes()
        last.next = new

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the head."""
        self.head = Node(value, self.head)

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; ValueError if there is none."""
        previous: Node | None = None
        node = self.head
        while node is not None and node.data != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursing to the tail."""
        self.head = _reverse_from(self.head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each run of ``k`` nodes in place; the last run may be shorter.

        Raises ValueError for ``k`` below one.
        """
        if k < 1:
            raise ValueError(f"group size must be positive, got {k}")
        new_head: Node | None = None
        previous_tail: Node | None = None
        current = self.head
        while current is not None:
            group_first = current
            reversed_head: Node | None = None
            for _ in range(k):
                if current is None:
                    break
                current.next, reversed_head, current = reversed_head, current, current.next
            if previous_tail is None:
                new_head = reversed_head
            else:
                previous_tail.next = reversed_head
            previous_tail = group_first
        self.head = new_head

    def move_last_to_front(self) -> None:
        """Move the tail node to the head; lists shorter than two are unchanged."""
        if self.head is None or self.head.next is None:
            return
        previous = self.head
        while previous.next.next is not None:
            previous = previous.next
        last = previous.next
        previous.next = None
        last.next = self.head
        self.head = last

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Splice two ascending lists into one ascending list.

    The nodes are moved, so both inputs are left empty. Ties take the node
    from ``first`` before the one from ``second``.
    """
    dummy = Node(None)
    tail = dummy
    a, b = first.head, second.head
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    first.head = second.head = None
    merged = LinkedList()
    merged.head = dummy.next
    return merged