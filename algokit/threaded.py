"""Binary search tree whose empty child links thread to in-order neighbours."""

from __future__ import annotations

import math
from collections.abc import Iterator

__all__ = ["ThreadedBST"]


class _Node:
    __slots__ = ("key", "left", "right", "left_thread", "right_thread")

    def __init__(self, key: float) -> None:
        self.key = key
        self.left: _Node = self
        self.right: _Node = self
        self.left_thread = True
        self.right_thread = True


class ThreadedBST:
    """Set of keys kept in a threaded binary search tree.

    A head node with a key above every other key anchors the tree; the real
    tree hangs off its left link, and the threads of the extreme nodes point
    back to it.
    """

    def __init__(self) -> None:
        self._head = self._new_head()

    @staticmethod
    def _new_head() -> _Node:
        head = _Node(math.inf)
        head.right_thread = False
        return head

    def clear(self) -> None:
        """Remove every key."""
        self._head = self._new_head()

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is ignored."""
        p = self._head
        while True:
            if p.key < key:
                if p.right_thread:
                    break
                p = p.right
            elif p.key > key:
                if p.left_thread:
                    break
                p = p.left
            else:
                return
        node = _Node(key)
        if p.key < key:
            node.right = p.right
            node.left = p
            p.right = node
            p.right_thread = False
        else:
            node.right = p
            node.left = p.left
            p.left = node
            p.left_thread = False

    def search(self, key: int) -> bool:
        """Tell whether ``key`` is in the tree."""
        node = self._head.left
        while True:
            if node.key < key:
                if node.right_thread:
                    return False
                node = node.right
            elif node.key > key:
                if node.left_thread:
                    return False
                node = node.left
            else:
                return True

    def delete(self, key: int) -> None:
        """Remove ``key``; a missing key is ignored."""
        dest = self._head.left
        p = self._head
        while True:
            if dest.key < key:
                if dest.right_thread:
                    return
                p, dest = dest, dest.right
            elif dest.key > key:
                if dest.left_thread:
                    return
                p, dest = dest, dest.left
            else:
                break

        target = dest
        if not dest.right_thread and not dest.left_thread:
            # Two children: take the largest key of the left subtree instead.
            p = dest
            target = dest.left
            while not target.right_thread:
                p, target = target, target.right
            dest.key = target.key

        if p.key >= target.key:
            if target.right_thread and target.left_thread:
                p.left = target.left
                p.left_thread = True
            elif target.right_thread:
                largest = target.left
                while not largest.right_thread:
                    largest = largest.right
                largest.right = p
                p.left = target.left
            else:
                smallest = target.right
                while not smallest.left_thread:
                    smallest = smallest.left
                smallest.left = target.left
                p.left = target.right
        else:
            if target.right_thread and target.left_thread:
                p.right = target.right
                p.right_thread = True
            elif target.right_thread:
                largest = target.left
                while not largest.right_thread:
                    largest = largest.right
                largest.right = target.right
                p.right = target.left
            else:
                smallest = target.right
                while not smallest.left_thread:
                    smallest = smallest.left
                smallest.left = p
                p.right = target.right

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order by following the threads."""
        head = self._head
        node = head
        while True:
            previous = node
            node = node.right
            if not previous.right_thread:
                while not node.left_thread:
                    node = node.left
            if node is head:
                return
            yield node.key

    def __len__(self) -> int:
        return sum(1 for _ in self)