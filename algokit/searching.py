"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "linear_search"]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next((index for index, value in enumerate(items) if value == target), None)