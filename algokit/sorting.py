"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new ascending list; the
input is never modified.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "randomized_quick_sort",
    "selection_sort",
    "exchange_sort",
    "bubble_sort",
    "insertion_sort",
    "counting_sort",
    "bucket_sort",
    "wave_sort",
]


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    """Restore the max-heap property for the subtree at ``root``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    heap = list(items)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable divide-and-conquer sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort taking the first element of each range as the pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = values[first]
        i, j = first, last
        while i < j:
            while values[i] <= pivot and i < last:
                i += 1
            while values[j] > pivot:
                j -= 1
            if i < j:
                values[i], values[j] = values[j], values[i]
        values[first], values[j] = values[j], values[first]
        pending.append((first, j - 1))
        pending.append((j + 1, last))
    return values


def _partition(values: list[Any], low: int, high: int) -> int:
    """Lomuto partition around ``values[high]``; returns the pivot's final index."""
    pivot = values[high]
    index = low
    for i in range(low, high):
        if values[i] < pivot:
            values[i], values[index] = values[index], values[i]
            index += 1
    values[high], values[index] = values[index], values[high]
    return index


def randomized_quick_sort(items: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Quicksort with a pivot drawn from ``rng`` (a fresh ``random.Random`` if None)."""
    rng = rng if rng is not None else random.Random()
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        choice = rng.randrange(low, high + 1)
        values[high], values[choice] = values[choice], values[high]
        split = _partition(values, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return values


def selection_sort(items: Iterable[T]) -> list[T]:
    """Select the minimum of the unsorted tail and swap it into place."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def exchange_sort(items: Iterable[T]) -> list[T]:
    """Swap each later element that is smaller than the current position."""
    values = list(items)
    for i in range(len(values) - 1):
        for j in range(i + 1, len(values)):
            if values[j] < values[i]:
                values[i], values[j] = values[j], values[i]
    return values


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Repeatedly swap adjacent out-of-order pairs."""
    values = list(items)
    n = len(values)
    for done in range(n - 1):
        for d in range(n - done - 1):
            if values[d] > values[d + 1]:
                values[d], values[d + 1] = values[d + 1], values[d]
    return values


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Insert each element into the sorted prefix before it."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers.

    Raises ValueError for a negative value.
    """
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    running = 0
    for index, count in enumerate(counts):
        running += count
        counts[index] = running
    result = [0] * len(values)
    for value in reversed(values):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over one bucket per element.

    Raises ValueError for a value outside [0, 1).
    """
    numbers = list(values)
    size = len(numbers)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for number in numbers:
        if not 0 <= number < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {number!r}")
        buckets[int(size * number)].append(number)
    return [number for bucket in buckets for number in sorted(bucket)]


def wave_sort(items: Iterable[T]) -> list[T]:
    """Arrange values so that a[0] >= a[1] <= a[2] >= a[3] <= ..."""
    values = list(items)
    n = len(values)
    for i in range(1, n, 2):
        if values[i] > values[i - 1]:
            values[i], values[i - 1] = values[i - 1], values[i]
        if i <= n - 2 and values[i] > values[i + 1]:
            values[i], values[i + 1] = values[i + 1], values[i]
    return values