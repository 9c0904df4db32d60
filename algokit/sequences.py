"""Array and string problems: windows, pair and triple sums, rotations, edit distance."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

__all__ = [
    "max_window_sum",
    "two_sum_pairs",
    "three_sum",
    "combination_sum",
    "left_rotate",
    "frequencies",
    "array_sum",
    "can_satisfy",
    "edit_distance",
]


def max_window_sum(items: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive elements.

    Raises ValueError unless 1 <= k <= len(items).
    """
    values = list(items)
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}, got {k}")
    current = sum(values[:k])
    best = current
    for leaving, entering in zip(values, values[k:]):
        current += entering - leaving
        best = max(best, current)
    return best


def two_sum_pairs(items: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Return ``(value, complement)`` for each value whose complement came earlier."""
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in items:
        complement = target - value
        if complement in seen:
            pairs.append((value, complement))
        seen.add(value)
    return pairs


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of elements that sums to zero."""
    values = sorted(nums)
    last = len(values) - 1
    result: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        wanted = -first
        left, right = i + 1, last
        while left < right:
            total = values[left] + values[right]
            if total == wanted:
                result.append([first, values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
                while right > left and values[right] == values[right + 1]:
                    right -= 1
            elif total < wanted:
                left += 1
            else:
                right -= 1
    return result


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return all non-decreasing combinations of candidates (reusable) summing to ``target``.

    Duplicate candidates are ignored; the result is sorted. Raises ValueError for a
    candidate that is not positive.
    """
    pool = sorted(set(candidates))
    if any(candidate <= 0 for candidate in pool):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for index, candidate in enumerate(pool[start:], start):
            if candidate > remaining:
                break
            chosen.append(candidate)
            search(index, remaining - candidate)
            chosen.pop()

    search(0, target)
    return sorted(results)


def left_rotate(items: Sequence[Any], d: int) -> list[Any]:
    """Return ``items`` rotated left by ``d`` places.

    Raises ValueError unless 0 <= d <= len(items).
    """
    values = list(items)
    if not 0 <= d <= len(values):
        raise ValueError(f"rotation must be between 0 and {len(values)}, got {d}")
    return values[d:] + values[:d]


def frequencies(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Map each distinct element to its count, in order of first occurrence."""
    return dict(Counter(items))


def array_sum(items: Iterable[int]) -> int:
    """Return the sum of the elements."""
    return sum(items)


def can_satisfy(demands: Iterable[int], candies: int) -> bool:
    """Tell whether ``candies`` cover every demand at once."""
    return sum(demands) <= candies


def edit_distance(source: str, target: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(source) + 1))
    for i, target_char in enumerate(target, 1):
        current = [i]
        for j, source_char in enumerate(source, 1):
            if source_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]