"""Small competitive-programming puzzles."""

from __future__ import annotations

from math import isqrt

__all__ = ["min_stair_steps", "min_power_terms"]


def _has_no_odd_divisor(number: int) -> bool:
    return all(number % divisor for divisor in range(3, isqrt(number) + 1, 2))


def min_stair_steps(start: int, end: int) -> int:
    """Return the fewest moves from stair ``start`` to stair ``end``.

    A move climbs one stair, or two stairs when the stair landed on is prime.
    Raises ValueError for a negative start or an end below the start.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if end < start:
        raise ValueError(f"end {end} lies below start {start}")
    first = start + 1 if start % 2 == 0 else start + 2
    landings = [stair for stair in range(first, end + 1, 2) if _has_no_odd_divisor(stair)]
    steps = end - start - len(landings)
    if landings and landings[0] == start + 1:
        steps += 1
    return steps


def min_power_terms(n: int, limit: int) -> int | None:
    """Return the fewest terms for ``n`` as one term up to ``limit`` plus odd powers of two.

    Returns None when no split exists. Raises ValueError for ``n`` below one or a
    negative ``limit``.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    exponent = n.bit_length() - 1
    if limit == 0 and n % 2 == 1:
        return None
    if n <= limit or (exponent % 2 == 1 and n == 1 << exponent):
        return 1
    terms: list[int] = []
    for position, bit in enumerate(reversed(format(n, "b"))):
        if bit == "0":
            continue
        if position % 2 == 1:
            terms.append(1 << position)
        elif position == 0:
            terms.append(1)
        else:
            terms.extend([1 << (position - 1)] * 2)
    covered = 0
    total = 0
    for term in terms:
        total += term
        if total > limit:
            break
        covered += 1
    return len(terms) if covered == 0 else len(terms) - covered + 1