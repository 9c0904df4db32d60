"""Basic numeric measures: standard deviation, distance, matrix product."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = ["population_std", "euclidean_distance", "matrix_multiply"]


def population_std(values: Iterable[float]) -> float:
    """Return the population standard deviation.

    Raises ValueError for no values.
    """
    data = [float(value) for value in values]
    if not data:
        raise ValueError("standard deviation needs at least one value")
    mean = math.fsum(data) / len(data)
    return math.sqrt(math.fsum((x - mean) ** 2 for x in data) / len(data))


def euclidean_distance(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the straight-line distance between two points of equal dimension.

    Raises ValueError when the dimensions differ.
    """
    if len(first) != len(second):
        raise ValueError("points must have the same dimension")
    return math.dist(first, second)


def _rows(matrix: Iterable[Iterable[float]], name: str) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError(f"{name} matrix must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} matrix rows differ in length")
    return rows


def matrix_multiply(
    left: Iterable[Iterable[float]], right: Iterable[Iterable[float]]
) -> list[list[float]]:
    """Return the product of two rectangular matrices given as rows.

    Raises ValueError for empty or ragged matrices or mismatched inner dimensions.
    """
    left_rows = _rows(left, "left")
    right_rows = _rows(right, "right")
    if len(left_rows[0]) != len(right_rows):
        raise ValueError("left column count must equal right row count")
    columns = list(zip(*right_rows))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in left_rows]