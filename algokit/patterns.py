"""Text patterns: triangles, arrows, Pascal's triangle.

Each function returns the pattern as a string with one newline-terminated line
per row; zero rows give an empty string.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import comb

__all__ = [
    "pascal_triangle",
    "pyramid",
    "full_triangle",
    "inverted_triangle",
    "right_arrow",
    "left_arrow",
    "spaced_triangle",
    "spaced_inverted_triangle",
    "spaced_right_arrow",
    "spaced_left_arrow",
    "palindrome_pyramid",
    "zigzag",
    "number_triangle",
]


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _solid(mask: Iterable[bool]) -> str:
    return "".join("*" if filled else " " for filled in mask)


def _alternate(mask: Iterable[bool], ready: bool = True) -> tuple[str, bool]:
    """Draw every other filled cell, starting with one when ``ready``."""
    cells = []
    for filled in mask:
        if filled and ready:
            cells.append("*")
            ready = False
        else:
            cells.append(" ")
            ready = True
    return "".join(cells), ready


def _arrow_counts(rows: int) -> Iterator[int]:
    """Yield the number of stars in each row of an arrow pointing sideways."""
    count = 0
    half = rows // 2
    for i in range(1, rows + 1):
        if rows % 2 == 0:
            if i <= half:
                count += 1
            if i > half + 1:
                count -= 1
        else:
            count += 1 if i <= (rows + 1) // 2 else -1
        yield count


def _triangle_masks(rows: int) -> Iterator[list[bool]]:
    for i in range(1, rows + 1):
        yield [rows + 1 - i <= j <= rows - 1 + i for j in range(1, 2 * rows)]


def _inverted_masks(rows: int) -> Iterator[list[bool]]:
    for i in range(1, rows + 1):
        yield [i <= j <= 2 * rows - i for j in range(1, 2 * rows)]


def _right_masks(rows: int) -> Iterator[list[bool]]:
    width = (rows + 1) // 2
    for count in _arrow_counts(rows):
        yield [j <= count for j in range(1, width + 1)]


def _left_masks(rows: int) -> Iterator[list[bool]]:
    width = rows // 2 + 1
    for count in _arrow_counts(rows):
        yield [j >= width + 1 - count for j in range(1, width + 1)]


def pascal_triangle(rows: int) -> str:
    """Return Pascal's triangle, indented two spaces per missing row."""
    return _join(
        "  " * (rows - i) + "".join(f"{comb(i, j)}   " for j in range(i + 1))
        for i in range(rows)
    )


def pyramid(rows: int) -> str:
    """Return a left-aligned half pyramid of ``* `` cells."""
    return _join("* " * i for i in range(1, rows + 1))


def full_triangle(rows: int) -> str:
    """Return a centred solid triangle pointing up."""
    return _join(_solid(mask) for mask in _triangle_masks(rows))


def inverted_triangle(rows: int) -> str:
    """Return a centred solid triangle pointing down."""
    return _join(_solid(mask) for mask in _inverted_masks(rows))


def right_arrow(rows: int) -> str:
    """Return a solid triangle pointing right."""
    return _join(_solid(mask) for mask in _right_masks(rows))


def left_arrow(rows: int) -> str:
    """Return a solid triangle pointing left."""
    return _join(_solid(mask) for mask in _left_masks(rows))


def spaced_triangle(rows: int) -> str:
    """Return a centred triangle pointing up with stars spaced apart."""
    return _join(_alternate(mask)[0] for mask in _triangle_masks(rows))


def spaced_inverted_triangle(rows: int) -> str:
    """Return a centred triangle pointing down with stars spaced apart."""
    return _join(_alternate(mask)[0] for mask in _inverted_masks(rows))


def spaced_right_arrow(rows: int) -> str:
    """Return a right-pointing arrow whose even rows are shifted by one cell."""
    width = 2 * rows - 1
    lines = []
    ready = True
    for i, count in enumerate(_arrow_counts(rows), 1):
        if i % 2 == 0:
            ready = False
        line, ready = _alternate((j <= count for j in range(1, width + 1)), ready)
        lines.append(line)
    return _join(lines)


def spaced_left_arrow(rows: int) -> str:
    """Return a left-pointing arrow with stars spaced apart."""
    return _join(_alternate(mask)[0] for mask in _left_masks(rows))


def palindrome_pyramid(rows: int) -> str:
    """Return a centred pyramid whose rows count down to 1 and back up."""
    lines = []
    for i in range(1, rows + 1):
        value = i
        cells = []
        for j in range(1, 2 * rows):
            if rows + 1 - i <= j <= rows - 1 + i:
                cells.append(str(value))
                value += -1 if j < rows else 1
            else:
                cells.append(" ")
        lines.append("".join(cells))
    return _join(lines)


def zigzag(width: int) -> str:
    """Return a three-row zigzag of stars ``width`` cells wide."""
    return _join(
        "".join(
            " *" if (i + j) % 4 == 0 or (i == 2 and j % 4 == 0) else "  "
            for j in range(1, width + 1)
        )
        for i in range(1, 4)
    )


def number_triangle(rows: int) -> str:
    """Return Pascal's triangle with each row's numbers run together."""
    return _join("".join(str(comb(i, j)) for j in range(i + 1)) for i in range(rows))