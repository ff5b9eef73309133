"""Algorithms over two-dimensional grids."""

from __future__ import annotations

from itertools import accumulate


def rotate_image(matrix: list[list[int]]) -> list[list[int]]:
    """Rotate a square matrix a quarter turn clockwise in place and return it."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_image() needs a square matrix")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]
    return matrix


def set_zeroes(matrix: list[list[int]]) -> list[list[int]]:
    """Zero every row and column holding a zero, in place, and return the matrix."""
    zero_rows = {i for i, row in enumerate(matrix) if any(v == 0 for v in row)}
    zero_cols = {j for row in matrix for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0
    return matrix


def maximal_square(matrix: list[list[str]]) -> int:
    """Area of the largest square made only of ``"1"`` cells."""
    if not matrix:
        return 0
    width = len(matrix[0])
    below = [0] * (width + 1)
    best = 0
    for row in reversed(matrix):
        current = [0] * (width + 1)
        for j in range(width - 1, -1, -1):
            if row[j] == "1":
                current[j] = 1 + min(current[j + 1], below[j], below[j + 1])
                best = max(best, current[j])
        below = current
    return best * best


def min_path_sum(grid: list[list[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down."""
    rows = iter(grid)
    first = next(rows, None)
    if not first:
        raise ValueError("min_path_sum() needs a non-empty grid")
    previous = list(accumulate(first))
    for row in rows:
        if len(row) != len(previous):
            raise ValueError("all rows must have the same length")
        current: list[int] = []
        for value, above in zip(row, previous):
            current.append(value + (min(above, current[-1]) if current else above))
        previous = current
    return previous[-1]