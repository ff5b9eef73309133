"""Algorithms over closed integer intervals."""

from __future__ import annotations

from collections.abc import Sequence


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into sorted, non-overlapping ones, merging where needed."""
    start, end = new_interval
    before: list[list[int]] = []
    after: list[list[int]] = []
    for lo, hi in intervals:
        if hi < start:
            before.append([lo, hi])
        elif lo > end:
            after.append([lo, hi])
        else:
            start, end = min(start, lo), max(end, hi)
    return [*before, [start, end], *after]


def min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Fewest vertical arrows needed to burst balloons spanning the given ranges."""
    ordered = sorted(points, key=lambda point: point[1])
    if not ordered:
        return 0
    arrows = 1
    current_end = ordered[0][1]
    for start, finish in ordered[1:]:
        if start > current_end:
            arrows += 1
            current_end = finish
    return arrows