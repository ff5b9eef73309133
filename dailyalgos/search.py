"""Binary-search and heap-driven selection algorithms."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Sequence


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Slowest whole eating speed that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("min_eating_speed() needs at least one pile")
    if h < len(piles):
        raise ValueError("h must be at least the number of piles")

    def hours(speed: int) -> int:
        return sum(-(-pile // speed) for pile in piles)

    low, high = 1, max(piles)
    while low <= high:
        mid = (low + high) // 2
        if hours(mid) <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low


def successful_pairs(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """For each spell, how many potions make a product of at least ``success``."""
    ordered = sorted(potions)
    counts: list[int] = []
    for spell in spells:
        if spell < 0:
            raise ValueError("spell strengths must not be negative")
        if spell == 0:
            counts.append(len(ordered) if success <= 0 else 0)
            continue
        threshold = -(-success // spell)
        counts.append(len(ordered) - bisect_left(ordered, threshold))
    return counts


def total_cost(costs: Sequence[int], k: int, candidates: int) -> int:
    """Cost of hiring ``k`` workers, each round taking the cheapest of the end candidates.

    Ties go to the lower index.
    """
    if not 0 <= k <= len(costs):
        raise ValueError("k must be between 0 and the number of workers")
    if candidates < 1:
        raise ValueError("candidates must be at least 1")
    left, right = 0, len(costs) - 1
    heap: list[tuple[int, int]] = []
    while left <= right and len(heap) < candidates:
        heap.append((costs[left], left))
        left += 1
    taken_right = 0
    while left <= right and taken_right < candidates:
        heap.append((costs[right], right))
        right -= 1
        taken_right += 1
    heapq.heapify(heap)
    total = 0
    for _ in range(k):
        cost, index = heapq.heappop(heap)
        total += cost
        if left <= right:
            if index < left:
                heapq.heappush(heap, (costs[left], left))
                left += 1
            else:
                heapq.heappush(heap, (costs[right], right))
                right -= 1
    return total