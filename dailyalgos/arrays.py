"""Algorithms over one-dimensional integer sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import pairwise


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> MutableSequence[int]:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    The first ``m`` items of ``nums1`` and the first ``n`` of ``nums2`` must be
    sorted, and ``nums1`` must have room for ``m + n`` items. Returns ``nums1``.
    """
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n items and nums2 at least n")
    i, j = m - 1, n - 1
    for k in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
    return nums1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so each value appears once; return the new length."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if value != nums[k - 1]:
            nums[k] = value
            k += 1
    return k


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times."""
    if not nums:
        raise ValueError("majority_element() needs a non-empty sequence")
    half = len(nums) // 2
    candidate, count = nums[0], 1
    for value in nums[1:]:
        if count > half:
            break
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def remove_duplicates_allow_twice(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so each value appears at most twice; return the new length."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if k < 2 or nums[k - 2] != value:
            nums[k] = value
            k += 1
    return k


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit from any number of non-overlapping buy/sell trades."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def rotate(nums: MutableSequence[int], k: int) -> MutableSequence[int]:
    """Rotate ``nums`` to the right by ``k`` steps in place and return it."""
    if not nums:
        return nums
    k %= len(nums)
    nums[:] = list(nums[-k:]) + list(nums[:-k]) if k else list(nums)
    return nums


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last.

    Each item is the longest jump allowed from its index. Raises
    ``ValueError`` if the last index cannot be reached.
    """
    if not nums:
        raise ValueError("min_jumps() needs a non-empty sequence")
    last = len(nums) - 1
    near = far = jumps = 0
    while far < last:
        reach = max(i + step for i, step in enumerate(nums[near : far + 1], start=near))
        if reach <= far:
            raise ValueError("the last index cannot be reached")
        near, far = far, reach
        jumps += 1
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached from the first."""
    last = len(nums) - 1
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
        if reach >= last:
            return True
    return True


def _climb(ratings) -> list[int]:
    counts: list[int] = []
    previous = None
    for rating in ratings:
        run = counts[-1] + 1 if previous is not None and rating > previous else 1
        counts.append(run)
        previous = rating
    return counts


def min_candies(ratings: Sequence[int]) -> int:
    """Fewest candies so everyone gets one and higher-rated neighbours get more."""
    left = _climb(ratings)
    right = _climb(reversed(ratings))[::-1]
    return sum(map(max, left, right))


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int | None:
    """Index of the station from which a full circuit is possible, or ``None``."""
    total = tank = start = 0
    for i, (fuel, spend) in enumerate(zip(gas, cost, strict=True)):
        total += fuel - spend
        tank += fuel - spend
        if tank < 0:
            tank = 0
            start = i + 1
    return None if total < 0 else start


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based indices of two items of a sorted sequence that add up to ``target``."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no two items add up to {target}")


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets adding up to zero, each sorted, in ascending order."""
    values = sorted(nums)
    if not values or values[0] > 0 or values[-1] < 0:
        return []
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(values[:-2]):
        if first > 0:
            break
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total == 0:
                found.add((first, values[lo], values[hi]))
                lo += 1
                hi -= 1
            elif total > 0:
                hi -= 1
            else:
                lo += 1
    return [list(triplet) for triplet in sorted(found)]


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 not in present:
            length = 1
            while value + length in present:
                length += 1
            best = max(best, length)
    return best


def _kadane(values: Sequence[int]) -> int:
    current = best = values[0]
    for value in values[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def max_circular_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty subarray of a circular sequence."""
    if not nums:
        raise ValueError("max_circular_subarray_sum() needs a non-empty sequence")
    non_wrap = _kadane(nums)
    wrap = sum(nums) + _kadane([-value for value in nums])
    if wrap == 0:
        return non_wrap
    return max(non_wrap, wrap)


def single_number(nums: Sequence[int]) -> int:
    """The one value that appears once where every other appears three times."""
    ones = twos = 0
    for num in nums:
        ones ^= num & ~twos
        twos ^= num & ~ones
    return ones