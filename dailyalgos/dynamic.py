"""Dynamic-programming algorithms."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two non-overlapping buy/sell trades."""
    buy1 = buy2 = math.inf
    sell1 = sell2 = 0
    for price in prices:
        buy1 = min(buy1, price)
        sell1 = max(sell1, price - buy1)
        buy2 = min(buy2, price - sell1)
        sell2 = max(sell2, price - buy2)
    return sell2


def rob(nums: Sequence[int]) -> int:
    """Largest total of items taken with no two adjacent ones."""
    before = best = 0
    for i, value in enumerate(nums):
        current = value if i == 0 else max(value + before, best)
        before, best = best, current
    return best


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins adding up to ``amount``, or ``None`` if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    fewest: list[int | None] = [0] + [None] * amount
    for total in range(1, amount + 1):
        options = [
            fewest[total - coin]
            for coin in coins
            if 0 < coin <= total and fewest[total - coin] is not None
        ]
        fewest[total] = min(options) + 1 if options else None
    return fewest[amount]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)