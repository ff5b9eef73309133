"""Small number-theory routines."""

from __future__ import annotations


def digit_square_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of ``n``."""
    n = abs(n)
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of ``n`` reaches 1."""
    if n == 1:
        return True
    slow, fast = n, digit_square_sum(n)
    while slow != fast:
        if slow == 1 or fast == 1:
            return True
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
    return False


def trailing_zeroes(n: int) -> int:
    """Number of trailing zeros in ``n!``."""
    count = 0
    while n >= 5:
        n //= 5
        count += n
    return count


def tribonacci(n: int) -> int:
    """The ``n``-th Tribonacci number, starting 0, 1, 1."""
    if n < 0:
        raise ValueError("tribonacci() is defined for n >= 0")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a