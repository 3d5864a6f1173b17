"""Binary search against a feedback oracle."""

from __future__ import annotations

from collections.abc import Callable


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in ``1..n`` by binary search.

    ``guess(num)`` returns -1 if ``num`` is too high, 1 if it is too low and
    0 if it is right. Returns -1 when the oracle never answers 0.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer < 0:
            high = mid - 1
        else:
            low = mid + 1
    return -1