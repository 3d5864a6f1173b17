"""Array and list drills: in-place compaction, merging, prefix sums and windows."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so each value appears once.

    Returns the number of unique values; they occupy ``nums[:k]``.
    """
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front, keeping order.

    Returns how many elements were kept; they occupy ``nums[:k]``.
    """
    write = 0
    for value in list(nums):
        if value != val:
            nums[write] = value
            write += 1
    return write


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    """
    i, j, k = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    while j >= 0:
        nums1[k] = nums2[j]
        j -= 1
        k -= 1


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements."""
    result = []
    prefix = 1
    for value in nums:
        result.append(prefix)
        prefix *= value
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def move_zeroes(nums: list[int]) -> None:
    """Move all zeroes to the end in place, keeping the order of the rest."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def increasing_triplet(nums: Iterable[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[j] < nums[k]."""
    first = second = math.inf
    for value in nums:
        if value <= first:
            first = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit with no two in adjacent plots.

    The given flowerbed is left unchanged.
    """
    bed = list(flowerbed)
    size = len(bed)
    planted = 0
    for index, plot in enumerate(bed):
        if plot != 0:
            continue
        empty_left = index == 0 or bed[index - 1] == 0
        empty_right = index == size - 1 or bed[index + 1] == 0
        if empty_left and empty_right:
            bed[index] = 1
            planted += 1
            if planted >= n:
                return True
    return planted >= n


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average of any contiguous run of ``k`` elements."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} must be between 1 and {len(nums)}")
    window = float(sum(nums[:k]))
    best = window
    for entering, leaving in zip(nums[k:], nums):
        window += entering - leaving
        best = max(best, window)
    return best / k


def _truncating_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def image_smoother(img: Sequence[Sequence[int]]) -> list[list[int]]:
    """Replace each cell with the truncated mean of its 3x3 neighbourhood."""
    if not img:
        raise ValueError("image must have at least one row")
    rows, cols = len(img), len(img[0])
    result = []
    for i in range(rows):
        row = []
        for j in range(cols):
            neighbours = [
                img[ni][nj]
                for ni in range(max(i - 1, 0), min(i + 2, rows))
                for nj in range(max(j - 1, 0), min(j + 2, cols))
            ]
            row.append(_truncating_div(sum(neighbours), len(neighbours)))
        result.append(row)
    return result


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = list(Counter(arr).values())
    return len(counts) == len(set(counts))


def find_difference(
    nums1: Iterable[int], nums2: Iterable[int]
) -> tuple[list[int], list[int]]:
    """Return the distinct values only in ``nums1`` and only in ``nums2``."""
    first = dict.fromkeys(nums1)
    second = dict.fromkeys(nums2)
    return (
        [value for value in first if value not in second],
        [value for value in second if value not in first],
    )


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell for each kid whether the extra candies give them the most."""
    if not candies:
        raise ValueError("candies must not be empty")
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def largest_altitude(gain: Iterable[int]) -> int:
    """Return the highest altitude reached, starting from zero."""
    altitude = highest = 0
    for step in gain:
        altitude += step
        highest = max(highest, altitude)
    return highest