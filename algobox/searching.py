"""Binary searches over sorted and rotated sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def my_sqrt(x: int) -> int:
    """Integer part of the square root of ``x``.

    Raises ValueError for a negative ``x``.
    """
    if x < 0:
        raise ValueError("x must not be negative")
    return math.isqrt(x)


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated sorted sequence that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[mid] == nums[lo]:
            lo += 1
        elif nums[mid] <= nums[hi]:
            # The right half is in order.
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
        elif nums[lo] <= target < nums[mid]:
            # The left half is in order and holds the target.
            hi = mid - 1
        else:
            lo = mid + 1
    return False