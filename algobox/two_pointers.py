"""Two-pointer techniques over sorted sequences, matrices and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """1-based positions of two values in sorted ``numbers`` adding to ``target``, or []."""
    lo, hi = 0, len(numbers) - 1
    while lo < hi:
        total = numbers[lo] + numbers[hi]
        if total == target:
            return [lo + 1, hi + 1]
        if total < target:
            lo += 1
        else:
            hi -= 1
    return []


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns ascend."""
    if not matrix or not matrix[0]:
        return False
    r, c = len(matrix) - 1, 0
    cols = len(matrix[0])
    while r >= 0 and c < cols:
        value = matrix[r][c]
        if value == target:
            return True
        if value > target:
            r -= 1
        else:
            c += 1
    return False


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    The leftmost such window wins; the result is empty when none exists.
    """
    need = Counter(t)
    matched = 0
    best_start, best_len = 0, len(s) + 1
    left = 0
    for right, ch in enumerate(s):
        if ch not in need:
            continue
        need[ch] -= 1
        if need[ch] >= 0:
            matched += 1
        while matched == len(t):
            if right - left + 1 < best_len:
                best_start, best_len = left, right - left + 1
            dropped = s[left]
            if dropped in need:
                need[dropped] += 1
                if need[dropped] > 0:
                    matched -= 1
            left += 1
    return "" if best_len == len(s) + 1 else s[best_start : best_start + best_len]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place.

    ``nums1`` must have room for ``m + n`` values. Raises ValueError otherwise.
    """
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n values and nums2 at least n")
    i, j = m - 1, n - 1
    for pos in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] >= nums2[j]:
            nums1[pos] = nums1[i]
            i -= 1
        else:
            nums1[pos] = nums2[j]
            j -= 1