"""Prefix sums over matrices and sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


class NumMatrix:
    """Answers rectangle-sum queries on a fixed matrix in constant time."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self._rows = len(matrix)
        self._cols = len(matrix[0]) if matrix else 0
        self._sums = [[0] * (self._cols + 1)]
        for row in matrix:
            above = self._sums[-1]
            running = 0
            current = [0]
            for j, value in enumerate(row):
                running += value
                current.append(above[j + 1] + running)
            self._sums.append(current)

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Sum of the cells from ``(row1, col1)`` to ``(row2, col2)`` inclusive.

        Raises IndexError when the rectangle is not inside the matrix.
        """
        if not (0 <= row1 <= row2 < self._rows and 0 <= col1 <= col2 < self._cols):
            raise IndexError("region lies outside the matrix")
        sums = self._sums
        return (
            sums[row2 + 1][col2 + 1]
            - sums[row1][col2 + 1]
            - sums[row2 + 1][col1]
            + sums[row1][col1]
        )


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count non-empty contiguous runs of ``nums`` that add up to ``k``."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count