"""Selection, frequency ranking and queue reconstruction by sorting."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The ``k``-th largest value, counting repeats.

    Raises ValueError when ``k`` is not between 1 and ``len(nums)``.
    """
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first; ties go to the smaller value.

    Raises ValueError when ``k`` exceeds the number of distinct values or is negative.
    """
    counts = Counter(sorted(nums))
    if not 0 <= k <= len(counts):
        raise ValueError("k must be between 0 and the number of distinct values")
    return [value for value, _ in counts.most_common(k)]


def _stands_before(a: Sequence[int], b: Sequence[int]) -> bool:
    if a[0] != b[0]:
        return a[0] > b[0]
    return a[1] < b[1]


def reconstruct_queue(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Order ``[height, ahead]`` pairs so each has ``ahead`` people of at least its height in front."""
    ordered = sorted((list(person) for person in people), key=lambda p: (-p[0], p[1]))
    queue: list[list[int]] = []
    for person in ordered:
        remaining = person[1]
        index = 0
        while index < len(queue) and remaining:
            if _stands_before(queue[index], person):
                remaining -= 1
            index += 1
        queue.insert(index, person)
    return queue