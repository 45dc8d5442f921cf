"""Greedy solutions to scheduling, allocation and partition problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def candy(ratings: Sequence[int]) -> int:
    """Fewest sweets so everyone has one and beats lower-rated neighbours."""
    if not ratings:
        return 0
    counts = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest intervals to remove so the rest do not overlap; touching ends are fine."""
    ordered = sorted(intervals, key=lambda interval: interval[1])
    kept = 0
    end = None
    for start, stop in ordered:
        if end is None or start >= end:
            kept += 1
            end = stop
    return len(ordered) - kept


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Most children satisfied when a child needs a cookie at least its greed."""
    cookies = iter(sorted(s))
    content = 0
    for child in sorted(g):
        for cookie in cookies:
            if cookie >= child:
                content += 1
                break
        else:
            break
    return content


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` more flowers fit without any two being adjacent."""
    runs = [(planted, len(list(group))) for planted, group in groupby(flowerbed)]
    room = 0
    for index, (planted, length) in enumerate(runs):
        if planted == 1:
            continue
        bounded = (index > 0) + (index < len(runs) - 1)
        room += (length + 1 - bounded) // 2
    return room >= n


def check_possibility(nums: Sequence[int]) -> bool:
    """Tell whether changing at most one value makes the sequence non-decreasing."""
    values = list(nums)
    last = len(values)
    modified = False
    for i in range(last - 1):
        if values[i] <= values[i + 1]:
            continue
        if modified:
            return False
        modified = True
        left_ok = i == 0 or values[i - 1] <= values[i + 1]
        right_ok = i >= last - 2 or values[i] <= values[i + 2]
        if not left_ok and not right_ok:
            return False
        if right_ok:
            values[i + 1] = values[i]
    return True


def partition_labels(s: str) -> list[int]:
    """Sizes of the most parts ``s`` splits into with each letter in one part only."""
    last = {ch: i for i, ch in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for i, ch in enumerate(s):
        end = max(end, last[ch])
        if i == end:
            sizes.append(end - start + 1)
            start = i + 1
    return sizes


def max_chunks_to_sorted(arr: Iterable[int]) -> int:
    """Most chunks a permutation of ``0..n-1`` splits into so that sorting each sorts all."""
    chunks = 0
    highest = 0
    for i, value in enumerate(arr):
        highest = max(highest, value)
        if i == highest:
            chunks += 1
    return chunks


def find_min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Fewest vertical arrows that burst every balloon spanning ``[start, end]``."""
    arrows = 0
    position = None
    for start, end in sorted(points, key=lambda point: point[1]):
        if position is None or start > position:
            arrows += 1
            position = end
    return arrows