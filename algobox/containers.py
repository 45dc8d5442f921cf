"""Small container exercises: a queue from two stacks and hash or deque tricks."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from fractions import Fraction


class TwoStackQueue:
    """A first-in, first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._head: list[int] = []  # last item is the front of the queue
        self._tail: list[int] = []  # last item is the back of the queue

    def _flip(self) -> None:
        if not self._head:
            self._head, self._tail = self._tail[::-1], []
        else:
            self._tail, self._head = self._head[::-1], []

    def __len__(self) -> int:
        return len(self._head) + len(self._tail)

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        if not self._tail:
            self._flip()
        self._tail.append(x)

    def pop(self) -> int:
        """Remove and return the front item; IndexError when empty."""
        if not self._head:
            self._flip()
        if not self._head:
            raise IndexError("pop from an empty queue")
        return self._head.pop()

    def peek(self) -> int:
        """Return the front item without removing it; IndexError when empty."""
        if not self._head:
            self._flip()
        if not self._head:
            raise IndexError("peek at an empty queue")
        return self._head[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._head and not self._tail


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    run_length: dict[int, int] = {}
    best = 0
    for value in nums:
        if value in run_length:
            continue
        below = run_length.get(value - 1, 0)
        above = run_length.get(value + 1, 0)
        length = below + above + 1
        best = max(best, length)
        # Only the ends of a run need the true length; the middle marks it as seen.
        run_length[value] = run_length[value - below] = run_length[value + above] = length
    return best


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Largest number of the given points lying on one straight line.

    Repeated points each count.
    """
    best = 0
    for x0, y0 in points:
        same = vertical = 0
        slopes: Counter[Fraction] = Counter()
        for x, y in points:
            if x == x0:
                if y == y0:
                    same += 1
                else:
                    vertical += 1
                continue
            slopes[Fraction(y0 - y, x0 - x)] += 1
        best = max(best, max(vertical, max(slopes.values(), default=0)) + same)
    return best


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values.

    Raises ValueError when ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] == i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result