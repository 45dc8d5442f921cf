"""Dynamic-programming solutions to classic sequence, grid and counting problems."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate


def is_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``; ``.`` is any character, ``x*`` repeats x.

    Raises ValueError when the pattern starts with ``*``.
    """
    if p.startswith("*"):
        raise ValueError("pattern may not start with '*'")
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True

    # The empty string matches a prefix made only of "x*" pairs.
    pending = False
    for j, ch in enumerate(p, start=1):
        if ch != "*":
            if pending:
                break
            pending = True
        else:
            pending = False
            dp[0][j] = True

    for i in range(1, m + 1):
        sc = s[i - 1]
        for j in range(1, n + 1):
            pc = p[j - 1]
            if pc == ".":
                dp[i][j] = dp[i - 1][j - 1]
            elif pc != "*":
                dp[i][j] = dp[i - 1][j - 1] and sc == pc
            elif p[j - 2] != "." and sc != p[j - 2]:
                dp[i][j] = dp[i][j - 2]
            else:
                dp[i][j] = dp[i - 1][j] or dp[i][j - 2] or dp[i][j - 1]
    return dp[m][n]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest subsequence common to both texts."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none gains."""
    best = 0
    lowest = math.inf
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def word_break(s: str, word_dict: Sequence[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of words from ``word_dict``."""
    reachable = [True] + [False] * len(s)
    for i in range(1, len(s) + 1):
        reachable[i] = any(
            len(word) <= i and reachable[i - len(word)] and s[i - len(word):i] == word
            for word in word_dict
        )
    return reachable[-1]


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Best profit from at most ``k`` buy-then-sell transactions."""
    if not prices:
        return 0
    holding = [-prices[0]] * (k + 1)
    free = [0] * (k + 1)
    for price in prices[1:]:
        new_holding = [max(h, f - price) for h, f in zip(holding, free)]
        new_free = [free[0]] + [
            max(free[j], holding[j - 1] + price) for j in range(1, k + 1)
        ]
        holding, free = new_holding, new_free
    return free[k]


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values with no two taken from adjacent positions."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    two_back, one_back = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        two_back, one_back = one_back, max(one_back, two_back + value)
    return one_back


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square made only of ``'1'`` cells."""
    if not matrix:
        return 0
    width = len(matrix[0])
    previous = [0] * (width + 1)
    longest = 0
    for row in matrix:
        current = [0] * (width + 1)
        for j, cell in enumerate(row, start=1):
            if cell == "1":
                current[j] = 1 + min(previous[j - 1], previous[j], current[j - 1])
                longest = max(longest, current[j])
        previous = current
    return longest * longest


def num_squares(n: int) -> int:
    """Fewest perfect squares that add up to ``n``."""
    dp = list(range(n + 1))
    for total in range(1, n + 1):
        root = 1
        while root * root <= total:
            dp[total] = min(dp[total], dp[total - root * root] + 1)
            root += 1
    return dp[n]


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        if not tails or value > tails[-1]:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best profit from many trades when a sale forces one day of rest."""
    if not prices:
        return 0
    holding, cooling, free = -prices[0], 0, 0
    for price in prices[1:]:
        holding, cooling, free = (
            max(free - price, holding),
            holding + price,
            max(free, cooling),
        )
    return max(cooling, free)


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    dp = [0] * len(s)
    for i in range(1, len(s)):
        if s[i] != ")":
            continue
        if s[i - 1] == "(":
            dp[i] = 2 + (dp[i - 2] if i >= 2 else 0)
        elif dp[i - 1] > 0:
            opener = i - dp[i - 1] - 1
            if opener >= 0 and s[opener] == "(":
                dp[i] = dp[i - 1] + 2 + (dp[opener - 1] if opener >= 1 else 0)
    return max(dp, default=0)


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins (each usable any number of times) making ``amount``, or -1."""
    dp: list[float] = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                dp[total] = min(dp[total], dp[total - coin] + 1)
    return -1 if dp[amount] == math.inf else int(dp[amount])


def number_of_arithmetic_slices(nums: Sequence[int]) -> int:
    """Count contiguous runs of at least three values in arithmetic progression."""
    total = 0
    ending_here = 0
    for a, b, c in zip(nums, nums[1:], nums[2:]):
        ending_here = ending_here + 1 if 2 * b == a + c else 0
        total += ending_here
    return total


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether the values split into two groups of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    reachable = [True] + [False] * half
    for value in nums:
        for j in range(half, value - 1, -1):
            reachable[j] = reachable[j] or reachable[j - value]
    return reachable[half]


def find_max_form(strs: Iterable[str], m: int, n: int) -> int:
    """Largest number of strings usable with at most ``m`` zeros and ``n`` ones."""
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for word in strs:
        zeros = word.count("0")
        ones = len(word) - zeros
        for i in range(m, zeros - 1, -1):
            for j in range(n, ones - 1, -1):
                dp[i][j] = max(dp[i][j], 1 + dp[i - zeros][j - ones])
    return dp[m][n]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down.

    Raises ValueError for an empty grid.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows = iter(grid)
    best = list(accumulate(next(rows)))
    for row in rows:
        current: list[int] = []
        for above, value in zip(best, row):
            current.append(value + (above if not current else min(above, current[-1])))
        best = current
    return best[-1]


def count_substrings(s: str) -> int:
    """Count palindromic substrings, each position range counted once."""
    count = 0
    for centre in range(2 * len(s) - 1):
        left = centre // 2
        right = left + centre % 2
        while left >= 0 and right < len(s) and s[left] == s[right]:
            count += 1
            left -= 1
            right += 1
    return count


def min_steps(n: int) -> int:
    """Fewest copy-all and paste operations to turn one character into ``n``."""
    if n <= 1:
        return 0
    dp = [0] * (n + 1)
    for i in range(2, n + 1):
        dp[i] = i
        for j in range(math.isqrt(i), 1, -1):
            if i % j == 0:
                dp[i] = min(dp[i], dp[j] + dp[i // j])
                break
    return dp[n]


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    one_back, two_back = 2, 1
    for _ in range(3, n + 1):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def min_distance(word1: str, word2: str) -> int:
    """Edit distance: fewest insertions, deletions and replacements."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def num_decodings(s: str) -> int:
    """Count ways to read a digit string as letters with A=1 .. Z=26."""
    if not s:
        return 0
    if len(s) == 1:
        return 0 if s == "0" else 1
    if s[0] == "0":
        return 0
    two_back, one_back = 1, 1
    for prev_ch, ch in zip(s, s[1:]):
        pairs = prev_ch in ("1", "2") if ch <= "6" else prev_ch == "1"
        if ch == "0":
            if prev_ch not in ("1", "2"):
                return 0
            current = two_back
        elif pairs:
            current = one_back + two_back
        else:
            current = one_back
        two_back, one_back = one_back, current
    return one_back