"""Backtracking searches: sudoku, permutations, n-queens and combinations."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = "123456789"


def solve_sudoku(board: list[list[str]]) -> None:
    """Fill the ``'.'`` cells of a 9x9 sudoku board in place.

    Digits are tried in ascending order and the first solution found is kept.
    Raises ValueError when the board is not 9x9 or has no solution.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9x9")

    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    blocks: list[set[str]] = [set() for _ in range(9)]
    spaces: list[tuple[int, int]] = []
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                spaces.append((i, j))
            else:
                rows[i].add(cell)
                cols[j].add(cell)
                blocks[(i // 3) * 3 + j // 3].add(cell)

    def fill(pos: int) -> bool:
        if pos == len(spaces):
            return True
        i, j = spaces[pos]
        block = blocks[(i // 3) * 3 + j // 3]
        for digit in _DIGITS:
            if digit in rows[i] or digit in cols[j] or digit in block:
                continue
            rows[i].add(digit)
            cols[j].add(digit)
            block.add(digit)
            board[i][j] = digit
            if fill(pos + 1):
                return True
            rows[i].discard(digit)
            cols[j].discard(digit)
            block.discard(digit)
        board[i][j] = "."
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, in the order produced by successive swaps.

    An empty input gives an empty list.
    """
    items = list(nums)
    result: list[list[int]] = []
    if not items:
        return result

    def arrange(index: int) -> None:
        if index == len(items) - 1:
            result.append(items.copy())
            return
        for i in range(index, len(items)):
            items[index], items[i] = items[i], items[index]
            arrange(index + 1)
            items[index], items[i] = items[i], items[index]

    arrange(0)
    return result


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each board is a list of rows drawn with ``'Q'`` and ``'.'``; boards come in
    order of the queen's column in the first row, then the second, and so on.
    Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    boards: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for c in range(n):
            if c in used_cols or row + c in diagonals or c - row in anti_diagonals:
                continue
            used_cols.add(c)
            diagonals.add(row + c)
            anti_diagonals.add(c - row)
            columns.append(c)
            place(row + 1)
            columns.pop()
            used_cols.discard(c)
            diagonals.discard(row + c)
            anti_diagonals.discard(c - row)

    place(0)
    return boards


def combine(n: int, k: int) -> list[list[int]]:
    """Return all ``k``-element subsets of ``1..n`` in lexicographic order.

    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    result: list[list[int]] = []
    current: list[int] = []

    def extend(start: int) -> None:
        if len(current) == k:
            result.append(current.copy())
            return
        # Stop early once too few numbers remain to complete the subset.
        last = n + 1 - k + len(current)
        for value in range(start, last + 1):
            current.append(value)
            extend(value + 1)
            current.pop()

    extend(1)
    return result