import itertools

import pytest

from algobox.backtracking import combine, permute, solve_n_queens, solve_sudoku

PUZZLE = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _board(rows):
    return [list(row) for row in rows]


def _is_complete(board):
    full = set("123456789")
    rows_ok = all(set(row) == full for row in board)
    cols_ok = all({board[i][j] for i in range(9)} == full for j in range(9))
    blocks_ok = all(
        {board[r + i][c + j] for i in range(3) for j in range(3)} == full
        for r in (0, 3, 6)
        for c in (0, 3, 6)
    )
    return rows_ok and cols_ok and blocks_ok


def test_sudoku_solution_is_complete_and_keeps_givens():
    board = _board(PUZZLE)
    solve_sudoku(board)
    assert _is_complete(board)
    for i, row in enumerate(PUZZLE):
        for j, cell in enumerate(row):
            if cell != ".":
                assert board[i][j] == cell


def test_sudoku_without_solution_raises():
    rows = ["12345678.", "........9"] + ["........."] * 7
    with pytest.raises(ValueError):
        solve_sudoku(_board(rows))


def test_sudoku_wrong_shape_raises():
    with pytest.raises(ValueError):
        solve_sudoku(_board(PUZZLE[:8]))


def test_permute_order_of_swaps():
    assert permute([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


def test_permute_covers_every_ordering_once():
    nums = [4, 7, 1, 9]
    result = permute(nums)
    expected = sorted(list(p) for p in itertools.permutations(nums))
    assert sorted(result) == expected
    assert len(result) == len(expected)


def test_permute_single_and_empty():
    assert permute([7]) == [[7]]
    assert permute([]) == []


def test_permute_leaves_input_alone():
    nums = [1, 2, 3]
    permute(nums)
    assert nums == [1, 2, 3]


def test_n_queens_four():
    assert solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


def _valid_queens(board):
    n = len(board)
    cols = [row.index("Q") for row in board]
    if any(row.count("Q") != 1 or len(row) != n for row in board):
        return False
    if len(set(cols)) != n:
        return False
    if len({r + c for r, c in enumerate(cols)}) != n:
        return False
    return len({c - r for r, c in enumerate(cols)}) == n


@pytest.mark.parametrize("n", [5, 6, 7])
def test_n_queens_boards_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert all(_valid_queens(board) for board in boards)
    assert len({tuple(board) for board in boards}) == len(boards)
    assert boards == sorted(boards, key=lambda b: [row.index("Q") for row in b])


def test_n_queens_eight_count():
    assert len(solve_n_queens(8)) == 92


def test_n_queens_one():
    assert solve_n_queens(1) == [["Q"]]


def test_n_queens_negative_raises():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


@pytest.mark.parametrize("n,k", [(4, 2), (5, 3), (6, 0), (3, 3), (2, 4), (6, 1)])
def test_combine_matches_lexicographic_combinations(n, k):
    expected = [list(c) for c in itertools.combinations(range(1, n + 1), k)]
    assert combine(n, k) == expected


def test_combine_negative_raises():
    with pytest.raises(ValueError):
        combine(3, -1)