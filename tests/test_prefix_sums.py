import pytest

from algobox.prefix_sums import NumMatrix, subarray_sum

MATRIX = [
    [3, 0, 1, 4, 2],
    [5, 6, 3, 2, 1],
    [1, 2, 0, 1, 5],
    [4, 1, 0, 1, 7],
    [1, 0, 3, 0, 5],
]


def test_sum_region_worked_example():
    assert NumMatrix(MATRIX).sum_region(2, 1, 4, 3) == 8


def test_sum_region_matches_slices():
    grid = NumMatrix(MATRIX)
    for r1 in range(5):
        for r2 in range(r1, 5):
            for c1 in range(5):
                for c2 in range(c1, 5):
                    expected = sum(sum(row[c1 : c2 + 1]) for row in MATRIX[r1 : r2 + 1])
                    assert grid.sum_region(r1, c1, r2, c2) == expected


def test_single_cells_round_trip():
    grid = NumMatrix(MATRIX)
    assert [[grid.sum_region(i, j, i, j) for j in range(5)] for i in range(5)] == MATRIX


@pytest.mark.parametrize("region", [(0, 0, 5, 0), (-1, 0, 0, 0), (0, 0, 0, 5)])
def test_sum_region_out_of_range(region):
    with pytest.raises(IndexError):
        NumMatrix(MATRIX).sum_region(*region)


def test_sum_region_empty_matrix():
    with pytest.raises(IndexError):
        NumMatrix([]).sum_region(0, 0, 0, 0)


@pytest.mark.parametrize("nums, k, expected", [([1, 1, 1], 2, 2), ([1, 2, 3], 3, 2)])
def test_subarray_sum_examples(nums, k, expected):
    assert subarray_sum(nums, k) == expected


def test_subarray_sum_whole_list_counts():
    nums = [4, -1, 7]
    assert subarray_sum(nums, sum(nums)) >= 1
    assert subarray_sum([], 0) == subarray_sum([5], 0)