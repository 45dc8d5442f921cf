from itertools import accumulate, combinations

import pytest

from algobox.greedy import (
    can_place_flowers,
    candy,
    check_possibility,
    erase_overlap_intervals,
    find_content_children,
    find_min_arrow_shots,
    max_chunks_to_sorted,
    partition_labels,
)


def test_candy_example():
    assert candy([1, 0, 2]) == 5


def test_candy_uniform_and_symmetry():
    assert candy([3] * 6) == 6
    ratings = [1, 3, 2, 2, 5, 4, 1]
    assert candy(ratings) == candy(ratings[::-1])
    assert candy(ratings) >= len(ratings)
    assert candy([]) == 0


def test_candy_increasing_beats_uniform():
    ratings = [1, 2, 3, 4]
    assert candy(ratings) == sum(range(1, len(ratings) + 1))


def test_erase_overlap_example():
    assert erase_overlap_intervals([[1, 2], [2, 3], [3, 4], [1, 3]]) == 1


def test_erase_overlap_disjoint_and_identical():
    assert erase_overlap_intervals([[1, 2], [2, 3], [5, 9]]) == 0
    same = [[1, 4]] * 5
    assert erase_overlap_intervals(same) == len(same) - 1
    assert erase_overlap_intervals([]) == 0


def test_content_children_example():
    assert find_content_children([1, 2, 3], [1, 1]) == 1


def test_content_children_bounds():
    greed = [5, 1, 3]
    assert find_content_children(greed, [10, 10, 10, 10]) == len(greed)
    assert find_content_children(greed, []) == 0
    assert find_content_children(greed, [2, 4]) <= min(len(greed), 2)


@pytest.mark.parametrize(
    "bed",
    [[1, 0, 0, 0, 1], [0, 0, 0, 0, 0], [1, 1, 0], [0, 1, 0, 0], [0]],
)
def test_flowers_monotone_in_n(bed):
    assert can_place_flowers(bed, 0)
    answers = [can_place_flowers(bed, n) for n in range(len(bed) + 2)]
    assert answers == sorted(answers, reverse=True)
    assert not can_place_flowers(bed, len(bed) + 1)


def test_flowers_example():
    assert can_place_flowers([1, 0, 0, 0, 1], 1)
    assert not can_place_flowers([1, 0, 0, 0, 1], 2)


def test_check_possibility_cases():
    assert check_possibility([4, 2, 3])
    assert not check_possibility([4, 2, 1])
    assert check_possibility(sorted([9, 2, 7, 7]))


def test_check_possibility_leaves_input_alone():
    nums = [3, 4, 2, 3]
    check_possibility(nums)
    assert nums == [3, 4, 2, 3]


def test_partition_labels_example():
    assert partition_labels("ababcbacadefegdehijhklij") == [9, 7, 8]


def test_partition_labels_invariants():
    s = "ababcbacadefegdehijhklij"
    sizes = partition_labels(s)
    assert sum(sizes) == len(s)
    ends = list(accumulate(sizes))
    starts = [0] + ends[:-1]
    parts = [set(s[start:end]) for start, end in zip(starts, ends)]
    assert len(parts) == 3
    assert all(not (a & b) for a, b in combinations(parts, 2))
    assert partition_labels("eccbbbbdec") == [10]
    assert partition_labels("") == []


def test_partition_labels_distinct_letters():
    s = "abcdef"
    assert partition_labels(s) == [1] * len(s)


def test_max_chunks_sorted_and_reversed():
    arr = list(range(6))
    assert max_chunks_to_sorted(arr) == len(arr)
    assert max_chunks_to_sorted(arr[::-1]) == 1


def test_max_chunks_bounded_by_length():
    arr = [2, 0, 1, 4, 3, 5]
    assert 1 <= max_chunks_to_sorted(arr) <= len(arr)


def test_min_arrow_shots_example():
    assert find_min_arrow_shots([[10, 16], [2, 8], [1, 6], [7, 12]]) == 2


def test_min_arrow_shots_disjoint_and_nested():
    disjoint = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert find_min_arrow_shots(disjoint) == len(disjoint)
    assert find_min_arrow_shots([[1, 10], [2, 9], [3, 8]]) == 1
    assert find_min_arrow_shots([[1, 2], [2, 3]]) == 1
    assert find_min_arrow_shots([]) == 0