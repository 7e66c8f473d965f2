from collections import Counter
from math import comb

import pytest

from solvebox.counting import (
    MOD,
    count_good_integers,
    count_good_numbers,
    count_good_triplets,
    count_pairs,
    count_symmetric_integers,
    number_of_powerful_int,
)


def test_good_triplets_worked_example():
    assert count_good_triplets([3, 0, 1, 1, 9, 7], 7, 2, 3) == 4


@pytest.mark.parametrize("arr", [[1, 2, 3], [5, 9, 1, 4, 4], [0] * 6])
def test_good_triplets_loose_bounds_count_all(arr):
    assert count_good_triplets(arr, 100, 100, 100) == comb(len(arr), 3)


def test_good_triplets_negative_bound_counts_none():
    assert count_good_triplets([1, 1, 1, 1], -1, 5, 5) == 0


def test_good_numbers_single_digit():
    assert count_good_numbers(1) == 5


@pytest.mark.parametrize("n", [1, 2, 7, 30])
def test_good_numbers_grow_by_pairs(n):
    assert count_good_numbers(n + 2) == count_good_numbers(n) * count_good_numbers(2) % MOD


def test_good_numbers_stay_below_modulus():
    assert 0 <= count_good_numbers(10**15) < MOD


def test_count_pairs_worked_example():
    assert count_pairs([3, 1, 2, 2, 2, 1, 3], 2) == 4


@pytest.mark.parametrize("nums", [[1, 1, 2, 2, 2], [7] * 5, [1, 2, 3]])
def test_count_pairs_with_k_one_counts_equal_pairs(nums):
    expected = sum(comb(c, 2) for c in Counter(nums).values())
    assert count_pairs(nums, 1) == expected


def test_count_pairs_distinct_values():
    assert count_pairs([1, 2, 3, 4], 1) == 0


def test_count_pairs_rejects_zero_k():
    with pytest.raises(ValueError):
        count_pairs([1, 1], 0)


def test_symmetric_worked_example():
    assert count_symmetric_integers(1, 100) == 9


@pytest.mark.parametrize("low,mid,high", [(1, 50, 100), (1000, 2500, 6000), (1, 1234, 9999)])
def test_symmetric_counts_add_over_ranges(low, mid, high):
    whole = count_symmetric_integers(low, high)
    assert whole == count_symmetric_integers(low, mid) + count_symmetric_integers(mid + 1, high)


def test_symmetric_three_digit_numbers_never_count():
    assert count_symmetric_integers(100, 999) == 0


def test_symmetric_empty_range():
    assert count_symmetric_integers(50, 10) == 0


def test_powerful_worked_example():
    assert number_of_powerful_int(1, 6000, 4, "124") == 5


def test_powerful_finish_below_suffix():
    assert number_of_powerful_int(1, 10, 9, "124") == 0


def test_powerful_suffix_alone():
    assert number_of_powerful_int(124, 124, 4, "124") == 1


@pytest.mark.parametrize("low,mid,high", [(1, 3000, 6000), (15, 215, 1215), (100, 9000, 100000)])
def test_powerful_counts_add_over_ranges(low, mid, high):
    whole = number_of_powerful_int(low, high, 6, "15")
    parts = number_of_powerful_int(low, mid, 6, "15") + number_of_powerful_int(mid + 1, high, 6, "15")
    assert whole == parts


def test_good_integers_worked_example():
    assert count_good_integers(3, 5) == 27


@pytest.mark.parametrize("k", [1, 2, 3, 4, 7, 9])
def test_good_integers_single_digit(k):
    assert count_good_integers(1, k) == len([d for d in range(1, 10) if d % k == 0])


@pytest.mark.parametrize("n,k", [(2, 3), (4, 7), (5, 6)])
def test_good_integers_bounded_by_digit_count(n, k):
    result = count_good_integers(n, k)
    assert 0 <= result <= 9 * 10 ** (n - 1)
    assert result <= count_good_integers(n, 1)