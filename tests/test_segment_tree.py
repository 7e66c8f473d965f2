from math import comb

import pytest

from solvebox.segment_tree import SegmentTree, good_triplets

VALUES = [5, -2, 7, 0, 3, 11, 4]


def test_every_range_matches_slice_sum():
    tree = SegmentTree(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            assert tree.query(left, right) == sum(VALUES[left : right + 1])


def test_update_replaces_value():
    tree = SegmentTree(VALUES)
    values = list(VALUES)
    for idx, val in [(0, 9), (3, -4), (6, 1), (3, 8)]:
        tree.update(idx, val)
        values[idx] = val
        assert tree.query(0, len(values) - 1) == sum(values)
        assert tree.query(idx, idx) == val


def test_empty_range_is_zero():
    tree = SegmentTree(VALUES)
    assert tree.query(4, 3) == 0


def test_range_is_clamped_to_array():
    tree = SegmentTree(VALUES)
    assert tree.query(-5, 100) == sum(VALUES)
    assert tree.query(len(VALUES), len(VALUES) + 3) == 0


def test_length():
    assert len(SegmentTree(VALUES)) == len(VALUES)


def test_update_out_of_range():
    tree = SegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.update(len(VALUES), 1)


def test_empty_tree_is_rejected():
    with pytest.raises(ValueError):
        SegmentTree([])


def test_good_triplets_worked_examples():
    assert good_triplets([2, 0, 1, 3], [0, 1, 2, 3]) == 1
    assert good_triplets([4, 0, 1, 3, 2], [4, 1, 0, 2, 3]) == 4


@pytest.mark.parametrize("size", [3, 4, 7, 10])
def test_identical_permutations_count_every_triple(size):
    perm = list(range(size))
    assert good_triplets(perm, perm) == comb(size, 3)


@pytest.mark.parametrize("size", [3, 6])
def test_reversed_permutations_have_no_triples(size):
    perm = list(range(size))
    assert good_triplets(perm, perm[::-1]) == 0


def test_short_inputs():
    assert good_triplets([1, 0], [0, 1]) == 0


def test_inputs_are_not_modified():
    nums1, nums2 = [2, 0, 1, 3], [0, 1, 2, 3]
    good_triplets(nums1, nums2)
    assert (nums1, nums2) == ([2, 0, 1, 3], [0, 1, 2, 3])