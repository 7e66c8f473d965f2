# solvebox

solvebox is a small library of classic algorithm solutions. Each one is a
plain Python function. The library has no runtime dependencies and needs
Python 3.10 or later.

## Installing

```
pip install .
```

## Contents

| Module | Functions and classes |
| --- | --- |
| `solvebox.tree` | `TreeNode`, `vertical_traversal(root)` |
| `solvebox.grid` | `oranges_rotting(grid)` |
| `solvebox.segment_tree` | `SegmentTree` (`update`, `query`, `len()`), `good_triplets(nums1, nums2)` |
| `solvebox.counting` | `count_good_triplets`, `count_good_numbers`, `count_pairs`, `count_symmetric_integers`, `number_of_powerful_int`, `count_good_integers` |
| `solvebox.arrays` | `subset_xor_sum`, `min_operations`, `minimum_operations`, `largest_divisible_subset`, `can_partition` |

## Trees

`TreeNode` is a dataclass with three fields: `val`, `left` and `right`.

`vertical_traversal` groups the values of a tree by column, from left to
right. Within a column, values are ordered by row. Values that share both a
row and a column are ordered by value. An empty tree (`None`) gives `[]`.

```python
from solvebox.tree import TreeNode, vertical_traversal

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
vertical_traversal(root)  # [[9], [3, 15], [20], [7]]
```

## Grids

`oranges_rotting` takes a grid of cells: `0` is empty, `1` is a fresh orange
and `2` is a rotten orange. It returns how many minutes pass until no fresh
orange is left. It returns `-1` if some orange can never rot. The grid is
not modified. An empty grid raises `ValueError`.

```python
from solvebox.grid import oranges_rotting

oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])  # 4
oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]])  # -1
```

## Segment tree

`SegmentTree` holds a fixed-length array of integers and supports two
operations:

- `update(idx, val)` sets one position to a new value. An index out of
  range raises `IndexError`.
- `query(left, right)` returns the sum over an inclusive range. Parts of the
  range outside the array add nothing, and an empty range gives `0`.

Building a tree from an empty sequence raises `ValueError`.

`good_triplets` takes two permutations of the same values. It counts the
triples of values that appear in the same relative order in both.

```python
from solvebox.segment_tree import SegmentTree, good_triplets

good_triplets([2, 0, 1, 3], [0, 1, 2, 3])  # 1

tree = SegmentTree([1, 2, 3, 4])
tree.update(0, 10)
tree.query(0, 2)  # 15
```

## Counting

- `count_good_triplets(arr, a, b, c)` counts the index triples `i < j < k`
  where `|arr[i]-arr[j]| <= a`, `|arr[j]-arr[k]| <= b` and
  `|arr[i]-arr[k]| <= c`.
- `count_good_numbers(n)` counts the digit strings of length `n` that have
  an even digit at every even index and a prime digit at every odd index.
  The count is taken modulo `10**9 + 7`.
- `count_pairs(nums, k)` counts the pairs `i < j` where
  `nums[i] == nums[j]` and `i * j` is divisible by `k`. If `k` is not
  positive, it raises `ValueError`.
- `count_symmetric_integers(low, high)` counts the two-digit and four-digit
  integers in `[low, high]` whose two digit halves have equal sums.
- `number_of_powerful_int(start, finish, limit, s)` counts the integers in
  `[start, finish]` that end in the digits `s` and whose digits are all at
  most `limit`.
- `count_good_integers(n, k)` counts the `n`-digit integers whose digits can
  be rearranged into a palindrome divisible by `k`. If `k` is zero, it
  raises `ValueError`.

```python
from solvebox.counting import (
    count_good_integers,
    count_good_numbers,
    count_good_triplets,
    count_pairs,
    count_symmetric_integers,
    number_of_powerful_int,
)

count_good_triplets([3, 0, 1, 1, 9, 7], 7, 2, 3)  # 4
count_good_numbers(4)                             # 400
count_pairs([3, 1, 2, 2, 2, 1, 3], 2)             # 4
count_symmetric_integers(1, 100)                  # 9
number_of_powerful_int(1, 6000, 4, "124")         # 5
count_good_integers(3, 5)                         # 27
```

## Arrays

- `subset_xor_sum(nums)` returns the sum of the XOR totals of every subset.
- `min_operations(nums, k)` returns the number of distinct values greater
  than `k`. It returns `-1` if any value is below `k`.
- `minimum_operations(nums)` returns how many times the first three
  elements must be removed before all the remaining values are distinct.
- `largest_divisible_subset(nums)` returns a largest subset in which every
  pair divides one another, with the largest value first.
- `can_partition(nums)` tells whether `nums` can be split into two parts
  with equal sums.

```python
from solvebox.arrays import (
    can_partition,
    largest_divisible_subset,
    min_operations,
    minimum_operations,
    subset_xor_sum,
)

subset_xor_sum([1, 3])                              # 6
min_operations([5, 2, 5, 4, 5], 2)                  # 2
minimum_operations([1, 2, 3, 4, 2, 3, 3, 5, 7])     # 2
largest_divisible_subset([1, 2, 4, 8])              # [8, 4, 2, 1]
can_partition([1, 5, 11, 5])                        # True
```

## What it does not do

solvebox is a library only. It has no command-line tool. It does not read
input files and does not store anything. You call its functions from your
own code.

## Running the tests

```
pip install ".[test]"
pytest
```