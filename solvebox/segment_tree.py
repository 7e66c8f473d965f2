"""A sum segment tree and the good-triplets count built on it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class SegmentTree:
    """Point assignment and inclusive range sums over a fixed-length array."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        if not leaves:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(leaves)
        self._tree = [0] * self._size + leaves
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def __len__(self) -> int:
        return self._size

    def update(self, idx: int, val: int) -> None:
        """Set the value at position idx to val."""
        if not 0 <= idx < self._size:
            raise IndexError(f"index {idx} out of range for size {self._size}")
        node = idx + self._size
        self._tree[node] = val
        node //= 2
        while node:
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]
            node //= 2

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions left..right inclusive; 0 if the range is empty.

        Parts of the range outside the array contribute nothing.
        """
        left = max(left, 0)
        right = min(right, self._size - 1)
        if left > right:
            return 0
        total = 0
        lo, hi = left + self._size, right + self._size + 1
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total


def good_triplets(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Count value triples that appear in the same relative order in both permutations."""
    size = len(nums1)
    if size < 3:
        return 0

    position = {value: index for index, value in enumerate(nums1)}
    order = [position[value] for value in nums2]

    seen = SegmentTree([0] * size)
    unseen = SegmentTree([1] * size)
    seen.update(order[0], 1)
    unseen.update(order[0], 0)

    total = 0
    for pos in order[1:-1]:
        unseen.update(pos, 0)
        total += seen.query(0, pos - 1) * unseen.query(pos + 1, size - 1)
        seen.update(pos, 1)
    return total