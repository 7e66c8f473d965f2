"""Problems over integer arrays."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import or_


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of nums."""
    if not nums:
        return 0
    return reduce(or_, nums, 0) << (len(nums) - 1)


def min_operations(nums: Sequence[int], k: int) -> int:
    """Return the steps needed to bring every value down to k, or -1 if some value is below k.

    Each step lowers all values above some value to that value, so the
    answer is the number of distinct values greater than k.
    """
    if min(nums) < k:
        return -1
    return len({value for value in nums if value > k})


def minimum_operations(nums: Sequence[int]) -> int:
    """Return how many removals of the first three elements leave only distinct values."""
    seen: set[int] = set()
    for index in range(len(nums) - 1, -1, -1):
        value = nums[index]
        if value in seen:
            return index // 3 + 1
        seen.add(value)
    return 0


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset in which every pair divides one another, largest value first."""
    values = sorted(nums)
    if not values:
        return []

    length = [1] * len(values)
    previous: list[int | None] = [None] * len(values)
    best = 0
    for i, value in enumerate(values):
        for j, smaller in enumerate(values[:i]):
            if value % smaller == 0 and length[i] < length[j] + 1:
                length[i] = length[j] + 1
                previous[i] = j
        if length[i] > length[best]:
            best = i

    subset = []
    current: int | None = best
    while current is not None:
        subset.append(values[current])
        current = previous[current]
    return subset


def can_partition(nums: Sequence[int]) -> bool:
    """Return whether nums splits into two parts with equal sums."""
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    mask = (1 << (target + 1)) - 1
    reachable = 1
    for num in nums:
        reachable |= (reachable << num) & mask
    return bool(reachable >> target & 1)