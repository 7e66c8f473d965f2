"""Counting problems over integers and integer sequences."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations
from math import factorial, prod

MOD = 10**9 + 7


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count index triples i < j < k whose pairwise differences are within a, b and c."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def count_good_numbers(n: int) -> int:
    """Count length-n digit strings with even digits at even indices and primes at odd ones, mod 10**9+7."""
    odd = n // 2
    even = n - odd
    return pow(5, even, MOD) * pow(4, odd, MOD) % MOD


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Count pairs i < j with nums[i] == nums[j] and i * j divisible by k."""
    if k <= 0:
        raise ValueError("k must be positive")
    residues: defaultdict[int, Counter[int]] = defaultdict(Counter)
    result = 0
    for index, value in enumerate(nums):
        residue = index % k
        seen = residues[value]
        result += sum(
            count for other, count in seen.items() if residue * other % k == 0
        )
        seen[residue] += 1
    return result


def _is_symmetric(number: int) -> bool:
    if number < 100:
        return number % 11 == 0
    if number > 1000:
        low = number % 10 + number // 10 % 10
        high = number // 100 % 10 + number // 1000
        return low == high
    return False


def count_symmetric_integers(low: int, high: int) -> int:
    """Count integers in [low, high] of two or four digits whose digit halves have equal sums."""
    return sum(1 for number in range(low, high + 1) if _is_symmetric(number))


def _count_with_digits_at_most(bound: int, limit: int) -> int:
    """Count integers in [0, bound] whose decimal digits are all at most limit."""
    if bound < 0:
        return 0
    digits = str(bound)
    width = len(digits)
    base = limit + 1
    count = sum(
        base if shorter == 1 else limit * base ** (shorter - 1)
        for shorter in range(1, width)
    )
    for pos, char in enumerate(digits):
        digit = int(char)
        first = 1 if pos == 0 and width > 1 else 0
        count += max(0, min(digit, base) - first) * base ** (width - pos - 1)
        if digit > limit:
            return count
    return count + 1


def number_of_powerful_int(start: int, finish: int, limit: int, s: str) -> int:
    """Count integers in [start, finish] ending in s whose digits are all at most limit."""
    suffix = int(s)
    scale = 10 ** len(s)
    if finish < suffix:
        return 0
    lowest = -((suffix - start) // scale)
    highest = (finish - suffix) // scale
    if lowest > highest:
        return 0
    return _count_with_digits_at_most(highest, limit) - _count_with_digits_at_most(
        lowest - 1, limit
    )


def _palindrome(half: int, length: int) -> str:
    head = str(half)
    tail = head if length % 2 == 0 else head[:-1]
    return head + tail[::-1]


def _arrangements_without_leading_zero(counts: tuple[int, ...], length: int) -> int:
    total = factorial(length) // prod(factorial(c) for c in counts)
    if counts[0] == 0:
        return total
    rest = (counts[0] - 1, *counts[1:])
    leading_zero = factorial(length - 1) // prod(factorial(c) for c in rest)
    return total - leading_zero


def count_good_integers(n: int, k: int) -> int:
    """Count n-digit integers whose digits can be rearranged into a palindrome divisible by k."""
    if k == 0:
        raise ValueError("k must be non-zero")
    half = (n + 1) // 2
    first = 10 ** (half - 1) if half > 1 else 1
    seen: set[tuple[int, ...]] = set()
    total = 0
    for prefix in range(first, 10**half):
        palindrome = _palindrome(prefix, n)
        if int(palindrome) % k:
            continue
        digit_counts = Counter(palindrome)
        counts = tuple(digit_counts[str(d)] for d in range(10))
        if counts in seen:
            continue
        seen.add(counts)
        total += _arrangements_without_leading_zero(counts, n)
    return total