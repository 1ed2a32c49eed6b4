"""Algorithms over integer sequences, strings and matrices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby, pairwise


def maximum_gap(nums: Sequence[int]) -> int:
    """Return the largest difference between neighbours in sorted order."""
    if len(nums) < 2:
        return 0
    return max(0, max(b - a for a, b in pairwise(sorted(nums))))


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return values that are the minimum of their row and maximum of their column."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must be non-empty")
    lucky = []
    for row in matrix:
        row_min = min(row)
        col = row.index(row_min)
        if all(other[col] <= row_min for other in matrix):
            lucky.append(row_min)
    return lucky


def can_break(s1: str, s2: str) -> bool:
    """Tell whether some permutation of one string dominates the other character-wise."""
    if len(s1) != len(s2):
        raise ValueError("strings must have the same length")
    pairs = list(zip(sorted(s1), sorted(s2)))
    return all(a >= b for a, b in pairs) or all(b >= a for a, b in pairs)


def count_hill_valley(nums: Sequence[int]) -> int:
    """Count hills and valleys, treating runs of equal values as one."""
    runs = [key for key, _ in groupby(nums)]
    return sum(
        1
        for left, mid, right in zip(runs, runs[1:], runs[2:])
        if (mid > left and mid > right) or (mid < left and mid < right)
    )


def longest_max_and_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run of the maximum value."""
    if not nums:
        raise ValueError("nums must be non-empty")
    top = max(nums)
    return max(len(list(run)) for key, run in groupby(nums) if key == top)


def max_unique_sum(nums: Sequence[int]) -> int:
    """Return the best sum of distinct values after deleting any elements."""
    positives = {n for n in nums if n > 0}
    if positives:
        return sum(positives)
    if not nums:
        return 0
    return max(nums)