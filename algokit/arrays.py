"""Problems answered over one-dimensional integer arrays."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from itertools import accumulate, combinations, groupby


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` (i < j) of the first pair whose values add up to ``target``."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    raise ValueError(f"no two values add up to {target}")


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each value, how many values in ``nums`` are strictly smaller."""
    return [sum(1 for other in nums if other < value) for value in nums]


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """``nums`` followed by itself."""
    return [*nums, *nums]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd needs two positive integers")
    return math.gcd(a, b)


def find_gcd(nums: Sequence[int]) -> int:
    """Greatest common divisor of the smallest and largest values."""
    if not nums:
        raise ValueError("find_gcd needs at least one value")
    return gcd(min(nums), max(nums))


def remove_duplicates(nums: list[int]) -> int:
    """Drop adjacent repeats from ``nums`` in place; return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of two sorted arrays taken together.

    With an even count the two middle values are averaged by integer division
    truncated toward zero.
    """
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("no values to take a median of")
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    total = merged[mid] + merged[mid - 1]
    half = -(-total // 2) if total < 0 else total // 2
    return float(half)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, the number of days until a warmer one, or 0 if none comes."""
    result = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperatures[waiting[-1]] < temperature:
            earlier = waiting.pop()
            result[earlier] = day - earlier
        waiting.append(day)
    return result


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Fewest boats carrying at most two people each within ``limit`` weight."""
    weights = sorted(people)
    low, high = 0, len(weights) - 1
    boats = 0
    while low <= high:
        if weights[low] + weights[high] <= limit:
            low += 1
        high -= 1
        boats += 1
    return boats