"""Counting, ranking and arithmetic problems over integer arrays and sentences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, combinations

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def add_to_array_form(num: Sequence[int], k: int) -> list[int]:
    """Digits of the number spelled by ``num`` plus ``k``, most significant first."""
    digits: list[int] = []
    carry = k
    for digit in reversed(num):
        carry, remainder = divmod(digit + carry, 10)
        digits.append(remainder)
    while carry > 0:
        carry, remainder = divmod(carry, 10)
        digits.append(remainder)
    digits.reverse()
    return digits


def left_right_difference(nums: Sequence[int]) -> list[int]:
    """For each index, the absolute difference of the sums to its left and right."""
    total = sum(nums)
    lefts = accumulate(nums, initial=0)
    return [abs(left - (total - left - value)) for left, value in zip(lefts, nums)]


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Number of index pairs i < j with ``lower <= nums[i] + nums[j] <= upper``."""
    return sum(1 for a, b in combinations(nums, 2) if lower <= a + b <= upper)


def count_pairs(nums: Sequence[int], target: int) -> int:
    """Number of index pairs i < j with ``nums[i] + nums[j] < target``."""
    return sum(1 for a, b in combinations(nums, 2) if a + b < target)


def find_max_k(nums: Sequence[int]) -> int:
    """Largest ``k`` such that both ``k`` and ``-k`` occur at distinct indices, or -1."""
    return max((abs(a) for a, b in combinations(nums, 2) if a == -b), default=-1)


def _digit_sum(n: int) -> int:
    total = sum(int(digit) for digit in str(abs(n)))
    return -total if n < 0 else total


def difference_of_sum(nums: Sequence[int]) -> int:
    """Absolute difference between the sum of the values and the sum of their digits."""
    return abs(sum(nums) - sum(_digit_sum(value) for value in nums))


def max_value(values: Sequence[int]) -> int:
    """The largest of ``values``."""
    if not values:
        raise ValueError("max_value needs at least one value")
    return max(values)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether getting ``extra_candies`` leaves them with the most candies."""
    result = []
    for i, count in enumerate(candies):
        boosted = count + extra_candies
        others = [*candies[:i], *candies[i + 1 :]]
        result.append(boosted >= max(others, default=boosted))
    return result


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Rank labels by descending score; the top three get medals, equal scores rank by position."""
    order = sorted(range(len(score)), key=lambda i: -score[i])
    ranks = [""] * len(score)
    for place, index in enumerate(order):
        ranks[index] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return ranks


def word_count(sentence: str) -> int:
    """Number of words in a sentence whose words are separated by single spaces."""
    return sentence.count(" ") + 1


def most_words_found(sentences: Sequence[str]) -> int:
    """The largest word count among the sentences."""
    if not sentences:
        raise ValueError("most_words_found needs at least one sentence")
    return max(word_count(sentence) for sentence in sentences)