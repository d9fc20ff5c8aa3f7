"""Classic array exercises: searching, partitioning, counting and rotation."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate, chain, groupby
from operator import xor
from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two positions whose values add up to ``target``.

    Returns ``(later_index, earlier_index)`` for the first pair completed
    while scanning left to right, or ``None`` when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        need = target - value
        if need in seen:
            return index, seen[need]
        seen[value] = index
    return None


def rotate_right(nums: Sequence[int], k: int) -> list[int]:
    """Return ``nums`` rotated ``k`` places to the right.

    ``k`` must lie between 0 and ``len(nums)`` inclusive.
    """
    n = len(nums)
    if not 0 <= k <= n:
        raise ValueError(f"rotation {k} out of range for {n} elements")
    items = list(nums)
    return items[n - k:] + items[:n - k]


def move_zeroes_to_end(nums: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, keeping order."""
    items = list(nums)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell (never negative)."""
    best: int | None = None
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = price - lowest
        best = profit if best is None else max(best, profit)
    if best is None:
        raise ValueError("max_profit() needs at least one price")
    return best


def maximum(values: Iterable[int]) -> int:
    """Largest value in a non-empty collection."""
    items = list(values)
    if not items:
        raise ValueError("maximum() of an empty collection")
    return max(items)


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    present = set(nums)
    longest = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values that occur more than ``len(nums) // 2`` times."""
    threshold = len(nums) // 2
    return [value for value, count in Counter(nums).items() if count > threshold]


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest unbroken run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(nums) if key == 1),
        default=0,
    )


def missing_number(nums: Sequence[int]) -> int:
    """The value from ``0..len(nums)`` that does not appear in ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Place positive values at even positions and the rest at odd positions.

    Relative order within each group is kept. The number of positive values
    must equal the number of even positions.
    """
    positives = [value for value in nums if value > 0]
    others = [value for value in nums if value <= 0]
    n = len(nums)
    if len(positives) != (n + 1) // 2 or len(others) != n // 2:
        raise ValueError("positive and non-positive counts do not alternate")
    interleaved = chain.from_iterable(zip(positives, others))
    result = list(interleaved)
    if len(positives) > len(others):
        result.append(positives[-1])
    return result


def sort_colors(nums: Iterable[int]) -> list[int]:
    """Sort a sequence made only of the colours 0, 1 and 2."""
    counts = Counter(nums)
    invalid = set(counts) - {0, 1, 2}
    if invalid:
        raise ValueError(f"unexpected colours: {sorted(invalid)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def single_number(nums: Iterable[int]) -> int:
    """The value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous, non-empty subarrays whose sum equals ``k``."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    for running in accumulate(nums):
        count += seen[running - k]
        seen[running] += 1
    return count