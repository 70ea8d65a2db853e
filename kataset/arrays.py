"""Puzzles over sequences of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import chain, combinations, pairwise
from operator import xor

_UNIQUE_MIN = 0
_UNIQUE_MAX = 100


def can_make_arithmetic_progression(arr: Iterable[int]) -> bool:
    """Return whether the values can be rearranged into an arithmetic progression."""
    values = sorted(arr, reverse=True)
    if len(values) < 2:
        raise ValueError("at least two values are required")
    diff = values[0] - values[1]
    return all(a - b == diff for a, b in pairwise(values))


def find_numbers(nums: Iterable[int]) -> int:
    """Count the numbers with an even number of digits.

    Numbers that are not positive are treated as having no digits,
    which is even.
    """
    return sum(1 for n in nums if (len(str(n)) if n > 0 else 0) % 2 == 0)


def busy_student(
    start_time: Iterable[int], end_time: Iterable[int], query_time: int
) -> int:
    """Count the students whose homework interval contains ``query_time``."""
    try:
        return sum(
            1
            for start, end in zip(start_time, end_time, strict=True)
            if start <= query_time <= end
        )
    except ValueError as exc:
        raise ValueError("start and end times differ in length") from exc


def max_product(nums: Iterable[int]) -> int:
    """Return the largest ``(a - 1) * (b - 1)`` over two distinct positions."""
    values = sorted(nums)
    if len(values) < 2:
        raise ValueError("at least two values are required")
    return (values[-2] - 1) * (values[-1] - 1)


def final_prices(prices: Iterable[int]) -> list[int]:
    """Apply to each price the discount of the first later price not above it."""
    values = list(prices)
    return [
        price - next((later for later in values[i + 1 :] if later <= price), 0)
        for i, price in enumerate(values)
    ]


def count_good_triplets(arr: Iterable[int], a: int, b: int, c: int) -> int:
    """Count ordered triplets whose pairwise differences stay within the bounds."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def sum_odd_length_subarrays(arr: Sequence[int]) -> int:
    """Sum every contiguous subarray of odd length."""
    size = len(arr)
    return sum(
        value * (((size - i) * (i + 1) + 1) // 2) for i, value in enumerate(arr)
    )


def count_good_rectangles(rectangles: Iterable[Sequence[int]]) -> int:
    """Count the rectangles that yield the largest possible square."""
    best = 0
    count = 0
    for width, height in rectangles:
        side = min(width, height)
        if side > best:
            best, count = side, 1
        elif side == best:
            count += 1
    return count


def sum_of_unique(nums: Iterable[int]) -> int:
    """Sum the values that occur exactly once (values must lie in 0..100)."""
    counts = Counter(nums)
    out_of_range = [v for v in counts if not _UNIQUE_MIN <= v <= _UNIQUE_MAX]
    if out_of_range:
        raise ValueError(
            f"values must lie in {_UNIQUE_MIN}..{_UNIQUE_MAX}: {out_of_range}"
        )
    return sum(value for value, seen in counts.items() if seen == 1)


def min_operations(nums: Iterable[int]) -> int:
    """Return the increments needed to make the sequence strictly increasing."""
    values = iter(nums)
    previous = next(values, None)
    if previous is None:
        return 0
    total = 0
    for value in values:
        if value > previous:
            previous = value
        else:
            total += previous + 1 - value
            previous += 1
    return total


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum the XOR totals of every subset, the empty one included."""
    subsets = chain.from_iterable(
        combinations(nums, r) for r in range(len(nums) + 1)
    )
    return sum(reduce(xor, subset, 0) for subset in subsets)


def max_product_difference(nums: Iterable[int]) -> int:
    """Return the product of the two largest minus that of the two smallest."""
    values = sorted(nums)
    if len(values) < 2:
        raise ValueError("at least two values are required")
    return values[-1] * values[-2] - values[0] * values[1]


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm with a remainder that takes the sign of the dividend."""
    while b:
        a, b = b, _truncated_mod(a, b)
    return a


def find_gcd(nums: Iterable[int]) -> int:
    """Return the greatest common divisor of the largest and smallest value."""
    values = list(nums)
    if not values:
        raise ValueError("at least one value is required")
    return gcd(max(values), min(values))


def count_k_difference(nums: Iterable[int], k: int) -> int:
    """Count pairs of positions whose values differ by exactly ``k``."""
    return sum(1 for x, y in combinations(nums, 2) if abs(x - y) == k)


def get_descent_periods(prices: Iterable[int]) -> int:
    """Count the contiguous runs in which each day is one below the last."""
    total = 0
    run = 0
    previous: int | None = None
    for price in prices:
        run = run + 1 if previous is not None and previous - price == 1 else 1
        total += run
        previous = price
    return total


def array_pair_sum(nums: Iterable[int]) -> int:
    """Pair up the values so that the sum of each pair's minimum is largest."""
    return sum(sorted(nums)[::2])


def sort_array_by_parity(nums: Iterable[int]) -> list[int]:
    """Return the even values followed by the odd ones, each in input order."""
    values = list(nums)
    return [v for v in values if v % 2 == 0] + [v for v in values if v % 2 != 0]


def repeated_n_times(nums: Iterable[int]) -> int:
    """Return the smallest repeated value, or 0 if nothing repeats."""
    return next((a for a, b in pairwise(sorted(nums)) if a == b), 0)


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []