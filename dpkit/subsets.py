"""Subset-sum family: existence, partitions, counting and target sums."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import product


def _validate(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("at least one value is required")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")


def _validate_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def is_subset_sum(values: Sequence[int], total: int) -> bool:
    """Whether some subset of ``values`` sums to ``total``."""
    _validate(values)
    _validate_target(total)
    reachable = [False] * (total + 1)
    reachable[0] = True
    if values[0] <= total:
        reachable[values[0]] = True
    for value in values[1:]:
        for target in range(total, value - 1, -1):
            if reachable[target - value]:
                reachable[target] = True
    return reachable[total]


def is_subset_sum_memo(values: Sequence[int], total: int) -> bool:
    """Whether some subset of ``values`` sums to ``total``, by memoised recursion."""
    _validate(values)
    _validate_target(total)
    values = tuple(values)

    @lru_cache(maxsize=None)
    def reachable(index: int, target: int) -> bool:
        if target == 0:
            return True
        if index == 0:
            return values[0] == target
        if reachable(index - 1, target):
            return True
        return values[index] <= target and reachable(index - 1, target - values[index])

    return reachable(len(values) - 1, total)


def can_partition(values: Sequence[int]) -> bool:
    """Whether ``values`` splits into two subsets of equal sum."""
    _validate(values)
    total = sum(values)
    if total % 2 == 1:
        return False
    return is_subset_sum_memo(values, total // 2)


def min_subset_difference(values: Sequence[int]) -> int:
    """Smallest absolute difference between the sums of a two-way split."""
    _validate(values)
    total = sum(values)
    reachable = 1
    for value in values:
        reachable |= reachable << value
    return min(
        abs(total - 2 * subtotal)
        for subtotal in range(total + 1)
        if reachable >> subtotal & 1
    )


def count_subsets_with_sum(values: Sequence[int], target: int) -> int:
    """Number of subsets of ``values`` summing to ``target``.

    Each zero doubles the count, since it may be taken or left.
    """
    _validate(values)
    _validate_target(target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for value in values:
        for subtotal in range(target, value - 1, -1):
            ways[subtotal] += ways[subtotal - value]
    return ways[target]


def count_partitions(values: Sequence[int], difference: int) -> int:
    """Number of two-way splits whose sums differ by ``difference``."""
    _validate(values)
    remainder = sum(values) - difference
    if remainder < 0 or remainder % 2 == 1:
        return 0
    return count_subsets_with_sum(values, remainder // 2)


def target_sum_ways(values: Sequence[int], target: int) -> int:
    """Number of ways to sign each value with + or - so the total is ``target``."""
    return count_partitions(values, target)


def target_sum_ways_bruteforce(values: Sequence[int], target: int) -> int:
    """Number of sign assignments reaching ``target``, by trying every one."""
    return sum(
        1
        for signs in product((1, -1), repeat=len(values))
        if sum(sign * value for sign, value in zip(signs, values)) == target
    )