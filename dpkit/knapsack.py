"""Knapsack problems: 0/1, unbounded, and rod cutting."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _validate(values: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if not values:
        raise ValueError("at least one item is required")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def _validate_unbounded(values: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    _validate(values, weights, capacity)
    if any(weight == 0 for weight in weights):
        raise ValueError("weights must be positive when items may repeat")


def knapsack_01(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Best total value when each item is taken at most once.

    Uses a single row of the table, updated from the largest capacity down.
    """
    _validate(values, weights, capacity)
    first_value, first_weight = values[0], weights[0]
    best = [first_value if room >= first_weight else 0 for room in range(capacity + 1)]
    for value, weight in zip(values[1:], weights[1:]):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def knapsack_01_memo(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Best total value for the 0/1 knapsack, by memoised recursion."""
    _validate(values, weights, capacity)
    values = tuple(values)
    weights = tuple(weights)

    @lru_cache(maxsize=None)
    def best(index: int, room: int) -> int:
        if index == 0:
            return values[0] if weights[0] <= room else 0
        skip = best(index - 1, room)
        if weights[index] <= room:
            return max(skip, values[index] + best(index - 1, room - weights[index]))
        return skip

    return best(len(values) - 1, capacity)


def unbounded_knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value when each item may be taken any number of times."""
    _validate_unbounded(values, weights, capacity)
    first_value, first_weight = values[0], weights[0]
    best = [(room // first_weight) * first_value for room in range(capacity + 1)]
    for value, weight in zip(values[1:], weights[1:]):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def unbounded_knapsack_memo(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value for the unbounded knapsack, by memoised recursion."""
    _validate_unbounded(values, weights, capacity)
    values = tuple(values)
    weights = tuple(weights)

    @lru_cache(maxsize=None)
    def best(index: int, room: int) -> int:
        if index == 0:
            return (room // weights[0]) * values[0]
        skip = best(index - 1, room)
        if weights[index] <= room:
            return max(skip, values[index] + best(index, room - weights[index]))
        return skip

    return best(len(values) - 1, capacity)


def cut_rod(prices: Sequence[int]) -> int:
    """Best value from cutting a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    if not prices:
        raise ValueError("at least one price is required")
    length = len(prices)
    return unbounded_knapsack(list(prices), list(range(1, length + 1)), length)