"""Coin change: fewest coins and number of combinations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

MOD = 1_000_000_007


def _validate(coins: Sequence[int], amount: int) -> None:
    if not coins:
        raise ValueError("at least one coin denomination is required")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")


def min_coins(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``, or None if it cannot be made."""
    _validate(coins, amount)
    first = coins[0]
    fewest: list[float] = [
        total // first if total % first == 0 else math.inf for total in range(amount + 1)
    ]
    for coin in coins[1:]:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return None if result == math.inf else int(result)


def min_coins_memo(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount`` by memoised recursion, or None."""
    _validate(coins, amount)
    coins = tuple(coins)

    @lru_cache(maxsize=None)
    def fewest(index: int, total: int) -> float:
        if index == 0:
            return total // coins[0] if total % coins[0] == 0 else math.inf
        skip = fewest(index - 1, total)
        if coins[index] <= total:
            return min(skip, 1 + fewest(index, total - coins[index]))
        return skip

    result = fewest(len(coins) - 1, amount)
    return None if result == math.inf else int(result)


def count_combinations(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations summing to ``amount``, modulo 10**9 + 7."""
    _validate(coins, amount)
    first = coins[0]
    ways = [1 if total % first == 0 else 0 for total in range(amount + 1)]
    for coin in coins[1:]:
        for total in range(coin, amount + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[amount]