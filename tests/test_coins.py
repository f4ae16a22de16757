import random

import pytest

from dpkit.coins import MOD, count_combinations, min_coins, min_coins_memo


def _random_case(seed):
    rng = random.Random(seed)
    count = rng.randint(1, 5)
    coins = [rng.randint(1, 12) for _ in range(count)]
    amount = rng.randint(0, 60)
    return coins, amount


def test_min_coins_example():
    assert min_coins([1, 2, 5], 11) == 3


def test_min_coins_memo_example():
    assert min_coins_memo([1, 2, 5], 11) == 3


def test_count_combinations_example():
    assert count_combinations(5, [1, 2, 5]) == 4


@pytest.mark.parametrize("func", [min_coins, min_coins_memo])
def test_min_coins_impossible(func):
    assert func([2], 3) is None


@pytest.mark.parametrize("func", [min_coins, min_coins_memo])
def test_min_coins_zero_amount(func):
    assert func([1, 2, 5], 0) == 0


def test_count_combinations_zero_amount():
    assert count_combinations(0, [1, 2, 5]) == 1


@pytest.mark.parametrize("seed", range(30))
def test_min_coins_variants_agree(seed):
    coins, amount = _random_case(seed)
    assert min_coins(coins, amount) == min_coins_memo(coins, amount)


@pytest.mark.parametrize("seed", range(30))
def test_min_coins_and_combinations_agree_on_feasibility(seed):
    coins, amount = _random_case(seed)
    fewest = min_coins(coins, amount)
    ways = count_combinations(amount, coins)
    assert (fewest is None) == (ways == 0)


@pytest.mark.parametrize("seed", range(20))
def test_unit_coin_always_feasible(seed):
    coins, amount = _random_case(seed)
    coins = [1, *coins]
    fewest = min_coins(coins, amount)
    assert fewest is not None
    assert fewest <= amount


@pytest.mark.parametrize("seed", range(20))
def test_min_coins_bounded_by_amount_over_largest(seed):
    coins, amount = _random_case(seed)
    fewest = min_coins(coins, amount)
    if fewest is None:
        assert count_combinations(amount, coins) == 0
    else:
        assert fewest * max(coins) >= amount


def test_single_coin_exact_multiple():
    assert min_coins([7], 63) == 63 // 7
    assert count_combinations(63, [7]) == 1


def test_count_combinations_order_independent():
    assert count_combinations(30, [1, 2, 5, 10]) == count_combinations(30, [10, 5, 2, 1])


def test_count_combinations_stays_below_modulus():
    assert 0 <= count_combinations(2000, [1, 2, 3, 5, 7, 11]) < MOD


@pytest.mark.parametrize("func", [min_coins, min_coins_memo])
def test_min_coins_rejects_bad_input(func):
    with pytest.raises(ValueError):
        func([], 5)
    with pytest.raises(ValueError):
        func([0, 1], 5)
    with pytest.raises(ValueError):
        func([1], -1)


def test_count_combinations_rejects_bad_input():
    with pytest.raises(ValueError):
        count_combinations(5, [])
    with pytest.raises(ValueError):
        count_combinations(5, [-1])
    with pytest.raises(ValueError):
        count_combinations(-2, [1])