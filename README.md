# dpkit

A small library of classic dynamic-programming algorithms. It has no
dependencies and works on plain lists and strings.

## Installation

```
pip install dpkit
```

## What is included

| Module            | Functions |
|-------------------|-----------|
| `dpkit.knapsack`  | `knapsack_01`, `knapsack_01_memo`, `unbounded_knapsack`, `unbounded_knapsack_memo`, `cut_rod` |
| `dpkit.coins`     | `min_coins`, `min_coins_memo`, `count_combinations` |
| `dpkit.subsets`   | `is_subset_sum`, `is_subset_sum_memo`, `can_partition`, `min_subset_difference`, `count_subsets_with_sum`, `count_partitions`, `target_sum_ways`, `target_sum_ways_bruteforce` |
| `dpkit.grid`      | `cherry_pickup`, `cherry_pickup_memo` |
| `dpkit.lcs`       | `lcs_table`, `lcs_length`, `lcs_length_memo`, `lcs_string`, `longest_palindromic_subsequence`, `min_insertions_to_palindrome`, `min_steps_to_equal` |
| `dpkit.strings`   | `longest_common_substring_length`, `longest_common_substring`, `shortest_common_supersequence`, `distinct_subsequences` |

Several problems have a bottom-up (tabulated) version and a top-down version
with a `_memo` suffix. Both give the same answers.

Invalid input, such as an empty item list, a negative capacity or amount, or
mismatched `values` and `weights`, raises `ValueError`.

## Examples

```python
from dpkit.knapsack import knapsack_01, unbounded_knapsack, cut_rod
from dpkit.coins import min_coins, count_combinations
from dpkit.subsets import can_partition, min_subset_difference, target_sum_ways
from dpkit.grid import cherry_pickup
from dpkit.lcs import lcs_string, longest_palindromic_subsequence
from dpkit.strings import longest_common_substring, distinct_subsequences

knapsack_01(50, [60, 100, 120], [10, 20, 30])         # 220
unbounded_knapsack([60, 100, 120], [10, 20, 30], 50)  # 300
cut_rod([1, 5, 8, 9, 10, 17, 17, 20])                 # 22

min_coins([1, 2, 5], 11)          # 3  (None when the amount cannot be made)
count_combinations(5, [1, 2, 5])  # 4  (counted modulo 10**9 + 7)

can_partition([1, 5, 11, 5])          # True
min_subset_difference([1, 6, 11, 5])  # 1
target_sum_ways([1, 1, 1, 1, 1], 3)   # 5

cherry_pickup([[3, 1, 1], [2, 5, 1], [1, 5, 5], [2, 1, 1]])  # 24

lcs_string("abcde", "ace")                    # "ace"
longest_palindromic_subsequence("bbabcbcab")  # 7

longest_common_substring("abcde", "abfce")  # "ab"
distinct_subsequences("rabbbit", "rabbit")  # 3
```

## What it does not do

`dpkit` is a library only: it has no command-line tool, and it returns the
optimal value (or one optimal string) rather than listing every optimal
solution.

## Running the tests

```
pip install -e ".[test]"
pytest
```