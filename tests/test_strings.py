from math import comb

import pytest

from dpkit.lcs import lcs_length
from dpkit.strings import (
    distinct_subsequences,
    longest_common_substring,
    longest_common_substring_length,
    shortest_common_supersequence,
)


def _is_subsequence(small: str, big: str) -> bool:
    chars = iter(big)
    return all(char in chars for char in small)


def test_common_substring_length_example():
    assert longest_common_substring_length("abcde", "abfce") == 2


def test_common_substring_example():
    assert longest_common_substring("abcde", "abfce") == "ab"


def test_common_substring_none_shared():
    assert longest_common_substring("abc", "xyz") == ""
    assert longest_common_substring_length("abc", "xyz") == 0


def test_common_substring_empty_input():
    assert longest_common_substring("", "abc") == ""
    assert longest_common_substring_length("abc", "") == 0


def test_common_substring_prefers_earliest_in_first():
    assert longest_common_substring("abxcd", "cdyab") == "ab"


@pytest.mark.parametrize(
    "first, second",
    [("abcde", "abfce"), ("banana", "ananas"), ("mississippi", "sip"), ("aaaa", "aa")],
)
def test_common_substring_is_shared_and_consistent(first, second):
    found = longest_common_substring(first, second)
    assert found in first
    assert found in second
    assert len(found) == longest_common_substring_length(first, second)


def test_common_substring_of_identical_strings():
    assert longest_common_substring("dynamic", "dynamic") == "dynamic"


@pytest.mark.parametrize(
    "first, second",
    [("abac", "cab"), ("geek", "eke"), ("abc", "def"), ("aaa", "aa"), ("brute", "groot")],
)
def test_supersequence_contains_both_and_is_shortest(first, second):
    merged = shortest_common_supersequence(first, second)
    assert _is_subsequence(first, merged)
    assert _is_subsequence(second, merged)
    assert len(merged) == len(first) + len(second) - lcs_length(first, second)


def test_supersequence_with_empty_side():
    assert shortest_common_supersequence("", "abc") == "abc"
    assert shortest_common_supersequence("abc", "") == "abc"


def test_supersequence_of_identical_strings():
    assert shortest_common_supersequence("same", "same") == "same"


def test_distinct_subsequences_example():
    assert distinct_subsequences("rabbbit", "rabbit") == 3


def test_distinct_subsequences_empty_pattern():
    assert distinct_subsequences("anything", "") == 1
    assert distinct_subsequences("", "") == 1


def test_distinct_subsequences_pattern_too_long():
    assert distinct_subsequences("ab", "abc") == 0
    assert distinct_subsequences("", "a") == 0


def test_distinct_subsequences_equal_strings():
    assert distinct_subsequences("pattern", "pattern") == 1


@pytest.mark.parametrize("n, k", [(5, 2), (8, 3), (10, 10), (30, 15)])
def test_distinct_subsequences_repeated_letter(n, k):
    assert distinct_subsequences("a" * n, "a" * k) == comb(n, k)


def test_distinct_subsequences_large_count_is_exact():
    assert distinct_subsequences("a" * 80, "a" * 40) == comb(80, 40)