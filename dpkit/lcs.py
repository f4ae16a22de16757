"""Longest common subsequence and the problems that reduce to it."""

from __future__ import annotations

from functools import lru_cache


def lcs_table(first: str, second: str) -> list[list[int]]:
    """Table whose cell ``[i][j]`` is the LCS length of ``first[:i]`` and ``second[:j]``."""
    width = len(second)
    table = [[0] * (width + 1)]
    for char in first:
        above = table[-1]
        row = [0]
        for j, other in enumerate(second, start=1):
            if char == other:
                row.append(above[j - 1] + 1)
            else:
                row.append(max(above[j], row[j - 1]))
        table.append(row)
    return table


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    return lcs_table(first, second)[-1][-1]


def lcs_length_memo(first: str, second: str) -> int:
    """Length of the longest common subsequence, by memoised recursion."""

    @lru_cache(maxsize=None)
    def length(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        if first[i - 1] == second[j - 1]:
            return 1 + length(i - 1, j - 1)
        return max(length(i - 1, j), length(i, j - 1))

    return length(len(first), len(second))


def lcs_string(first: str, second: str) -> str:
    """One longest common subsequence, traced back through the table.

    On a tie the walk moves left along ``second`` before moving up along ``first``.
    """
    table = lcs_table(first, second)
    picked: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that is a palindrome."""
    return lcs_length(text, text[::-1])


def min_insertions_to_palindrome(text: str) -> int:
    """Fewest characters to insert so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_steps_to_equal(first: str, second: str) -> int:
    """Fewest single-character deletions and insertions making the strings equal."""
    common = lcs_length(first, second)
    return (len(first) - common) + (len(second) - common)