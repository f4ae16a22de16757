"""Common substrings, shortest common supersequences and distinct subsequences."""

from __future__ import annotations

from dpkit.lcs import lcs_table


def _longest_match(first: str, second: str) -> tuple[int, int]:
    """Length and end index in ``first`` of the earliest longest common substring."""
    best_length = 0
    best_end = -1
    above = [0] * (len(second) + 1)
    for i, char in enumerate(first):
        row = [0]
        for j, other in enumerate(second, start=1):
            run = above[j - 1] + 1 if char == other else 0
            row.append(run)
            if run > best_length:
                best_length = run
                best_end = i
        above = row
    return best_length, best_end


def longest_common_substring_length(first: str, second: str) -> int:
    """Length of the longest contiguous run shared by both strings."""
    length, _ = _longest_match(first, second)
    return length


def longest_common_substring(first: str, second: str) -> str:
    """The longest contiguous run shared by both strings.

    Among runs of equal length, the one ending earliest in ``first`` wins.
    Returns an empty string when the strings share no character.
    """
    length, end = _longest_match(first, second)
    if length == 0:
        return ""
    return first[end - length + 1 : end + 1]


def shortest_common_supersequence(first: str, second: str) -> str:
    """A shortest string that has both ``first`` and ``second`` as subsequences."""
    table = lcs_table(first, second)
    merged: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            merged.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            merged.append(first[i - 1])
            i -= 1
        else:
            merged.append(second[j - 1])
            j -= 1
    merged.extend(reversed(first[:i]))
    merged.extend(reversed(second[:j]))
    return "".join(reversed(merged))


def distinct_subsequences(text: str, pattern: str) -> int:
    """Number of distinct ways ``pattern`` occurs in ``text`` as a subsequence."""
    ways = [1] + [0] * len(pattern)
    for char in text:
        for j in range(len(pattern), 0, -1):
            if pattern[j - 1] == char:
                ways[j] += ways[j - 1]
    return ways[-1]