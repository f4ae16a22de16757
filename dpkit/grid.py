"""Two robots collecting cherries down a grid."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _validate(grid: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    rows = tuple(tuple(row) for row in grid)
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one row and one column")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _gain(row: Sequence[int], first: int, second: int) -> int:
    return row[first] if first == second else row[first] + row[second]


def _moves(column: int, width: int) -> range:
    return range(max(column - 1, 0), min(column + 2, width))


def cherry_pickup(grid: Sequence[Sequence[int]]) -> int:
    """Most cherries two robots collect starting in the top corners.

    Each step moves down one row and at most one column sideways; a cell
    visited by both robots is counted once.
    """
    rows = _validate(grid)
    width = len(rows[0])
    below = [[_gain(rows[-1], a, b) for b in range(width)] for a in range(width)]
    for row in reversed(rows[:-1]):
        below = [
            [
                _gain(row, a, b)
                + max(below[na][nb] for na in _moves(a, width) for nb in _moves(b, width))
                for b in range(width)
            ]
            for a in range(width)
        ]
    return below[0][width - 1]


def cherry_pickup_memo(grid: Sequence[Sequence[int]]) -> int:
    """Same as :func:`cherry_pickup`, by memoised recursion."""
    rows = _validate(grid)
    width = len(rows[0])
    last = len(rows) - 1

    @lru_cache(maxsize=None)
    def best(index: int, first: int, second: int) -> int:
        gained = _gain(rows[index], first, second)
        if index == last:
            return gained
        return gained + max(
            best(index + 1, na, nb)
            for na in _moves(first, width)
            for nb in _moves(second, width)
        )

    return best(0, 0, width - 1)