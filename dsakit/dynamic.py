"""Dynamic programming, binary search and parsing exercises on sequences."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence

_MAX_CAPACITY = 10**9
"""Largest ship capacity considered by :func:`ship_within_days`."""


def ship_within_days(weights: Iterable[int], days: int) -> int:
    """Return the least capacity that ships ``weights`` in order within ``days``.

    Capacities from 1 to 10**9 are considered; ``-1`` means none of them works.
    """
    loads = list(weights)

    def fits(capacity: int) -> bool:
        trips = 1
        room = capacity
        for weight in loads:
            if weight > capacity:
                return False
            if room < weight:
                trips += 1
                room = capacity - weight
            else:
                room -= weight
        return trips <= days

    lo, hi = 1, _MAX_CAPACITY
    best = -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if fits(mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def max_sum_after_partitioning(values: Iterable[int], k: int) -> int:
    """Split into runs of at most ``k`` values, raise each run to its maximum, and
    return the largest possible total."""
    if k < 1:
        raise ValueError("k must be at least 1")
    items = list(values)
    n = len(items)
    best = [0] * (n + 1)
    for start in range(n - 1, -1, -1):
        window = items[start : start + k]
        best[start] = max(
            peak * size + best[start + size]
            for size, peak in enumerate(accumulate(window, max), 1)
        )
    return best[0]


_OPERATORS = "!&|"


def parse_bool_expr(expression: str) -> bool:
    """Evaluate an expression of ``t``, ``f``, ``!(e)``, ``&(e,...)`` and ``|(e,...)``."""
    stack: list[object] = []
    for ch in expression:
        if ch == ",":
            continue
        if ch == ")":
            operands: list[bool] = []
            while stack and stack[-1] != "(":
                operand = stack.pop()
                if not isinstance(operand, bool):
                    raise ValueError(f"malformed expression: {expression!r}")
                operands.append(operand)
            if not stack or not operands:
                raise ValueError(f"malformed expression: {expression!r}")
            stack.pop()
            operator = stack.pop() if stack else None
            if operator == "!":
                if len(operands) != 1:
                    raise ValueError("'!' takes exactly one operand")
                stack.append(not operands[0])
            elif operator == "&":
                stack.append(all(operands))
            elif operator == "|":
                stack.append(any(operands))
            else:
                raise ValueError(f"malformed expression: {expression!r}")
        elif ch in "tf":
            stack.append(ch == "t")
        elif ch in _OPERATORS or ch == "(":
            stack.append(ch)
        else:
            raise ValueError(f"unexpected character {ch!r}")
    if len(stack) != 1 or not isinstance(stack[0], bool):
        raise ValueError(f"malformed expression: {expression!r}")
    return stack[0]


def min_palindrome_cuts(text: str) -> int:
    """Return the fewest cuts that split ``text`` into palindromes."""
    n = len(text)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    cuts = [0] * n
    for end in range(n):
        best = end
        for start in range(end + 1):
            if text[start] == text[end] and (end - start < 2 or palindrome[start + 1][end - 1]):
                palindrome[start][end] = True
                best = 0 if start == 0 else min(best, cuts[start - 1] + 1)
        cuts[end] = best
    return cuts[-1]


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Count the square submatrices made entirely of ones in a 0/1 matrix."""
    sides = [list(row) for row in matrix]
    total = 0
    for i, row in enumerate(sides):
        for j, cell in enumerate(row):
            if cell == 1 and i > 0 and j > 0:
                row[j] = min(sides[i - 1][j], sides[i - 1][j - 1], row[j - 1]) + 1
            total += row[j]
    return total


def min_cost_cut_stick(length: int, cuts: Iterable[int]) -> int:
    """Return the least total cost of making every cut, where a cut costs the
    length of the piece it splits."""
    points = sorted([0, length, *cuts])
    m = len(points)
    cost = [[0] * m for _ in range(m)]
    for span in range(2, m):
        for i in range(m - span):
            j = i + span
            cost[i][j] = points[j] - points[i] + min(
                cost[i][k] + cost[k][j] for k in range(i + 1, j)
            )
    return cost[0][m - 1]


def max_coins(nums: Iterable[int]) -> int:
    """Return the most coins from bursting every balloon.

    Bursting a balloon pays the product of it and its current neighbours,
    with a 1 assumed beyond either end.
    """
    padded = [1, *nums, 1]
    m = len(padded)
    coins = [[0] * m for _ in range(m)]
    for span in range(2, m):
        for i in range(m - span):
            j = i + span
            coins[i][j] = max(
                padded[i] * padded[k] * padded[j] + coins[i][k] + coins[k][j]
                for k in range(i + 1, j)
            )
    return coins[0][m - 1]


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(text):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best