"""Monotonic-stack algorithms over sequences of integers."""

from __future__ import annotations

from typing import Iterable, Sequence

MOD = 10**9 + 7


def _sum_of_minimums(values: Sequence[int]) -> int:
    """Return the exact sum of the minimum of every contiguous subarray."""
    n = len(values)
    previous = [-1] * n
    following = [n] * n
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        previous[i] = stack[-1] if stack else -1
        stack.append(i)
    stack.clear()
    for i in range(n - 1, -1, -1):
        while stack and values[stack[-1]] > values[i]:
            stack.pop()
        following[i] = stack[-1] if stack else n
        stack.append(i)
    return sum(
        value * (i - left) * (right - i)
        for i, (value, left, right) in enumerate(zip(values, previous, following))
    )


def sum_subarray_mins(nums: Iterable[int]) -> int:
    """Return the sum of the minimum of every subarray, modulo 1_000_000_007."""
    return _sum_of_minimums(list(nums)) % MOD


def sum_subarray_ranges(nums: Iterable[int]) -> int:
    """Return the sum of ``max - min`` over every subarray."""
    values = list(nums)
    maximums = -_sum_of_minimums([-v for v in values])
    return maximums - _sum_of_minimums(values)


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    if k < 0:
        raise ValueError("k must not be negative")
    kept: list[str] = []
    for digit in num:
        while kept and kept[-1] > digit and k > 0:
            kept.pop()
            k -= 1
        kept.append(digit)
    if k:
        del kept[max(len(kept) - k, 0):]
    return "".join(kept).lstrip("0") or "0"


def trap(heights: Sequence[int]) -> int:
    """Return how much water collects between bars of the given heights."""
    if not heights:
        return 0
    left, right = 0, len(heights) - 1
    left_max, right_max = heights[left], heights[right]
    water = 0
    while left < right:
        if heights[right] >= heights[left]:
            left_max = max(left_max, heights[left])
            water += left_max - heights[left]
            left += 1
        else:
            right_max = max(right_max, heights[right])
            water += right_max - heights[right]
            right -= 1
    return water


def next_greater_element(queries: Iterable[int], nums: Sequence[int]) -> list[int]:
    """For each query value, return the next greater value after it in ``nums``.

    ``-1`` means no greater value follows. Every query must occur in ``nums``;
    for a repeated value, its last occurrence is used.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums):
        while stack and stack[-1] < value:
            stack.pop()
        if stack and stack[-1] == value:
            continue
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    result = []
    for query in queries:
        if query not in greater:
            raise KeyError(f"{query} does not occur in nums")
        result.append(greater[query])
    return result


def next_greater_circular(nums: Sequence[int]) -> list[int]:
    """Return the next greater value for each element, wrapping around; ``-1`` if none."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in range(2 * n - 1, -1, -1):
        index = i % n
        while stack and nums[stack[-1]] <= nums[index]:
            stack.pop()
        if i < n and stack:
            result[index] = nums[stack[-1]]
        stack.append(index)
    return result


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative ones left; in a collision the smaller
    one is destroyed, and both are when they are the same size.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        if asteroid >= 0:
            stack.append(asteroid)
            continue
        while stack and 0 < stack[-1] < -asteroid:
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(asteroid)
        elif stack[-1] == -asteroid:
            stack.pop()
    return stack


def largest_rectangle(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside a histogram."""
    best = 0
    stack: list[int] = []
    for i, height in enumerate([*heights, -1]):
        while stack and heights[stack[-1]] > height:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, heights[top] * (i - left - 1))
        stack.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[object]]) -> int:
    """Return the area of the largest all-``'1'`` rectangle in a grid of ``'0'``/``'1'``."""
    best = 0
    heights: list[int] = []
    for row in matrix:
        if not heights:
            heights = [0] * len(row)
        elif len(row) != len(heights):
            raise ValueError("rows differ in length")
        heights = [h + 1 if str(cell) == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle(heights))
    return best


class StockSpanner:
    """Reports, for each day's price, how many consecutive days up to it had
    a price no higher."""

    def __init__(self) -> None:
        self._day = -1
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        self._day += 1
        while self._stack and self._stack[-1][0] <= price:
            self._stack.pop()
        span = self._day - self._stack[-1][1] if self._stack else self._day + 1
        self._stack.append((price, self._day))
        return span