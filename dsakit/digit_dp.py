"""Digit dynamic programming: counting and summing numbers by their digits.

Every range function works on an inclusive range ``[low, high]`` and is
computed as ``upto(high) - upto(low - 1)``, where ``upto`` of a negative
number is zero.
"""

from __future__ import annotations

from functools import lru_cache

MOD = 10**9 + 7
SEGMENT_MOD = 998244353
_UINT64 = 1 << 64
_NO_DIGIT = 10
_MAX_NONZERO = 3


def _digits(value: int) -> tuple[int, ...]:
    return tuple(int(c) for c in str(value))


def _count_no_adjacent_upto(value: int) -> int:
    if value < 0:
        return 0
    digits = _digits(value)

    @lru_cache(maxsize=None)
    def rec(pos: int, tight: bool, prev: int) -> int:
        if pos == len(digits):
            return 1
        limit = digits[pos] if tight else 9
        total = 0
        for d in range(limit + 1):
            if d == prev:
                continue
            nxt = _NO_DIGIT if d == 0 and prev == _NO_DIGIT else d
            total += rec(pos + 1, tight and d == limit, nxt)
        return total

    return rec(0, True, _NO_DIGIT)


def count_no_adjacent_equal(low: int, high: int) -> int:
    """Count numbers in ``[low, high]`` with no two equal neighbouring digits."""
    return _count_no_adjacent_upto(high) - _count_no_adjacent_upto(low - 1)


def _count_classy_upto(value: int) -> int:
    if value < 0:
        return 0
    digits = _digits(value)

    @lru_cache(maxsize=None)
    def rec(pos: int, tight: bool, nonzero: int) -> int:
        if pos == len(digits):
            return 1
        if nonzero == _MAX_NONZERO:
            return rec(pos + 1, tight and digits[pos] == 0, nonzero)
        limit = digits[pos] if tight else 9
        return sum(
            rec(pos + 1, tight and d == limit, nonzero + (d != 0))
            for d in range(limit + 1)
        )

    return rec(0, True, 0)


def count_classy(low: int, high: int) -> int:
    """Count numbers in ``[low, high]`` with at most three non-zero digits."""
    return _count_classy_upto(high) - _count_classy_upto(low - 1)


def count_digit_sum_multiples(bound: int | str, divisor: int) -> int:
    """Count integers in ``[1, bound]`` whose digit sum is a multiple of ``divisor``.

    ``bound`` may be given as a decimal string of any length. The result is
    taken modulo 1_000_000_007.
    """
    text = str(bound)
    if not text or not text.isdigit():
        raise ValueError(f"bound must be a non-negative decimal number, got {bound!r}")
    if divisor < 1:
        raise ValueError("divisor must be positive")

    free = [0] * divisor  # prefixes already below the bound, by digit sum mod divisor
    tight_mod = 0
    for ch in text:
        digit = int(ch)
        following = [0] * divisor
        for mod, count in enumerate(free):
            if count:
                for d in range(10):
                    following[(mod + d) % divisor] += count
        for d in range(digit):
            following[(tight_mod + d) % divisor] += 1
        free = [count % MOD for count in following]
        tight_mod = (tight_mod + digit) % divisor

    total = free[0] + (tight_mod == 0)
    return (total - 1) % MOD


def _segment_sum_upto(value: int, k: int) -> int:
    if value < 0:
        return 0
    digits = _digits(value)
    length = len(digits)
    weights = [pow(10, length - pos - 1, SEGMENT_MOD) for pos in range(length)]

    @lru_cache(maxsize=None)
    def rec(pos: int, tight: bool, mask: int) -> tuple[int, int]:
        if pos == length:
            return 1, 0
        limit = digits[pos] if tight else 9
        count = total = 0
        for d in range(limit + 1):
            next_mask = mask
            if not mask & (1 << d):
                if mask.bit_count() >= k:
                    continue
                next_mask |= 1 << d
            sub_count, sub_total = rec(pos + 1, tight and d == limit, next_mask)
            count = (count + sub_count) % SEGMENT_MOD
            total = (total + sub_total + d * weights[pos] * sub_count) % SEGMENT_MOD
        return count, total

    return rec(0, True, 0)[1]


def segment_digit_sum(low: int, high: int, k: int) -> int:
    """Sum numbers in ``[low, high]`` made of at most ``k`` distinct digits.

    Numbers are padded with leading zeros to the length of the upper bound
    being counted, and those zeros count as the digit 0. The result is taken
    modulo 998244353.
    """
    return (_segment_sum_upto(high, k) - _segment_sum_upto(low - 1, k)) % SEGMENT_MOD


def _digit_sum_upto(value: int) -> int:
    if value < 0:
        return 0
    digits = _digits(value)

    @lru_cache(maxsize=None)
    def rec(pos: int, tight: bool) -> tuple[int, int]:
        if pos == len(digits):
            return 1, 0
        limit = digits[pos] if tight else 9
        count = total = 0
        for d in range(limit + 1):
            sub_count, sub_total = rec(pos + 1, tight and d == limit)
            count += sub_count
            total += sub_total + d * sub_count
        return count, total

    return rec(0, True)[1]


def digit_sum_range(low: int, high: int) -> int:
    """Sum the digits of every number in ``[low, high]``, as an unsigned 64-bit value."""
    return (_digit_sum_upto(high) - _digit_sum_upto(low - 1)) % _UINT64