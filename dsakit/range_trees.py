"""Segment trees over fixed-size sequences with point updates and range queries.

All indices are zero-based and query ranges are inclusive on both ends.
A query range that does not overlap the sequence yields the identity element.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")

INT_MAX = 2**31 - 1
"""Value reported by minimum queries over an empty range."""

_ALPHABET_SIZE = 26


class SegmentTree(Generic[T]):
    """A segment tree over leaf values joined by an associative ``combine``."""

    def __init__(
        self,
        leaves: Iterable[T],
        combine: Callable[[T, T], T],
        identity: T,
    ) -> None:
        items = list(leaves)
        if not items:
            raise ValueError("a segment tree needs at least one element")
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._nodes: list[T] = [identity] * (4 * self._size)
        self._build(items, 0, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, items: Sequence[T], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._nodes[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * node + 1, lo, mid)
        self._build(items, 2 * node + 2, mid + 1, hi)
        self._nodes[node] = self._combine(
            self._nodes[2 * node + 1], self._nodes[2 * node + 2]
        )

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> T:
        if left > hi or lo > right:
            return self._identity
        if left <= lo and hi <= right:
            return self._nodes[node]
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node + 1, lo, mid, left, right),
            self._query(2 * node + 2, mid + 1, hi, left, right),
        )

    def query(self, left: int, right: int) -> T:
        """Combine the leaves from ``left`` to ``right`` inclusive."""
        return self._query(0, 0, self._size - 1, left, right)

    def update(self, pos: int, leaf: T) -> None:
        """Replace the leaf at ``pos`` and refresh its ancestors."""
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range for size {self._size}")
        node, lo, hi = 0, 0, self._size - 1
        path = []
        while lo != hi:
            path.append(node)
            mid = (lo + hi) // 2
            if pos <= mid:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid + 1
        self._nodes[node] = leaf
        for parent in reversed(path):
            self._nodes[parent] = self._combine(
                self._nodes[2 * parent + 1], self._nodes[2 * parent + 2]
            )


class MinSegmentTree(SegmentTree[int]):
    """Range minimum with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, min, INT_MAX)

    def query(self, left: int, right: int) -> int:
        """Return the minimum of ``values[left..right]``."""
        return super().query(left, right)

    def update(self, pos: int, value: int) -> None:
        super().update(pos, value)


def _combine_min_count(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    low = min(a[0], b[0])
    count = (a[1] if a[0] == low else 0) + (b[1] if b[0] == low else 0)
    return low, count


class MinCountSegmentTree(SegmentTree[tuple[int, int]]):
    """Range minimum together with how many times it occurs."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(((v, 1) for v in values), _combine_min_count, (INT_MAX, 0))

    def query(self, left: int, right: int) -> tuple[int, int]:
        """Return ``(minimum, occurrences)`` over ``values[left..right]``."""
        return super().query(left, right)

    def update(self, pos: int, value: int) -> None:
        super().update(pos, (value, 1))


class SumSegmentTree(SegmentTree[int]):
    """Range sum with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, lambda a, b: a + b, 0)

    def query(self, left: int, right: int) -> int:
        """Return the sum of ``values[left..right]``."""
        return super().query(left, right)

    def update(self, pos: int, value: int) -> None:
        super().update(pos, value)


def _letter_mask(char: str) -> int:
    if len(char) != 1 or not "a" <= char <= "z":
        raise ValueError(f"expected a lowercase letter, got {char!r}")
    return 1 << (ord(char) - ord("a"))


class DistinctCharSegmentTree(SegmentTree[int]):
    """Counts distinct lowercase letters in a substring, with point edits."""

    def __init__(self, text: str) -> None:
        super().__init__((_letter_mask(c) for c in text), lambda a, b: a | b, 0)

    def query(self, left: int, right: int) -> int:
        """Return the number of distinct letters in ``text[left..right]``."""
        mask = super().query(left, right)
        return bin(mask & ((1 << _ALPHABET_SIZE) - 1)).count("1")

    def update(self, pos: int, char: str) -> None:
        super().update(pos, _letter_mask(char))


def _combine_prefix(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return max(a[1] + b[0], a[0]), a[1] + b[1]


class PrefixSumSegmentTree(SegmentTree[tuple[int, int]]):
    """Maximum prefix sum of a range; the empty prefix counts as zero."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(((max(v, 0), v) for v in values), _combine_prefix, (0, 0))

    def query(self, left: int, right: int) -> int:
        """Return the largest prefix sum of ``values[left..right]``."""
        return super().query(left, right)[0]

    def update(self, pos: int, value: int) -> None:
        super().update(pos, (max(value, 0), value))


def _combine_brackets(
    a: tuple[int, int, int], b: tuple[int, int, int]
) -> tuple[int, int, int]:
    opened_a, closed_a, matched_a = a
    opened_b, closed_b, matched_b = b
    paired = min(opened_a, closed_b)
    return (
        opened_a - paired + opened_b,
        closed_b - paired + closed_a,
        matched_a + matched_b + paired,
    )


class BracketSegmentTree(SegmentTree[tuple[int, int, int]]):
    """Longest correct bracket subsequence of a substring.

    Any character other than ``(`` is treated as a closing bracket.
    """

    def __init__(self, text: str) -> None:
        super().__init__(
            ((1, 0, 0) if c == "(" else (0, 1, 0) for c in text),
            _combine_brackets,
            (0, 0, 0),
        )

    def query(self, left: int, right: int) -> int:
        """Return the length of the longest correct subsequence of ``text[left..right]``."""
        return 2 * super().query(left, right)[2]


class HotelSegmentTree(SegmentTree[int]):
    """Free capacities of hotels, serving groups at the first hotel that fits."""

    def __init__(self, capacities: Iterable[int]) -> None:
        super().__init__(capacities, max, 0)

    def max(self) -> int:
        """Return the largest free capacity of any hotel."""
        return self._nodes[0]

    def allocate(self, rooms: int) -> int:
        """Book ``rooms`` in the leftmost hotel that can hold them; return its index."""
        if rooms > self.max():
            raise ValueError(f"no hotel has {rooms} free rooms")
        node, lo, hi = 0, 0, self._size - 1
        while lo != hi:
            mid = (lo + hi) // 2
            if rooms <= self._nodes[2 * node + 1]:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid + 1
        self.update(lo, self._nodes[node] - rooms)
        return lo


def assign_hotels(capacities: Iterable[int], groups: Iterable[int]) -> list[int]:
    """Return the one-based hotel for each group in turn, or 0 if none fits."""
    tree = HotelSegmentTree(capacities)
    return [tree.allocate(g) + 1 if g <= tree.max() else 0 for g in groups]