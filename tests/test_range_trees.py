import random

import pytest

from dsakit.range_trees import (
    INT_MAX,
    BracketSegmentTree,
    DistinctCharSegmentTree,
    HotelSegmentTree,
    MinCountSegmentTree,
    MinSegmentTree,
    PrefixSumSegmentTree,
    SegmentTree,
    SumSegmentTree,
    assign_hotels,
)


def _ranges(n):
    for left in range(n):
        for right in range(left, n):
            yield left, right


@pytest.fixture
def values():
    rng = random.Random(7)
    return [rng.randint(-20, 20) for _ in range(13)]


def test_generic_tree_non_commutative_combine():
    tree = SegmentTree(list("abcdefg"), lambda a, b: a + b, "")
    assert len(tree) == 7
    for left, right in _ranges(7):
        assert tree.query(left, right) == "abcdefg"[left : right + 1]
    tree.update(3, "X")
    assert tree.query(0, 6) == "abcXefg"


def test_generic_tree_rejects_empty():
    with pytest.raises(ValueError):
        SegmentTree([], min, INT_MAX)


def test_update_out_of_range():
    tree = SumSegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.update(3, 5)
    with pytest.raises(IndexError):
        tree.update(-1, 5)


def test_min_tree_matches_slices(values):
    tree = MinSegmentTree(values)
    data = list(values)
    rng = random.Random(1)
    for _ in range(30):
        pos, val = rng.randrange(len(data)), rng.randint(-50, 50)
        tree.update(pos, val)
        data[pos] = val
        for left, right in _ranges(len(data)):
            assert tree.query(left, right) == min(data[left : right + 1])


def test_min_tree_empty_range_gives_int_max():
    tree = MinSegmentTree([5, 6])
    assert tree.query(1, 0) == INT_MAX


def test_min_count_tree(values):
    tree = MinCountSegmentTree([v % 3 for v in values])
    data = [v % 3 for v in values]
    for left, right in _ranges(len(data)):
        part = data[left : right + 1]
        assert tree.query(left, right) == (min(part), part.count(min(part)))
    tree.update(0, -9)
    data[0] = -9
    assert tree.query(0, len(data) - 1) == (-9, 1)


def test_sum_tree(values):
    tree = SumSegmentTree(values)
    data = list(values)
    tree.update(4, 100)
    data[4] = 100
    for left, right in _ranges(len(data)):
        assert tree.query(left, right) == sum(data[left : right + 1])


def test_distinct_chars():
    text = "abacabadabacaba"
    tree = DistinctCharSegmentTree(text)
    chars = list(text)
    for left, right in _ranges(len(chars)):
        assert tree.query(left, right) == len(set(chars[left : right + 1]))
    tree.update(1, "z")
    chars[1] = "z"
    assert tree.query(0, len(chars) - 1) == len(set(chars))


def test_distinct_chars_rejects_non_letters():
    with pytest.raises(ValueError):
        DistinctCharSegmentTree("ab1")
    tree = DistinctCharSegmentTree("abc")
    with pytest.raises(ValueError):
        tree.update(0, "A")


def test_prefix_sum_tree(values):
    tree = PrefixSumSegmentTree(values)
    data = list(values)
    tree.update(2, -7)
    data[2] = -7
    for left, right in _ranges(len(data)):
        part = data[left : right + 1]
        prefixes = [sum(part[:i]) for i in range(len(part) + 1)]
        assert tree.query(left, right) == max(prefixes)


def _matched_length(text):
    depth = pairs = 0
    for c in text:
        if c == "(":
            depth += 1
        elif depth:
            depth -= 1
            pairs += 1
    return 2 * pairs


def test_brackets():
    text = "())(())(())("
    tree = BracketSegmentTree(text)
    for left, right in _ranges(len(text)):
        assert tree.query(left, right) == _matched_length(text[left : right + 1])


def test_brackets_balanced_whole():
    text = "(()())"
    assert BracketSegmentTree(text).query(0, len(text) - 1) == len(text)


def test_assign_hotels_worked_example():
    assert assign_hotels([3, 2, 4, 1, 5, 5, 2, 6], [4, 4, 8, 1, 1]) == [3, 5, 0, 1, 1]


def test_hotel_allocate_leftmost_and_capacity():
    rng = random.Random(3)
    caps = [rng.randint(0, 10) for _ in range(9)]
    tree = HotelSegmentTree(caps)
    free = list(caps)
    for _ in range(20):
        want = rng.randint(1, 10)
        assert tree.max() == max(free)
        if want > max(free):
            with pytest.raises(ValueError):
                tree.allocate(want)
            continue
        idx = tree.allocate(want)
        assert free[idx] >= want
        assert all(c < want for c in free[:idx])
        free[idx] -= want
    assert tree.max() == max(free)