import pytest

from dsakit.dynamic import (
    count_squares,
    longest_unique_substring,
    max_coins,
    max_sum_after_partitioning,
    min_cost_cut_stick,
    min_palindrome_cuts,
    parse_bool_expr,
    ship_within_days,
)


@pytest.mark.parametrize("weights", [[1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [3, 2, 2, 4, 1, 4], [1, 2, 3, 1, 1]])
def test_ship_one_day_per_package(weights):
    assert ship_within_days(weights, len(weights)) == max(weights)


@pytest.mark.parametrize("weights", [[1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [3, 2, 2, 4, 1, 4]])
def test_ship_single_day(weights):
    assert ship_within_days(weights, 1) == sum(weights)


def test_ship_capacity_bounds_and_monotone():
    weights = [3, 2, 2, 4, 1, 4]
    results = [ship_within_days(weights, d) for d in range(1, len(weights) + 1)]
    assert results == sorted(results, reverse=True)
    assert all(max(weights) <= r <= sum(weights) for r in results)


def test_ship_impossible():
    assert ship_within_days([10**9 + 1], 5) == -1
    assert ship_within_days([1, 2], 0) == -1


@pytest.mark.parametrize("values", [[1, 15, 7, 9, 2, 5, 10], [1, 4, 1, 5, 7, 3, 6, 1, 9, 9, 3], [1]])
def test_partition_k_one_is_sum(values):
    assert max_sum_after_partitioning(values, 1) == sum(values)


@pytest.mark.parametrize("values", [[1, 15, 7, 9, 2, 5, 10], [3, 1, 2]])
def test_partition_whole_array(values):
    assert max_sum_after_partitioning(values, len(values)) == max(values) * len(values)


def test_partition_monotone_in_k():
    values = [1, 4, 1, 5, 7, 3, 6, 1, 9, 9, 3]
    results = [max_sum_after_partitioning(values, k) for k in range(1, len(values) + 1)]
    assert results == sorted(results)
    assert results[-1] == max(values) * len(values)


def test_partition_rejects_bad_k():
    with pytest.raises(ValueError):
        max_sum_after_partitioning([1, 2], 0)


@pytest.mark.parametrize("expression", ["|(&(t,f,t),!(t))", "!(&(!(&(f)),&(t),|(f,f,t)))"])
def test_bool_expressions_from_source(expression):
    assert parse_bool_expr(expression) is False


SUBEXPRESSIONS = ["t", "f", "!(t)", "&(t,f)", "|(f,t)", "&(|(f))", "|(&(t,f,t),!(t))"]


@pytest.mark.parametrize("expression", SUBEXPRESSIONS)
def test_not_negates(expression):
    assert parse_bool_expr(f"!({expression})") == (not parse_bool_expr(expression))


@pytest.mark.parametrize("a", SUBEXPRESSIONS)
@pytest.mark.parametrize("b", ["t", "f", "!(&(f,t))"])
def test_and_or_combine(a, b):
    left, right = parse_bool_expr(a), parse_bool_expr(b)
    assert parse_bool_expr(f"&({a},{b})") == (left and right)
    assert parse_bool_expr(f"|({a},{b})") == (left or right)


@pytest.mark.parametrize("expression", ["", "x", "&(t", "t)", "!(t,f)", "(t)", "&t", "|()"])
def test_bool_malformed(expression):
    with pytest.raises(ValueError):
        parse_bool_expr(expression)


@pytest.mark.parametrize("text", ["", "a", "racecar", "abba"])
def test_palindrome_needs_no_cut(text):
    assert min_palindrome_cuts(text) == 0


@pytest.mark.parametrize("text", ["ab", "abcde", "xyzw"])
def test_distinct_letters_need_every_cut(text):
    assert min_palindrome_cuts(text) == len(text) - 1


def test_palindrome_cuts_bounded():
    for text in ["aab", "abacdc", "banana", "cabababcbc"]:
        assert 0 <= min_palindrome_cuts(text) <= len(text) - 1


def test_count_squares_example():
    matrix = [[0, 1, 1, 1], [1, 1, 1, 1], [0, 1, 1, 1]]
    snapshot = [row[:] for row in matrix]
    assert count_squares(matrix) == 15
    assert matrix == snapshot


def test_count_squares_single_row_and_zeros():
    assert count_squares([[1, 1, 1, 1]]) == 4
    assert count_squares([[0, 0], [0, 0]]) == 0
    assert count_squares([]) == 0


def test_count_squares_at_least_ones():
    matrix = [[1, 0, 1], [1, 1, 0], [1, 1, 0]]
    assert count_squares(matrix) >= sum(map(sum, matrix))


def test_cut_stick_example():
    assert min_cost_cut_stick(7, [1, 3, 4, 5]) == 16


def test_cut_stick_trivial():
    assert min_cost_cut_stick(9, []) == 0
    assert min_cost_cut_stick(9, [4]) == 9


def test_cut_stick_order_independent_and_inputs_kept():
    cuts = [5, 6, 1, 4, 2]
    assert min_cost_cut_stick(9, cuts) == min_cost_cut_stick(9, sorted(cuts))
    assert cuts == [5, 6, 1, 4, 2]
    assert min_cost_cut_stick(9, cuts) >= 9


def test_max_coins_example():
    assert max_coins([3, 1, 5, 8]) == 167


def test_max_coins_small():
    assert max_coins([]) == 0
    assert max_coins([7]) == 7


def test_max_coins_reversal_symmetric():
    nums = [2, 4, 1, 6, 3]
    assert max_coins(nums) == max_coins(nums[::-1])


@pytest.mark.parametrize("text", ["", "a", "abcdef", "xyz"])
def test_unique_whole_string(text):
    assert longest_unique_substring(text) == len(text)


@pytest.mark.parametrize("text", ["bbbbb", "zz"])
def test_unique_repeated_char(text):
    assert longest_unique_substring(text) == 1


@pytest.mark.parametrize("unit", ["abc", "pwke", "dvf"])
def test_unique_repeated_block(unit):
    assert longest_unique_substring(unit * 3) == len(unit)


def test_unique_bounded_by_alphabet():
    for text in ["abcabcbb", "pwwkew", "dvdf", "tmmzuxt"]:
        assert 1 <= longest_unique_substring(text) <= len(set(text))