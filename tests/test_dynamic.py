import pytest

from algonotes.dynamic import (
    count_bits,
    longest_common_subsequence,
    max_profit,
    min_distance,
    num_tilings,
    rob,
    tribonacci,
    unique_paths,
)


def test_tribonacci_initial_terms():
    assert [tribonacci(n) for n in range(3)] == [0, 1, 1]


@pytest.mark.parametrize("n", range(3, 20))
def test_tribonacci_recurrence(n):
    assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def test_tribonacci_negative():
    with pytest.raises(ValueError):
        tribonacci(-1)


def test_lcs_disjoint():
    assert longest_common_subsequence("abc", "def") == 0


@pytest.mark.parametrize("text", ["", "a", "abcde", "banana"])
def test_lcs_with_itself(text):
    assert longest_common_subsequence(text, text) == len(text)


@pytest.mark.parametrize("a,b", [("abcde", "ace"), ("xyz", "zyx"), ("aab", "ab")])
def test_lcs_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result <= min(len(a), len(b))


def test_lcs_subsequence_is_full():
    assert longest_common_subsequence("ace", "abcde") == len("ace")


def test_rob_small_inputs():
    assert rob([]) == 0
    assert rob([7]) == 7
    assert rob([3, 9]) == 9


def test_rob_never_below_max_element():
    nums = [2, 7, 9, 3, 1]
    assert rob(nums) >= max(nums)
    assert rob(nums) <= sum(nums)


def test_unique_paths_single_row_or_column():
    assert unique_paths(1, 9) == 1
    assert unique_paths(9, 1) == 1


@pytest.mark.parametrize("m,n", [(3, 7), (2, 5), (6, 6)])
def test_unique_paths_symmetric_and_recurrent(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 5, 3], 0) == 0


def test_max_profit_single_price():
    assert max_profit([5], 2) == 0


def test_max_profit_fee_reduces_profit():
    prices = [1, 3, 2, 8, 4, 9]
    assert max_profit(prices, 0) >= max_profit(prices, 2)
    assert max_profit(prices, 100) == 0


def test_max_profit_empty():
    with pytest.raises(ValueError):
        max_profit([], 1)


def test_min_distance_example():
    assert min_distance("horse", "ros") == 3


@pytest.mark.parametrize("a,b", [("", "abc"), ("abc", ""), ("", "")])
def test_min_distance_with_empty(a, b):
    assert min_distance(a, b) == len(a) + len(b)


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("flaw", "lawn"), ("abc", "abc")])
def test_min_distance_properties(a, b):
    result = min_distance(a, b)
    assert result == min_distance(b, a)
    assert abs(len(a) - len(b)) <= result <= max(len(a), len(b))
    assert min_distance(a, a) == 0


def test_num_tilings_small_boards():
    assert num_tilings(1) == 1
    assert num_tilings(2) == 2
    assert num_tilings(0) == 0


def test_num_tilings_modular_range():
    assert 0 <= num_tilings(1000) < 10**9 + 7


def test_num_tilings_negative():
    with pytest.raises(ValueError):
        num_tilings(-3)


def test_count_bits_matches_binary_representation():
    result = count_bits(64)
    assert len(result) == 65
    assert all(result[i] == format(i, "b").count("1") for i in range(65))


def test_count_bits_zero():
    assert count_bits(0) == [0]


def test_count_bits_negative():
    with pytest.raises(ValueError):
        count_bits(-1)