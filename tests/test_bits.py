import pytest

from algonotes.bits import divide, min_flips, reverse_bits


def test_min_flips_source_example():
    assert min_flips(2, 6, 5) == 3


@pytest.mark.parametrize("a,b", [(0, 0), (1, 2), (7, 9), (123, 456)])
def test_min_flips_already_equal(a, b):
    assert min_flips(a, b, a | b) == 0


@pytest.mark.parametrize("c", [0, 1, 5, 255, 1024])
def test_min_flips_from_zero_sets_each_bit(c):
    assert min_flips(0, 0, c) == bin(c).count("1")


@pytest.mark.parametrize("a,b", [(3, 5), (15, 15), (8, 1)])
def test_min_flips_to_zero_clears_every_bit(a, b):
    assert min_flips(a, b, 0) == bin(a).count("1") + bin(b).count("1")


def test_reverse_bits_source_example():
    assert reverse_bits(43261596) == 964176192


def test_reverse_bits_edges():
    assert reverse_bits(0) == 0
    assert reverse_bits(1) == 2**31
    assert reverse_bits(2**32 - 1) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 2, 43261596, 2**31, 2**32 - 3])
def test_reverse_bits_involution(n):
    assert reverse_bits(reverse_bits(n)) == n


def test_divide_source_example():
    assert divide(-2147483648, -2147483648) == 1


def test_divide_overflow_saturates():
    assert divide(-(2**31), -1) == 2**31 - 1
    assert divide(-(2**31), 1) == -(2**31)
    assert divide(-(2**31), 0) == 2**31 - 1


@pytest.mark.parametrize("a", [-50, -17, -1, 0, 1, 9, 100, 2**31 - 1])
@pytest.mark.parametrize("b", [-7, -3, -1, 1, 2, 5])
def test_divide_truncates_toward_zero(a, b):
    if a == b:
        assert divide(a, b) == 1
    else:
        assert divide(a, b) == int(a / b)


def test_divide_negative_result():
    assert divide(7, -3) == -2


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)