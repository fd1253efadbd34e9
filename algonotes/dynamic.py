"""Dynamic programming problems: sequences, grids, strings and tilings."""

from __future__ import annotations

from collections.abc import Sequence
from math import comb

_TILING_MODULUS = 10**9 + 7


def tribonacci(n: int) -> int:
    """The ``n``-th Tribonacci number, with T0 = 0 and T1 = T2 = 1.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence common to both texts."""
    previous = [0] * (len(text2) + 1)
    for ch1 in text1:
        current = [0]
        for j, ch2 in enumerate(text2, start=1):
            if ch1 == ch2:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses of which no two adjacent are chosen."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(before + value, best)
    return best


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid.

    Raises ValueError unless both dimensions are positive.
    """
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)


def max_profit(prices: Sequence[int], fee: int) -> int:
    """Best profit from any number of trades, each sale paying ``fee``.

    Raises ValueError when there are no prices.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    cash, hold = 0, -prices[0]
    for price in prices[1:]:
        cash, hold = max(cash, hold + price - fee), max(cash - price, hold)
    return cash


def min_distance(word1: str, word2: str) -> int:
    """Edit distance: fewest insertions, deletions and substitutions."""
    if not word1 or not word2:
        return len(word1) + len(word2)
    shorter, longer = sorted((word1, word2), key=len)
    previous = list(range(len(shorter) + 1))
    for i, ch_long in enumerate(longer, start=1):
        current = [i]
        for j, ch_short in enumerate(shorter, start=1):
            substitute = previous[j - 1] + (ch_long != ch_short)
            current.append(min(current[j - 1] + 1, previous[j] + 1, substitute))
        previous = current
    return previous[-1]


def num_tilings(n: int) -> int:
    """Ways to tile a 2 by ``n`` board with dominoes and trominoes, mod 10^9+7.

    A board of width 0 gives 0. Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    # States at column i: gap-free before, top filled, bottom filled, full.
    empty, top, bottom, full = 1, 0, 0, 1
    for _ in range(n - 1):
        empty, top, bottom, full = (
            full,
            (bottom + empty) % _TILING_MODULUS,
            (top + empty) % _TILING_MODULUS,
            (empty + top + bottom + full) % _TILING_MODULUS,
        )
    return full


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to ``n``.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [0]
    for i in range(1, n + 1):
        counts.append(counts[i >> 1] + (i & 1))
    return counts