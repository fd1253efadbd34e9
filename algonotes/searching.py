"""Binary and ternary searches over arrays and monotone predicates."""

from __future__ import annotations

from collections.abc import Callable, Sequence

_OUTSIDE = float("-inf")


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element larger than its neighbours; outside counts as -infinity.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")

    def at(index: int) -> float:
        return nums[index] if 0 <= index < len(nums) else _OUTSIDE

    left, right = 0, len(nums) - 1
    while left + 1 < right:
        mid = (left + right) // 2
        value, before, after = at(mid), at(mid - 1), at(mid + 1)
        if value > before and value > after:
            return mid
        if before > value:
            right = mid
        else:
            left = mid
    if at(left) > at(left - 1) and at(left) > at(left + 1):
        return left
    return right


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest eating speed that finishes every pile within ``h`` hours.

    Raises ValueError when there are no piles.
    """
    if not piles:
        raise ValueError("piles must not be empty")
    left, right = 1, max(piles)
    while left + 1 < right:
        mid = (left + right) // 2
        if _hours_needed(piles, mid) <= h:
            right = mid
        else:
            left = mid
    return left if _hours_needed(piles, left) <= h else right


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in ``1..n`` using ``guess``.

    ``guess(x)`` returns -1 if ``x`` is too high, 1 if too low, else 0.
    """
    low, high = 1, n
    while low + 1 < high:
        mid = low + (high - low) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == -1:
            high = mid
        else:
            low = mid
    return low if guess(low) == 0 else high


def binary_search(
    nums: Sequence[int], k: int, begin: int = 0, end: int | None = None
) -> int:
    """Index of ``k`` in the ascending ``nums[begin..end]`` (inclusive), or -1."""
    if end is None:
        end = len(nums) - 1
    if begin > end:
        return -1
    while True:
        if begin == end:
            return begin if nums[begin] == k else -1
        if end == begin + 1:
            if nums[begin] == k:
                return begin
            return end if nums[end] == k else -1
        mid = (begin + end) // 2
        if nums[mid] == k:
            return mid
        if k > nums[mid]:
            begin = mid
        else:
            end = mid


def ternary_search(
    nums: Sequence[int], k: int, begin: int = 0, end: int | None = None
) -> int:
    """Index of ``k`` in the ascending ``nums[begin..end]`` (inclusive), or -1.

    The range is split into thirds at each step.
    """
    if end is None:
        end = len(nums) - 1
    if begin > end:
        return -1
    while True:
        if end - begin <= 2:
            return next((i for i in range(begin, end + 1) if nums[i] == k), -1)
        span = end - begin
        mid1 = begin + span // 3
        mid2 = begin + 2 * span // 3
        if nums[mid1] == k:
            return mid1
        if nums[mid2] == k:
            return mid2
        if k < nums[mid1]:
            end = mid1
        elif k < nums[mid2]:
            begin, end = mid1, mid2
        else:
            begin = mid2