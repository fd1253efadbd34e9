"""Array and sequence problems: sliding windows, two pointers, hashing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two indices whose values add up to ``target``, or ``[]``.

    The earlier index comes first. When a value occurs more than once,
    its first position is the one that gets paired.
    """
    first_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        first_seen.setdefault(value, index)
    for index, value in enumerate(nums):
        other = first_seen.get(target - value)
        if other is not None and other != index:
            return [other, index]
    return []


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Length of the longest run of ones when up to ``k`` zeros may be flipped."""
    best = 0
    left = 0
    for right, value in enumerate(nums):
        if value == 0:
            k -= 1
        while k < 0:
            if nums[left] == 0:
                k += 1
            left += 1
        best = max(best, right - left + 1)
    return best


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given lines."""
    left, right = 0, len(height) - 1
    best = 0
    while right > left:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    most = max(candies, default=0)
    most = max(most, 0)
    return [count + extra_candies >= most for count in candies]


def longest_subarray(nums: Sequence[int]) -> int:
    """Longest run of ones after deleting exactly one element.

    An empty input gives -1, as there is no element to delete.
    """
    return longest_ones(nums, 1) - 1


def max_operations(nums: Sequence[int], k: int) -> int:
    """Number of disjoint pairs that can be removed, each summing to ``k``."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    count = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if total < k:
            left += 1
        elif total > k:
            right -= 1
        else:
            count += 1
            left += 1
            right -= 1
    return count


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting from 0 and applying each gain."""
    return max(accumulate(gain, initial=0))


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Distinct values only in ``nums1`` and distinct values only in ``nums2``.

    Values appear in the order of their first occurrence.
    """
    set1, set2 = set(nums1), set(nums2)
    only1 = [value for value in dict.fromkeys(nums1) if value not in set2]
    only2 = [value for value in dict.fromkeys(nums2) if value not in set1]
    return [only1, only2]


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Number of (row, column) pairs of a square grid that are equal."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[tuple(column)] for column in zip(*grid))


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Each position holds the product of all other elements."""
    prefix = list(accumulate(nums[:-1], lambda a, b: a * b, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), lambda a, b: a * b, initial=1))
    suffix.reverse()
    return [left * right for left, right in zip(prefix, suffix)]


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Whether some i < j < k has nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    left_min = list(accumulate(nums, min))
    right_max = list(accumulate(reversed(nums), max))
    right_max.reverse()
    return any(
        low < middle < high
        for low, middle, high in zip(left_min, nums[1:-1], right_max[2:])
    )


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether ``n`` flowers fit without any two being adjacent.

    The given flowerbed is not modified.
    """
    bed = list(flowerbed)
    size = len(bed)
    placed = 0
    i = 0
    while i < size:
        if bed[i] == 1:
            i += 2
            continue
        left_free = i == 0 or bed[i - 1] == 0
        right_free = i == size - 1 or bed[i + 1] == 0
        if left_free and right_free:
            bed[i] = 1
            placed += 1
            i += 2
        else:
            i += 1
    return placed >= n


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of any contiguous window of length ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window length {k} out of range for {len(nums)} elements")
    current = sum(nums[:k])
    best = current
    for leaving, entering in zip(nums, nums[k:]):
        current += entering - leaving
        best = max(best, current)
    return best / k


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left sum equals its right sum, or -1."""
    total = sum(nums)
    left_sum = 0
    for index, value in enumerate(nums):
        if left_sum == total - left_sum - value:
            return index
        left_sum += value
    return -1


def single_number(nums: Sequence[int]) -> int:
    """The first value that occurs exactly once, or -1 if there is none."""
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count == 1), -1)


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Shortest contiguous run with sum at least ``target``, or 0 if none."""
    best = 0
    window = 0
    left = 0
    for right, value in enumerate(nums):
        window += value
        while left <= right and window >= target:
            length = right - left + 1
            if best == 0 or length < best:
                best = length
            window -= nums[left]
            left += 1
    return best


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1-9 summing to ``n``, in lexicographic order."""
    if sum(range(1, k + 1)) > n:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]