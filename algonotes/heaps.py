"""Priority-queue problems: hiring costs and subsequence scores."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import chain


def total_cost(costs: Sequence[int], k: int, candidates: int) -> int:
    """Total cost of hiring ``k`` workers, always taking the cheapest candidate.

    Each round considers the first and last ``candidates`` unhired workers;
    ties go to the lower index. Hiring stops early if no workers remain.
    """
    size = len(costs)
    left = candidates - 1
    right = size - candidates
    if left >= right:
        indices = range(size)
    else:
        indices = chain(range(left + 1), range(right, size))
    heap = [(costs[i], i) for i in indices]
    heapq.heapify(heap)

    total = 0
    for _ in range(k):
        if not heap:
            break
        cost, index = heapq.heappop(heap)
        total += cost
        if left >= right - 1:
            continue
        if 0 <= index <= left:
            left += 1
            heapq.heappush(heap, (costs[left], left))
        else:
            right -= 1
            heapq.heappush(heap, (costs[right], right))
    return total


def max_score(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Largest ``sum(nums1[i]) * min(nums2[i])`` over any ``k`` chosen indices.

    Raises ValueError if the sequences differ in length or ``k`` is out of range.
    """
    if len(nums1) != len(nums2):
        raise ValueError("sequences must have the same length")
    if not 1 <= k <= len(nums1):
        raise ValueError(f"k={k} out of range for {len(nums1)} elements")

    pairs = sorted(zip(nums2, nums1), key=lambda pair: pair[0], reverse=True)
    chosen: list[int] = []
    running = 0
    best: int | None = None
    for multiplier, value in pairs:
        heapq.heappush(chosen, value)
        running += value
        if len(chosen) > k:
            running -= heapq.heappop(chosen)
        if len(chosen) == k:
            score = running * multiplier
            best = score if best is None else max(best, score)
    assert best is not None
    return best