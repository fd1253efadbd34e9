"""Small stateful data structures."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass, field

_INFINITE_SET_LIMIT = 1000
_PING_WINDOW = 3000


class StockSpanner:
    """Tracks a stack of prices and reports how many lower ones each price clears.

    Each call pops the stored prices strictly below the new one from the top
    of the stack, pushes the new price, and returns one more than the number
    popped.
    """

    def __init__(self) -> None:
        self._prices: list[int] = []

    def next(self, price: int) -> int:
        """Record ``price`` and return 1 plus the number of lower prices cleared."""
        cleared = 0
        while self._prices and self._prices[-1] < price:
            self._prices.pop()
            cleared += 1
        self._prices.append(price)
        return 1 + cleared


class SmallestInfiniteSet:
    """The positive integers 1 to 1000, from which the smallest can be taken."""

    def __init__(self) -> None:
        self._heap = list(range(1, _INFINITE_SET_LIMIT + 1))
        self._present = set(self._heap)

    def pop_smallest(self) -> int:
        """Remove and return the smallest number. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty set")
        smallest = heapq.heappop(self._heap)
        self._present.discard(smallest)
        return smallest

    def add_back(self, num: int) -> None:
        """Put ``num`` into the set; nothing happens if it is already there."""
        if num not in self._present:
            self._present.add(num)
            heapq.heappush(self._heap, num)


class RecentCounter:
    """Counts pings within the last 3000 time units."""

    def __init__(self) -> None:
        self._times: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a ping at ``t`` and return how many fall in ``[t - 3000, t]``."""
        self._times.append(t)
        while self._times[0] < t - _PING_WINDOW:
            self._times.popleft()
        return len(self._times)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word``. Inserting the empty string changes nothing."""
        if not word:
            return
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted. The empty string always matches."""
        node = self._find(word)
        return node is not None and (not word or node.is_end)

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None