"""String problems: parsing, two pointers, sliding windows and counting."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import MutableSequence
from itertools import groupby, product, zip_longest

_VOWELS = frozenset("aeiouAEIOU")
_LOWER_VOWELS = frozenset("aeiou")

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that divides both inputs, found by Euclid's method.

    Raises ValueError if either string is empty.
    """
    if not str1 or not str2:
        raise ValueError("both strings must be non-empty")
    longer, shorter = (str2, str1) if len(str2) > len(str1) else (str1, str2)
    while True:
        if not longer.startswith(shorter):
            return ""
        while longer.startswith(shorter):
            longer = longer[len(shorter):]
        if not longer:
            return shorter
        longer, shorter = shorter, longer


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))


def close_strings(word1: str, word2: str) -> bool:
    """Whether one word can be turned into the other by swaps and letter relabelling."""
    counts1, counts2 = Counter(word1), Counter(word2)
    return counts1.keys() == counts2.keys() and sorted(counts1.values()) == sorted(
        counts2.values()
    )


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of both words, appending the longer one's tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def remove_stars(s: str) -> str:
    """Apply each ``*`` as a deletion of the closest remaining letter to its left."""
    kept: list[str] = []
    for ch in s:
        if ch == "*":
            if kept:
                kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other letters in place."""
    vowels = [ch for ch in s if ch in _VOWELS]
    return "".join(vowels.pop() if ch in _VOWELS else ch for ch in s)


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def _matching_bracket(s: str, open_at: int) -> int:
    depth = 0
    for index in range(open_at, len(s)):
        if s[index] == "[":
            depth += 1
        elif s[index] == "]":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError(f"unbalanced brackets in {s!r}")


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into ``text`` repeated ``k`` times.

    Raises ValueError when a count has no bracketed group after it.
    """
    out: list[str] = []
    i = 0
    while i < len(s):
        if s[i] not in string.digits:
            out.append(s[i])
            i += 1
            continue
        j = i
        while j < len(s) and s[j] in string.digits:
            j += 1
        times = int(s[i:j])
        open_at = s.find("[", j)
        if open_at < 0:
            raise ValueError(f"count without a bracketed group in {s!r}")
        close_at = _matching_bracket(s, open_at)
        out.append(decode_string(s[open_at + 1 : close_at]) * times)
        i = close_at + 1
    return "".join(out)


def compress(chars: MutableSequence[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length.

    Runs of one character are written without a count. Entries past the
    returned length are left as they were.
    """
    encoded: list[str] = []
    for ch, run in groupby(list(chars)):
        count = sum(1 for _ in run)
        encoded.append(ch)
        if count != 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad can spell for ``digits``, in keypad order."""
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD.get(d, "") for d in digits))]


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings as a binary string.

    Leading zeros are dropped; a zero sum is written with as many zeros as
    the longer input has digits.
    """
    total = int(a or "0", 2) + int(b or "0", 2)
    if total:
        return format(total, "b")
    return "0" * max(len(a), len(b))


def is_robot_bounded(instructions: str) -> bool:
    """Whether repeating the instructions keeps the robot within a circle.

    ``G`` moves forward, ``L`` and ``R`` turn; other characters are ignored.
    """
    dx, dy = 0, 1
    x = y = 0
    for step in instructions:
        if step == "G":
            x += dx
            y += dy
        elif step == "L":
            dx, dy = -dy, dx
        elif step == "R":
            dx, dy = dy, -dx
    return (x, y) == (0, 0) or (dx, dy) != (0, 1)


def max_vowels(s: str, k: int) -> int:
    """Most lowercase vowels in any window of ``k`` consecutive characters."""
    if not 1 <= k <= len(s):
        raise ValueError(f"window length {k} out of range for {len(s)} characters")
    current = sum(ch in _LOWER_VOWELS for ch in s[:k])
    best = current
    for leaving, entering in zip(s, s[k:]):
        current += (entering in _LOWER_VOWELS) - (leaving in _LOWER_VOWELS)
        best = max(best, current)
    return best