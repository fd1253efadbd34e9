"""Huffman coding of lowercase text, with deterministic tie-breaking."""

from __future__ import annotations

import string
import sys
from bisect import insort
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from operator import attrgetter

_INVALID = "INVALID"


@dataclass(eq=False)
class _Node:
    weight: int
    symbol: str | None = None
    left: _Node | None = None
    right: _Node | None = None


def _paths(node: _Node, prefix: str = "") -> Iterator[tuple[str, str]]:
    if node.left is None and node.right is None:
        yield node.symbol, prefix
        return
    yield from _paths(node.left, prefix + "0")
    yield from _paths(node.right, prefix + "1")


@dataclass
class HuffmanCode:
    """A Huffman code built from a text.

    ``frequencies`` and ``codes`` list the symbols from least to most
    frequent, earlier-seen symbols first among equals.
    """

    length: int
    frequencies: dict[str, int]
    codes: dict[str, str]
    _root: _Node = field(repr=False)

    @property
    def total_bits(self) -> int:
        """Number of bits needed to encode the original text."""
        return sum(len(self.codes[s]) * count for s, count in self.frequencies.items())

    @property
    def encoded_bytes(self) -> int:
        """Number of whole bytes needed to hold the encoded text."""
        return -(-self.total_bits // 8)

    def decode(self, bits: str) -> str:
        """Decode a string of bits; ``0`` goes left, anything else right.

        Raises ValueError if the bits do not form a whole sequence of codes.
        """
        node = self._root
        out: list[str] = []
        for bit in bits:
            node = node.left if bit == "0" else node.right
            if node is None:
                raise ValueError("bits do not match the code")
            if node.right is None:
                out.append(node.symbol)
                node = self._root
        if node is not self._root:
            raise ValueError("bits end in the middle of a code")
        return "".join(out)


def build_huffman_code(text: str) -> HuffmanCode:
    """Build the Huffman code for a non-empty string of lowercase letters.

    Merged nodes are placed after existing nodes of equal weight; the
    lighter of each merged pair becomes the ``0`` branch.
    """
    if not text:
        raise ValueError("text must not be empty")
    if any(ch not in string.ascii_lowercase for ch in text):
        raise ValueError("text must contain only lowercase letters")

    ordered = sorted(Counter(text).items(), key=lambda item: item[1])
    queue = [_Node(count, symbol) for symbol, count in ordered]
    while len(queue) > 1:
        first = queue.pop(0)
        second = queue.pop(0)
        merged = _Node(first.weight + second.weight, left=first, right=second)
        insort(queue, merged, key=attrgetter("weight"))
    root = queue[0]

    paths = dict(_paths(root))
    return HuffmanCode(
        length=len(text),
        frequencies=dict(ordered),
        codes={symbol: paths[symbol] for symbol, _ in ordered},
        _root=root,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a text and two bit strings, print the code table and both decodings."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    if not tokens:
        print("expected a text to encode", file=sys.stderr)
        return 1
    try:
        code = build_huffman_code(tokens[0])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"{code.length} {code.encoded_bytes}")
    for symbol, bits in code.codes.items():
        print(f"{symbol}:{bits}")
    for bits in (tokens[1:] + ["", ""])[:2]:
        try:
            print(code.decode(bits))
        except ValueError:
            print(_INVALID)
    return 0