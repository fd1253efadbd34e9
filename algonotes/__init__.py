"""Classic algorithm and data-structure solutions, and a small Huffman coding tool."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "strings",
    "bits",
    "trees",
    "linked_lists",
    "design",
    "stacks",
    "graphs",
    "heaps",
    "dynamic",
    "searching",
    "huffman",
]