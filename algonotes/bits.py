"""Bit manipulation on 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MASK32 = 0xFFFFFFFF


def min_flips(a: int, b: int, c: int) -> int:
    """Fewest bit flips in ``a`` and ``b`` so that ``a | b == c`` over 32 bits."""
    a, b, c = a & _MASK32, b & _MASK32, c & _MASK32
    flips = 0
    for shift in range(32):
        bit_a = (a >> shift) & 1
        bit_b = (b >> shift) & 1
        if (c >> shift) & 1:
            flips += not (bit_a | bit_b)
        else:
            flips += bit_a + bit_b
    return flips


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of ``n``."""
    return int(format(n & _MASK32, "032b")[::-1], 2)


def divide(a: int, b: int) -> int:
    """Truncating 32-bit division without multiplication or division.

    Overflow saturates at the largest 32-bit integer. Raises
    ZeroDivisionError when ``b`` is zero and no saturating case applies.
    """
    if a == b:
        return 1
    if a == INT_MIN and b == 0:
        return INT_MAX
    if a == INT_MIN and b == 1:
        return INT_MIN
    if a == INT_MIN and b == -1:
        return INT_MAX
    if b == 0:
        raise ZeroDivisionError("division by zero")

    remain, divisor = abs(a), abs(b)
    quotient = 0
    while remain >= divisor:
        chunk, multiple = divisor, 1
        while remain - chunk > chunk:
            chunk += chunk
            multiple += multiple
        remain -= chunk
        quotient += multiple
    same_sign = (a < 0 and b < 0) or (a > 0 and b > 0)
    return quotient if same_sign else -quotient