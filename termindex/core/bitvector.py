"""
termindex Bit Vector Union
Fixed-width byte vectors combined by bitwise OR and tested by containment
"""

from typing import Iterable


class ContractViolation(AssertionError):
    """Raised when fixed-width operands disagree on width. Never recovered from."""


def _check_widths(a: bytes, b: bytes):
    if len(a) != len(b):
        raise ContractViolation(
            f"Fixed-width operands differ in width: {len(a)} != {len(b)} bytes"
        )


def empty_vector(width: int) -> bytes:
    """All-zero starting accumulator of ``width`` bytes"""
    if width <= 0:
        raise ContractViolation(f"Vector width must be positive, got {width}")
    return bytes(width)


def accumulate(acc: bytes, nxt: bytes) -> bytes:
    """
    OR two vectors together byte by byte

    Args:
        acc: Accumulated vector
        nxt: Vector to fold in, same width as ``acc``

    Returns:
        New vector with every bit set in either operand
    """
    _check_widths(acc, nxt)
    return bytes(a | b for a, b in zip(acc, nxt))


def union(vectors: Iterable[bytes], width: int) -> bytes:
    """Fold ``vectors`` into one union starting from the all-zero vector"""
    result = empty_vector(width)
    for vector in vectors:
        result = accumulate(result, vector)
    return result


def contains(mask: bytes, vector: bytes) -> bool:
    """
    Check that every bit set in ``vector`` is also set in ``mask``

    Stops at the first byte with a bit missing from the mask.
    """
    _check_widths(mask, vector)
    for m, v in zip(mask, vector):
        if m & v != v:
            return False
    return True


def is_superset(a: bytes, b: bytes) -> bool:
    """True when ``a`` has every bit of ``b`` set"""
    return contains(a, b)


def popcount(vector: bytes) -> int:
    """Number of set bits in the vector"""
    return sum(bin(byte).count("1") for byte in vector)
