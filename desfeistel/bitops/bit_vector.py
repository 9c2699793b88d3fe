"""
Bit Vector Helpers

This module converts between byte strings and bit sequences and provides
the small set of bit-level operations the cipher is built from. A bit
sequence is a one-dimensional numpy array of booleans where index 0 is
the most significant bit of the first byte.
"""

import numpy as np
from typing import Sequence, Union

BitsLike = Union[np.ndarray, Sequence[bool]]


def bytes_to_bits(data: Union[bytes, bytearray]) -> np.ndarray:
    """
    Convert bytes to a bit sequence, most significant bit first.

    Args:
        data: The bytes to convert

    Returns:
        A boolean array of length 8 * len(data)
    """
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.unpackbits(arr).astype(bool)


def bits_to_bytes(bits: BitsLike) -> bytes:
    """
    Fold a bit sequence back into bytes, eight bits per byte, MSB first.

    Args:
        bits: The bit sequence (length must be a multiple of 8)

    Returns:
        The packed bytes

    Raises:
        ValueError: If the length is not a multiple of 8
    """
    bits = np.asarray(bits, dtype=bool)
    if bits.size % 8 != 0:
        raise ValueError(f"Bit sequence length must be a multiple of 8, got {bits.size}")
    return np.packbits(bits).tobytes()


def permute(bits: BitsLike, table: np.ndarray) -> np.ndarray:
    """
    Apply a permutation table: position i of the result is bits[table[i]].

    Tables may repeat or omit source indices, so the output length is
    len(table) rather than len(bits).
    """
    return np.asarray(bits, dtype=bool)[table]


def xor_bits(a: BitsLike, b: BitsLike) -> np.ndarray:
    """
    XOR two bit sequences of equal length.

    Raises:
        ValueError: If the lengths differ
    """
    a = np.asarray(a, dtype=bool)
    b = np.asarray(b, dtype=bool)
    if a.shape != b.shape:
        raise ValueError(f"Cannot XOR bit sequences of length {a.size} and {b.size}")
    return np.logical_xor(a, b)


def rotate_left(bits: BitsLike, shift: int) -> np.ndarray:
    """Circular left rotation by `shift` positions."""
    return np.roll(np.asarray(bits, dtype=bool), -shift)


def bits_to_int(bits: BitsLike) -> int:
    """Interpret a bit sequence as an unsigned big-endian integer."""
    value = 0
    for bit in np.asarray(bits, dtype=bool):
        value = (value << 1) | int(bit)
    return value


def int_to_bits(value: int, width: int) -> np.ndarray:
    """
    Render an unsigned integer as a fixed-width bit sequence, MSB first.

    Args:
        value: The integer to convert
        width: Number of bits in the result

    Returns:
        A boolean array of length `width`

    Raises:
        ValueError: If the value does not fit in `width` bits
    """
    if value < 0 or value >> width:
        raise ValueError(f"Value {value} does not fit in {width} bits")
    return np.array([(value >> (width - 1 - i)) & 1 for i in range(width)], dtype=bool)
