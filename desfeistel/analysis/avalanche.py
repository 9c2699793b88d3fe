"""
Avalanche Measurement

Helpers that flip a single key or plaintext bit and report how much of
the ciphertext block changes. For a good block cipher the fraction is
close to one half.
"""

import numpy as np
from typing import Iterable, Optional, Union

from ..bitops.bit_vector import bytes_to_bits
from ..cipher_core.block_cipher import encrypt_block
from ..key_schedule.des_key_schedule import generate_schedule, normalize_key
from ..tables.des_tables import BLOCK_SIZE, PC1

# Key bits that PC1 drops; flipping them never changes the ciphertext
PARITY_BITS = tuple(sorted(set(range(64)) - set(PC1.tolist())))


def _flip_bit(data: bytes, bit: int) -> bytes:
    if not 0 <= bit < len(data) * 8:
        raise ValueError(f"Bit index {bit} out of range for {len(data)} bytes")
    flipped = bytearray(data)
    flipped[bit // 8] ^= 0x80 >> (bit % 8)
    return bytes(flipped)


def bit_difference(a: bytes, b: bytes) -> int:
    """Count the bit positions in which two equal-length byte strings differ."""
    if len(a) != len(b):
        raise ValueError("Cannot compare byte strings of different length")
    return int(np.count_nonzero(bytes_to_bits(a) != bytes_to_bits(b)))


def avalanche(block: bytes,
              key: Union[str, bytes],
              flip_bit: int,
              target: str = 'key') -> float:
    """
    Fraction of ciphertext bits that change when one input bit flips.

    Args:
        block: An 8-byte plaintext block
        key: The cipher key
        flip_bit: MSB-first index (0..63) of the bit to flip
        target: 'key' to flip a key bit, 'plaintext' to flip a block bit

    Returns:
        The changed fraction of the 64 ciphertext bits
    """
    key = normalize_key(key)
    reference = encrypt_block(block, generate_schedule(key))

    if target == 'key':
        changed = encrypt_block(block, generate_schedule(_flip_bit(key, flip_bit)))
    elif target == 'plaintext':
        changed = encrypt_block(_flip_bit(block, flip_bit), generate_schedule(key))
    else:
        raise ValueError("Target must be 'key' or 'plaintext'")

    return bit_difference(reference, changed) / (BLOCK_SIZE * 8)


def mean_avalanche(block: bytes,
                   key: Union[str, bytes],
                   target: str = 'key',
                   bits: Optional[Iterable[int]] = None) -> float:
    """
    Average avalanche over a set of bit positions.

    By default every plaintext bit, or every key bit except the parity
    bits, is flipped in turn.
    """
    if bits is None:
        if target == 'key':
            bits = [b for b in range(64) if b not in PARITY_BITS]
        else:
            bits = range(64)
    return float(np.mean([avalanche(block, key, b, target) for b in bits]))
