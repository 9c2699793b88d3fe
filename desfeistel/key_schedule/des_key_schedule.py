"""
DES Key Schedule Implementation

This module derives the sixteen 48-bit round subkeys from a 64-bit key:
PC1 splits the key into two 28-bit halves, each round rotates both halves
left by a fixed amount, and PC2 compresses the joined halves into the
round subkey.
"""

import logging
import secrets
from typing import Tuple, Union

import numpy as np

from ..bitops.bit_vector import bytes_to_bits, permute, rotate_left
from ..tables.des_tables import KEY_SIZE, NUM_ROUNDS, PC1, PC2, SHIFT_SCHEDULE

logger = logging.getLogger(__name__)

KeySchedule = Tuple[np.ndarray, ...]


def normalize_key(key: Union[str, bytes, bytearray]) -> bytes:
    """
    Bring a key to exactly KEY_SIZE bytes.

    Text keys are UTF-8 encoded first. Longer keys are truncated and
    shorter keys are right-padded with zero bytes.

    Args:
        key: The key as text or bytes

    Returns:
        An 8-byte key

    Raises:
        TypeError: If the key is neither str nor bytes
    """
    if isinstance(key, str):
        key = key.encode('utf-8')
    elif not isinstance(key, (bytes, bytearray)):
        raise TypeError(f"Key must be str or bytes, not {type(key).__name__}")

    key = bytes(key)
    if len(key) != KEY_SIZE:
        logger.debug("Normalizing %d-byte key to %d bytes", len(key), KEY_SIZE)
    return key[:KEY_SIZE].ljust(KEY_SIZE, b'\x00')


def generate_key() -> bytes:
    """
    Generate a random 64-bit key.

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(KEY_SIZE)


def generate_schedule(key: Union[str, bytes, bytearray]) -> KeySchedule:
    """
    Expand a key into the round subkeys.

    The rotations accumulate: round i rotates the halves produced by
    round i - 1, not the original C0/D0.

    Args:
        key: The cipher key (normalized with normalize_key)

    Returns:
        A tuple of NUM_ROUNDS read-only 48-bit subkeys, in encryption order
    """
    key_bits = bytes_to_bits(normalize_key(key))

    permuted = permute(key_bits, PC1)
    c, d = permuted[:28], permuted[28:]

    subkeys = []
    for shift in SHIFT_SCHEDULE:
        c = rotate_left(c, shift)
        d = rotate_left(d, shift)
        subkey = permute(np.concatenate((c, d)), PC2)
        subkey.flags.writeable = False
        subkeys.append(subkey)

    logger.debug("Generated %d round subkeys", len(subkeys))
    return tuple(subkeys)


def reverse_schedule(schedule: KeySchedule) -> KeySchedule:
    """Return the subkeys in decryption order (last round first)."""
    if len(schedule) != NUM_ROUNDS:
        raise ValueError(f"Key schedule must hold {NUM_ROUNDS} subkeys, got {len(schedule)}")
    return tuple(reversed(schedule))


if __name__ == "__main__":
    schedule = generate_schedule(bytes.fromhex("133457799BBCDFF1"))
    for i, subkey in enumerate(schedule, start=1):
        print(f"K{i:<2} {''.join('1' if b else '0' for b in subkey)}")
