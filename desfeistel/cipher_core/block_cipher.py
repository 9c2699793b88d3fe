"""
Block Cipher Implementation

This module provides the DES block transformation: initial permutation,
sixteen Feistel rounds, the final half swap and the inverse initial
permutation, applied to a single 64-bit block.
"""

import numpy as np
from typing import Iterable, Union

from ..bitops.bit_vector import bits_to_bytes, bytes_to_bits, permute
from ..errors import BlockSizeError
from ..key_schedule.des_key_schedule import KeySchedule, generate_schedule, reverse_schedule
from ..tables.des_tables import BLOCK_SIZE, FP, IP, NUM_ROUNDS
from .feistel import feistel_round


def _check_block(block: bytes) -> bytes:
    if not isinstance(block, (bytes, bytearray)):
        raise TypeError(f"Block must be bytes, not {type(block).__name__}")
    if len(block) != BLOCK_SIZE:
        raise BlockSizeError(f"Block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
    return bytes(block)


def _crypt_block(block: bytes, subkeys: Iterable[np.ndarray]) -> bytes:
    """
    Run the Feistel network over one block with the given subkey order.

    Args:
        block: An 8-byte block
        subkeys: The round subkeys in the order they are consumed

    Returns:
        The transformed 8-byte block
    """
    state = permute(bytes_to_bits(block), IP)
    left, right = state[:32], state[32:]

    for subkey in subkeys:
        left, right = feistel_round(left, right, subkey)

    # Undo the swap of the last round before IP^-1
    preoutput = np.concatenate((right, left))
    return bits_to_bytes(permute(preoutput, FP))


def encrypt_block(block: bytes, schedule: KeySchedule) -> bytes:
    """
    Encrypt a single 8-byte block.

    Args:
        block: The plaintext block
        schedule: Round subkeys from generate_schedule

    Returns:
        The ciphertext block
    """
    if len(schedule) != NUM_ROUNDS:
        raise ValueError(f"Key schedule must hold {NUM_ROUNDS} subkeys, got {len(schedule)}")
    return _crypt_block(_check_block(block), schedule)


def decrypt_block(block: bytes, schedule: KeySchedule) -> bytes:
    """
    Decrypt a single 8-byte block.

    The same network as encryption, consuming the subkeys in reverse.

    Args:
        block: The ciphertext block
        schedule: Round subkeys from generate_schedule (encryption order)

    Returns:
        The plaintext block
    """
    return _crypt_block(_check_block(block), reverse_schedule(schedule))


class DESBlockCipher:
    """
    DES block cipher bound to one key.

    The key schedule is derived once in the constructor and reused for
    every block.
    """

    def __init__(self, key: Union[str, bytes, bytearray]):
        """
        Initialize the block cipher with a key.

        Args:
            key: The cipher key; see normalize_key for how it is sized
        """
        self._schedule = generate_schedule(key)

    @property
    def key_schedule(self) -> KeySchedule:
        return self._schedule

    def encrypt_block(self, plaintext: bytes) -> bytes:
        return encrypt_block(plaintext, self._schedule)

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        return decrypt_block(ciphertext, self._schedule)
