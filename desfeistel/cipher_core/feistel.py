"""
Feistel Round Function

This module implements one DES round: the right half is expanded to 48
bits, mixed with the round subkey, pushed through the eight S-boxes and
permuted, and the result is XORed into the left half before the halves
swap.
"""

import numpy as np
from typing import Tuple

from ..bitops.bit_vector import permute, xor_bits
from ..tables.des_tables import E, P, SBOXES

_BOX_INDEX = np.arange(8)
_COLUMN_WEIGHTS = np.array([8, 4, 2, 1])


def expand(right: np.ndarray) -> np.ndarray:
    """Expand a 32-bit half block to 48 bits with the E table."""
    return permute(right, E)


def substitute(bits: np.ndarray) -> np.ndarray:
    """
    Run a 48-bit value through the eight S-boxes.

    Each consecutive 6-bit group g selects its row from the outer bits
    (0 and 5) and its column from the inner bits (1 to 4) of S-box g.

    Args:
        bits: The 48-bit expanded and keyed value

    Returns:
        The 32-bit concatenation of the eight 4-bit S-box outputs
    """
    groups = np.asarray(bits, dtype=np.intp).reshape(8, 6)
    rows = groups[:, 0] * 2 + groups[:, 5]
    columns = groups[:, 1:5] @ _COLUMN_WEIGHTS
    outputs = SBOXES[_BOX_INDEX, rows, columns]
    # low nibble of each output byte, MSB first
    return np.unpackbits(outputs[:, np.newaxis], axis=1)[:, 4:].ravel().astype(bool)


def f_function(right: np.ndarray, subkey: np.ndarray) -> np.ndarray:
    """
    The DES round function f(R, K) = P(S(E(R) XOR K)).

    Args:
        right: The 32-bit right half
        subkey: The 48-bit round subkey

    Returns:
        The 32-bit output of the round function
    """
    mixed = xor_bits(expand(right), subkey)
    return permute(substitute(mixed), P)


def feistel_round(left: np.ndarray,
                  right: np.ndarray,
                  subkey: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Apply one Feistel round.

    Args:
        left: The 32-bit left half
        right: The 32-bit right half
        subkey: The 48-bit round subkey

    Returns:
        The new (left, right) pair: (right, left XOR f(right, subkey))
    """
    return right, xor_bits(left, f_function(right, subkey))
