"""
S-box Metrics

This module measures the cryptographic strength of the DES S-boxes:
the difference distribution table (differential cryptanalysis) and the
linear approximation table (linear cryptanalysis). Each S-box is viewed
as a function from a 6-bit input to a 4-bit output, with the row taken
from the outer bits and the column from the four inner bits.
"""

import logging
import numpy as np
from typing import Dict

from ..tables.des_tables import SBOXES

logger = logging.getLogger(__name__)

SBOX_INPUTS = 64
SBOX_OUTPUTS = 16

# Parity of every byte value, used for mask dot products
_PARITY = np.array([bin(x).count('1') & 1 for x in range(256)], dtype=np.int32)


def sbox_function(box_index: int) -> np.ndarray:
    """
    Flatten one S-box into a lookup indexed by its 6-bit input.

    Args:
        box_index: 0-based S-box number (0..7)

    Returns:
        An array of 64 outputs
    """
    if not 0 <= box_index < len(SBOXES):
        raise ValueError(f"S-box index must be in 0..{len(SBOXES) - 1}, got {box_index}")

    x = np.arange(SBOX_INPUTS)
    rows = ((x >> 4) & 0b10) | (x & 1)
    columns = (x >> 1) & 0xF
    return SBOXES[box_index][rows, columns].astype(np.int32)


def difference_distribution_table(box_index: int) -> np.ndarray:
    """
    Build the difference distribution table of an S-box.

    Entry [dx, dy] counts the inputs x with S(x) ^ S(x ^ dx) == dy.

    Args:
        box_index: 0-based S-box number

    Returns:
        A 64x16 integer array
    """
    sbox = sbox_function(box_index)
    ddt = np.zeros((SBOX_INPUTS, SBOX_OUTPUTS), dtype=np.int32)

    x = np.arange(SBOX_INPUTS)
    for dx in range(SBOX_INPUTS):
        dy = sbox[x] ^ sbox[x ^ dx]
        ddt[dx] = np.bincount(dy, minlength=SBOX_OUTPUTS)

    return ddt


def differential_uniformity(box_index: int) -> int:
    """
    Largest DDT entry over non-zero input differences (lower is better).
    """
    ddt = difference_distribution_table(box_index)
    return int(np.max(ddt[1:, :]))


def linear_approximation_table(box_index: int) -> np.ndarray:
    """
    Build the linear approximation table of an S-box.

    Entry [a, b] is the number of inputs x for which the input parity
    a.x equals the output parity b.S(x), minus 32.

    Args:
        box_index: 0-based S-box number

    Returns:
        A 64x16 integer array
    """
    sbox = sbox_function(box_index)
    x = np.arange(SBOX_INPUTS)

    input_masks = np.arange(SBOX_INPUTS)[:, np.newaxis]
    output_masks = np.arange(SBOX_OUTPUTS)[:, np.newaxis]
    input_parity = _PARITY[input_masks & x]          # (64 masks, 64 inputs)
    output_parity = _PARITY[output_masks & sbox]     # (16 masks, 64 inputs)

    matches = (input_parity[:, np.newaxis, :] == output_parity[np.newaxis, :, :])
    return matches.sum(axis=2).astype(np.int32) - SBOX_INPUTS // 2


def linear_bias(box_index: int) -> float:
    """
    Largest absolute LAT entry over non-zero masks, normalized to [0, 1].
    """
    lat = linear_approximation_table(box_index)
    return float(np.max(np.abs(lat[1:, 1:]))) / (SBOX_INPUTS // 2)


def evaluate_sbox(box_index: int) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        box_index: 0-based S-box number

    Returns:
        A dictionary of scores (lower is better for both)
    """
    scores = {
        'differential': differential_uniformity(box_index),
        'linear': linear_bias(box_index),
    }
    logger.debug("S-box %d: %s", box_index + 1, scores)
    return scores


if __name__ == "__main__":
    for i in range(len(SBOXES)):
        metrics = evaluate_sbox(i)
        print(f"S{i + 1}: differential uniformity {metrics['differential']}, "
              f"linear bias {metrics['linear']:.4f}")
