"""
DES Tables Package

This package holds the fixed permutation tables, S-boxes and size
constants of the Data Encryption Standard.
"""

from .des_tables import (
    BLOCK_SIZE,
    KEY_SIZE,
    NUM_ROUNDS,
    SHIFT_SCHEDULE,
    IP,
    FP,
    E,
    P,
    PC1,
    PC2,
    SBOXES,
    inverse_permutation,
)

__all__ = ['BLOCK_SIZE', 'KEY_SIZE', 'NUM_ROUNDS', 'SHIFT_SCHEDULE',
           'IP', 'FP', 'E', 'P', 'PC1', 'PC2', 'SBOXES', 'inverse_permutation']
