"""
Cipher Analysis Package

This package measures properties of the cipher: differential and linear
strength of the S-boxes and the avalanche effect of the full block
transformation.
"""

from .sbox_metrics import (
    difference_distribution_table,
    differential_uniformity,
    linear_approximation_table,
    linear_bias,
    evaluate_sbox,
)
from .avalanche import PARITY_BITS, avalanche, mean_avalanche, bit_difference

__all__ = ['difference_distribution_table', 'differential_uniformity',
           'linear_approximation_table', 'linear_bias', 'evaluate_sbox',
           'PARITY_BITS', 'avalanche', 'mean_avalanche', 'bit_difference']
