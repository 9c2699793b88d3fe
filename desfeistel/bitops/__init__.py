"""
Bit Operations Package

This package implements the conversion between byte strings and
MSB-first bit sequences, plus the permutation, XOR and rotation
primitives used by the cipher.
"""

from .bit_vector import (
    bytes_to_bits,
    bits_to_bytes,
    permute,
    xor_bits,
    rotate_left,
    bits_to_int,
    int_to_bits,
)

__all__ = ['bytes_to_bits', 'bits_to_bytes', 'permute', 'xor_bits',
           'rotate_left', 'bits_to_int', 'int_to_bits']
