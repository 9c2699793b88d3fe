"""
Key Schedule Package

This package implements the DES key schedule that transforms a 64-bit
key into the sixteen 48-bit round subkeys used by the block cipher.
"""

from .des_key_schedule import (
    KeySchedule,
    normalize_key,
    generate_key,
    generate_schedule,
    reverse_schedule,
)

__all__ = ['KeySchedule', 'normalize_key', 'generate_key',
           'generate_schedule', 'reverse_schedule']
