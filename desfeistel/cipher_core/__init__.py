"""
Cipher Core Package

This package implements the core components of the DES block cipher,
including the Feistel round function and single-block
encryption/decryption.
"""

from .block_cipher import DESBlockCipher, encrypt_block, decrypt_block
from .feistel import feistel_round, f_function

__all__ = ['DESBlockCipher', 'encrypt_block', 'decrypt_block',
           'feistel_round', 'f_function']
