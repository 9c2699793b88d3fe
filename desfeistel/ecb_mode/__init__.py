"""
Electronic Codebook Mode Package

This package implements buffer-level encryption and decryption with the
DES block cipher: block splitting, PKCS#7 padding and its removal.
"""

from .ecb import DESCipherECB, encrypt, decrypt, pad_to_multiple, unpad

__all__ = ['DESCipherECB', 'encrypt', 'decrypt', 'pad_to_multiple', 'unpad']
