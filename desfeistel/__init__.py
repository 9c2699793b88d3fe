"""
desfeistel - DES Feistel Block Cipher Library

This library implements the Data Encryption Standard block cipher:
64-bit blocks, a 64-bit key and a 16-round Feistel network built from
fixed permutation tables and eight S-boxes.

Key Features:
- Bit-level permutation tables checked against the standard
- 16-round key schedule (PC1, rotations, PC2)
- Single-block encryption/decryption
- ECB mode over byte buffers with PKCS#7 padding
- S-box differential/linear metrics and avalanche measurement

"""

__version__ = '0.1.0'
__author__ = 'desfeistel Team'

from .cipher_core import DESBlockCipher, encrypt_block, decrypt_block  # noqa: E402
from .ecb_mode import DESCipherECB, encrypt, decrypt, pad_to_multiple, unpad  # noqa: E402
from .errors import DESError, BlockSizeError, PaddingError  # noqa: E402
from .key_schedule import generate_schedule, generate_key  # noqa: E402

__all__ = ['DESBlockCipher', 'encrypt_block', 'decrypt_block',
           'DESCipherECB', 'encrypt', 'decrypt', 'pad_to_multiple', 'unpad',
           'DESError', 'BlockSizeError', 'PaddingError',
           'generate_schedule', 'generate_key']
