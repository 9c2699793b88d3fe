"""
ECB Mode with PKCS#7 Padding

This module splits byte buffers into 8-byte blocks and runs each block
through the DES block cipher independently (electronic codebook). Input
to encrypt is padded PKCS#7-style so decryption recovers the exact
original length.
"""

import logging
from typing import Callable, Union

from Cryptodome.Util import Padding

from ..cipher_core.block_cipher import decrypt_block, encrypt_block
from ..errors import BlockSizeError, PaddingError
from ..key_schedule.des_key_schedule import KeySchedule, generate_schedule
from ..tables.des_tables import BLOCK_SIZE

logger = logging.getLogger(__name__)

KeyLike = Union[str, bytes, bytearray]


def pad_to_multiple(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Append PKCS#7 padding.

    r = block_size - len(data) % block_size bytes of value r are added,
    so a full block of padding is appended to already aligned input.

    Args:
        data: The data to pad
        block_size: Block size in bytes (1 to 255)

    Returns:
        The padded data, a non-empty multiple of block_size
    """
    if not 0 < block_size < 256:
        raise ValueError("Block size must be between 1 and 255 bytes")
    return Padding.pad(bytes(data), block_size, style='pkcs7')


def unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Strip PKCS#7 padding.

    Args:
        data: Padded data
        block_size: Block size in bytes

    Returns:
        The data without its padding

    Raises:
        PaddingError: If the trailing length byte is 0 or larger than the
            block size, the padding bytes disagree, or the input is not
            block aligned
    """
    if not data:
        raise PaddingError("Corrupted padding: empty input")
    try:
        return Padding.unpad(bytes(data), block_size, style='pkcs7')
    except ValueError as e:
        raise PaddingError(f"Corrupted padding: {e}") from e


def _process_blocks(data: bytes,
                    schedule: KeySchedule,
                    transform: Callable[[bytes, KeySchedule], bytes]) -> bytes:
    if len(data) % BLOCK_SIZE != 0:
        raise BlockSizeError(
            f"Data length must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}")

    result = bytearray()
    for i in range(0, len(data), BLOCK_SIZE):
        result.extend(transform(data[i:i + BLOCK_SIZE], schedule))
    return bytes(result)


class DESCipherECB:
    """
    DES in electronic codebook mode, bound to one key.
    """

    def __init__(self, key: KeyLike):
        """
        Initialize the ECB mode with a key.

        Args:
            key: The cipher key; shorter keys are zero-padded and longer
                keys truncated to 8 bytes
        """
        self.schedule = generate_schedule(key)

    def encrypt_blocks(self, data: bytes) -> bytes:
        """Encrypt block-aligned data without padding."""
        return _process_blocks(bytes(data), self.schedule, encrypt_block)

    def decrypt_blocks(self, data: bytes) -> bytes:
        """Decrypt block-aligned data without removing padding."""
        return _process_blocks(bytes(data), self.schedule, decrypt_block)

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Pad and encrypt a buffer.

        Args:
            plaintext: Data of any length, including empty

        Returns:
            The ciphertext, one block longer than the plaintext when the
            plaintext is already block aligned
        """
        padded = pad_to_multiple(plaintext)
        logger.debug("Encrypting %d bytes as %d blocks", len(plaintext), len(padded) // BLOCK_SIZE)
        return self.encrypt_blocks(padded)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a buffer and strip its padding.

        Args:
            ciphertext: Data produced by encrypt

        Returns:
            The original plaintext

        Raises:
            BlockSizeError: If the ciphertext is empty or not block aligned
            PaddingError: If the decrypted padding is corrupted
        """
        if not ciphertext or len(ciphertext) % BLOCK_SIZE != 0:
            raise BlockSizeError(
                f"Ciphertext length must be a non-zero multiple of {BLOCK_SIZE} bytes, "
                f"got {len(ciphertext)}")

        logger.debug("Decrypting %d blocks", len(ciphertext) // BLOCK_SIZE)
        return unpad(self.decrypt_blocks(ciphertext))


def encrypt(plaintext: bytes, key: KeyLike) -> bytes:
    """
    Encrypt data using DES in ECB mode with PKCS#7 padding.

    Args:
        plaintext: The plaintext to encrypt
        key: The encryption key

    Returns:
        The ciphertext
    """
    return DESCipherECB(key).encrypt(plaintext)


def decrypt(ciphertext: bytes, key: KeyLike) -> bytes:
    """
    Decrypt data produced by encrypt.

    Args:
        ciphertext: The ciphertext to decrypt
        key: The encryption key

    Returns:
        The plaintext

    Raises:
        BlockSizeError: If the ciphertext is not a non-zero multiple of 8 bytes
        PaddingError: If the padding is corrupted (usually a wrong key)
    """
    return DESCipherECB(key).decrypt(ciphertext)
