"""
Cipher Errors

Exception types raised at the buffer-processing boundary of the cipher.
All of them derive from ValueError so callers that already catch
ValueError keep working.
"""


class DESError(ValueError):
    """Base class for malformed cipher input."""


class BlockSizeError(DESError):
    """Raised when a block or ciphertext buffer has the wrong length."""


class PaddingError(DESError):
    """Raised when PKCS#7 padding is missing or corrupted."""
