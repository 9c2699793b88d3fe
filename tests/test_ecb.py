import os

import pytest
from Cryptodome.Cipher import DES

from desfeistel.ecb_mode import DESCipherECB, decrypt, encrypt, pad_to_multiple, unpad
from desfeistel.errors import BlockSizeError, DESError, PaddingError

KEY = "12345678"
MESSAGE = b"hello world!\n"


def test_hello_world_scenario():
    padded = pad_to_multiple(MESSAGE)
    assert len(padded) == 16
    assert padded[-3:] == b"\x03\x03\x03"

    cipher = DESCipherECB(KEY)
    ciphertext = encrypt(MESSAGE, KEY)
    assert ciphertext == cipher.encrypt_blocks(padded)
    assert cipher.decrypt_blocks(ciphertext) == MESSAGE + b"\x03\x03\x03"
    assert decrypt(ciphertext, KEY) == MESSAGE


def test_empty_input_encrypts_to_one_padding_block():
    ciphertext = encrypt(b"", KEY)
    assert len(ciphertext) == 8
    assert DESCipherECB(KEY).decrypt_blocks(ciphertext) == b"\x08" * 8
    assert decrypt(ciphertext, KEY) == b""


@pytest.mark.parametrize("length", range(0, 25))
def test_round_trip(length):
    data = os.urandom(length)
    key = os.urandom(8)
    ciphertext = encrypt(data, key)
    assert len(ciphertext) == (length // 8 + 1) * 8
    assert decrypt(ciphertext, key) == data


def test_matches_reference_des_ecb():
    key = bytes.fromhex("0123456789ABCDEF")
    data = b"Now is the time for all "
    expected = DES.new(key, DES.MODE_ECB).encrypt(pad_to_multiple(data))
    assert encrypt(data, key) == expected


def test_identical_plaintext_blocks_repeat_in_ciphertext():
    ciphertext = encrypt(b"SAMEBLOCSAMEBLOC", KEY)
    assert ciphertext[:8] == ciphertext[8:16]
    assert ciphertext[16:] != ciphertext[:8]


def test_short_key_is_zero_padded():
    assert encrypt(MESSAGE, "1234") == encrypt(MESSAGE, b"1234\x00\x00\x00\x00")


def test_long_key_is_truncated():
    assert encrypt(MESSAGE, "12345678-extra") == encrypt(MESSAGE, KEY)


@pytest.mark.parametrize("length", [0, 7, 9, 15])
def test_decrypt_rejects_unaligned_input(length):
    with pytest.raises(BlockSizeError):
        decrypt(b"x" * length, KEY)


def test_encrypt_blocks_rejects_unaligned_input():
    with pytest.raises(BlockSizeError):
        DESCipherECB(KEY).encrypt_blocks(b"1234567")


@pytest.mark.parametrize("last_block", [
    b"abcdefg\x00",
    b"abcdefg\x09",
    b"abcdef\x01\x03",
])
def test_decrypt_detects_corrupted_padding(last_block):
    cipher = DESCipherECB(KEY)
    ciphertext = cipher.encrypt_blocks(b"12345678" + last_block)
    with pytest.raises(PaddingError):
        cipher.decrypt(ciphertext)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decrypt(b"short", KEY)
    assert issubclass(PaddingError, DESError)


def test_pad_to_multiple_full_block_when_aligned():
    assert pad_to_multiple(b"12345678") == b"12345678" + b"\x08" * 8
    assert pad_to_multiple(b"abc", 4) == b"abc\x01"


def test_pad_to_multiple_rejects_bad_block_size():
    with pytest.raises(ValueError):
        pad_to_multiple(b"abc", 0)


def test_unpad():
    assert unpad(b"abcde\x03\x03\x03") == b"abcde"
    assert unpad(b"\x08" * 8) == b""


@pytest.mark.parametrize("data", [b"", b"abcdefg", b"abcdefg\x00", b"abcdefg\x10"])
def test_unpad_rejects_bad_padding(data):
    with pytest.raises(PaddingError):
        unpad(data)
