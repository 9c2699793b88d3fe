import pytest

from desfeistel.bitops import int_to_bits
from desfeistel.key_schedule import (
    generate_key,
    generate_schedule,
    normalize_key,
    reverse_schedule,
)

FIPS_KEY = bytes.fromhex("133457799BBCDFF1")


def _bits(text):
    text = text.replace(" ", "")
    return int_to_bits(int(text, 2), len(text)).tolist()


def test_schedule_shape():
    schedule = generate_schedule(FIPS_KEY)
    assert len(schedule) == 16
    for subkey in schedule:
        assert subkey.shape == (48,)
        assert subkey.dtype == bool


def test_known_subkeys():
    schedule = generate_schedule(FIPS_KEY)
    assert schedule[0].tolist() == _bits("000110 110000 001011 101111 111111 000111 000001 110010")
    assert schedule[1].tolist() == _bits("011110 011010 111011 011001 110110 111100 100111 100101")
    assert schedule[15].tolist() == _bits("110010 110011 110110 001011 000011 100001 011111 110101")


def test_subkeys_are_immutable():
    schedule = generate_schedule(FIPS_KEY)
    with pytest.raises(ValueError):
        schedule[0][0] = not schedule[0][0]


def test_schedule_is_deterministic():
    a = generate_schedule("12345678")
    b = generate_schedule(b"12345678")
    assert all((x == y).all() for x, y in zip(a, b))


def test_parity_bits_do_not_affect_schedule():
    flipped = bytes(b ^ 0x01 for b in FIPS_KEY)
    a = generate_schedule(FIPS_KEY)
    b = generate_schedule(flipped)
    assert all((x == y).all() for x, y in zip(a, b))


def test_reverse_schedule():
    schedule = generate_schedule(FIPS_KEY)
    reversed_schedule = reverse_schedule(schedule)
    assert reversed_schedule[0] is schedule[15]
    assert reversed_schedule[15] is schedule[0]


def test_reverse_schedule_rejects_wrong_length():
    with pytest.raises(ValueError):
        reverse_schedule(generate_schedule(FIPS_KEY)[:15])


@pytest.mark.parametrize("key, expected", [
    ("12345678", b"12345678"),
    ("1234", b"1234\x00\x00\x00\x00"),
    (b"", b"\x00" * 8),
    ("1234567890", b"12345678"),
    (bytearray(b"abcdefgh"), b"abcdefgh"),
])
def test_normalize_key(key, expected):
    assert normalize_key(key) == expected


def test_normalize_key_rejects_other_types():
    with pytest.raises(TypeError):
        normalize_key(12345678)


def test_generate_key():
    key = generate_key()
    assert isinstance(key, bytes)
    assert len(key) == 8
    assert generate_key() != key
