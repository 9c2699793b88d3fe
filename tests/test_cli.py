import pytest

from desfeistel.cli import main
from desfeistel.ecb_mode import decrypt


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DESFEISTEL_KEY", raising=False)
    monkeypatch.delenv("DESFEISTEL_LOG_LEVEL", raising=False)


def test_encrypt_then_decrypt_files(tmp_path):
    plain = tmp_path / "plain.txt"
    encrypted = tmp_path / "cipher.bin"
    restored = tmp_path / "restored.txt"
    plain.write_bytes(b"hello world!\n")

    assert main(["encrypt", str(plain), str(encrypted), "--key", "12345678"]) == 0
    assert len(encrypted.read_bytes()) == 16
    assert decrypt(encrypted.read_bytes(), "12345678") == b"hello world!\n"

    assert main(["decrypt", str(encrypted), str(restored), "-k", "12345678"]) == 0
    assert restored.read_bytes() == b"hello world!\n"


def test_key_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DESFEISTEL_KEY", "envkey")
    plain = tmp_path / "plain.txt"
    encrypted = tmp_path / "cipher.bin"
    plain.write_bytes(b"data")

    assert main(["encrypt", str(plain), str(encrypted)]) == 0
    assert decrypt(encrypted.read_bytes(), "envkey") == b"data"


def test_missing_key_is_a_usage_error(tmp_path):
    plain = tmp_path / "plain.txt"
    plain.write_bytes(b"data")
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", str(plain), str(tmp_path / "out.bin")])
    assert excinfo.value.code == 2


def test_decrypt_of_unaligned_file_fails(tmp_path):
    broken = tmp_path / "broken.bin"
    output = tmp_path / "out.txt"
    broken.write_bytes(b"1234567")

    assert main(["decrypt", str(broken), str(output), "--key", "12345678"]) == 1
    assert not output.exists()
