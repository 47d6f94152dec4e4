import string

import pytest

from youvideo.checksum import md5_checksum, sha256_checksum


def test_sha256_of_empty_data():
    assert (
        sha256_checksum(b"")
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_is_lowercase_hex_of_fixed_length():
    digest = sha256_checksum(b"some video bytes")
    assert len(digest) == 64
    assert set(digest) <= set(string.hexdigits.lower())


def test_sha256_is_deterministic_and_distinguishes_data():
    assert sha256_checksum(b"abc") == sha256_checksum(b"abc")
    assert sha256_checksum(b"abc") != sha256_checksum(b"abd")


def test_md5_of_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert md5_checksum(path) == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_of_known_content(tmp_path):
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")
    assert md5_checksum(str(path)) == "900150983cd24fb0d6963f7d28e17f72"


def test_md5_changes_when_file_changes(tmp_path):
    path = tmp_path / "video.mp4"
    path.write_bytes(b"first")
    before = md5_checksum(path)
    path.write_bytes(b"second")
    after = md5_checksum(path)
    assert before != after
    assert len(after) == 32


def test_md5_of_large_file_matches_copy(tmp_path):
    payload = bytes(range(256)) * 10000
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(payload)
    second.write_bytes(payload)
    assert md5_checksum(first) == md5_checksum(second)


def test_md5_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        md5_checksum(tmp_path / "missing.mp4")