"""Checksums for raw data and files on disk."""

from __future__ import annotations

import hashlib
import os

_CHUNK_SIZE = 1024 * 1024


def sha256_checksum(data: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def md5_checksum(file_path: str | os.PathLike[str]) -> str:
    """Return the lowercase hex MD5 digest of the file at ``file_path``.

    Raises ``OSError`` when the file cannot be read.
    """
    digest = hashlib.md5()
    with open(file_path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()