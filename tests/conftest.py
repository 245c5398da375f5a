import hashlib

import pytest

from ipfskit.codec import b58encode

SHA2_256_PREFIX = bytes([0x12, 0x20])


def sha256_multihash(data: bytes) -> bytes:
    return SHA2_256_PREFIX + hashlib.sha256(data).digest()


@pytest.fixture
def make_raw_hash():
    """Return a factory building sha2-256 multihash bytes for some content."""
    return sha256_multihash


@pytest.fixture
def make_hash():
    """Return a factory building base58 (btc) sha2-256 hashes for some content."""

    def _make_hash(data: bytes) -> str:
        return b58encode(sha256_multihash(data))

    return _make_hash
