"""
Multihash helpers.

A multihash is ``<function code><digest length><digest>``; these helpers
compute one for local content and check that decoded bytes have that shape
before a node is allowed to carry them.
"""

import multihash

from ipfskit.codec.b58 import (
    AlphabetLike,
    b58decode,
    b58encode,
)
from ipfskit.codec.config import (
    DEFAULT_ALPHABET,
)
from ipfskit.codec.errors import (
    Base58Error,
)

from .config import (
    DEFAULT_HASH_FUNC,
)
from .errors import (
    HashDecodeError,
)


def compute_multihash(data: bytes, func: multihash.Func = DEFAULT_HASH_FUNC) -> bytes:
    """
    Compute the multihash of ``data``.

    Args:
        data: The content to hash
        func: Hash function (default: sha2-256)

    Returns:
        Multihash bytes, ready for base58 encoding

    """
    mh_digest = multihash.digest(data, func)
    return mh_digest.encode()


def validate_multihash(raw: bytes) -> multihash.Multihash:
    """
    Parse ``raw`` as a multihash.

    Raises:
        HashDecodeError: if the bytes are too short, the length field does not
            match the digest, or the function code is unknown

    """
    try:
        return multihash.decode(bytes(raw))
    except (ValueError, KeyError) as e:
        raise HashDecodeError(f"Not a valid multihash: {bytes(raw).hex()}") from e


def multihash_to_base58(raw: bytes, alphabet: AlphabetLike = DEFAULT_ALPHABET) -> str:
    validate_multihash(raw)
    return b58encode(raw, alphabet)


def multihash_from_base58(
    text: str, alphabet: AlphabetLike = DEFAULT_ALPHABET
) -> bytes:
    """Decode a base58 hash string into validated multihash bytes."""
    try:
        raw = b58decode(text, alphabet)
    except Base58Error as e:
        raise HashDecodeError(f"Hash {text!r} is not valid base58") from e
    validate_multihash(raw)
    return raw
