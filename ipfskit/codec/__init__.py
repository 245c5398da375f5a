"""
Base58 codec for content identifiers.

Provides lossless conversion between raw byte strings (such as multihashes)
and their base58 text form, using the Bitcoin or Flickr alphabet.
"""

from .b58 import (
    BTC,
    FLICKR,
    Base58Codec,
    b58decode,
    b58encode,
    resolve_alphabet,
)
from .config import (
    ALPHABETS,
    BTC_ALPHABET,
    DEFAULT_ALPHABET,
    FLICKR_ALPHABET,
)
from .errors import (
    Base58Error,
    DecodeAlphabetMismatchError,
    InvalidAlphabetError,
)

__all__ = [
    "Base58Codec",
    "BTC",
    "FLICKR",
    "b58encode",
    "b58decode",
    "resolve_alphabet",
    # Alphabets
    "ALPHABETS",
    "BTC_ALPHABET",
    "FLICKR_ALPHABET",
    "DEFAULT_ALPHABET",
    # Errors
    "Base58Error",
    "DecodeAlphabetMismatchError",
    "InvalidAlphabetError",
]
