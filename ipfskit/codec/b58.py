"""
Base58 encoding and decoding of arbitrary byte strings.

The byte string is read as one big-endian unsigned integer and rewritten in
radix 58, so there is no limit on input length. Leading zero bytes carry no
weight in that integer and are kept as leading ``alphabet[0]`` symbols, which
makes ``decode(encode(data)) == data`` hold for every input, including empty
and all-zero ones.

The integer arithmetic itself is done by the ``base58`` package. This module
adds alphabet validation and a strict decoder that rejects any symbol outside
the alphabet instead of trimming or skipping it.
"""

from typing import (
    Union,
)

import base58

from .config import (
    ALPHABETS,
    BASE58_RADIX,
    BTC_ALPHABET,
    DEFAULT_ALPHABET,
    FLICKR_ALPHABET,
)
from .errors import (
    DecodeAlphabetMismatchError,
    InvalidAlphabetError,
)

AlphabetLike = Union[str, bytes]
BytesLike = Union[bytes, bytearray, memoryview]


def resolve_alphabet(alphabet: AlphabetLike) -> bytes:
    """
    Turn a preset name or a literal alphabet into validated alphabet bytes.

    Args:
        alphabet: ``"btc"``, ``"flickr"``, or the 58 symbols as str or bytes

    Returns:
        The alphabet as 58 bytes, ``alphabet[0]`` being the zero symbol

    Raises:
        InvalidAlphabetError: if the symbols are not 58 distinct printable,
            non-whitespace ASCII characters

    """
    if isinstance(alphabet, str):
        preset = ALPHABETS.get(alphabet)
        if preset is not None:
            return preset
        try:
            symbols = alphabet.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidAlphabetError("alphabet must be ASCII") from e
    elif isinstance(alphabet, (bytes, bytearray, memoryview)):
        symbols = bytes(alphabet)
    else:
        raise InvalidAlphabetError(
            f"alphabet must be str or bytes, got {type(alphabet)}"
        )

    if len(symbols) != BASE58_RADIX:
        raise InvalidAlphabetError(
            f"alphabet must have {BASE58_RADIX} symbols, got {len(symbols)}"
        )
    if len(set(symbols)) != BASE58_RADIX:
        raise InvalidAlphabetError("alphabet symbols must be distinct")
    if any(not 0x21 <= symbol <= 0x7E for symbol in symbols):
        raise InvalidAlphabetError(
            "alphabet symbols must be printable, non-whitespace ASCII"
        )
    return symbols


def _encode(data: BytesLike, symbols: bytes) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data)}")
    return base58.b58encode(bytes(data), alphabet=symbols).decode("ascii")


def _decode(text: Union[str, bytes], symbols: bytes) -> bytes:
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    elif not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text)}")

    allowed = frozenset(symbols)
    for position, char in enumerate(text):
        if ord(char) not in allowed:
            raise DecodeAlphabetMismatchError(char, position)

    return base58.b58decode(text.encode("ascii"), alphabet=symbols)


def b58encode(data: BytesLike, alphabet: AlphabetLike = DEFAULT_ALPHABET) -> str:
    """
    Encode bytes as a base58 string.

    Example:
        >>> b58encode(b"\\x00\\x00\\x00\\x01")
        '1112'

    """
    return _encode(data, resolve_alphabet(alphabet))


def b58decode(
    text: Union[str, bytes], alphabet: AlphabetLike = DEFAULT_ALPHABET
) -> bytes:
    """
    Decode a base58 string back to bytes.

    Raises:
        DecodeAlphabetMismatchError: if any character is not in the alphabet;
            nothing is returned in that case

    """
    return _decode(text, resolve_alphabet(alphabet))


class Base58Codec:
    """Encoder / decoder bound to a single validated alphabet."""

    __slots__ = ("_alphabet",)

    _alphabet: bytes

    def __init__(self, alphabet: AlphabetLike = DEFAULT_ALPHABET) -> None:
        self._alphabet = resolve_alphabet(alphabet)

    @property
    def alphabet(self) -> bytes:
        return self._alphabet

    @property
    def zero_symbol(self) -> str:
        return chr(self._alphabet[0])

    def encode(self, data: BytesLike) -> str:
        return _encode(data, self._alphabet)

    def decode(self, text: Union[str, bytes]) -> bytes:
        return _decode(text, self._alphabet)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base58Codec):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self) -> int:
        return hash(self._alphabet)

    def __repr__(self) -> str:
        return f"<ipfskit.codec.Base58Codec ({self._alphabet.decode('ascii')})>"


BTC = Base58Codec(BTC_ALPHABET)
FLICKR = Base58Codec(FLICKR_ALPHABET)
