"""
Base58 codec errors.
"""

from ipfskit.exceptions import (
    ParseError,
    ValidationError,
)


class InvalidAlphabetError(ValidationError):
    """Raised when an alphabet is not 58 distinct printable ASCII symbols."""

    pass


class Base58Error(ParseError):
    """Base exception for base58 decoding errors."""

    pass


class DecodeAlphabetMismatchError(Base58Error):
    """Raised when the input to decode holds a symbol outside the alphabet."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"Invalid base58 character {char!r} at position {position}"
        )
        self.char = char
        self.position = position
