"""
Merkle node construction and parsing errors.
"""

from ipfskit.exceptions import (
    ParseError,
)


class MerkleNodeError(ParseError):
    """Base exception for Merkle node errors."""

    pass


class JsonShapeError(MerkleNodeError):
    """Raised when a JSON value is not the object or array expected."""

    pass


class RequiredFieldMissingError(MerkleNodeError):
    """Raised when a JSON object lacks a field a node cannot be built without."""

    def __init__(self, field_name: str, message: str | None = None) -> None:
        super().__init__(message or f"Required field missing: {field_name}")
        self.field_name = field_name


class HashDecodeError(MerkleNodeError):
    """Raised when a hash does not decode to a valid multihash."""

    pass
