from collections.abc import (
    Iterable,
)

import multihash

from ipfskit.codec.b58 import (
    AlphabetLike,
    b58encode,
)
from ipfskit.codec.config import (
    DEFAULT_ALPHABET,
)
from ipfskit.exceptions import (
    ValidationError,
)

from .hashing import (
    multihash_from_base58,
    validate_multihash,
)


class MerkleNode:
    """
    One node of a Merkle DAG.

    A node is identified by its multihash alone: two nodes compare equal when
    their hashes are byte-equal, whatever their name, size, type, links or
    data. Nodes are immutable; ``links`` is kept as a tuple in the order it
    was given, duplicates included.

    Example:
        >>> root = MerkleNode(
        ...     "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
        ...     name="docs",
        ...     links=[MerkleNode(child_hash, "readme")],
        ... )
        >>> root.to_base58()
        'QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG'

    """

    __slots__ = ("_hash", "_name", "_size", "_type", "_links", "_data")

    _hash: bytes
    _name: str | None
    _size: int | None
    _type: int | None
    _links: tuple["MerkleNode", ...] | None
    _data: bytes | None

    def __init__(
        self,
        hash: str,
        name: str | None = None,
        size: int | None = None,
        type: int | None = None,
        links: Iterable["MerkleNode"] | None = None,
        data: bytes | None = None,
        alphabet: AlphabetLike = DEFAULT_ALPHABET,
    ) -> None:
        if not isinstance(hash, str):
            raise ValidationError(f"hash must be str, got {type_name(hash)}")
        self._init_fields(
            multihash_from_base58(hash, alphabet), name, size, type, links, data
        )

    @classmethod
    def from_bytes(
        cls,
        raw_hash: bytes,
        name: str | None = None,
        size: int | None = None,
        type: int | None = None,
        links: Iterable["MerkleNode"] | None = None,
        data: bytes | None = None,
    ) -> "MerkleNode":
        """Build a node from raw multihash bytes instead of a base58 string."""
        if not isinstance(raw_hash, (bytes, bytearray, memoryview)):
            raise ValidationError(
                f"raw_hash must be bytes, got {type_name(raw_hash)}"
            )
        raw_hash = bytes(raw_hash)
        validate_multihash(raw_hash)
        node = cls.__new__(cls)
        node._init_fields(raw_hash, name, size, type, links, data)
        return node

    def _init_fields(
        self,
        raw_hash: bytes,
        name: str | None,
        size: int | None,
        type: int | None,
        links: Iterable["MerkleNode"] | None,
        data: bytes | None,
    ) -> None:
        if name is not None and not isinstance(name, str):
            raise ValidationError(f"name must be str, got {type_name(name)}")
        if size is not None and (
            not isinstance(size, int) or isinstance(size, bool) or size < 0
        ):
            raise ValidationError(f"size must be non-negative int, got {size!r}")
        if type is not None and (not isinstance(type, int) or isinstance(type, bool)):
            raise ValidationError(f"type must be int, got {type!r}")
        if data is not None:
            if not isinstance(data, (bytes, bytearray, memoryview)):
                raise ValidationError(f"data must be bytes, got {type_name(data)}")
            data = bytes(data)

        link_nodes = None
        if links is not None:
            link_nodes = tuple(links)
            for link in link_nodes:
                if not isinstance(link, MerkleNode):
                    raise ValidationError(
                        f"links must be MerkleNode instances, got {type_name(link)}"
                    )

        self._hash = raw_hash
        self._name = name
        self._size = size
        self._type = type
        self._links = link_nodes
        self._data = data

    @property
    def hash(self) -> bytes:
        return self._hash

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def size(self) -> int | None:
        return self._size

    @property
    def type(self) -> int | None:
        return self._type

    @property
    def links(self) -> tuple["MerkleNode", ...] | None:
        return self._links

    @property
    def data(self) -> bytes | None:
        return self._data

    @property
    def multihash(self) -> multihash.Multihash:
        return validate_multihash(self._hash)

    def to_bytes(self) -> bytes:
        return self._hash

    def to_base58(self, alphabet: AlphabetLike = DEFAULT_ALPHABET) -> str:
        return b58encode(self._hash, alphabet)

    __str__ = to_base58

    def __repr__(self) -> str:
        b58 = self.to_base58()
        if len(b58) > 10:
            b58 = f"{b58[:2]}*{b58[-6:]}"
        if self._name is None:
            return f"<ipfskit.merkle.MerkleNode ({b58})>"
        return f"<ipfskit.merkle.MerkleNode ({b58} {self._name!r})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleNode):
            return NotImplemented
        return self._hash == other._hash

    def __hash__(self) -> int:
        return hash(self._hash)


def type_name(value: object) -> str:
    return type(value).__name__
