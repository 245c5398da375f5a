"""
Merkle DAG node model for IPFS content identifiers.

This module provides the immutable MerkleNode value type, its conversion
to and from the JSON returned by the IPFS HTTP API, and multihash helpers
used to compute and validate node hashes.
"""

from . import config
from .errors import (
    HashDecodeError,
    JsonShapeError,
    MerkleNodeError,
    RequiredFieldMissingError,
)
from .hashing import (
    compute_multihash,
    multihash_from_base58,
    multihash_to_base58,
    validate_multihash,
)
from .node import MerkleNode
from .parser import (
    node_to_json,
    parse_node,
    parse_tree,
    tree_to_json,
)

__all__ = [
    "MerkleNode",
    "config",
    # JSON conversion
    "parse_tree",
    "parse_node",
    "node_to_json",
    "tree_to_json",
    # Multihash utilities
    "compute_multihash",
    "validate_multihash",
    "multihash_to_base58",
    "multihash_from_base58",
    # Errors
    "MerkleNodeError",
    "JsonShapeError",
    "RequiredFieldMissingError",
    "HashDecodeError",
]
