"""Content identifiers for IPFS: base58 codec and Merkle DAG nodes."""

from importlib.metadata import version as __version

from ipfskit.codec import (
    BTC_ALPHABET,
    FLICKR_ALPHABET,
    Base58Codec,
    b58decode,
    b58encode,
)
from ipfskit.exceptions import (
    BaseIPFSKitError,
    ParseError,
    ValidationError,
)
from ipfskit.merkle import (
    MerkleNode,
    compute_multihash,
    node_to_json,
    parse_node,
    parse_tree,
    tree_to_json,
)
from ipfskit.utils.logging import (
    setup_logging,
)

# Initialize logging configuration
setup_logging()

__all__ = [
    "Base58Codec",
    "BTC_ALPHABET",
    "FLICKR_ALPHABET",
    "b58encode",
    "b58decode",
    "MerkleNode",
    "compute_multihash",
    "parse_tree",
    "parse_node",
    "node_to_json",
    "tree_to_json",
    "BaseIPFSKitError",
    "ParseError",
    "ValidationError",
    "setup_logging",
]

__version__ = __version("ipfskit")
