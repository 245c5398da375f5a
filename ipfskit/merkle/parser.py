"""
Conversion between decoded IPFS API JSON and MerkleNode trees.

The IPFS HTTP API describes DAG nodes as JSON objects such as::

    {
        "Hash": "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
        "Name": "docs",
        "Size": 1024,
        "Type": 1,
        "Links": [{"Hash": "Qm...", "Name": "readme"}],
        "Data": "..."
    }

Older endpoints use ``Key`` instead of ``Hash``. Parsing is strict about the
hash and lenient about everything else: an optional field of the wrong type is
treated as if it were absent.
"""

from collections.abc import (
    Iterable,
)
import logging
from typing import (
    Any,
)

from ipfskit.codec.b58 import (
    AlphabetLike,
)
from ipfskit.codec.config import (
    DEFAULT_ALPHABET,
)
from ipfskit.exceptions import (
    ValidationError,
)

from .config import (
    DATA_ENCODING,
    DATA_FIELD,
    HASH_FIELD,
    HASH_FIELDS,
    KEY_FIELD,
    LINKS_FIELD,
    NAME_FIELD,
    SIZE_FIELD,
    TYPE_FIELD,
)
from .errors import (
    JsonShapeError,
    RequiredFieldMissingError,
)
from .node import (
    MerkleNode,
    type_name,
)

logger = logging.getLogger(__name__)


def _get_str(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def _get_int(obj: dict[str, Any], key: str) -> int | None:
    value = obj.get(key)
    # bool is an int subclass but never a valid JSON number here
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _get_list(obj: dict[str, Any], key: str) -> list[Any] | None:
    value = obj.get(key)
    return value if isinstance(value, list) else None


def parse_tree(
    raw_json: Any, alphabet: AlphabetLike = DEFAULT_ALPHABET
) -> list[MerkleNode]:
    """
    Parse a decoded JSON value into a list of nodes.

    Args:
        raw_json: A single node object, or an array of node objects
        alphabet: Alphabet the hashes are encoded with (default: btc)

    Returns:
        The parsed nodes, in the order they appear

    Raises:
        JsonShapeError: if ``raw_json`` is neither an object nor an array,
            or an array element is not an object
        RequiredFieldMissingError: if a node has no ``Hash`` or ``Key``
        HashDecodeError: if a node's hash is not a valid base58 multihash

    """
    if isinstance(raw_json, dict):
        nodes = [parse_node(raw_json, alphabet)]
    elif isinstance(raw_json, list):
        nodes = [parse_node(obj, alphabet) for obj in raw_json]
    else:
        raise JsonShapeError(
            f"Expected a JSON object or array, got {type_name(raw_json)}"
        )
    logger.debug("Parsed %d top-level Merkle node(s)", len(nodes))
    return nodes


def parse_node(
    raw_json: Any, alphabet: AlphabetLike = DEFAULT_ALPHABET
) -> MerkleNode:
    """
    Parse one JSON object, and all of its links, into a MerkleNode.

    Children are built before their parent, so a parent only exists once
    every link under it has parsed; the first failing child aborts the whole
    node with that child's error.
    """
    if not isinstance(raw_json, dict):
        raise JsonShapeError(f"Expected a JSON object, got {type_name(raw_json)}")

    hash_str = None
    for field in HASH_FIELDS:
        hash_str = _get_str(raw_json, field)
        if hash_str is not None:
            break
    if hash_str is None:
        raise RequiredFieldMissingError(
            HASH_FIELD, f"Neither {HASH_FIELD} nor {KEY_FIELD} exist"
        )

    size = _get_int(raw_json, SIZE_FIELD)
    if size is not None and size < 0:
        size = None

    links = None
    raw_links = _get_list(raw_json, LINKS_FIELD)
    if raw_links is not None:
        links = [parse_node(raw_link, alphabet) for raw_link in raw_links]

    # NOTE: the daemon's command line output suggests Data may hold 16-bit
    # values; it is read as UTF-8 until checked against real daemon output.
    data = None
    raw_data = _get_str(raw_json, DATA_FIELD)
    if raw_data is not None:
        data = raw_data.encode(DATA_ENCODING)

    return MerkleNode(
        hash_str,
        name=_get_str(raw_json, NAME_FIELD),
        size=size,
        type=_get_int(raw_json, TYPE_FIELD),
        links=links,
        data=data,
        alphabet=alphabet,
    )


def node_to_json(node: MerkleNode) -> dict[str, Any]:
    """
    Serialize a node back to the IPFS API JSON shape.

    Hashes are written with the btc alphabet and fields that are ``None`` are
    left out, so ``parse_node(node_to_json(node))`` rebuilds the same tree.
    """
    obj: dict[str, Any] = {HASH_FIELD: node.to_base58()}
    if node.name is not None:
        obj[NAME_FIELD] = node.name
    if node.size is not None:
        obj[SIZE_FIELD] = node.size
    if node.type is not None:
        obj[TYPE_FIELD] = node.type
    if node.links is not None:
        obj[LINKS_FIELD] = [node_to_json(link) for link in node.links]
    if node.data is not None:
        try:
            obj[DATA_FIELD] = node.data.decode(DATA_ENCODING)
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"Data of node {node.to_base58()} is not valid {DATA_ENCODING}"
            ) from e
    return obj


def tree_to_json(nodes: Iterable[MerkleNode]) -> list[dict[str, Any]]:
    return [node_to_json(node) for node in nodes]
