"""
Merkle node constants and defaults.
"""

import multihash

# JSON field names used by the IPFS HTTP API for DAG nodes (case-sensitive)
HASH_FIELD = "Hash"
KEY_FIELD = "Key"
NAME_FIELD = "Name"
SIZE_FIELD = "Size"
TYPE_FIELD = "Type"
LINKS_FIELD = "Links"
DATA_FIELD = "Data"

# Fields tried, in order, when looking up a node's hash
HASH_FIELDS = (HASH_FIELD, KEY_FIELD)

# Encoding of the Data field payload
DATA_ENCODING = "utf-8"

# Hash function used when computing multihashes locally
DEFAULT_HASH_FUNC = multihash.Func.sha2_256
