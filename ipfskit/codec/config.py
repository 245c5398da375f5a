"""
Base58 codec constants and defaults.
"""

# Radix of the encoding; every alphabet must have exactly this many symbols
BASE58_RADIX = 58

# Bitcoin alphabet, used by IPFS for CIDv0 hashes
BTC_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Flickr alphabet (btc with upper and lower case swapped)
FLICKR_ALPHABET = b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"

# Named presets accepted wherever an alphabet is expected
ALPHABETS = {
    "btc": BTC_ALPHABET,
    "flickr": FLICKR_ALPHABET,
}

DEFAULT_ALPHABET = BTC_ALPHABET
