"""Tests for alphabet presets and validation."""

import pytest

from ipfskit.codec import (
    ALPHABETS,
    BTC_ALPHABET,
    DEFAULT_ALPHABET,
    FLICKR_ALPHABET,
    InvalidAlphabetError,
    resolve_alphabet,
)
from ipfskit.exceptions import ValidationError


class TestPresets:
    """Test the named alphabets."""

    def test_btc_alphabet(self):
        """Test the Bitcoin alphabet excludes ambiguous symbols."""
        assert len(BTC_ALPHABET) == 58
        for symbol in b"0OIl":
            assert symbol not in BTC_ALPHABET

    def test_flickr_swaps_case_blocks(self):
        """Test that flickr has the same symbols with case swapped."""
        assert sorted(FLICKR_ALPHABET) == sorted(BTC_ALPHABET)
        assert FLICKR_ALPHABET[:9] == BTC_ALPHABET[:9]
        assert FLICKR_ALPHABET[9:34] == BTC_ALPHABET[33:]
        assert FLICKR_ALPHABET[34:] == BTC_ALPHABET[9:33]

    def test_default_is_btc(self):
        """Test the default alphabet."""
        assert DEFAULT_ALPHABET == BTC_ALPHABET

    def test_named_presets(self):
        """Test the preset registry."""
        assert ALPHABETS == {"btc": BTC_ALPHABET, "flickr": FLICKR_ALPHABET}


class TestResolveAlphabet:
    """Test alphabet resolution and validation."""

    def test_resolve_names(self):
        """Test resolving preset names."""
        assert resolve_alphabet("btc") == BTC_ALPHABET
        assert resolve_alphabet("flickr") == FLICKR_ALPHABET

    def test_resolve_literal_str(self):
        """Test resolving an alphabet given as text."""
        assert resolve_alphabet(BTC_ALPHABET.decode()) == BTC_ALPHABET

    def test_resolve_literal_bytes(self):
        """Test resolving an alphabet given as bytes."""
        assert resolve_alphabet(bytearray(FLICKR_ALPHABET)) == FLICKR_ALPHABET

    def test_reject_unknown_name(self):
        """Test that an unknown preset name is not a valid alphabet."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet("ripple")

    def test_reject_wrong_length(self):
        """Test that alphabets must have exactly 58 symbols."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(BTC_ALPHABET[:-1])
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(BTC_ALPHABET + b"0")

    def test_reject_duplicates(self):
        """Test that alphabet symbols must be distinct."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(BTC_ALPHABET[:-1] + b"1")

    def test_reject_whitespace(self):
        """Test that whitespace symbols are refused."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(BTC_ALPHABET[:-1] + b" ")

    def test_reject_non_ascii(self):
        """Test that non-ASCII symbols are refused."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(BTC_ALPHABET.decode()[:-1] + "é")

    def test_reject_wrong_type(self):
        """Test that non-text alphabets are refused."""
        with pytest.raises(InvalidAlphabetError):
            resolve_alphabet(58)  # type: ignore[arg-type]

    def test_alphabet_error_is_validation_error(self):
        """Test the error hierarchy."""
        assert issubclass(InvalidAlphabetError, ValidationError)
