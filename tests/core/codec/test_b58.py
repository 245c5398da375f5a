"""Unit tests for the base58 codec."""

import os

import pytest

from ipfskit.codec import (
    BTC,
    BTC_ALPHABET,
    FLICKR,
    FLICKR_ALPHABET,
    Base58Codec,
    DecodeAlphabetMismatchError,
    b58decode,
    b58encode,
)


class TestEncode:
    """Test base58 encoding."""

    def test_encode_known_value(self):
        """Test encoding against a well-known vector."""
        assert b58encode(b"hello world") == "StV1DL6CwTryKyV"

    def test_encode_single_byte(self):
        """Test that small values map straight to alphabet symbols."""
        assert b58encode(b"\x01") == "2"
        assert b58encode(b"\x39") == "z"
        assert b58encode(b"\x3a") == "21"

    def test_encode_empty(self):
        """Test that empty input encodes to an empty string."""
        assert b58encode(b"") == ""

    def test_encode_leading_zeros(self):
        """Test that each leading zero byte becomes one zero symbol."""
        assert b58encode(b"\x00\x00\x01") == "112"
        assert b58encode(b"\x00\x00\x00\x01") == "1112"

    def test_encode_all_zeros(self):
        """Test that N zero bytes encode to N zero symbols."""
        assert b58encode(b"\x00" * 5) == "11111"
        assert b58encode(b"\x00" * 5, FLICKR_ALPHABET) == "11111"

    def test_encode_deterministic(self):
        """Test that encoding is a pure function."""
        data = b"test data"
        assert b58encode(data) == b58encode(data)

    def test_encode_bytearray(self):
        """Test that bytes-like input is accepted."""
        assert b58encode(bytearray(b"hello world")) == "StV1DL6CwTryKyV"

    def test_encode_rejects_str(self):
        """Test that text input is refused."""
        with pytest.raises(TypeError):
            b58encode("hello")  # type: ignore[arg-type]

    def test_encode_alphabets_differ(self):
        """Test that the flickr alphabet gives a different encoding."""
        data = b"hello world"
        assert b58encode(data, "btc") != b58encode(data, "flickr")


class TestDecode:
    """Test base58 decoding."""

    def test_decode_known_value(self):
        """Test decoding a well-known vector."""
        assert b58decode("StV1DL6CwTryKyV") == b"hello world"

    def test_decode_empty(self):
        """Test that an empty string decodes to empty bytes."""
        assert b58decode("") == b""

    def test_decode_leading_zeros(self):
        """Test that leading zero symbols are restored as zero bytes."""
        assert b58decode("1112") == b"\x00\x00\x00\x01"
        assert b58decode("111") == b"\x00\x00\x00"

    def test_decode_bytes_input(self):
        """Test that ASCII bytes are accepted as input."""
        assert b58decode(b"StV1DL6CwTryKyV") == b"hello world"

    @pytest.mark.parametrize("char", ["0", "O", "I", "l", "+", "/"])
    def test_decode_rejects_excluded_symbols(self, char):
        """Test that symbols outside the btc alphabet abort the decode."""
        with pytest.raises(DecodeAlphabetMismatchError) as exc_info:
            b58decode(f"2{char}2")

        assert exc_info.value.char == char
        assert exc_info.value.position == 1

    def test_decode_rejects_zero(self):
        """Test that '0' is rejected under btc."""
        with pytest.raises(DecodeAlphabetMismatchError):
            b58decode("0")

    def test_decode_rejects_whitespace(self):
        """Test that whitespace is not trimmed or skipped."""
        with pytest.raises(DecodeAlphabetMismatchError) as exc_info:
            b58decode("StV1DL6CwTryKyV ")

        assert exc_info.value.position == 15

    def test_decode_rejects_non_ascii(self):
        """Test that non-ASCII characters are rejected."""
        with pytest.raises(DecodeAlphabetMismatchError):
            b58decode("StV1é")

    def test_decode_rejects_non_ascii_bytes(self):
        """Test that non-ASCII bytes are rejected."""
        with pytest.raises(DecodeAlphabetMismatchError):
            b58decode(b"StV1\xff")


class TestRoundTrip:
    """Test that decode(encode(data)) == data."""

    @pytest.mark.parametrize("alphabet", [BTC_ALPHABET, FLICKR_ALPHABET])
    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"\x00",
            b"\x00\x00\x00\x01",
            b"\x00\xff\x00",
            b"\xff" * 64,
            bytes(range(256)),
        ],
    )
    def test_round_trip(self, alphabet, data):
        """Test round-tripping edge-case inputs."""
        assert b58decode(b58encode(data, alphabet), alphabet) == data

    def test_round_trip_large_random(self):
        """Test values far wider than any fixed-width integer."""
        for size in (32, 34, 64, 1024):
            data = b"\x00\x00" + os.urandom(size)
            assert b58decode(b58encode(data)) == data
            assert FLICKR.decode(FLICKR.encode(data)) == data


class TestBase58Codec:
    """Test the alphabet-bound codec object."""

    def test_default_alphabet_is_btc(self):
        """Test that a codec without arguments uses btc."""
        assert Base58Codec().alphabet == BTC_ALPHABET
        assert Base58Codec() == BTC

    def test_preset_instances(self):
        """Test the module-level btc and flickr codecs."""
        assert BTC.alphabet == BTC_ALPHABET
        assert FLICKR.alphabet == FLICKR_ALPHABET
        assert BTC != FLICKR

    def test_codec_matches_functions(self):
        """Test that the codec agrees with the module functions."""
        data = b"\x00codec"
        assert BTC.encode(data) == b58encode(data)
        assert FLICKR.encode(data) == b58encode(data, "flickr")
        assert BTC.decode(BTC.encode(data)) == data

    def test_zero_symbol(self):
        """Test the zero symbol of each preset."""
        assert BTC.zero_symbol == "1"
        assert FLICKR.zero_symbol == "1"

    def test_codec_from_name(self):
        """Test building a codec from a preset name."""
        assert Base58Codec("flickr") == FLICKR

    def test_alphabets_not_interchangeable(self):
        """Test that btc text read as flickr gives different bytes."""
        text = BTC.encode(b"hello world")
        assert FLICKR.decode(text) != b"hello world"

    def test_repr(self):
        """Test the codec representation names its alphabet."""
        assert "123456789ABC" in repr(BTC)
