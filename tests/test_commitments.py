"""
elements-fun Confidential Commitment Tests
"""

import pytest

from elements_fun.core.commitments import (
    AssetCommitment,
    ValueCommitment,
    NonceCommitment,
)
from elements_fun.errors import EncodingError


class TestCommitments:
    """Tests for the commitment containers."""

    @pytest.mark.parametrize("cls,tag", [
        (ValueCommitment, 0x08),
        (AssetCommitment, 0x0A),
        (NonceCommitment, 0x02),
    ])
    def test_roundtrip_and_bad_prefix(self, cls, tag):
        """Test from_slice accepts the encoding and rejects a bad prefix."""
        x = cls.new(tag, bytes([1] * 32))
        commitment = bytearray(x.commitment())
        assert x == cls.from_slice(bytes(commitment))

        commitment[0] = 42
        with pytest.raises(EncodingError):
            cls.from_slice(bytes(commitment))

    @pytest.mark.parametrize("cls,prefixes", [
        (ValueCommitment, (0x08, 0x09)),
        (AssetCommitment, (0x0A, 0x0B)),
        (NonceCommitment, (0x02, 0x03)),
    ])
    def test_valid_prefixes(self, cls, prefixes):
        """Test exactly two prefixes are valid per kind."""
        valid = [tag for tag in range(256) if cls.is_valid_prefix(tag)]
        assert tuple(valid) == prefixes

    def test_prefixes_are_per_kind(self):
        """Test a value prefix is not an asset prefix."""
        with pytest.raises(EncodingError):
            AssetCommitment.new(0x08, bytes(32))

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_commitment_length(self, length):
        with pytest.raises(EncodingError):
            ValueCommitment.new(0x08, bytes(length))

    def test_empty_slice(self):
        with pytest.raises(EncodingError):
            ValueCommitment.from_slice(b"")

    def test_hex(self):
        """Test hex parsing and display."""
        hex_str = "0a" + "11" * 32
        c = AssetCommitment.from_hex(hex_str)
        assert str(c) == hex_str
        assert c.hex() == hex_str
        assert c.prefix == 0x0A
        assert c.encoded_length() == 33

    def test_bad_hex(self):
        with pytest.raises(EncodingError):
            AssetCommitment.from_hex("0a" + "zz" * 32)

    def test_serialization(self):
        """Test serialize/deserialize with offset."""
        c = NonceCommitment.new(0x03, bytes(range(32)))
        restored, consumed = NonceCommitment.deserialize(b"\xff" + c.serialize(), 1)
        assert restored == c
        assert consumed == 33

    def test_truncated(self):
        with pytest.raises(EncodingError):
            ValueCommitment.deserialize(bytes([0x08] + [0] * 10))

    def test_kinds_differ(self):
        """Test commitment kinds are distinct types."""
        assert ValueCommitment.new(0x08, bytes(32)) != NonceCommitment.new(0x02, bytes(32))
