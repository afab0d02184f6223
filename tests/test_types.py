"""
elements-fun Type Tests
"""

import pytest

from elements_fun.core.types import ContractHash, Slip21Node, BlindingKey
from elements_fun.errors import EncodingError


class TestContractHash:
    """Tests for ContractHash type."""

    def test_creation(self):
        """Test creation from bytes."""
        data = bytes(range(32))
        h = ContractHash(data)
        assert h.data == data
        assert bytes(h) == data

    def test_zero(self):
        assert ContractHash.zero().data == bytes(32)
        assert ContractHash() == ContractHash.zero()

    def test_hex_is_reversed(self):
        """Test display hex is byte-reversed."""
        h = ContractHash(bytes([0xAB] + [0] * 31))
        assert h.hex().endswith("ab")
        assert str(h) == h.hex()

    def test_from_hex(self):
        """Test from_hex inverts hex."""
        h = ContractHash(bytes(range(32)))
        assert ContractHash.from_hex(h.hex()) == h

    @pytest.mark.parametrize("data", [bytes(31), bytes(33), b""])
    def test_wrong_size(self, data):
        with pytest.raises(EncodingError):
            ContractHash(data)

    def test_wrong_type(self):
        with pytest.raises(EncodingError):
            ContractHash(bytearray(32))

    def test_bad_hex(self):
        with pytest.raises(EncodingError):
            ContractHash.from_hex("zz" * 32)

    def test_serialization(self):
        """Test serialize/deserialize with offset."""
        h = ContractHash(bytes(range(32)))
        restored, consumed = ContractHash.deserialize(b"\x01\x02" + h.serialize(), 2)
        assert restored == h
        assert consumed == 32

    def test_truncated(self):
        with pytest.raises(EncodingError):
            ContractHash.deserialize(bytes(20))

    def test_hashable(self):
        """Test ContractHash can key a dict."""
        h = ContractHash(bytes(range(32)))
        assert {h: 1}[ContractHash(bytes(range(32)))] == 1


class TestSlip21Node:
    """Tests for Slip21Node type."""

    def test_layout(self):
        data = bytes(range(64))
        node = Slip21Node(data)
        assert node.chain_code == data[:32]
        assert node.key == data[32:]

    def test_repr_redacted(self):
        """Test repr never shows secret bytes."""
        node = Slip21Node(bytes([0xAB] * 64))
        assert "ab" not in repr(node).lower()
        assert "redacted" in repr(node)

    def test_wipe(self):
        node = Slip21Node(bytes(range(1, 65)))
        assert not node.is_wiped
        node.wipe()
        assert node.is_wiped
        assert node.key == bytes(32)

    def test_context_manager_wipes(self):
        with Slip21Node(bytes(range(1, 65))) as node:
            assert not node.is_wiped
        assert node.is_wiped

    def test_copy_on_construction(self):
        """Test the node does not alias the caller's buffer."""
        buf = bytearray(range(64))
        node = Slip21Node(buf)
        buf[:] = bytes(64)
        assert node.chain_code == bytes(range(32))

    def test_equality(self):
        assert Slip21Node(bytes(64)) == Slip21Node(bytes(64))
        assert Slip21Node(bytes(64)) != Slip21Node(bytes([1] * 64))
        assert Slip21Node(bytes(64)) != bytes(64)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Slip21Node(bytes(64)))

    @pytest.mark.parametrize("data", [bytes(32), bytes(65), "00" * 64])
    def test_invalid(self, data):
        with pytest.raises(EncodingError):
            Slip21Node(data)


class TestBlindingKey:
    """Tests for BlindingKey type."""

    def test_hex(self):
        key = BlindingKey(bytes(range(32)))
        assert key.hex() == bytes(range(32)).hex()
        assert BlindingKey.from_hex(key.hex()) == key

    def test_repr_redacted(self):
        key = BlindingKey(bytes([0xCD] * 32))
        assert "cd" not in repr(key).lower()

    def test_wipe(self):
        with BlindingKey(bytes([7] * 32)) as key:
            assert key.secret == bytes([7] * 32)
        assert key.secret == bytes(32)

    def test_not_equal_to_node(self):
        """Test secret types of different kinds never compare equal."""
        assert BlindingKey(bytes(32)) != Slip21Node(bytes(64))

    def test_wrong_size(self):
        with pytest.raises(EncodingError):
            BlindingKey(bytes(31))
