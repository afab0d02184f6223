"""
elements-fun SLIP-77 Blinding Key Tests
"""

import hashlib
import hmac

import pytest

from elements_fun.core.types import BlindingKey
from elements_fun.crypto.blinding import (
    master_blinding_key,
    derive_blinding_key,
    blinding_key_for_script,
)
from elements_fun.crypto.slip21 import derive_path
from elements_fun.errors import EmptySeed, EncodingError

from conftest import slip21_hmac


def expected_master(seed: bytes) -> bytes:
    return slip21_hmac(seed, [b"SLIP-0077"])[32:]


def expected_blinding_key(seed: bytes, script: bytes) -> bytes:
    return hmac.new(expected_master(seed), script, hashlib.sha256).digest()


class TestMasterBlindingKey:
    """Tests for the SLIP-77 master blinding key."""

    def test_master_blinding_key(self, vector_seed):
        """Test the master key is the SLIP-0077 node key."""
        key = master_blinding_key(vector_seed)
        assert isinstance(key, BlindingKey)
        assert key.secret == expected_master(vector_seed)

    def test_matches_slip21_node(self, test_seed):
        """Test agreement with derive_path."""
        assert master_blinding_key(test_seed).secret == derive_path(test_seed, [b"SLIP-0077"]).key

    def test_custom_label(self, test_seed):
        """Test a configured label."""
        key = master_blinding_key(test_seed, "other")
        assert key.secret == slip21_hmac(test_seed, [b"other"])[32:]
        assert key != master_blinding_key(test_seed)

    def test_empty_seed(self):
        with pytest.raises(EmptySeed):
            master_blinding_key(b"")


class TestDeriveBlindingKey:
    """Tests for per-script blinding keys."""

    def test_blinding_key(self, vector_seed, p2pkh_script):
        """Test HMAC-SHA256 of the script under the master key."""
        master_key = master_blinding_key(vector_seed)
        key = derive_blinding_key(master_key, p2pkh_script)
        assert key.secret == expected_blinding_key(vector_seed, p2pkh_script)

    def test_master_key_untouched(self, test_seed, p2pkh_script):
        """Test deriving does not wipe the caller's master key."""
        master_key = master_blinding_key(test_seed)
        derive_blinding_key(master_key, p2pkh_script)
        assert master_key.secret == expected_master(test_seed)

    def test_node_as_master(self, test_seed, p2pkh_script):
        """Test a SLIP-21 node can stand in for the master key."""
        node = derive_path(test_seed, [b"SLIP-0077"])
        assert derive_blinding_key(node, p2pkh_script) == derive_blinding_key(
            master_blinding_key(test_seed), p2pkh_script
        )

    def test_for_script(self, test_seed, p2pkh_script):
        """Test the one-step helper."""
        key = blinding_key_for_script(test_seed, p2pkh_script)
        assert key.secret == expected_blinding_key(test_seed, p2pkh_script)

    def test_distinct_scripts(self, test_seed, p2pkh_script):
        """Test different scripts give different keys."""
        other = bytes.fromhex("0014") + bytes(20)
        assert blinding_key_for_script(test_seed, p2pkh_script) != blinding_key_for_script(
            test_seed, other
        )

    def test_empty_script(self, test_seed):
        """Test an empty script is allowed."""
        assert blinding_key_for_script(test_seed, b"").secret == expected_blinding_key(test_seed, b"")

    def test_script_type(self, test_seed):
        with pytest.raises(EncodingError):
            blinding_key_for_script(test_seed, "76a914")

    def test_master_key_type(self, p2pkh_script):
        with pytest.raises(EncodingError):
            derive_blinding_key(bytes(32), p2pkh_script)
