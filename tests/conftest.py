"""
elements-fun Test Fixtures
"""

import hashlib
import hmac
import json
from typing import List

import pytest


TETHER_CONTRACT_JSON = (
    '{"entity":{"domain":"tether.to"},'
    '"issuer_pubkey":"0337cceec0beea0232ebe14cba0197a9fbd45fcf2ec946749de920e71434c2b904",'
    '"name":"Tether USD","precision":8,"ticker":"USDt","version":0}'
)

# Contract hash of TETHER_CONTRACT_JSON, display (byte-reversed) order
TETHER_CONTRACT_HASH = "3c7f0a53c2ff5b99590620d7f6604a7a3a7bfbaaa6aa61f7bfc7833ca03cde82"


def slip21_hmac(seed: bytes, path: List[bytes]) -> bytes:
    """Independent SLIP-21 computation with the standard library."""
    node = hmac.new(b"Symmetric key seed", seed, hashlib.sha512).digest()
    for label in path:
        node = hmac.new(node[:32], b"\x00" + label, hashlib.sha512).digest()
    return node


@pytest.fixture(scope="session")
def vector_seed() -> bytes:
    """BIP-39 seed of the SLIP-21 example mnemonic (empty passphrase)."""
    mnemonic = " ".join(["all"] * 12).encode()
    return hashlib.pbkdf2_hmac("sha512", mnemonic, b"mnemonic", 2048)


@pytest.fixture
def test_seed() -> bytes:
    """64-byte seed 0x00..0x3f."""
    return bytes(range(64))


@pytest.fixture
def tether_contract() -> dict:
    """Tether USD registry contract as a dict."""
    return json.loads(TETHER_CONTRACT_JSON)


@pytest.fixture
def tether_json() -> str:
    return TETHER_CONTRACT_JSON


@pytest.fixture
def p2pkh_script() -> bytes:
    """A P2PKH scriptPubKey."""
    return bytes.fromhex("76a914a579388225827d9f2fe9014add644487808c695d88ac")
