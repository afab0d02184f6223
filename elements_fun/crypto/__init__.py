"""
elements-fun Cryptographic Primitives

Contract hashing, SLIP-21 derivation and SLIP-77 blinding keys.
"""

from elements_fun.crypto.hash import sha256, hmac_sha256, hmac_sha512, secure_zero
from elements_fun.crypto.contract import (
    canonical_contract,
    hash_contract,
    load_contract,
    validate_contract,
)
from elements_fun.crypto.slip21 import master, derive_child, derive_path, parse_path
from elements_fun.crypto.blinding import (
    master_blinding_key,
    derive_blinding_key,
    blinding_key_for_script,
)

__all__ = [
    # Hash functions
    "sha256",
    "hmac_sha256",
    "hmac_sha512",
    "secure_zero",
    # Contract hashing
    "canonical_contract",
    "hash_contract",
    "load_contract",
    "validate_contract",
    # SLIP-21
    "master",
    "derive_child",
    "derive_path",
    "parse_path",
    # SLIP-77
    "master_blinding_key",
    "derive_blinding_key",
    "blinding_key_for_script",
]
