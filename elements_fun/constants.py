"""
elements-fun Constants

All constants defined here for single source of truth.
"""

from typing import Final, Dict, Tuple

# ==============================================================================
# SIZES
# ==============================================================================

HASH_SIZE: Final[int] = 32                      # SHA-256 digest
SLIP21_NODE_SIZE: Final[int] = 64               # HMAC-SHA512 output
SLIP21_CHAIN_CODE_SIZE: Final[int] = 32         # N[0:32]
SLIP21_KEY_SIZE: Final[int] = 32                # N[32:64]
BLINDING_KEY_SIZE: Final[int] = 32              # HMAC-SHA256 output

COMMITMENT_SIZE: Final[int] = 32                # Commitment body without prefix
CONFIDENTIAL_COMMITMENT_SIZE: Final[int] = 33   # prefix || commitment

# ==============================================================================
# SLIP-21 / SLIP-77
# ==============================================================================

# HMAC key for the master node
SLIP21_MASTER_KEY: Final[bytes] = b"Symmetric key seed"

# Leading byte of every child derivation message
SLIP21_CHILD_PREFIX: Final[bytes] = b"\x00"

# Label of the SLIP-77 master blinding key node
SLIP77_LABEL: Final[bytes] = b"SLIP-0077"

# ==============================================================================
# CONFIDENTIAL COMMITMENT PREFIXES
# ==============================================================================

ASSET_COMMITMENT_PREFIXES: Final[Tuple[int, int]] = (0x0A, 0x0B)
VALUE_COMMITMENT_PREFIXES: Final[Tuple[int, int]] = (0x08, 0x09)
NONCE_COMMITMENT_PREFIXES: Final[Tuple[int, int]] = (0x02, 0x03)

# ==============================================================================
# CONTRACTS
# ==============================================================================

# serde_json recursion limit: at most 127 nested containers are accepted
CONTRACT_MAX_DEPTH: Final[int] = 128

# Liquid asset registry precision range
CONTRACT_MAX_PRECISION: Final[int] = 8

# Integers outside this range are encoded as doubles
JSON_INT_MIN: Final[int] = -(2 ** 63)
JSON_INT_MAX: Final[int] = 2 ** 64 - 1

# Required registry fields and their JSON types
CONTRACT_REQUIRED_FIELDS: Final[Dict[str, str]] = {
    "entity": "object",
    "issuer_pubkey": "string",
    "name": "string",
    "precision": "integer",
    "ticker": "string",
    "version": "integer",
}

JSON_TYPES: Final[Tuple[str, ...]] = (
    "object",
    "array",
    "string",
    "integer",
    "number",
    "boolean",
    "null",
)
