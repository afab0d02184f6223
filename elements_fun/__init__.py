"""
elements-fun
Make it fun to work with the Elements blockchain.

Contract hashes bind an asset issuance to its contract document; SLIP-21
and SLIP-77 derive per-output blinding keys from one master seed.
"""

__version__ = "0.1.0"

# crypto first: core.types imports crypto.hash
from elements_fun.crypto import (
    hash_contract,
    canonical_contract,
    master,
    derive_child,
    derive_path,
    master_blinding_key,
    derive_blinding_key,
    blinding_key_for_script,
)
from elements_fun.core import (
    ContractHash,
    Slip21Node,
    BlindingKey,
    AssetCommitment,
    ValueCommitment,
    NonceCommitment,
)
from elements_fun.errors import (
    ElementsFunError,
    InvalidContract,
    EmptySeed,
    EncodingError,
    ConfigError,
)

__all__ = [
    "hash_contract",
    "canonical_contract",
    "master",
    "derive_child",
    "derive_path",
    "master_blinding_key",
    "derive_blinding_key",
    "blinding_key_for_script",
    "ContractHash",
    "Slip21Node",
    "BlindingKey",
    "AssetCommitment",
    "ValueCommitment",
    "NonceCommitment",
    "ElementsFunError",
    "InvalidContract",
    "EmptySeed",
    "EncodingError",
    "ConfigError",
    "__version__",
]
