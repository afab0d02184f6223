"""
elements-fun Core Types
"""

from elements_fun.core.types import ContractHash, Slip21Node, BlindingKey
from elements_fun.core.commitments import (
    AssetCommitment,
    ValueCommitment,
    NonceCommitment,
)

__all__ = [
    "ContractHash",
    "Slip21Node",
    "BlindingKey",
    "AssetCommitment",
    "ValueCommitment",
    "NonceCommitment",
]
