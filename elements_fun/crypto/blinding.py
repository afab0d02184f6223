"""
elements-fun Blinding Keys (SLIP-77)

One master blinding key per wallet, one blinding private key per output
script:

    master_blinding_key = SLIP21(seed, ["SLIP-0077"]).key
    blinding_key        = HMAC-SHA256(master_blinding_key, script_pubkey)

Deriving the matching public key needs secp256k1 and belongs to the
confidential-transaction layer.
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from elements_fun.constants import SLIP77_LABEL
from elements_fun.core.types import BlindingKey, Slip21Node, BytesLike, as_bytes
from elements_fun.crypto.hash import hmac_sha256, secure_zero
from elements_fun.crypto.slip21 import derive_path, label_bytes
from elements_fun.errors import EncodingError

logger = logging.getLogger(__name__)


def master_blinding_key(seed: BytesLike, label: Optional[Union[bytes, str]] = None) -> BlindingKey:
    """
    Derive the wallet's master blinding key.

    Args:
        seed: Master entropy
        label: SLIP-21 label of the blinding node (default "SLIP-0077")
    """
    label = SLIP77_LABEL if label is None else label_bytes(label)
    with derive_path(seed, [label]) as node:
        return BlindingKey(node.key)


def derive_blinding_key(
    master_key: Union[BlindingKey, Slip21Node],
    script_pubkey: BytesLike,
) -> BlindingKey:
    """
    Derive the blinding private key for one output script.

    Args:
        master_key: Master blinding key, or a SLIP-21 node whose key is used
        script_pubkey: Output script bytes (may be empty)

    Raises:
        EncodingError: if an argument has the wrong type
    """
    if isinstance(master_key, BlindingKey):
        secret = bytearray(master_key.secret)
    elif isinstance(master_key, Slip21Node):
        secret = bytearray(master_key.key)
    else:
        raise EncodingError(
            f"Master key must be a BlindingKey or Slip21Node, got {type(master_key).__name__}"
        )

    script = as_bytes(script_pubkey, "script_pubkey")
    try:
        digest = bytearray(hmac_sha256(secret, script))
    finally:
        secure_zero(secret)

    try:
        return BlindingKey(digest)
    finally:
        secure_zero(digest)


def blinding_key_for_script(
    seed: BytesLike,
    script_pubkey: BytesLike,
    label: Optional[Union[bytes, str]] = None,
) -> BlindingKey:
    """Derive an output's blinding key straight from the seed."""
    with master_blinding_key(seed, label) as master_key:
        key = derive_blinding_key(master_key, script_pubkey)

    logger.debug(f"Derived blinding key for {len(script_pubkey)}-byte script")
    return key
