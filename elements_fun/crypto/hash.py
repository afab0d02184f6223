"""
elements-fun Hash Primitives

SHA-256 and HMAC helpers backed by pycryptodome, plus secret-buffer hygiene.
"""

from __future__ import annotations
import hmac
from typing import Union

from Crypto.Hash import HMAC, SHA256, SHA512

BytesLike = Union[bytes, bytearray, memoryview]


def sha256(data: BytesLike) -> bytes:
    """Compute SHA-256 hash."""
    return SHA256.new(data).digest()


def sha256_engine() -> SHA256.SHA256Hash:
    """
    Return an incremental SHA-256 object.

    Feed it with update() and finish with digest(). Used for hashing
    encoder output chunk by chunk.
    """
    return SHA256.new()


def hmac_sha256(key: BytesLike, data: BytesLike) -> bytes:
    """Compute HMAC-SHA256."""
    return HMAC.new(bytes(key), msg=data, digestmod=SHA256).digest()


def hmac_sha512(key: BytesLike, data: BytesLike) -> bytes:
    """Compute HMAC-SHA512."""
    return HMAC.new(bytes(key), msg=data, digestmod=SHA512).digest()


def constant_time_compare(a: BytesLike, b: BytesLike) -> bool:
    """Constant-time comparison to prevent timing attacks."""
    return hmac.compare_digest(bytes(a), bytes(b))


def secure_zero(data: bytearray) -> None:
    """Securely zero sensitive data in memory."""
    for i in range(len(data)):
        data[i] = 0
