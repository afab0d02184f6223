"""
elements-fun Confidential Commitments

Pedersen commitment containers for confidential outputs. Each is one prefix
byte followed by a 32-byte commitment; the prefix pair identifies the kind.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple

from elements_fun.constants import (
    COMMITMENT_SIZE,
    CONFIDENTIAL_COMMITMENT_SIZE,
    ASSET_COMMITMENT_PREFIXES,
    VALUE_COMMITMENT_PREFIXES,
    NONCE_COMMITMENT_PREFIXES,
)
from elements_fun.errors import EncodingError
from elements_fun.core.types import as_bytes, bytes_from_hex


@dataclass(frozen=True, slots=True)
class ConfidentialCommitment:
    """
    Base for the commitment kinds.

    SIZE: 33 bytes
    SERIALIZATION: prefix || commitment
    """
    data: bytes

    PREFIXES: ClassVar[Tuple[int, int]] = ()

    def __post_init__(self):
        if not isinstance(self.data, bytes) or len(self.data) != CONFIDENTIAL_COMMITMENT_SIZE:
            raise EncodingError(
                f"{type(self).__name__} must be {CONFIDENTIAL_COMMITMENT_SIZE} bytes"
            )
        if not self.is_valid_prefix(self.data[0]):
            raise EncodingError(
                f"Invalid {type(self).__name__} prefix: 0x{self.data[0]:02x}"
            )

    @classmethod
    def is_valid_prefix(cls, tag: int) -> bool:
        return tag in cls.PREFIXES

    @classmethod
    def new(cls, tag: int, commitment: bytes):
        """
        Build from a prefix byte and a 32-byte commitment.

        Raises:
            EncodingError: on wrong length or unknown prefix
        """
        commitment = as_bytes(commitment, "commitment")
        if len(commitment) != COMMITMENT_SIZE:
            raise EncodingError(f"Commitments must be {COMMITMENT_SIZE} bytes long")
        if not isinstance(tag, int) or not 0 <= tag <= 0xFF:
            raise EncodingError(f"Invalid prefix: {tag!r}")
        return cls(bytes([tag]) + commitment)

    @classmethod
    def from_slice(cls, data: bytes):
        data = as_bytes(data, "commitment")
        if not data:
            raise EncodingError("Empty commitment")
        return cls.new(data[0], data[1:])

    @classmethod
    def from_hex(cls, hex_string: str):
        return cls.from_slice(bytes_from_hex(hex_string, cls.__name__))

    @property
    def prefix(self) -> int:
        return self.data[0]

    def commitment(self) -> bytes:
        """Full 33-byte encoding."""
        return self.data

    def encoded_length(self) -> int:
        return CONFIDENTIAL_COMMITMENT_SIZE

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.data.hex()

    def hex(self) -> str:
        return self.data.hex()

    def serialize(self) -> bytes:
        return self.data

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0):
        """Deserialize from bytes, return (commitment, bytes_consumed)."""
        chunk = data[offset:offset + CONFIDENTIAL_COMMITMENT_SIZE]
        if len(chunk) != CONFIDENTIAL_COMMITMENT_SIZE:
            raise EncodingError(f"Truncated {cls.__name__}: {len(chunk)} bytes available")
        return cls.from_slice(chunk), CONFIDENTIAL_COMMITMENT_SIZE


@dataclass(frozen=True, slots=True)
class AssetCommitment(ConfidentialCommitment):
    """Blinded asset tag (generator)."""
    PREFIXES: ClassVar[Tuple[int, int]] = ASSET_COMMITMENT_PREFIXES


@dataclass(frozen=True, slots=True)
class ValueCommitment(ConfidentialCommitment):
    """Blinded amount."""
    PREFIXES: ClassVar[Tuple[int, int]] = VALUE_COMMITMENT_PREFIXES


@dataclass(frozen=True, slots=True)
class NonceCommitment(ConfidentialCommitment):
    """ECDH public key for output unblinding."""
    PREFIXES: ClassVar[Tuple[int, int]] = NONCE_COMMITMENT_PREFIXES
