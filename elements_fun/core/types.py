"""
elements-fun Core Types

ContractHash is a public 32-byte commitment. Slip21Node and BlindingKey hold
secret material: they keep it in a private bytearray that can be wiped, never
print it, and compare in constant time.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union

from elements_fun.constants import (
    HASH_SIZE,
    SLIP21_NODE_SIZE,
    SLIP21_CHAIN_CODE_SIZE,
    BLINDING_KEY_SIZE,
)
from elements_fun.errors import EncodingError
from elements_fun.crypto.hash import sha256, constant_time_compare, secure_zero

BytesLike = Union[bytes, bytearray, memoryview]


def as_bytes(value: Any, what: str = "value") -> bytes:
    """
    Coerce a bytes-like value to bytes.

    Raises:
        EncodingError: if value is not bytes, bytearray or memoryview
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise EncodingError(f"{what} must be bytes-like, got {type(value).__name__}")


def bytes_from_hex(hex_string: str, what: str = "value") -> bytes:
    """Parse hex, mapping failures to EncodingError."""
    if not isinstance(hex_string, str):
        raise EncodingError(f"{what} must be a hex string, got {type(hex_string).__name__}")
    try:
        return bytes.fromhex(hex_string)
    except ValueError as e:
        raise EncodingError(f"{what} is not valid hex: {e}") from e


@dataclass(frozen=True, slots=True)
class ContractHash:
    """
    SHA-256 of a canonically serialized issuance contract.

    SIZE: 32 bytes
    SERIALIZATION: raw digest bytes
    DISPLAY: byte-reversed hex, as Elements prints hashes
    """
    data: bytes = field(default_factory=lambda: bytes(HASH_SIZE))

    def __post_init__(self):
        if not isinstance(self.data, bytes):
            raise EncodingError(
                f"ContractHash data must be bytes, got {type(self.data).__name__}"
            )
        if len(self.data) != HASH_SIZE:
            raise EncodingError(f"ContractHash must be {HASH_SIZE} bytes, got {len(self.data)}")

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"ContractHash({self.hex()})"

    def hex(self) -> str:
        """Display-order (byte-reversed) hex."""
        return self.data[::-1].hex()

    @classmethod
    def from_hex(cls, hex_string: str) -> ContractHash:
        """Parse display-order hex, the inverse of hex()."""
        return cls(bytes_from_hex(hex_string, "ContractHash")[::-1])

    @classmethod
    def zero(cls) -> ContractHash:
        return cls(bytes(HASH_SIZE))

    @classmethod
    def hash(cls, data: BytesLike) -> ContractHash:
        """Hash raw bytes, e.g. an already canonical contract."""
        return cls(sha256(as_bytes(data, "data")))

    @classmethod
    def from_json_contract(cls, json_text: Union[str, bytes]) -> ContractHash:
        """
        Hash a JSON contract after canonicalizing it.

        Registry fields are not checked; any JSON object is accepted.

        Raises:
            InvalidContract: if the text cannot be canonicalized
        """
        from elements_fun.crypto.contract import hash_contract
        from elements_fun.config import ContractConfig

        return hash_contract(json_text, ContractConfig(validate_fields=False))

    def serialize(self) -> bytes:
        """Serialize to raw bytes."""
        return self.data

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0) -> tuple[ContractHash, int]:
        """Deserialize from bytes, return (ContractHash, bytes_consumed)."""
        chunk = data[offset:offset + HASH_SIZE]
        if len(chunk) != HASH_SIZE:
            raise EncodingError(f"Truncated ContractHash: {len(chunk)} bytes available")
        return cls(bytes(chunk)), HASH_SIZE


class _SecretBytes:
    """Fixed-size secret held in a wipeable buffer."""

    __slots__ = ("_data",)

    SIZE = 0

    def __init__(self, data: BytesLike):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise EncodingError(
                f"{type(self).__name__} data must be bytes-like, got {type(data).__name__}"
            )
        if len(data) != self.SIZE:
            raise EncodingError(
                f"{type(self).__name__} must be {self.SIZE} bytes, got {len(data)}"
            )
        self._data = bytearray(data)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return constant_time_compare(self._data, other._data)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        # Never expose secret data
        return f"{type(self).__name__}(<redacted>)"

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.wipe()

    def wipe(self) -> None:
        """Overwrite the secret with zeros."""
        secure_zero(self._data)

    @property
    def is_wiped(self) -> bool:
        return not any(self._data)


class Slip21Node(_SecretBytes):
    """
    SLIP-21 derivation node.

    SIZE: 64 bytes
    LAYOUT: chain_code (N[0:32]) || key (N[32:64])
    NOTE: Recomputed from the seed on demand, never cached.
    """

    __slots__ = ()

    SIZE = SLIP21_NODE_SIZE

    @property
    def chain_code(self) -> bytes:
        return bytes(self._data[:SLIP21_CHAIN_CODE_SIZE])

    @property
    def key(self) -> bytes:
        return bytes(self._data[SLIP21_CHAIN_CODE_SIZE:])

    def serialize(self) -> bytes:
        """Serialize to bytes: chain_code || key. Use with caution!"""
        return bytes(self._data)


class BlindingKey(_SecretBytes):
    """
    Blinding private key for one confidential output.

    SIZE: 32 bytes
    NOTE: Handed to the confidential-transaction layer, never stored here.
    """

    __slots__ = ()

    SIZE = BLINDING_KEY_SIZE

    @property
    def secret(self) -> bytes:
        return bytes(self._data)

    def hex(self) -> str:
        return self._data.hex()

    @classmethod
    def from_hex(cls, hex_string: str) -> BlindingKey:
        return cls(bytes_from_hex(hex_string, "BlindingKey"))

    def serialize(self) -> bytes:
        """Serialize to raw bytes. Use with caution!"""
        return bytes(self._data)
