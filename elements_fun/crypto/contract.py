"""
elements-fun Contract Hashing

Binds an asset issuance to a human-readable contract document.

The contract hash is SHA-256 over the canonical JSON serialization of the
contract, with no prefix or tag. The canonical form is the one rust-elements
writes in ContractHash::from_json_contract: object keys sorted
(recursively), compact separators, strings as raw UTF-8 with only
mandatory escapes, integers in decimal and floats in shortest round-trip
form laid out as ryu does ("1e16", "0.00001", "1.5e-7"). A contract that
has no single canonical form is rejected with InvalidContract rather than
hashed.
"""

from __future__ import annotations
import json
import logging
import math
import unicodedata
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from elements_fun.config import ContractConfig
from elements_fun.constants import JSON_INT_MIN, JSON_INT_MAX
from elements_fun.core.types import ContractHash
from elements_fun.crypto.hash import sha256_engine
from elements_fun.errors import InvalidContract

logger = logging.getLogger(__name__)

ContractInput = Union[Mapping, str, bytes, bytearray, memoryview]


# ==============================================================================
# Parsing
# ==============================================================================

def _unique_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise InvalidContract(f"Duplicate key in contract: {key!r}")
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise InvalidContract(f"Non-finite number in contract: {name}")


def _parse_int(literal: str) -> Union[int, float]:
    # serde_json reads a negative integer literal equal to zero as -0.0
    if literal == "-0":
        return -0.0
    return int(literal)


def load_contract(text: Union[str, bytes, bytearray, memoryview]) -> Dict[str, Any]:
    """
    Parse JSON contract text strictly.

    Unlike json.loads, duplicate keys and NaN/Infinity literals are errors,
    bytes must be UTF-8, and the top level must be an object.

    Raises:
        InvalidContract: if the text is not an acceptable JSON object
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidContract(f"Contract is not valid UTF-8: {e}") from e

    if not isinstance(text, str):
        raise InvalidContract(f"Contract text must be str or bytes, got {type(text).__name__}")

    try:
        contract = json.loads(
            text,
            object_pairs_hook=_unique_object,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except ValueError as e:
        raise InvalidContract(f"Invalid contract JSON: {e}") from e
    except RecursionError as e:
        raise InvalidContract("Contract nesting too deep") from e

    if not isinstance(contract, dict):
        raise InvalidContract(
            f"Contract must be a JSON object, got {type(contract).__name__}"
        )

    return contract


# ==============================================================================
# Canonical encoding
# ==============================================================================

def format_float(value: float) -> str:
    """
    Format a finite float in shortest round-trip form, ryu layout.

    repr() supplies the shortest digits; only the placement of the decimal
    point and exponent differs from Python's own formatting.
    """
    if not math.isfinite(value):
        raise InvalidContract(f"Non-finite number in contract: {value!r}")

    if value == 0.0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")

    digits = int_part + frac_part
    point = len(int_part) + (int(exp) if exp else 0)

    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")

    # value == 0.<digits> * 10**point
    length = len(digits)
    k = point - length

    if 0 <= k and point <= 16:
        # 1234e7 -> 12340000000.0
        body = digits + "0" * k + ".0"
    elif 0 < point <= 16:
        # 1234e-2 -> 12.34
        body = digits[:point] + "." + digits[point:]
    elif -5 < point <= 0:
        # 1234e-6 -> 0.001234
        body = "0." + "0" * -point + digits
    elif length == 1:
        # 1e30
        body = f"{digits}e{point - 1}"
    else:
        # 1234e30 -> 1.234e33
        body = f"{digits[0]}.{digits[1:]}e{point - 1}"

    return sign + body


def _encode_string(value: str) -> bytes:
    try:
        return json.dumps(value, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidContract(f"Contract string is not valid Unicode: {e}") from e


def _sorted_keys(obj: Mapping) -> List[str]:
    normalized = {}
    for key in obj:
        if not isinstance(key, str):
            raise InvalidContract(f"Contract keys must be strings, got {type(key).__name__}")
        nfc = unicodedata.normalize("NFC", key)
        if nfc in normalized:
            raise InvalidContract(
                f"Contract keys {normalized[nfc]!r} and {key!r} collide under normalization"
            )
        normalized[nfc] = key
    return sorted(obj)


def _encode(value: Any, depth: int, max_depth: int) -> Iterator[bytes]:
    if value is None:
        yield b"null"
    elif value is True:
        yield b"true"
    elif value is False:
        yield b"false"
    elif isinstance(value, int):
        if JSON_INT_MIN <= value <= JSON_INT_MAX:
            yield str(int(value)).encode("ascii")
        else:
            # Out of 64-bit range: serde_json parses these as doubles
            try:
                yield format_float(float(value)).encode("ascii")
            except OverflowError as e:
                raise InvalidContract(f"Integer too large for contract: {e}") from e
    elif isinstance(value, float):
        yield format_float(float(value)).encode("ascii")
    elif isinstance(value, str):
        yield _encode_string(value)
    elif isinstance(value, Mapping):
        if depth + 1 >= max_depth:
            raise InvalidContract(f"Contract nesting exceeds {max_depth} levels")
        yield b"{"
        for i, key in enumerate(_sorted_keys(value)):
            if i:
                yield b","
            yield _encode_string(key)
            yield b":"
            yield from _encode(value[key], depth + 1, max_depth)
        yield b"}"
    elif isinstance(value, (list, tuple)):
        if depth + 1 >= max_depth:
            raise InvalidContract(f"Contract nesting exceeds {max_depth} levels")
        yield b"["
        for i, item in enumerate(value):
            if i:
                yield b","
            yield from _encode(item, depth + 1, max_depth)
        yield b"]"
    else:
        raise InvalidContract(f"Unsupported contract value type: {type(value).__name__}")


def _as_mapping(contract: ContractInput) -> Mapping:
    if isinstance(contract, (str, bytes, bytearray, memoryview)):
        return load_contract(contract)
    if isinstance(contract, Mapping):
        return contract
    raise InvalidContract(f"Contract must be a mapping or JSON text, got {type(contract).__name__}")


def canonical_contract(
    contract: ContractInput,
    config: Optional[ContractConfig] = None,
) -> bytes:
    """
    Return the canonical byte serialization of a contract.

    Raises:
        InvalidContract: if no canonical form exists
    """
    config = config or ContractConfig()
    return b"".join(_encode(_as_mapping(contract), 0, config.max_depth))


# ==============================================================================
# Registry fields
# ==============================================================================

def json_type(value: Any) -> str:
    """Name the JSON type a Python value serializes as."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def validate_contract(
    contract: Mapping,
    config: Optional[ContractConfig] = None,
) -> None:
    """
    Check required registry fields and their JSON types.

    A field declared "number" also accepts integers.

    Raises:
        InvalidContract: on a missing field, wrong type or bad precision
    """
    config = config or ContractConfig()

    for name, expected in config.required_fields.items():
        if name not in contract:
            raise InvalidContract(f"Missing required contract field: {name}")
        actual = json_type(contract[name])
        if actual != expected and not (expected == "number" and actual == "integer"):
            raise InvalidContract(
                f"Contract field {name!r} must be {expected}, got {actual}"
            )

    precision = contract.get("precision")
    if json_type(precision) == "integer" and not 0 <= precision <= config.max_precision:
        raise InvalidContract(
            f"Contract precision must be between 0 and {config.max_precision}, got {precision}"
        )


# ==============================================================================
# Hashing
# ==============================================================================

def hash_contract(
    contract: ContractInput,
    config: Optional[ContractConfig] = None,
) -> ContractHash:
    """
    Compute the contract hash.

    Args:
        contract: Mapping, or JSON text as str or UTF-8 bytes
        config: Field validation and depth settings

    Returns:
        SHA-256 of the canonical serialization

    Raises:
        InvalidContract: on malformed input, missing or mistyped registry
            fields, or values with no canonical encoding
    """
    config = config or ContractConfig()
    mapping = _as_mapping(contract)

    if config.validate_fields:
        validate_contract(mapping, config)

    engine = sha256_engine()
    size = 0
    for chunk in _encode(mapping, 0, config.max_depth):
        engine.update(chunk)
        size += len(chunk)

    result = ContractHash(engine.digest())
    logger.debug(f"Contract hash over {size} canonical bytes: {result.hex()}")
    return result
