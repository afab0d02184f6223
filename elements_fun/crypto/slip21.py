"""
elements-fun SLIP-21 Key Tree

Symmetric hierarchical derivation with byte-string labels
(https://github.com/satoshilabs/slips/blob/master/slip-0021.md):

    m     = HMAC-SHA512(key=b"Symmetric key seed", msg=seed)
    child = HMAC-SHA512(key=parent[0:32], msg=b"\\x00" || label)
    key   = node[32:64]

Nodes are recomputed from the seed on every call and never cached.
"""

from __future__ import annotations
import logging
import re
from typing import Any, Iterable, List, Union

from elements_fun.constants import SLIP21_MASTER_KEY, SLIP21_CHILD_PREFIX
from elements_fun.core.types import Slip21Node, BytesLike
from elements_fun.crypto.hash import hmac_sha512, secure_zero
from elements_fun.errors import EmptySeed, EncodingError

logger = logging.getLogger(__name__)

Label = Union[bytes, bytearray, memoryview, str]

_PATH_LABEL = re.compile(r'"((?:[^"\\]|\\.)*)"')


def label_bytes(label: Any) -> bytes:
    """
    Convert a derivation label to bytes. Strings are UTF-8 encoded.

    Raises:
        EncodingError: for any other type or unencodable text
    """
    if isinstance(label, (bytes, bytearray, memoryview)):
        return bytes(label)
    if isinstance(label, str):
        try:
            return label.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Label is not valid Unicode: {e}") from e
    raise EncodingError(f"Label must be bytes or str, got {type(label).__name__}")


def _node_from_digest(digest: bytes) -> Slip21Node:
    buf = bytearray(digest)
    try:
        return Slip21Node(buf)
    finally:
        secure_zero(buf)


def master(seed: BytesLike) -> Slip21Node:
    """
    Compute the root node from a master seed.

    Args:
        seed: Master entropy, any non-zero length

    Raises:
        EmptySeed: if seed is empty
        EncodingError: if seed is not bytes-like
    """
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise EncodingError(f"Seed must be bytes-like, got {type(seed).__name__}")
    if len(seed) == 0:
        raise EmptySeed("Seed must not be empty")

    return _node_from_digest(hmac_sha512(SLIP21_MASTER_KEY, seed))


def derive_child(parent: Slip21Node, label: Label) -> Slip21Node:
    """Derive the child of parent at label."""
    if not isinstance(parent, Slip21Node):
        raise EncodingError(f"Parent must be a Slip21Node, got {type(parent).__name__}")

    message = SLIP21_CHILD_PREFIX + label_bytes(label)
    return _node_from_digest(hmac_sha512(parent.chain_code, message))


def parse_path(path: str) -> List[bytes]:
    """
    Parse a textual path such as m/"SLIP-0021"/"Master encryption key".

    Labels are double-quoted; \\" and \\\\ escape a quote and a backslash.

    Raises:
        EncodingError: if the path is malformed
    """
    if not isinstance(path, str):
        raise EncodingError(f"Path must be a string, got {type(path).__name__}")

    text = path.strip()
    if text == "m":
        return []
    if not text.startswith("m/"):
        raise EncodingError(f"Path must start with 'm': {path!r}")

    labels = []
    pos = 2
    while True:
        match = _PATH_LABEL.match(text, pos)
        if match is None:
            raise EncodingError(f"Malformed path label at offset {pos}: {path!r}")
        labels.append(label_bytes(re.sub(r"\\(.)", r"\1", match.group(1))))
        pos = match.end()
        if pos == len(text):
            return labels
        if text[pos] != "/":
            raise EncodingError(f"Expected '/' at offset {pos}: {path!r}")
        pos += 1


def derive_path(seed: BytesLike, path: Union[Iterable[Label], str] = ()) -> Slip21Node:
    """
    Derive the node at path from seed.

    Equivalent to master(seed) followed by derive_child for each label.
    Intermediate nodes are wiped before returning.

    Args:
        seed: Master entropy
        path: Sequence of labels, or a textual path for parse_path

    Returns:
        Node at path (the root for an empty path)
    """
    if isinstance(path, str):
        path = parse_path(path)
    elif isinstance(path, (bytes, bytearray, memoryview)):
        raise EncodingError("Path must be a sequence of labels, not a single label")

    node = master(seed)
    depth = 0
    try:
        for label in path:
            child = derive_child(node, label)
            node.wipe()
            node = child
            depth += 1
    except BaseException:
        node.wipe()
        raise

    logger.debug(f"Derived SLIP-21 node at depth {depth}")
    return node
