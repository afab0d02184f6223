"""
elements-fun Command Line

Usage:
    elements-fun contract-hash contract.json     # Hash a contract file
    elements-fun contract-hash - < contract.json # Hash stdin
    elements-fun slip21 --seed HEX SLIP-0021     # Derive a SLIP-21 node
    elements-fun blinding-key --seed HEX --script HEX
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from elements_fun import __version__
from elements_fun.config import Config, load_config, setup_logging
from elements_fun.core.types import bytes_from_hex
from elements_fun.crypto.contract import hash_contract
from elements_fun.crypto.slip21 import derive_path
from elements_fun.crypto.blinding import blinding_key_for_script
from elements_fun.crypto.hash import secure_zero
from elements_fun.errors import ElementsFunError, InvalidContract

logger = logging.getLogger(__name__)


def _read_contract(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    try:
        with open(source, "rb") as f:
            return f.read()
    except OSError as e:
        raise InvalidContract(f"Cannot read contract {source}: {e}") from e


def cmd_contract_hash(args: argparse.Namespace, config: Config) -> int:
    if args.no_validate:
        config.contract.validate_fields = False

    contract_hash = hash_contract(_read_contract(args.contract), config.contract)
    print(contract_hash.hex())
    return 0


def cmd_slip21(args: argparse.Namespace, config: Config) -> int:
    seed = bytearray(bytes_from_hex(args.seed, "seed"))
    try:
        with derive_path(seed, args.labels) as node:
            print(f"key:        {node.key.hex()}")
            print(f"chain_code: {node.chain_code.hex()}")
    finally:
        secure_zero(seed)
    return 0


def cmd_blinding_key(args: argparse.Namespace, config: Config) -> int:
    seed = bytearray(bytes_from_hex(args.seed, "seed"))
    script = bytes_from_hex(args.script, "script")
    try:
        with blinding_key_for_script(seed, script, config.derivation.blinding_label) as key:
            print(key.hex())
    finally:
        secure_zero(seed)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elements-fun",
        description="Elements contract hashes and blinding keys",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", "-c", type=str, help="Path to config file")
    parser.add_argument("--log-level", type=str, help="Log level (overrides config)")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("contract-hash", help="Hash a JSON issuance contract")
    p.add_argument("contract", nargs="?", default="-", help="Contract file, '-' for stdin")
    p.add_argument("--no-validate", action="store_true", help="Skip registry field checks")
    p.set_defaults(func=cmd_contract_hash)

    p = sub.add_parser("slip21", help="Derive a SLIP-21 node")
    p.add_argument("--seed", required=True, help="Master seed (hex)")
    p.add_argument("labels", nargs="*", help="Path labels, root first")
    p.set_defaults(func=cmd_slip21)

    p = sub.add_parser("blinding-key", help="Derive a SLIP-77 blinding private key")
    p.add_argument("--seed", required=True, help="Master seed (hex)")
    p.add_argument("--script", required=True, help="Output scriptPubKey (hex)")
    p.set_defaults(func=cmd_blinding_key)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else Config.default()
        if args.log_level:
            config.log.level = args.log_level
        setup_logging(config.log)
        logger.debug(f"Running {args.command}")

        return args.func(args, config)
    except ElementsFunError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
