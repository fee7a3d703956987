"""
Deterministic deployer - command line helpers

Read-only helpers for deployment tooling: hash a content blob and predict
the location a creation through the registry would occupy.

Usage:
    python run.py hash-content --file build/Token.bin
    python run.py compute-location --salt 1 --hex 0x6080...
    python run.py compute-location --salt 0x2a --content-hash 0xabc... --registry 0x...
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import get_validated_config, load_config
from .registry.address_oracle import derive_location, hash_content
from .registry.errors import NotConfiguredError, RegistryError
from .registry.identity import format_bytes32, format_identity, to_content_hash, to_salt

logger = logging.getLogger(__name__)


def _parse_salt(value: str) -> bytes:
    """Salt from decimal or 0x-prefixed hex text."""
    if value.startswith(("0x", "0X")):
        return to_salt(value)
    try:
        return to_salt(int(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid salt: {value!r}") from exc


def _read_content(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        return Path(args.file).read_bytes()
    text: str = args.hex
    digits = text[2:] if text.startswith(("0x", "0X")) else text
    try:
        return bytes.fromhex(digits)
    except ValueError as exc:
        raise SystemExit(f"error: --hex is not valid hex: {exc}") from exc


def _add_content_source(parser: argparse.ArgumentParser, accept_hash: bool = False) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--hex", help="Content blob as hex text")
    group.add_argument("--file", help="Path to a file holding the raw content blob")
    if accept_hash:
        group.add_argument("--content-hash", help="Precomputed content hash (0x hex)")


def cmd_hash_content(args: argparse.Namespace) -> int:
    print(format_bytes32(hash_content(_read_content(args))))
    return 0


def cmd_compute_location(args: argparse.Namespace) -> int:
    registry = args.registry or get_validated_config().registry.address
    if registry is None:
        raise NotConfiguredError("pass --registry or set registry.address in config")

    if args.content_hash is not None:
        content_hash = to_content_hash(args.content_hash)
    else:
        content_hash = hash_content(_read_content(args))

    location = derive_location(registry, args.salt, content_hash)
    logger.debug(
        "Derived %s from registry=%s salt=%s hash=%s",
        format_identity(location), registry, format_bytes32(args.salt), format_bytes32(content_hash),
    )
    print(format_identity(location))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Deterministic deployer helpers (content hash, location prediction)"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default: $REGISTRY_CONFIG or config/config.yaml)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    hash_parser = sub.add_parser("hash-content", help="Print keccak256 of a content blob")
    _add_content_source(hash_parser)
    hash_parser.set_defaults(func=cmd_hash_content)

    loc_parser = sub.add_parser("compute-location", help="Predict a creation location")
    loc_parser.add_argument("--salt", type=_parse_salt, required=True, help="Salt (decimal or 0x hex)")
    loc_parser.add_argument("--registry", default=None, help="Registry address (default: registry.address)")
    _add_content_source(loc_parser, accept_hash=True)
    loc_parser.set_defaults(func=cmd_compute_location)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    load_config(args.config)
    logging.basicConfig(
        level=get_validated_config().logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result: int = args.func(args)
        return result
    except RegistryError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
