"""Normalization of identities, salts and content hashes.

All registry internals work on raw bytes of fixed width. Callers may hand
in hex text (any case, 0x-prefixed) or, for salts, plain integers; these
helpers turn them into canonical bytes or raise InvalidArgumentError.
"""

from __future__ import annotations

from eth_utils import (
    decode_hex,
    encode_hex,
    int_to_big_endian,
    is_hex,
    to_checksum_address,
)

from .constants import HASH_WIDTH, IDENTITY_WIDTH, MAX_SALT, SALT_WIDTH, ZERO_IDENTITY
from .errors import InvalidArgumentError

IdentityLike = bytes | str
SaltLike = bytes | str | int


def _decode_prefixed_hex(value: str, what: str) -> bytes:
    if not value.startswith(("0x", "0X")) or not is_hex(value):
        raise InvalidArgumentError(f"{what} must be 0x-prefixed hex, got {value!r}", value=value)
    digits = value[2:]
    if len(digits) % 2:
        digits = "0" + digits
    return decode_hex("0x" + digits)


def to_identity(value: IdentityLike) -> bytes:
    """Return the canonical 20-byte form of an identity.

    Raises:
        InvalidArgumentError: If the value is not 20 bytes or 40 hex digits.
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        raw = _decode_prefixed_hex(value, "identity")
    else:
        raise InvalidArgumentError(
            f"identity must be bytes or hex text, got {type(value).__name__}"
        )
    if len(raw) != IDENTITY_WIDTH:
        raise InvalidArgumentError(
            f"identity must be {IDENTITY_WIDTH} bytes, got {len(raw)}",
            length=len(raw),
        )
    return raw


def to_salt(value: SaltLike) -> bytes:
    """Return the canonical 32-byte form of a salt.

    Integers are encoded big-endian and hex text is left-padded, so
    ``to_salt(1) == to_salt("0x01")``. Raw bytes must already be 32 long.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError("salt must not be a bool")
    if isinstance(value, int):
        if value < 0 or value >= MAX_SALT:
            raise InvalidArgumentError(f"salt out of range: {value}", value=value)
        return int_to_big_endian(value).rjust(SALT_WIDTH, b"\x00")
    if isinstance(value, (bytes, bytearray)):
        if len(value) != SALT_WIDTH:
            raise InvalidArgumentError(
                f"salt must be {SALT_WIDTH} bytes, got {len(value)}",
                length=len(value),
            )
        return bytes(value)
    if isinstance(value, str):
        raw = _decode_prefixed_hex(value, "salt")
        if len(raw) > SALT_WIDTH:
            raise InvalidArgumentError(
                f"salt must be at most {SALT_WIDTH} bytes, got {len(raw)}",
                length=len(raw),
            )
        return raw.rjust(SALT_WIDTH, b"\x00")
    raise InvalidArgumentError(f"salt must be int, bytes or hex text, got {type(value).__name__}")


def to_content_hash(value: bytes | str) -> bytes:
    """Return a 32-byte content hash from bytes or hex text."""
    if isinstance(value, str):
        value = _decode_prefixed_hex(value, "content hash")
    if not isinstance(value, (bytes, bytearray)) or len(value) != HASH_WIDTH:
        raise InvalidArgumentError(f"content hash must be {HASH_WIDTH} bytes")
    return bytes(value)


def is_zero_identity(identity: bytes) -> bool:
    return identity == ZERO_IDENTITY


def format_identity(identity: bytes) -> str:
    """EIP-55 checksum text for an identity."""
    return to_checksum_address(identity)


def format_bytes32(value: bytes) -> str:
    return encode_hex(value)
