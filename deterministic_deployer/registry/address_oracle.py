"""Deterministic location derivation (EIP-1014 CREATE2).

    location = keccak256(0xff ++ creator ++ salt ++ keccak256(content))[12:]

Both functions are pure: no state, no dependence on call order or on the
host environment. Hashing the content is kept separate from deriving the
location so callers can pre-compute and cross-check a target before
attempting creation.
"""

from __future__ import annotations

from eth_utils import keccak

from .constants import CREATION_TAG, IDENTITY_WIDTH
from .errors import InvalidArgumentError
from .identity import IdentityLike, SaltLike, to_content_hash, to_identity, to_salt


def hash_content(blob: bytes) -> bytes:
    """Keccak-256 of the blob exactly as given. Empty input is valid."""
    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"content must be bytes-like, got {type(blob).__name__}",
            type=type(blob).__name__,
        )
    return keccak(bytes(blob))


def derive_location(
    creator: IdentityLike,
    salt: SaltLike,
    content_hash: bytes | str,
) -> bytes:
    """Compute the 20-byte location an artifact will occupy.

    Args:
        creator: Identity performing the creation (the registry itself)
        salt: 32-byte salt, or an int / hex text normalized to one
        content_hash: keccak256 of the content blob

    Returns:
        Last 20 bytes of keccak256(CREATION_TAG ++ creator ++ salt ++ content_hash)
    """
    preimage = (
        CREATION_TAG
        + to_identity(creator)
        + to_salt(salt)
        + to_content_hash(content_hash)
    )
    return keccak(preimage)[-IDENTITY_WIDTH:]


def predict_location(creator: IdentityLike, salt: SaltLike, content: bytes) -> bytes:
    """Shortcut for ``derive_location(creator, salt, hash_content(content))``."""
    return derive_location(creator, salt, hash_content(content))
