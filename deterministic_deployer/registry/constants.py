"""Centralized constants for the registry module.

Widths and tags of the CREATE2 derivation live here to avoid byte
literals scattered across modules.
"""

# Prefix byte distinguishing CREATE2 derivation from nonce-based CREATE
CREATION_TAG = b"\xff"

IDENTITY_WIDTH = 20
SALT_WIDTH = 32
HASH_WIDTH = 32

# Empty identity; as allowed actor it disables creation entirely
ZERO_IDENTITY = bytes(IDENTITY_WIDTH)

MAX_SALT = 2 ** (8 * SALT_WIDTH)
