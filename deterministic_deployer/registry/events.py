"""Notifications emitted by the registry.

Each event knows its canonical signature and can render itself in the
EVM log layout (topics + data) so existing tooling that filters on the
keccak topic of the signature sees identical bytes.

    AllowedActorChanged(address indexed newActor)
    OwnerChanged(address indexed newOwner)
    NewCreation(bytes32 salt, address location)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from eth_utils import encode_hex, keccak

from .identity import format_bytes32, format_identity

WORD = 32


def _word(value: bytes) -> bytes:
    """Left-pad a value to one 32-byte ABI word."""
    return value.rjust(WORD, b"\x00")


@dataclass(frozen=True)
class RegistryEvent:
    """Base class for registry notifications."""

    signature: ClassVar[str] = ""
    event_type: ClassVar[str] = ""

    @classmethod
    def topic(cls) -> bytes:
        """keccak256 of the event signature (topic 0)."""
        return keccak(text=cls.signature)

    def indexed(self) -> list[bytes]:
        return []

    def unindexed(self) -> list[bytes]:
        return []

    def to_log(self) -> dict[str, Any]:
        """Render as an EVM log entry with hex-encoded topics and data."""
        topics = [self.topic()] + [_word(v) for v in self.indexed()]
        data = b"".join(_word(v) for v in self.unindexed())
        return {
            "topics": [encode_hex(t) for t in topics],
            "data": encode_hex(data),
        }

    def payload(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"event_type": self.event_type, **self.payload()}


@dataclass(frozen=True)
class AllowedActorChanged(RegistryEvent):
    signature: ClassVar[str] = "AllowedActorChanged(address)"
    event_type: ClassVar[str] = "allowed_actor_changed"

    new_actor: bytes

    def indexed(self) -> list[bytes]:
        return [self.new_actor]

    def payload(self) -> dict[str, Any]:
        return {"new_actor": format_identity(self.new_actor)}


@dataclass(frozen=True)
class OwnerChanged(RegistryEvent):
    signature: ClassVar[str] = "OwnerChanged(address)"
    event_type: ClassVar[str] = "owner_changed"

    new_owner: bytes

    def indexed(self) -> list[bytes]:
        return [self.new_owner]

    def payload(self) -> dict[str, Any]:
        return {"new_owner": format_identity(self.new_owner)}


@dataclass(frozen=True)
class NewCreation(RegistryEvent):
    signature: ClassVar[str] = "NewCreation(bytes32,address)"
    event_type: ClassVar[str] = "new_creation"

    salt: bytes
    location: bytes

    def unindexed(self) -> list[bytes]:
        return [self.salt, self.location]

    def payload(self) -> dict[str, Any]:
        return {
            "salt": format_bytes32(self.salt),
            "location": format_identity(self.location),
        }
