"""Host environment creation primitive and an in-memory slot table.

The registry never implements creation itself. It delegates to a Creator,
which atomically claims the derived slot or fails. InMemoryHost is the
reference Creator used by tests and the command line: a table mapping
occupied locations to the content that was placed there.

Usage:
    host = InMemoryHost()

    location = host.create(sender, salt, content)   # claims the slot
    host.is_occupied(location)                       # True
    host.create(sender, salt, content)               # raises SlotOccupiedError
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .address_oracle import derive_location, hash_content
from .errors import CreationFailedError, SlotOccupiedError
from .identity import IdentityLike, SaltLike, format_identity, to_identity, to_salt


@runtime_checkable
class Creator(Protocol):
    """Atomic "claim this derived location or fail" capability."""

    def create(self, sender: bytes, salt: bytes, content: bytes) -> bytes:
        """Instantiate content at the location derived from (sender, salt, content).

        Returns:
            The realized 20-byte location.

        Raises:
            SlotOccupiedError: If an artifact already lives there.
            CreationFailedError: For any other host-side failure.
        """
        ...


class InMemoryHost:
    """In-memory slot table implementing Creator.

    The location is always recomputed here from the inputs; the host
    never trusts a location computed by its caller.

    Thread-safety: This class is NOT thread-safe. Callers serialize access
    (CreationGateway holds its own lock around every create).
    """

    _slots: dict[bytes, bytes]

    def __init__(self) -> None:
        """Initialize an empty slot table."""
        self._slots = {}

    def create(self, sender: IdentityLike, salt: SaltLike, content: bytes) -> bytes:
        """Claim the derived slot for content.

        Raises:
            CreationFailedError: If content is empty
            SlotOccupiedError: If the slot is already occupied
        """
        if not content:
            raise CreationFailedError("host refuses to create empty content")
        location = derive_location(to_identity(sender), to_salt(salt), hash_content(content))
        if location in self._slots:
            raise SlotOccupiedError(
                f"slot {format_identity(location)} is already occupied",
                location=format_identity(location),
            )
        self._slots[location] = bytes(content)
        return location

    def is_occupied(self, location: IdentityLike) -> bool:
        """Check whether an artifact lives at location."""
        return to_identity(location) in self._slots

    def code_at(self, location: IdentityLike) -> bytes | None:
        """Content stored at location, or None for a free slot."""
        return self._slots.get(to_identity(location))

    def locations(self) -> list[bytes]:
        """All occupied locations in creation order."""
        return list(self._slots.keys())

    def count(self) -> int:
        """Number of occupied slots."""
        return len(self._slots)

    def clear(self) -> None:
        """Free every slot. Use with caution - mainly for testing."""
        self._slots.clear()
