"""Owner / allowed-actor access state and its transitions.

AccessState is immutable. Every transition is a pure function that either
returns a new state or raises, so a rejected call can never leave the
state half-updated.

Roles:
- owner: changes the allowed actor and drives the ownership handshake
- pending_owner: nominee who must accept before becoming owner
- allowed_actor: sole identity that may request creations; the zero
  identity disables creation
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import ZERO_IDENTITY
from .errors import NoPendingOwnerError, NotAllowedError, NotOwnerError, NotPendingOwnerError
from .identity import format_identity, is_zero_identity


@dataclass(frozen=True)
class AccessState:
    """Snapshot of the registry's roles."""

    owner: bytes
    allowed_actor: bytes = ZERO_IDENTITY
    pending_owner: bytes | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for serialization."""
        return {
            "owner": format_identity(self.owner),
            "allowed_actor": format_identity(self.allowed_actor),
            "pending_owner": (
                format_identity(self.pending_owner) if self.pending_owner is not None else None
            ),
        }


def initial_state(owner: bytes) -> AccessState:
    """State at registry construction: creation disabled, nobody nominated."""
    return AccessState(owner=owner)


def require_owner(state: AccessState, caller: bytes) -> None:
    if caller != state.owner:
        raise NotOwnerError(
            "caller is not the owner",
            caller=format_identity(caller),
        )


def require_allowed_actor(state: AccessState, caller: bytes) -> None:
    """Reject everyone but the allowed actor.

    With the zero identity as allowed actor nobody passes, including a
    caller presenting the zero identity.
    """
    if is_zero_identity(state.allowed_actor) or caller != state.allowed_actor:
        raise NotAllowedError(
            "caller is not allowed to create",
            caller=format_identity(caller),
        )


def set_allowed_actor(state: AccessState, caller: bytes, new_actor: bytes) -> AccessState:
    require_owner(state, caller)
    return replace(state, allowed_actor=new_actor)


def transfer_ownership(state: AccessState, caller: bytes, nominee: bytes) -> AccessState:
    """Start (or replace, or cancel) the ownership handshake.

    Nominating the zero identity clears any pending nomination.
    """
    require_owner(state, caller)
    pending = None if is_zero_identity(nominee) else nominee
    return replace(state, pending_owner=pending)


def accept_ownership(state: AccessState, caller: bytes) -> AccessState:
    """Complete the handshake. Only the nominee may accept."""
    if state.pending_owner is None:
        raise NoPendingOwnerError("no ownership transfer is pending")
    if caller != state.pending_owner:
        raise NotPendingOwnerError(
            "caller is not the pending owner",
            caller=format_identity(caller),
        )
    return replace(state, owner=state.pending_owner, pending_owner=None)
