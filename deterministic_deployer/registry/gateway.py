"""CreationGateway - the only path to the host creation primitive.

Flow of a creation:
    caller -> authorization (allowed actor) -> content check
           -> predicted location (address oracle)
           -> host.create (atomic claim of the slot)
           -> realized location == predicted? -> NewCreation notification

The owner controls who the allowed actor is and hands ownership over via
a two-step handshake (nominate, then the nominee accepts).

Every mutating call holds the gateway lock for its whole duration, so
calls are applied in one total order and a state change is never visible
without its notification.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable

from . import access
from .access import AccessState
from .address_oracle import derive_location, hash_content
from .errors import EmptyContentError, LocationMismatchError, RegistryError
from .events import AllowedActorChanged, NewCreation, OwnerChanged, RegistryEvent
from .host import Creator
from .identity import IdentityLike, SaltLike, format_identity, to_identity, to_salt

if TYPE_CHECKING:
    from .logger import EventLogger

logger = logging.getLogger(__name__)


class CreationGateway:
    """Gatekeeper for deterministic creations.

    Args:
        registry_identity: Identity the registry runs at; the creator in
            every location derivation
        initial_owner: Owner at construction
        host: Host environment performing the actual creation
        event_logger: Optional JSONL sink mirroring every notification
    """

    def __init__(
        self,
        registry_identity: IdentityLike,
        initial_owner: IdentityLike,
        host: Creator,
        event_logger: "EventLogger | None" = None,
    ) -> None:
        self._identity = to_identity(registry_identity)
        self._state = access.initial_state(to_identity(initial_owner))
        self._host = host
        self._event_logger = event_logger
        self._events: list[RegistryEvent] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def registry_identity(self) -> bytes:
        return self._identity

    @property
    def state(self) -> AccessState:
        return self._state

    @property
    def owner(self) -> bytes:
        return self._state.owner

    @property
    def pending_owner(self) -> bytes | None:
        return self._state.pending_owner

    @property
    def allowed_actor(self) -> bytes:
        return self._state.allowed_actor

    @property
    def events(self) -> list[RegistryEvent]:
        """Notifications emitted so far, oldest first."""
        with self._lock:
            return list(self._events)

    def compute_location(self, salt: SaltLike, content_hash: bytes | str) -> bytes:
        """Location a creation with this salt and content hash would occupy."""
        return derive_location(self._identity, salt, content_hash)

    def get_content_hash(self, content: bytes) -> bytes:
        return hash_content(content)

    # ------------------------------------------------------------------
    # Owner operations
    # ------------------------------------------------------------------

    def set_allowed_actor(self, caller: IdentityLike, new_actor: IdentityLike) -> None:
        """Replace the allowed actor. Owner only.

        Raises:
            NotOwnerError: If caller is not the owner
        """
        caller_id = to_identity(caller)
        actor_id = to_identity(new_actor)
        with self._lock:
            self._state = self._guarded(access.set_allowed_actor, caller_id, actor_id)
            logger.info("Allowed actor set to %s", format_identity(actor_id))
            self._emit(AllowedActorChanged(new_actor=actor_id))

    def transfer_ownership(self, caller: IdentityLike, nominee: IdentityLike) -> None:
        """Nominate a successor. Takes effect only once the nominee accepts.

        Raises:
            NotOwnerError: If caller is not the owner
        """
        caller_id = to_identity(caller)
        nominee_id = to_identity(nominee)
        with self._lock:
            self._state = self._guarded(access.transfer_ownership, caller_id, nominee_id)
            logger.info("Ownership transfer to %s started", format_identity(nominee_id))

    def accept_ownership(self, caller: IdentityLike) -> None:
        """Complete the ownership handshake as the nominee.

        Raises:
            NoPendingOwnerError: If no transfer was started
            NotPendingOwnerError: If caller is not the nominee
        """
        caller_id = to_identity(caller)
        with self._lock:
            self._state = self._guarded(access.accept_ownership, caller_id)
            logger.info("Ownership accepted by %s", format_identity(caller_id))
            self._emit(OwnerChanged(new_owner=caller_id))

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create(self, caller: IdentityLike, salt: SaltLike, content: bytes) -> bytes:
        """Instantiate content at its deterministic location.

        Authorization is checked before any content validation.

        Returns:
            The 20-byte location the artifact now occupies.

        Raises:
            NotAllowedError: If caller is not the allowed actor
            InvalidArgumentError: If content is not bytes-like
            EmptyContentError: If content is empty
            SlotOccupiedError: If the host already holds an artifact there
            LocationMismatchError: If the host realized a different location
        """
        caller_id = to_identity(caller)
        with self._lock:
            self._guarded(access.require_allowed_actor, caller_id)
            content_hash = hash_content(content)
            if not content:
                raise EmptyContentError("content must not be empty")
            salt_bytes = to_salt(salt)
            predicted = derive_location(self._identity, salt_bytes, content_hash)

            # The host is authoritative on occupancy; no pre-check here
            realized = self._host.create(self._identity, salt_bytes, bytes(content))

            if realized != predicted:
                logger.error(
                    "Host realized %s but %s was predicted",
                    format_identity(realized),
                    format_identity(predicted),
                )
                raise LocationMismatchError(
                    "host realized a location different from the prediction",
                    predicted=format_identity(predicted),
                    realized=format_identity(realized),
                )
            logger.info("Created artifact at %s", format_identity(realized))
            self._emit(NewCreation(salt=salt_bytes, location=realized))
            return realized

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _guarded(self, transition: Callable[..., Any], caller: bytes, *args: bytes) -> Any:
        """Run an access transition, logging rejected callers."""
        try:
            return transition(self._state, caller, *args)
        except RegistryError as exc:
            logger.warning(
                "Rejected %s from %s: %s",
                transition.__name__,
                format_identity(caller),
                exc,
            )
            raise

    def _emit(self, event: RegistryEvent) -> None:
        # Called after the change is committed; the JSONL file only mirrors _events
        self._events.append(event)
        if self._event_logger is None:
            return
        try:
            self._event_logger.log_event(event)
        except OSError:
            logger.exception("Failed to mirror %s to the event log", event.event_type)
