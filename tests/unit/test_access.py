"""Unit tests for the owner / allowed-actor state machine.

Transitions are pure: the input state must be untouched whether the
transition succeeds or raises.
"""

import pytest

from deterministic_deployer.registry import access
from deterministic_deployer.registry.access import AccessState
from deterministic_deployer.registry.constants import ZERO_IDENTITY
from deterministic_deployer.registry.errors import (
    NoPendingOwnerError,
    NotAllowedError,
    NotOwnerError,
    NotPendingOwnerError,
)
from tests.testing_utils import DEPLOYER, NEW_OWNER, OWNER, STRANGER


@pytest.fixture
def state() -> AccessState:
    return access.initial_state(OWNER)


class TestInitialState:
    """Construction leaves creation disabled."""

    def test_defaults(self, state: AccessState) -> None:
        assert state.owner == OWNER
        assert state.allowed_actor == ZERO_IDENTITY
        assert state.pending_owner is None

    def test_nobody_may_create_initially(self, state: AccessState) -> None:
        for caller in (OWNER, DEPLOYER, ZERO_IDENTITY):
            with pytest.raises(NotAllowedError):
                access.require_allowed_actor(state, caller)


class TestSetAllowedActor:
    """Tests for set_allowed_actor."""

    def test_owner_sets_actor(self, state: AccessState) -> None:
        updated = access.set_allowed_actor(state, OWNER, DEPLOYER)
        assert updated.allowed_actor == DEPLOYER
        access.require_allowed_actor(updated, DEPLOYER)

    def test_non_owner_rejected(self, state: AccessState) -> None:
        with pytest.raises(NotOwnerError):
            access.set_allowed_actor(state, STRANGER, STRANGER)
        assert state.allowed_actor == ZERO_IDENTITY

    def test_clearing_actor_disables_creation(self, state: AccessState) -> None:
        enabled = access.set_allowed_actor(state, OWNER, DEPLOYER)
        disabled = access.set_allowed_actor(enabled, OWNER, ZERO_IDENTITY)
        with pytest.raises(NotAllowedError):
            access.require_allowed_actor(disabled, DEPLOYER)
        with pytest.raises(NotAllowedError):
            access.require_allowed_actor(disabled, ZERO_IDENTITY)


class TestOwnershipHandshake:
    """Tests for transfer_ownership / accept_ownership."""

    def test_nomination_does_not_transfer(self, state: AccessState) -> None:
        nominated = access.transfer_ownership(state, OWNER, NEW_OWNER)
        assert nominated.owner == OWNER
        assert nominated.pending_owner == NEW_OWNER
        with pytest.raises(NotOwnerError):
            access.set_allowed_actor(nominated, NEW_OWNER, DEPLOYER)

    def test_accept_completes_transfer(self, state: AccessState) -> None:
        nominated = access.transfer_ownership(state, OWNER, NEW_OWNER)
        accepted = access.accept_ownership(nominated, NEW_OWNER)
        assert accepted.owner == NEW_OWNER
        assert accepted.pending_owner is None

        with pytest.raises(NotOwnerError):
            access.set_allowed_actor(accepted, OWNER, DEPLOYER)
        assert access.set_allowed_actor(accepted, NEW_OWNER, DEPLOYER).allowed_actor == DEPLOYER

    def test_only_nominee_may_accept(self, state: AccessState) -> None:
        nominated = access.transfer_ownership(state, OWNER, NEW_OWNER)
        for caller in (OWNER, STRANGER):
            with pytest.raises(NotPendingOwnerError):
                access.accept_ownership(nominated, caller)
        assert nominated.pending_owner == NEW_OWNER

    def test_accept_without_nomination(self, state: AccessState) -> None:
        with pytest.raises(NoPendingOwnerError):
            access.accept_ownership(state, NEW_OWNER)

    def test_non_owner_cannot_nominate(self, state: AccessState) -> None:
        with pytest.raises(NotOwnerError):
            access.transfer_ownership(state, STRANGER, STRANGER)

    def test_renomination_replaces_nominee(self, state: AccessState) -> None:
        first = access.transfer_ownership(state, OWNER, NEW_OWNER)
        second = access.transfer_ownership(first, OWNER, STRANGER)
        assert second.pending_owner == STRANGER
        with pytest.raises(NotPendingOwnerError):
            access.accept_ownership(second, NEW_OWNER)

    def test_zero_nominee_cancels(self, state: AccessState) -> None:
        nominated = access.transfer_ownership(state, OWNER, NEW_OWNER)
        cancelled = access.transfer_ownership(nominated, OWNER, ZERO_IDENTITY)
        assert cancelled.pending_owner is None
        with pytest.raises(NoPendingOwnerError):
            access.accept_ownership(cancelled, NEW_OWNER)

    def test_allowed_actor_survives_ownership_change(self, state: AccessState) -> None:
        enabled = access.set_allowed_actor(state, OWNER, DEPLOYER)
        moved = access.accept_ownership(
            access.transfer_ownership(enabled, OWNER, NEW_OWNER), NEW_OWNER
        )
        assert moved.allowed_actor == DEPLOYER


def test_state_to_dict(state: AccessState) -> None:
    data = access.transfer_ownership(state, OWNER, NEW_OWNER).to_dict()
    assert data["owner"] == "0x" + "11" * 20
    assert data["pending_owner"] == "0x" + "44" * 20
    assert data["allowed_actor"] == "0x" + "00" * 20
