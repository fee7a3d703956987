"""Error conventions for registry operations.

Every failure the registry can report is an exception deriving from
RegistryError. Each carries a machine-readable code, a category and retry
guidance so that deployment tooling can switch on them, and can render
itself as the standard error response dict.

Usage:
    from deterministic_deployer.registry.errors import RegistryError

    try:
        gateway.create(caller, salt, content)
    except RegistryError as exc:
        print(exc.to_response().to_dict())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Categories for error classification.

    - VALIDATION: Caller provided bad input
    - PERMISSION: Caller not authorized
    - RESOURCE: Slot already occupied
    - EXECUTION: Host environment failed the creation
    - SYSTEM: Registry misconfigured
    """

    VALIDATION = "validation"
    PERMISSION = "permission"
    RESOURCE = "resource"
    EXECUTION = "execution"
    SYSTEM = "system"


class ErrorCode(str, Enum):
    """Specific error codes for programmatic handling."""

    # Validation errors
    EMPTY_CONTENT = "empty_content"
    INVALID_ARGUMENT = "invalid_argument"

    # Permission errors
    NOT_OWNER = "not_owner"
    NOT_ALLOWED = "not_allowed"
    NOT_PENDING_OWNER = "not_pending_owner"
    NO_PENDING_OWNER = "no_pending_owner"

    # Resource errors
    SLOT_OCCUPIED = "slot_occupied"

    # Execution errors
    CREATION_FAILED = "creation_failed"
    LOCATION_MISMATCH = "location_mismatch"

    # System errors
    NOT_CONFIGURED = "not_configured"


@dataclass
class ErrorResponse:
    """Standardized error response.

    All error responses include:
    - success: Always False
    - error: Human-readable message
    - code: Machine-readable error code
    - category: Error category (validation, permission, etc.)
    - retriable: Whether the operation should be retried
    - details: Optional additional context
    """

    success: bool = False  # Always False for errors
    error: str = ""
    code: str = ""
    category: str = ""
    retriable: bool = False
    details: dict[str, object] | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        result: dict[str, object] = {
            "success": self.success,
            "error": self.error,
            "code": self.code,
            "category": self.category,
            "retriable": self.retriable,
        }
        if self.details:
            result["details"] = self.details
        return result


class RegistryError(Exception):
    """Base class for every error raised by the registry.

    Subclasses fix code, category and retriable. Extra keyword arguments
    become the response details.
    """

    code: ErrorCode = ErrorCode.CREATION_FAILED
    category: ErrorCategory = ErrorCategory.SYSTEM
    retriable: bool = False

    def __init__(self, message: str, **details: object) -> None:
        self.message = message
        self.details: dict[str, object] = dict(details)
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Render as a standard error response."""
        return ErrorResponse(
            error=self.message,
            code=self.code.value,
            category=self.category.value,
            retriable=self.retriable,
            details=self.details or None,
        )


# Authorization errors


class NotOwnerError(RegistryError):
    """Caller is not the current owner."""

    code = ErrorCode.NOT_OWNER
    category = ErrorCategory.PERMISSION


class NotAllowedError(RegistryError):
    """Caller is not the current allowed actor."""

    code = ErrorCode.NOT_ALLOWED
    category = ErrorCategory.PERMISSION


class NotPendingOwnerError(RegistryError):
    """Caller is not the nominated pending owner."""

    code = ErrorCode.NOT_PENDING_OWNER
    category = ErrorCategory.PERMISSION


class NoPendingOwnerError(RegistryError):
    """No ownership transfer has been started."""

    code = ErrorCode.NO_PENDING_OWNER
    category = ErrorCategory.PERMISSION


# Input-validity errors


class EmptyContentError(RegistryError):
    """Creation requested with an empty content blob."""

    code = ErrorCode.EMPTY_CONTENT
    category = ErrorCategory.VALIDATION


class InvalidArgumentError(RegistryError, ValueError):
    """An identity, salt or hash could not be normalized."""

    code = ErrorCode.INVALID_ARGUMENT
    category = ErrorCategory.VALIDATION


# Environment errors


class SlotOccupiedError(RegistryError):
    """The derived location already holds an artifact.

    Retriable in the sense that a different salt will derive a free slot;
    the registry never picks one itself.
    """

    code = ErrorCode.SLOT_OCCUPIED
    category = ErrorCategory.RESOURCE
    retriable = True


class CreationFailedError(RegistryError):
    """The host environment rejected the creation for another reason."""

    code = ErrorCode.CREATION_FAILED
    category = ErrorCategory.EXECUTION


class LocationMismatchError(RegistryError):
    """The host realized a location different from the predicted one."""

    code = ErrorCode.LOCATION_MISMATCH
    category = ErrorCategory.EXECUTION


class NotConfiguredError(RegistryError):
    """Required registry configuration is missing."""

    code = ErrorCode.NOT_CONFIGURED
    category = ErrorCategory.SYSTEM
