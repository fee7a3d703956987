# Registry package
from .constants import CREATION_TAG, IDENTITY_WIDTH, SALT_WIDTH, HASH_WIDTH, ZERO_IDENTITY
from .identity import (
    to_identity, to_salt, to_content_hash, is_zero_identity, format_identity, format_bytes32,
)
from .address_oracle import hash_content, derive_location, predict_location
from .access import AccessState
from .events import RegistryEvent, AllowedActorChanged, OwnerChanged, NewCreation
from .host import Creator, InMemoryHost
from .gateway import CreationGateway
from .logger import EventLogger
from .factory import create_gateway
from .errors import (
    ErrorCategory, ErrorCode, ErrorResponse, RegistryError,
    NotOwnerError, NotAllowedError, NotPendingOwnerError, NoPendingOwnerError,
    EmptyContentError, InvalidArgumentError, SlotOccupiedError,
    CreationFailedError, LocationMismatchError, NotConfiguredError,
)

__all__ = [
    "CREATION_TAG", "IDENTITY_WIDTH", "SALT_WIDTH", "HASH_WIDTH", "ZERO_IDENTITY",
    "to_identity", "to_salt", "to_content_hash", "is_zero_identity",
    "format_identity", "format_bytes32",
    "hash_content", "derive_location", "predict_location",
    "AccessState",
    "RegistryEvent", "AllowedActorChanged", "OwnerChanged", "NewCreation",
    "Creator", "InMemoryHost",
    "CreationGateway",
    "EventLogger",
    "create_gateway",
    "ErrorCategory", "ErrorCode", "ErrorResponse", "RegistryError",
    "NotOwnerError", "NotAllowedError", "NotPendingOwnerError", "NoPendingOwnerError",
    "EmptyContentError", "InvalidArgumentError", "SlotOccupiedError",
    "CreationFailedError", "LocationMismatchError", "NotConfiguredError",
]
