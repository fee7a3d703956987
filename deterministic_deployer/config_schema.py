"""Pydantic schema for configuration validation.

All config values are validated at startup. Typos and invalid values
fail fast with clear error messages.

Usage:
    from deterministic_deployer.config_schema import load_validated_config
    config = load_validated_config("config/config.yaml")
    # config is now a validated AppConfig instance
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from eth_utils import is_hex_address
from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# BASE MODEL WITH STRICT VALIDATION
# =============================================================================

class StrictModel(BaseModel):
    """Base model that rejects unknown fields (catches typos)."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# REGISTRY MODEL
# =============================================================================

class RegistryConfig(StrictModel):
    """Identities the registry is constructed with.

    Both are optional so an empty config file stays valid; the gateway
    factory refuses to build a registry without them.
    """

    address: str | None = Field(
        default=None,
        description="Identity the registry itself runs at (creator in the derivation)"
    )
    initial_owner: str | None = Field(
        default=None,
        description="Owner at construction; controls the allowed actor"
    )

    @field_validator("address", "initial_owner")
    @classmethod
    def must_be_hex_address(cls, v: str | None) -> str | None:
        if v is not None and not is_hex_address(v):
            raise ValueError(f"not a 20-byte hex address: {v!r}")
        return v


# =============================================================================
# LOGGING MODEL
# =============================================================================

class LoggingConfig(StrictModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Level for diagnostic (stdlib) logging"
    )
    output_file: str = Field(
        default="registry_events.jsonl",
        description="JSONL file for registry notifications"
    )
    logs_dir: str = Field(
        default="logs",
        description="Per-run logs directory (e.g., logs/run_20260115_120000/)"
    )
    default_recent: int = Field(
        default=50,
        gt=0,
        description="Default number of recent events to return"
    )

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {v!r}")
        return level


# =============================================================================
# ROOT CONFIG MODEL
# =============================================================================

class AppConfig(StrictModel):
    """Root configuration model for the entire application.

    All fields have sensible defaults, so an empty config file is valid.
    """

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# LOADING FUNCTIONS
# =============================================================================

def load_validated_config(config_path: str | Path = "config/config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to config YAML file.

    Returns:
        Validated AppConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid (with detailed error message).
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        raw_config = yaml.safe_load(f) or {}

    return AppConfig.model_validate(raw_config)


def validate_config_dict(config_dict: dict[str, Any]) -> AppConfig:
    """Validate a configuration dictionary.

    Raises:
        pydantic.ValidationError: If config is invalid.
    """
    return AppConfig.model_validate(config_dict)


__all__ = [
    "AppConfig",
    "RegistryConfig",
    "LoggingConfig",
    "load_validated_config",
    "validate_config_dict",
]
