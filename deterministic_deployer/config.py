"""Configuration loader for the deterministic deployer

All configurable values come from config/config.yaml (or the file named
by the REGISTRY_CONFIG environment variable).

Configuration is validated at load time using Pydantic.
Typos and invalid values fail fast with clear error messages.

Usage:
    from deterministic_deployer.config import load_config, get, get_validated_config

    # Load and validate (call once at startup)
    load_config("config/config.yaml")

    # Get values by dot-path
    owner = get("registry.initial_owner")

    # Or use the typed config object (preferred)
    config = get_validated_config()
    owner = config.registry.initial_owner
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from .config_schema import AppConfig, load_validated_config, validate_config_dict


# Global config instances
_config: dict[str, Any] | None = None
_validated_config: AppConfig | None = None

# Default config path
DEFAULT_CONFIG_PATH: Path = Path(__file__).parent.parent / "config" / "config.yaml"
CONFIG_ENV_VAR = "REGISTRY_CONFIG"


def _resolve_path(config_path: str | None) -> Path:
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(config_path: str | None = None) -> dict[str, Any]:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to $REGISTRY_CONFIG,
            then config/config.yaml. If the default file is absent, the
            schema defaults are used.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If an explicitly named config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    global _config, _validated_config

    path = _resolve_path(config_path)

    # Installed without the repo's config/ directory: run on defaults
    if path == DEFAULT_CONFIG_PATH and not path.exists():
        _validated_config = AppConfig()
        _config = {}
        return _config

    _validated_config = load_validated_config(path)

    with open(path) as f:
        loaded: Any = yaml.safe_load(f)
        if not isinstance(loaded, dict):
            loaded = {}
        _config = loaded

    return _config


def get_config() -> dict[str, Any]:
    """Get the loaded configuration dict. Loads default if not already loaded.

    For typed access, use get_validated_config() instead.
    """
    if _config is None:
        load_config()
    if _config is None:
        raise RuntimeError("Config failed to load. Call load_config() first.")
    return _config


def get_validated_config() -> AppConfig:
    """Get the validated configuration object.

    Loads default config if not already loaded.
    """
    if _validated_config is None:
        load_config()
    if _validated_config is None:
        raise RuntimeError("Validated config failed to load. Call load_config() first.")
    return _validated_config


def get(key: str, default: Any = None) -> Any:
    """Get a config value by dot-separated key path.

    Examples:
        get("registry.address")
        get("logging.default_recent")
    """
    config: dict[str, Any] = get_config()
    value: Any = config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config_value(key: str, value: Any) -> None:
    """Set a config value by dot-separated key path.

    Used for runtime overrides (e.g., CLI args). The whole config is
    re-validated afterwards.

    Args:
        key: Dot-separated key path (e.g., "registry.address")
        value: Value to set
    """
    global _validated_config

    config = get_config()
    keys = key.split(".")
    target = config

    for k in keys[:-1]:
        if k not in target:
            target[k] = {}
        target = target[k]

    target[keys[-1]] = value

    _validated_config = validate_config_dict(config)


def reset_config() -> None:
    """Forget the loaded config. Mainly for tests."""
    global _config, _validated_config
    _config = None
    _validated_config = None
