"""Deterministic deployer package.

This package contains the creation registry components:
- config: Configuration loading and management
- registry: Address derivation, access control, host slot table, gateway
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
