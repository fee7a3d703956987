"""Pytest fixtures for deterministic deployer tests.

Common hosts, gateways and loggers shared by unit and integration tests.
Identities live in tests/testing_utils.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from deterministic_deployer import config as config_module
from deterministic_deployer.registry.gateway import CreationGateway
from deterministic_deployer.registry.host import InMemoryHost
from deterministic_deployer.registry.logger import EventLogger
from tests.testing_utils import DEPLOYER, OWNER, REGISTRY


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "feature(name): mark test as belonging to a feature. "
        "Usage: @pytest.mark.feature('ownership')"
    )


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    """Each test starts without a cached global config."""
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def gateway(host: InMemoryHost) -> CreationGateway:
    """Gateway owned by OWNER with creation still disabled."""
    return CreationGateway(registry_identity=REGISTRY, initial_owner=OWNER, host=host)


@pytest.fixture
def active_gateway(gateway: CreationGateway) -> CreationGateway:
    """Gateway where DEPLOYER is the allowed actor."""
    gateway.set_allowed_actor(OWNER, DEPLOYER)
    return gateway


@pytest.fixture
def event_logger(tmp_path: Path) -> EventLogger:
    return EventLogger(output_file=str(tmp_path / "events.jsonl"))
