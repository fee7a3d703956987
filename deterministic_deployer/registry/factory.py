"""Registry factory - builds a CreationGateway from configuration."""

from __future__ import annotations

from ..config import get_validated_config
from ..config_schema import AppConfig
from .errors import NotConfiguredError
from .gateway import CreationGateway
from .host import Creator, InMemoryHost
from .logger import EventLogger


def create_gateway(
    host: Creator | None = None,
    config: AppConfig | None = None,
    event_logger: EventLogger | None = None,
    run_id: str | None = None,
) -> CreationGateway:
    """
    Factory function to create the registry gateway.

    The registry identity and initial owner come from the registry section
    of the config; nothing is read from ambient state after construction.

    Args:
        host: Host creation primitive (default: a fresh InMemoryHost)
        config: Validated config (default: the globally loaded config)
        event_logger: Optional JSONL sink for notifications
        run_id: When no event_logger is given, log notifications to
            logging.logs_dir/{run_id}/events.jsonl

    Raises:
        NotConfiguredError: If registry.address or registry.initial_owner is unset
    """
    cfg = config if config is not None else get_validated_config()
    missing = [
        name
        for name, value in (
            ("registry.address", cfg.registry.address),
            ("registry.initial_owner", cfg.registry.initial_owner),
        )
        if value is None
    ]
    if missing:
        raise NotConfiguredError(
            f"missing registry configuration: {', '.join(missing)}",
            missing=missing,
        )
    assert cfg.registry.address is not None and cfg.registry.initial_owner is not None

    if event_logger is None and run_id is not None:
        event_logger = EventLogger(logs_dir=cfg.logging.logs_dir, run_id=run_id)

    return CreationGateway(
        registry_identity=cfg.registry.address,
        initial_owner=cfg.registry.initial_owner,
        host=host if host is not None else InMemoryHost(),
        event_logger=event_logger,
    )
