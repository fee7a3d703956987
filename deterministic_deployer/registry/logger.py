"""JSONL notification log - durable record of every registry event"""

from __future__ import annotations

import json
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import get
from .events import RegistryEvent


class EventLogger:
    """Append-only JSONL event log with per-run directory support.

    Supports two modes:
    1. Per-run mode (run_id + logs_dir): Creates one directory per run
       - logs/{run_id}/events.jsonl
       - logs/latest -> {run_id} (symlink)
    2. Single-file mode (output_file only): One file, cleared on init

    Every line carries a monotonic 'sequence' so the order in which the
    registry emitted events survives log shipping.
    """

    output_path: Path
    _logs_dir: Path | None
    _run_id: str | None
    _sequence: int

    def __init__(
        self,
        output_file: str | None = None,
        logs_dir: str | None = None,
        run_id: str | None = None,
    ) -> None:
        """Initialize the event logger.

        Args:
            output_file: Single-file mode path (default: logging.output_file)
            logs_dir: Per-run mode - base directory for run logs
            run_id: Per-run mode - unique run identifier (e.g., run_20260115_120000)
        """
        self._logs_dir = Path(logs_dir) if logs_dir else None
        self._run_id = run_id
        self._sequence = 0

        if logs_dir and run_id:
            self._setup_per_run_logging()
        else:
            self._setup_single_file_logging(output_file)

    def _setup_per_run_logging(self) -> None:
        """Set up per-run directory logging."""
        if self._logs_dir is None or self._run_id is None:
            raise ValueError("Both logs_dir and run_id required for per-run mode")

        run_dir = self._logs_dir / self._run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        self.output_path = run_dir / "events.jsonl"
        self.output_path.write_text("")

        latest_link = self._logs_dir / "latest"
        if latest_link.is_symlink():
            latest_link.unlink()
        elif latest_link.is_dir():
            shutil.rmtree(latest_link)
        elif latest_link.exists():
            latest_link.unlink()

        # Relative target keeps the logs directory relocatable
        latest_link.symlink_to(self._run_id)

    def _setup_single_file_logging(self, output_file: str | None) -> None:
        """Set up single-file logging."""
        resolved_file = output_file or get("logging.output_file") or "registry_events.jsonl"
        if not isinstance(resolved_file, str):
            resolved_file = "registry_events.jsonl"
        self.output_path = Path(resolved_file)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text("")

    def log(self, event_type: str, data: dict[str, Any]) -> None:
        """Append one event line to the JSONL file."""
        self._sequence += 1
        event: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "sequence": self._sequence,
            "event_type": event_type,
            **data,
        }
        with open(self.output_path, "a") as f:
            f.write(json.dumps(event) + "\n")

    def log_event(self, event: RegistryEvent) -> None:
        """Log a registry notification together with its EVM log form."""
        data = event.to_dict()
        data.pop("event_type")
        data["log"] = event.to_log()
        self.log(event.event_type, data)

    def read_recent(self, n: int | None = None) -> list[dict[str, Any]]:
        """Read the last N events from the log.

        N defaults to logging.default_recent from config.
        """
        if n is None:
            default_recent = get("logging.default_recent")
            n = default_recent if isinstance(default_recent, int) else 50
        if not self.output_path.exists():
            return []
        lines = [line for line in self.output_path.read_text().split("\n") if line]
        recent = lines[-n:] if len(lines) > n else lines
        return [json.loads(line) for line in recent]

    @property
    def sequence(self) -> int:
        """Number of events written so far."""
        return self._sequence

    @property
    def run_id(self) -> str | None:
        """Return the run ID if in per-run mode."""
        return self._run_id

    @property
    def logs_dir(self) -> Path | None:
        """Return the logs directory if in per-run mode."""
        return self._logs_dir
