"""Logging setup: plain text by default, single-line JSON when configured.

Pipeline milestones (preview ready, artifacts published) go through
:func:`log_event`, which attaches a structured payload that the JSON
formatter emits under ``data`` and the text formatter ignores.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from praia_news.config import MonitoringConfig

APP_NAME = "praia-news"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; accents are written as-is."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "app": APP_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            entry["event"] = event
        extra_data = getattr(record, "extra_data", None)
        if extra_data is not None:
            entry["data"] = extra_data
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def log_event(logger: logging.Logger, event: str, message: str, *args: object, **data: Any) -> None:
    """Log ``message`` at INFO, tagged with ``event`` and the keyword payload."""
    logger.info(message, *args, extra={"event": event, "extra_data": data or None})


def setup_structured_logging(*, log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Send JSON logs to stderr and, optionally, to ``log_file``."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    formatter = JSONFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def setup_logging(monitoring: MonitoringConfig, *, level: int = logging.INFO) -> None:
    """Configure the root logger from the ``monitoring`` config section."""
    if monitoring.structured_logging:
        log_file = Path(monitoring.log_file) if monitoring.log_file else None
        setup_structured_logging(log_file=log_file, level=level)
    else:
        logging.basicConfig(level=level, format=_TEXT_FORMAT)
