"""Structured JSON logging configuration."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not callable(value)
        )
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_structured_logging(level: int = logging.WARNING) -> None:
    """Send JSON records to stderr at ``level``.

    httpx logs every request at INFO; its loggers are kept at WARNING
    so that only the application's own records show up at DEBUG.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
