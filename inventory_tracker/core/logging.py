from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from inventory_tracker.core.config import settings

_RESERVED = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

# Lifted out of "extra" so movement logs can be filtered on them directly.
_MOVEMENT_KEYS = ("movement_type", "document_number", "stage")


class JsonFormatter(logging.Formatter):
    """One JSON object per line; movement identifiers sit at the top level."""

    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service or settings.PROJECT_NAME

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {key: value for key, value in record.__dict__.items() if key not in _RESERVED}
        for key in _MOVEMENT_KEYS:
            if key in context:
                payload[key] = context.pop(key)
        if context:
            payload["extra"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level_name: str | None = None) -> None:
    level = logging.getLevelName((level_name or settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "stdout": {"class": "logging.StreamHandler", "formatter": "json", "stream": "ext://sys.stdout"},
            },
            "root": {"handlers": ["stdout"], "level": logging.WARNING},
            "loggers": {
                "inventory_tracker": {"level": level},
                "uvicorn.error": {"level": level},
                "uvicorn.access": {"handlers": ["stdout"], "level": level, "propagate": False},
                # Statement echo stays off unless explicitly lowered here.
                "sqlalchemy.engine": {"level": logging.WARNING},
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
