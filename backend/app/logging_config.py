"""
Bugboard Backend — Structured Logging Configuration
=====================================================

What:  Configures the standard `logging` module for the whole application.
How:   Console handler with StructuredFormatter; in production (or when
       LOG_FILE is set) JSON-lines file handlers (python-json-logger) for
       all records and for ERROR-only records.
When:  Called once from the lifespan handler, before anything else logs.

Console line format:
    2024-01-15 12:00:00 [INFO] app.services.post_service: Post created {"service": "bugboard", "post_id": "..."}

Structured fields are passed with `extra=` at the call site:
    logger.info("Post created", extra={"post_id": pid, "user_id": uid})
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

from pythonjsonlogger.core import RESERVED_ATTRS, merge_record_extra
from pythonjsonlogger.json import JsonFormatter

from app.config import Settings, settings

SERVICE_NAME = "bugboard"

# taskName only exists on 3.12+ records
_RESERVED_ATTRS = frozenset(RESERVED_ATTRS) | {"taskName"}


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    """Structured fields attached to a record via `extra=`."""
    return merge_record_extra(record, {}, reserved=_RESERVED_ATTRS)


class StructuredFormatter(logging.Formatter):
    """Human-readable line followed by the structured fields as JSON."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        meta = {"service": self.service, **record_extras(record)}
        line = "%s [%s] %s: %s %s" % (
            self.formatTime(record, self.datefmt),
            record.levelname,
            record.name,
            record.getMessage(),
            json.dumps(meta, default=str),
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JSONFormatter(JsonFormatter):
    """
    One JSON object per line, for log files shipped to aggregators.

        {"level": "info", "logger": "...", "message": "...", "service": "bugboard",
         "timestamp": "...", <extra fields>, "stack": "..."}
    """

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__(
            "%(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": service},
            reserved_attrs=sorted(_RESERVED_ATTRS),
            timestamp=True,
        )

    def process_log_record(self, log_record: Dict[str, Any]) -> Dict[str, Any]:
        log_record["level"] = str(log_record.get("level", "")).lower()
        stack = log_record.pop("exc_info", None)
        if stack:
            log_record["stack"] = stack
        return super().process_log_record(log_record)


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure logging for the entire application.

    Safe to call more than once: `force=True` replaces previous handlers.
    """
    config = config or settings

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(StructuredFormatter())
    handlers: list[logging.Handler] = [console]

    if config.environment == "production" or config.log_file:
        file_handler = logging.FileHandler(config.log_file or "app.log")
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

        error_handler = logging.FileHandler(config.error_log_file or "error.log")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JSONFormatter())
        handlers.append(error_handler)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        handlers=handlers,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
