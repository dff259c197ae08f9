"""Structured JSON logging for the seeding scripts."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from shared.config import Settings, get_settings

# Extra fields attached by the seeders and the error logger
STRUCTURED_FIELDS = ("stage", "collection", "entity_index", "log_ref", "error_category")

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

QUIET_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Always carries timestamp, level, logger and message; seeding context
    (stage, collection, entity_index, log_ref, error_category) only when
    the record has it.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(
            (name, value)
            for name in STRUCTURED_FIELDS
            if (value := getattr(record, name, None)) is not None
        )
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "text":
        return logging.Formatter(TEXT_FORMAT)
    return JSONFormatter()


def configure_logging() -> None:
    """
    Send every log record to stderr using LOG_LEVEL and LOG_FORMAT.

    Environment values that fail validation must not prevent logging from
    starting: the defaults are used and the rejected fields are reported,
    leaving the seeding run to abort on the same error.
    """
    rejected = None
    try:
        settings = get_settings()
    except ValidationError as e:
        settings = Settings.model_construct()
        rejected = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(build_formatter(settings.LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Request lines from httpx would double every seeding log entry
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(f"Logging configured: level={settings.LOG_LEVEL}, format={settings.LOG_FORMAT}")
    if rejected is not None:
        root_logger.warning(f"Invalid settings ignored for logging: {rejected}")
