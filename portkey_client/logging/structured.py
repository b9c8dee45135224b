"""Structured JSON logging for the client library.

Library code only creates loggers under ``portkey_client``; nothing is
emitted until the application either configures logging itself or calls
``setup_logging()``, which writes JSON lines to stdout (and optionally a
file). Secrets never go into ``log_data``; API keys are logged masked.
"""

import json
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone

from portkey_client.config.settings import get_settings

ROOT_LOGGER = "portkey_client"

# Per-call id for correlating the records of one request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Fields passed as ``extra={"log_data": {...}}`` are merged in, but never
    replace the envelope keys (timestamp, level, logger, message, request_id).
    """

    ENVELOPE = ("timestamp", "level", "logger", "message", "request_id")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_var.get(),
        }
        for key, value in getattr(record, "log_data", {}).items():
            if key not in self.ENVELOPE:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Attach JSON handlers to the library's root logger."""
    settings = get_settings()
    level = level or settings.log_level
    log_file = settings.log_file if log_file is None else log_file

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    formatter = JSONFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def generate_request_id() -> str:
    """12 random hex characters, enough to correlate one call's records."""
    return secrets.token_hex(6)


class RequestTimer:
    """Wall-clock latency of a block, in milliseconds, available after exit."""

    def __init__(self):
        self._started: float | None = None
        self.elapsed_ms: float = 0.0

    def __enter__(self) -> "RequestTimer":
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ms = round((time.perf_counter() - self._started) * 1000, 3)
