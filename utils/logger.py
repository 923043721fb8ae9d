"""JSON-line logging shared by the HTTP layer and storage backends.

Every record is written as one JSON object. Request context passed through
``extra`` (see :func:`request_context`) becomes top-level keys, and personal
data is masked before serialisation.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from utils.personal_data import scrub_sensitive_mapping

__all__ = ["CONTEXT_FIELDS", "JsonLogFormatter", "get_logger", "request_context"]

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

CONTEXT_FIELDS = ("method", "path", "status", "latency_ms", "user_id")
_HANDLER_TAG = "_lions_json_kind"


def request_context(
    method: str, path: str, status: int, latency_ms: float | None = None
) -> dict[str, Any]:
    """Build the ``extra`` mapping describing one served request."""

    return {"method": method, "path": path, "status": status, "latency_ms": latency_ms}


class JsonLogFormatter(logging.Formatter):
    """Render records as single-line JSON with request context fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited doc
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            payload[field] = getattr(record, field, None)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(scrub_sensitive_mapping(payload), ensure_ascii=False)


def _tag(handler: logging.Handler, kind: str) -> logging.Handler:
    handler.setFormatter(JsonLogFormatter())
    setattr(handler, _HANDLER_TAG, kind)
    return handler


def _has_handler(logger: logging.Logger, kind: str) -> bool:
    return any(getattr(handler, _HANDLER_TAG, None) == kind for handler in logger.handlers)


def _file_handler() -> logging.Handler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_DIR / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.INFO)
    return _tag(handler, "file")


def _stream_handler() -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(logging.WARNING)
    return _tag(handler, "stream")


def get_logger(name: str) -> logging.Logger:
    """Return ``name`` logger writing JSON to ``logs/app.log`` and stderr.

    Calling it again for the same name does not duplicate handlers.
    """

    logger = logging.getLogger(name)
    if not _has_handler(logger, "stream"):
        logger.addHandler(_stream_handler())
    if not _has_handler(logger, "file"):
        logger.addHandler(_file_handler())

    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    logger.propagate = False
    return logger
