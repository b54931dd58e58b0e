"""JSON-lines logging for the server and the smoke runner."""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _structured_fields(record: LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class JsonFormatter(logging.Formatter):
    """Render a record as ``{"ts", "level", "logger", "message", **extra}``.

    Dict messages are merged in place of ``message``; fields already present
    are never overwritten by `extra`.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict):
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()

        for key, value in _structured_fields(record).items():
            payload.setdefault(key, value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Attach one stdout JSON handler to the root logger, once."""
    root = logging.getLogger()
    if root.handlers:
        return
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    root.setLevel(level)
    root.addHandler(handler)

    # uvicorn logs through root, in the same format.
    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.propagate = True
        for h in list(server_logger.handlers):
            server_logger.removeHandler(h)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name if name else __name__)
