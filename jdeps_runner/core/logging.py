"""Structured JSON logging configuration.

All log output goes to stdout in JSON format so build logs and CI
collectors can ingest it line by line.

Format per line:
    {"ts": "2026-03-01T12:00:00+00:00", "level": "INFO", "logger": "jdeps_runner.services.invoker", "msg": "...", ...}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

# Extras copied onto the payload when attached via extra={}
_EXTRA_FIELDS = ("tool", "exit_code", "source")


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(stream: TextIO | None = None) -> None:
    """Configure root logger with JSON output to ``stream`` (stdout by default).

    The log level is controlled by the ``LOG_LEVEL`` env var
    (default ``INFO``). The CLI passes stderr so stdout carries only the
    jdeps report.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers (e.g. uvicorn defaults)
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
