"""Logging configuration helpers with raw-input redaction support."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

TEXT_ATTRIBUTES = ("raw_input", "formatted")


def _redact(value: str) -> str:
    return f"[{len(value)} chars]"


class RawInputFilter(logging.Filter):
    """Filter that replaces user-entered text on log records with a length marker."""

    def __init__(self, enabled: bool = True):
        super().__init__()
        self._enabled = enabled

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        if not self._enabled:
            return True

        for key in TEXT_ATTRIBUTES:
            value = getattr(record, key, None)
            if isinstance(value, str):
                setattr(record, key, _redact(value))

        return True


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in TEXT_ATTRIBUTES:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack"] = record.stack_info

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level_name: str, fmt: str, *, redact_input: bool = True) -> None:
    """Configure root logging with optional JSON output and raw-input redaction."""

    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    format_normalized = (fmt or "plain").lower()

    handler = logging.StreamHandler()
    if format_normalized == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)
    handler.addFilter(RawInputFilter(enabled=redact_input))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)
