"""Structured logging configuration."""

from __future__ import annotations

import json
import logging

from backend.app.core.settings import get_settings


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> None:
    """Configure JSON logging for the service."""

    settings = get_settings()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter())
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        handlers=[handler],
    )
