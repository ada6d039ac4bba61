"""Structured logging for story request submission.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a RequestLogger helper for submission events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Iterable, Optional

# Structured fields copied from ``extra=`` into JSON output when present
EXTRA_FIELDS = (
    "session_id",
    "stage",
    "context_mode",
    "page_length_mode",
    "failures",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class RequestLogger:
    """Logger for story request events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_requests")

    def request_built(self, session_id: str, context_mode: str, page_length_mode: str) -> None:
        self.logger.info(
            "Story request built",
            extra={
                "session_id": session_id,
                "stage": "built",
                "context_mode": context_mode,
                "page_length_mode": page_length_mode,
            },
        )

    def validation_failed(self, session_id: str, failures: Iterable[str]) -> None:
        failures = list(failures)
        self.logger.warning(
            f"Story request incomplete: {', '.join(failures)}",
            extra={"session_id": session_id, "stage": "validation", "failures": failures},
        )

    def request_submitted(self, session_id: str) -> None:
        self.logger.info(
            "Story request submitted",
            extra={"session_id": session_id, "stage": "submitted"},
        )

    def submission_failed(self, session_id: str, error: Exception, stage: Optional[str] = None) -> None:
        extra = {"session_id": session_id, "stage": stage or "submit", "error_type": type(error).__name__}
        self.logger.error(f"Story request submission failed: {error}", extra=extra, exc_info=True)


# Global request logger instance
request_logger = RequestLogger()
