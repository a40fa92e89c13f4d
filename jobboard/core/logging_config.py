"""
Structured logging for the job board service.

Log calls attach domain context through ``extra`` (application, candidate and
job ids, application status, request method/path/outcome). The JSON formatter
emits those keys as top-level fields; the text formatter used in development
appends them as ``key=value`` pairs.
"""

import enum
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID

from pythonjsonlogger import jsonlogger

# Keys the service passes via ``extra``, in display order
CONTEXT_FIELDS = (
    "application_id",
    "candidate_id",
    "job_id",
    "status",
    "method",
    "path",
    "status_code",
    "duration_ms",
)

NOISY_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    # replaced by the request log line written in main.py
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
}


def _plain(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    return value


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Domain context carried by a record, in CONTEXT_FIELDS order."""
    return {
        key: _plain(getattr(record, key))
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    One JSON object per record: service name, UTC timestamp, level, origin
    and any domain context passed through ``extra``.
    """

    def __init__(self, *args, service: str = "job-board", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["service"] = self.service
        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z")
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record.update(record_context(record))

        if record.levelno >= logging.WARNING:
            log_record["line"] = record.lineno
            log_record["pathname"] = record.pathname


class ContextTextFormatter(logging.Formatter):
    """Human-readable lines with the domain context appended."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


def setup_logging(log_level: str = "INFO", json_logs: bool = True, service: str = "job-board") -> None:
    """
    Configure root logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines (production) or readable text (development)
        service: Value of the ``service`` field on every JSON record
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if json_logs:
        formatter = ServiceJsonFormatter("%(message)s %(module)s %(funcName)s", service=service)
    else:
        formatter = ContextTextFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)

    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    for name, level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
