"""
Logging setup for the bootstrap run.

Text output follows the worker format (``time | level | message``). JSON
output writes one object per line for log shippers. When ``LOG_PATH`` is set
the same records also go to a daily-rotated ``fhir-init.log`` in that
directory.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from fhir_init.config import Settings

LOG_FILE_NAME = "fhir-init.log"
TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings, replacing existing handlers."""
    formatter = build_formatter(settings.log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_path:
        log_dir = Path(settings.log_path)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                log_dir / LOG_FILE_NAME,
                when="midnight",
                backupCount=settings.log_backup_count,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        handlers=handlers,
        force=True,
    )
