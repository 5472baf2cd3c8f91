"""
Name: Structured Logger Configuration

Responsibilities:
  - Configure JSON-structured logging
  - Automatically include narration context (narration_id, chunk_index)
  - Include stack traces for exceptions

Collaborators:
  - context.py: Job-scoped context vars
  - Python logging module (stdlib)

Constraints:
  - No external dependencies (uses stdlib only)
  - Never log secrets (API keys, tokens)

Notes:
  - Import as: from narration.logger import logger
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from .context import get_context_dict

# R: LogRecord attributes that are not user-supplied extra fields
_INTERNAL_KEYS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    }
)


class JSONFormatter(logging.Formatter):
    """
    R: Format logs as JSON with automatic context enrichment.

    Includes:
      - timestamp (ISO 8601), level, message
      - logger, module, function, line
      - narration_id, chunk_index (from context)
      - extra fields from log call
      - exception stack trace (if present)
    """

    # R: Fields that should never be logged (security)
    SENSITIVE_KEYS = {"password", "api_key", "secret", "token", "authorization", "openai_api_key"}

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        log_obj.update(get_context_dict())

        for key, value in record.__dict__.items():
            if key in _INTERNAL_KEYS:
                continue
            if key.lower() in self.SENSITIVE_KEYS:
                continue
            log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_obj, default=str)


def setup_logger(name: str = "narration", level: str | int = logging.INFO) -> logging.Logger:
    """
    R: Configure and return structured logger.

    Args:
        name: Logger name (default: "narration")
        level: Logging level name or number

    Returns:
        Configured logger with JSON formatting
    """
    log = logging.getLogger(name)
    log.setLevel(level)

    # R: Avoid duplicate handlers on reimport
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        log.addHandler(handler)

    return log


# R: Global logger instance
logger = setup_logger()


def configure_logging(level: str | int) -> None:
    """R: Apply a configured level (e.g. Settings.log_level) to the global logger."""
    logger.setLevel(level)
