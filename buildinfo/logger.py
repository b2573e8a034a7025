"""
Logging setup for buildinfo

Library modules log through `logging.getLogger(__name__)` and never configure
handlers. The CLI calls `configure_logging` once, choosing human-readable or
structured JSON output on stderr.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

LOGGER_NAME = "buildinfo"


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception information if present
        if record.exc_info and isinstance(record.exc_info, tuple):
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Add any extra data attached to the record
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Emit one JSON object per line instead of plain text
        stream: Output stream, stderr by default

    Returns:
        The configured "buildinfo" logger
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Replace handlers so repeated CLI invocations in one process don't stack
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False
    return logger
