"""
Structured Logging Configuration Module

Provides JSON-formatted structured logging for bignumbers. Library modules only
obtain loggers; handlers are installed by the application through setup_logging().
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional

from .config import get_config

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module if hasattr(record, 'module') else record.name,
            "message": record.getMessage(),
            "operation": getattr(record, 'operation', None),
            "extra": getattr(record, 'extra', None)
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: Optional[str] = None, logger_name: str = "bignumbers",
                  log_format: Optional[str] = None) -> logging.Logger:
    """
    Setup logging for the bignumbers logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to config.log_level
        logger_name: Name of the logger
        log_format: "json" or "text"; defaults to config.log_format

    Returns:
        Configured logger instance
    """
    settings = get_config()
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger


def get_logger(name: str = "bignumbers") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def log_operation(logger: logging.Logger, level: str, message: str,
                  operation: Optional[str] = None, extra: Optional[dict] = None):
    """
    Log an arithmetic or conversion event with structured data.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, etc.)
        message: Log message
        operation: Operation name (div, pow, to_float, ...)
        extra: Additional structured data
    """
    levelno = getattr(logging, level.upper())
    if not logger.isEnabledFor(levelno):
        return

    record = logger.makeRecord(
        logger.name, levelno, __name__, 0, message, (), None
    )

    if operation:
        record.operation = operation
    if extra:
        record.extra = extra

    logger.handle(record)
