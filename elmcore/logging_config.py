"""
Structured logging configuration for elmcore.

The library only emits DEBUG records (dispatch, drain, render) through
get_logger(); applications and the CLI call setup_logging() to see them.

Environment Variables:
    ELMCORE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    ELMCORE_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from elmcore.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="todo-list")
    logger.debug("Dispatch received", extra={"msg": "AddItem"})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger


def setup_logging() -> None:
    """
    Configure root logger.

    Reads configuration from environment variables:
    - ELMCORE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - ELMCORE_LOG_FORMAT: json, text (default: text)
    """
    log_level = os.getenv("ELMCORE_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("ELMCORE_LOG_FORMAT", "text").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the component name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def add_trace_id_filter() -> None:
    """Add TraceIDFilter to root logger (ensures all logs have trace_id field)."""
    root_logger = logging.getLogger()
    root_logger.addFilter(TraceIDFilter())
