"""
Structured logging configuration for minidux.

Provides JSON-formatted logs with trace_id support so that log lines from
several stores in one process can be told apart.

Environment Variables:
    MINIDUX_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    MINIDUX_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from minidux.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="store-1")
    logger.debug("Dispatching", extra={"action_type": "INCREMENT"})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - MINIDUX_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - MINIDUX_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("MINIDUX_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("MINIDUX_LOG_FORMAT", "json").lower()

    # Map string log level to logging constant
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler on stderr; stdout carries CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    # Configure formatter based on format preference
    if log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        # Text formatter
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
        trace_id: Trace ID for correlating logs (typically the store name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to log records that lack one.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
