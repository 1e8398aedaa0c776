"""
core/logging_setup.py - Logging configuration for host applications.

yachtforge modules only create loggers; hosts call setup_logging() once
to attach a handler to the package logger.
"""

from __future__ import annotations
from typing import Optional
import json
import logging
import os
import sys

PACKAGE_LOGGER = "yachtforge"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure the yachtforge package logger.

    Args:
        level: Log level name; defaults to YACHTFORGE_LOG_LEVEL or WARNING
        log_file: Optional log file path
        json_format: Emit JSON lines instead of plain text

    Returns:
        The configured package logger
    """
    level_name = level or os.getenv("YACHTFORGE_LOG_LEVEL", "WARNING")
    log_level = getattr(logging, level_name.upper(), logging.WARNING)

    formatter: logging.Formatter
    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        package_logger.addHandler(file_handler)

    return package_logger
