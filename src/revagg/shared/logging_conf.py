# src/revagg/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the entire application.
It sets up structured logging with consistent formatting, log levels, and output
handlers so feed failures and rejected records are visible in one place.

Files that USE this module:
- revagg.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stream: Optional[bool] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Sets up structured logging with consistent formatting. Can output to stderr,
    file, or both. Supports log rotation for file logging.

    Args:
        level: Logging level (default: logging.INFO), int or level name
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is named revagg.log)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stream: Log to stderr; defaults to the REVAGG_LOG_STDOUT env var
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    log_format = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    # stdout carries the rendered table, so console logging goes to stderr
    if log_to_stream is None:
        log_to_stream = os.environ.get("REVAGG_LOG_STDOUT", "true").lower() == "true"

    if log_to_stream:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(stream_handler)

    log_file_path = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "revagg.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    if not handlers:
        handlers = [logging.NullHandler()]

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.debug("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.debug("Logging configured: stream, level=%s", level)
