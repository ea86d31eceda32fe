"""Logging configuration for the typeahead project using loguru."""

import os
import sys
from loguru import logger
from typing import Optional

from typeahead.utils import get_project_root

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru logger with file and console output.

    Args:
        log_file: Path to the log file (if None, uses TYPEAHEAD_LOG_FILE, the
            previously configured path or the default in the project root)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
    """
    global _log_file_path

    if log_file is None:
        log_file = os.getenv("TYPEAHEAD_LOG_FILE") or _log_file_path
    if log_file is None:
        log_file = os.path.join(get_project_root(), "typeahead.log")
    elif not os.path.isabs(log_file):
        log_file = os.path.join(get_project_root(), log_file)
    _log_file_path = log_file

    # Remove default handler
    logger.remove()

    # Console output with colors
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    # File output
    logger.add(
        log_file,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional component name bound to every record

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "typeahead")


# Records logged through the bare loguru logger still need extra[name]
logger.configure(extra={"name": "typeahead"})

# Default logger configuration - creates typeahead.log in project root
setup_logger()
