"""
Logging configuration for the benchmark log parser.

Provides centralized logging setup with clean, concise terminal output.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

_LEVEL = logging.INFO
_LOG_FILE: Optional[Path] = None
_LOGGERS = {}


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: the process-wide level, INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = _LEVEL if level is None else level
    log_file = _LOG_FILE if log_file is None else log_file

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Clean format: [LEVEL] message
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Re-apply level and file handler to every logger created by setup_logger.

    Module loggers are created at import time, before the CLI is parsed, so
    --verbose and --log-file are applied afterwards through this call.
    """
    global _LEVEL, _LOG_FILE
    _LEVEL = level
    _LOG_FILE = log_file
    for name in list(_LOGGERS):
        setup_logger(name)
