"""
Centralized Logging Configuration

This module provides unified logging configuration for applications using
vcard_builder. The library modules only create named loggers; nothing is
configured until an application calls setup_logging().

Log Level Conventions:
    DEBUG   - Dropped lines, no-op builder calls, parsed property counts
    INFO    - High-level progress in calling applications
    WARNING - Unknown type parameters and other recoverable oddities
    ERROR   - Failures that require user attention

Example:
    >>> from vcard_builder.logging_config import setup_logging, get_logger
    >>> setup_logging(verbose=True, log_file="vcard.log")
    >>> logger = get_logger(__name__)
    >>> logger.info("Building contact cards")
"""

import logging
from typing import Optional

# =============================================================================
# Format Constants - Single source of truth for log formats
# =============================================================================

LOG_FORMAT_DETAILED = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""Detailed format including timestamp and module name, used for verbose/file logging."""

LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"
"""Simple format for non-verbose console output."""

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Standard date format for all log timestamps."""


# =============================================================================
# Main Logging Setup Functions
# =============================================================================


def setup_logging(
    verbose: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Configure logging for vCard processing.

    In quiet mode (verbose=False) the console only shows ERROR messages.
    In verbose mode the console shows INFO and above with the detailed
    format. A log file, when given, always captures DEBUG.

    Args:
        verbose: If True, enable verbose console output
        log_file: Optional path to log file for persistent logging

    Returns:
        Configured root logger

    Example:
        >>> logger = setup_logging(verbose=True)
        >>> logger.info("Parsing started")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.ERROR)

    if verbose:
        formatter = logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT_SIMPLE)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_formatter = logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    return root_logger


# =============================================================================
# Logger Factory
# =============================================================================


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
