"""
================================================================================
Global Logging Configuration
================================================================================

Centralized Loguru setup for the UI test framework and the test runner.

Settings (all optional, read from any object with ``get_string(key)``):
    logging.level       DEBUG, INFO, WARNING, ERROR (default INFO)
    logging.format      Loguru format string
    logging.file        Also log to this file, rotated by size
    logging.rotation    Rotation size (default "10 MB")
    logging.retention   Retention period (default "7 days")

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized: bool = False


def _setting(settings: Any, key: str, default: Optional[str]) -> Optional[str]:
    if settings is None:
        return default
    return settings.get_string(key) or default


def init_logger(
    settings: Any = None,
    level: str = None,
    format_string: str = None,
    log_file: str = None,
) -> None:
    """
    Initializes the global Loguru logger once per process.

    Explicit arguments win over settings; LOG_LEVEL overrides the level.

    Args:
        settings: PropertySource (or compatible) providing logging.* keys
        level: Log level
        format_string: Loguru format string
        log_file: Optional log file path

    Example:
        init_logger(PropertySource.from_yaml())
        init_logger(level="DEBUG", log_file="logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    level = level or os.environ.get("LOG_LEVEL") or _setting(settings, "logging.level", "INFO")
    format_string = format_string or _setting(settings, "logging.format", DEFAULT_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=format_string,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = log_file or _setting(settings, "logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=format_string.replace("{level: <8}", "{level}"),
            rotation=_setting(settings, "logging.rotation", "10 MB"),
            retention=_setting(settings, "logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """
    Allows init_logger() to run again, e.g. after settings changed.
    """
    global _logger_initialized
    _logger_initialized = False
