"""
================================================================================
UI Test Tools Common Utilities
================================================================================

Shared logging setup for the framework, fixtures and the test runner.

Usage:
    from uitest_tools.common import init_logger

    init_logger(settings)

================================================================================
"""

from .global_config import init_logger, reset_logger

__all__ = [
    "init_logger",
    "reset_logger",
]
