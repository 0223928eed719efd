"""
================================================================================
UI Test Tools
================================================================================

Support utilities for the Selenium UI test suites.

Modules:
    - common: Logging setup shared by the framework and the test runner
    - resources: Bundled files resolved through "classpath:" settings

Example:
    from uitest_tools.common import init_logger

    init_logger(level="DEBUG")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "resources",
]
