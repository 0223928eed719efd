"""
================================================================================
UI Testing Framework
================================================================================

Selenium WebDriver helpers for UI acceptance tests.

Components:
    - property_source: Dotted-key settings from YAML and environment
    - driver_factory: Configured Chrome / IE / Firefox driver creation
    - capture: Timestamped screenshot and alert-text files
    - selenium_test_base: Shared run context and element lookup shortcuts
    - page_const: Element / attribute / locator names for page generators

Author: Automation Team
License: MIT
================================================================================
"""

from .property_source import ConfigurationError, PropertySource
from .driver_factory import (
    BrowserKind,
    DriverConfiguration,
    DriverCreationError,
    WebDriverFactory,
)
from .capture import CaptureError, SeleniumCapture
from .selenium_test_base import SeleniumContext, SeleniumTestBase, resolve_browser_list
from .page_const import FindBy, Item, ItemAttr

__all__ = [
    "ConfigurationError",
    "PropertySource",
    "BrowserKind",
    "DriverConfiguration",
    "DriverCreationError",
    "WebDriverFactory",
    "CaptureError",
    "SeleniumCapture",
    "SeleniumContext",
    "SeleniumTestBase",
    "resolve_browser_list",
    "FindBy",
    "Item",
    "ItemAttr",
]
