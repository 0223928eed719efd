"""
================================================================================
Selenium Test Base
================================================================================

Shared state and element-lookup shortcuts for Selenium UI tests.

Provides:
    - SeleniumContext: settings, target browser list and the run's driver
    - SeleniumTestBase: base class with find shortcuts bound to a context

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .driver_factory import BrowserKind
from .property_source import PropertySource


# Settings enabling each browser, in execution order
BROWSER_FLAGS = (
    ("execute.browser.ie", BrowserKind.IE),
    ("execute.browser.chrome", BrowserKind.CHROME),
    ("execute.browser.firefox", BrowserKind.FIREFOX),
)


def resolve_browser_list(properties: PropertySource) -> List[BrowserKind]:
    """
    Browsers enabled for this run, always ordered IE, Chrome, Firefox.

    Example:
        execute.browser.chrome=true, execute.browser.firefox=true
        -> [BrowserKind.CHROME, BrowserKind.FIREFOX]
    """
    return [kind for key, kind in BROWSER_FLAGS if properties.get_bool(key)]


class SeleniumContext:
    """
    State shared by all tests of a run.

    The browser list is computed once at construction. The driver is assigned
    once by the setup fixture and cleared again at teardown.
    """

    def __init__(self, properties: PropertySource):
        self.properties = properties
        self.browsers: List[BrowserKind] = resolve_browser_list(properties)
        self._driver: Optional[WebDriver] = None
        logger.debug(f"Target browsers: {[b.name for b in self.browsers]}")

    @property
    def driver(self) -> Optional[WebDriver]:
        return self._driver

    def attach_driver(self, driver: WebDriver) -> None:
        """
        Assign the run's driver.

        Raises:
            RuntimeError: A driver is already attached
        """
        if self._driver is not None:
            raise RuntimeError("A driver is already attached to this context")
        self._driver = driver

    def detach_driver(self) -> Optional[WebDriver]:
        """Clear and return the attached driver."""
        driver, self._driver = self._driver, None
        return driver


class SeleniumTestBase:
    """
    Base class for Selenium tests.

    Usage:
        class TestLogin(SeleniumTestBase):
            def test_submit(self):
                self.find(By.ID, "username").send_keys("demo_user")
                self.find_button_by_value("Login").click()
    """

    context: Optional[SeleniumContext] = None

    @property
    def driver(self) -> WebDriver:
        """
        Driver of the bound context.

        Raises:
            RuntimeError: No context bound or no driver attached yet
        """
        driver = self.context.driver if self.context is not None else None
        if driver is None:
            raise RuntimeError("No WebDriver attached; run the driver setup first")
        return driver

    def set_system_properties(self) -> None:
        """Hook run before driver creation. Override to adjust process settings."""
        logger.debug("set system properties")

    def find(self, by: str, value: str) -> WebElement:
        """Find an element, e.g. ``self.find(By.ID, "username")``."""
        return self.driver.find_element(by, value)

    def find_button_by_value(self, value: str) -> WebElement:
        """
        Find ``<input type="button">`` whose value attribute equals ``value``.

        Quotes in ``value`` are not escaped.
        """
        return self.driver.find_element(
            By.CSS_SELECTOR, f"input[type='button'][value='{value}']"
        )


__all__ = [
    "BROWSER_FLAGS",
    "SeleniumContext",
    "SeleniumTestBase",
    "resolve_browser_list",
]
