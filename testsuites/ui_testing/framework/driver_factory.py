"""
================================================================================
WebDriver Factory
================================================================================

Creates configured Selenium WebDriver instances from property settings.

Features:
    - Chrome / Internet Explorer / Firefox drivers
    - Driver binaries from the filesystem or bundled package resources
    - Window position, size and maximize settings
    - Implicit page-load and element-wait timeouts

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import allure
from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.firefox_profile import FirefoxProfile
from selenium.webdriver.ie.service import Service as IeService
from selenium.webdriver.remote.webdriver import WebDriver

from .property_source import ConfigurationError, PropertySource


# Process-level properties naming the driver binaries
CHROME_DRIVER_EXE_PROPERTY = "webdriver.chrome.driver"
IE_DRIVER_EXE_PROPERTY = "webdriver.ie.driver"

# Prefix for driver paths bundled as package resources
CLASSPATH_PREFIX = "classpath:"

# Package that classpath: paths are resolved against
DEFAULT_RESOURCE_PACKAGE = "uitest_tools.resources"


class DriverCreationError(Exception):
    """Raised when the browser driver cannot be started."""
    pass


class BrowserKind(Enum):
    """Browsers a test run can target."""

    IE = "ie"
    CHROME = "chrome"
    FIREFOX = "firefox"

    @classmethod
    def from_string(cls, name: Optional[str]) -> Optional["BrowserKind"]:
        """
        Resolve a browser kind by name, ignoring case.

        Returns:
            Matching BrowserKind, or None when the name is unknown
        """
        if not name:
            return None
        wanted = name.strip().lower()
        for kind in cls:
            if kind.name.lower() == wanted:
                return kind
        return None


@dataclass(frozen=True)
class DriverConfiguration:
    """
    Settings resolved for a single driver creation.

    Attributes:
        browser: Target browser
        options: Selenium options object for the browser
        driver_path: Absolute path of the driver binary (None for Firefox)
        position: Window (x, y), applied only when both are configured
        maximize: Maximize the window, taking precedence over size
        size: Window (width, height), applied only when both are configured
        page_load_timeout_ms: Implicit page-load timeout
        element_wait_timeout_ms: Implicit element-wait timeout
    """
    browser: BrowserKind
    options: Any
    driver_path: Optional[str] = None
    position: Optional[Tuple[int, int]] = None
    maximize: bool = False
    size: Optional[Tuple[int, int]] = None
    page_load_timeout_ms: int = 0
    element_wait_timeout_ms: int = 0


class WebDriverFactory:
    """
    Builds WebDriver instances from a PropertySource.

    Usage:
        >>> factory = WebDriverFactory(PropertySource.from_yaml())
        >>> driver = factory.create(BrowserKind.CHROME)
        >>> driver.get("https://example.com")
        >>> driver.quit()

    Recognized settings:
        driver.url.chrome / driver.url.ie       driver binary, "classpath:" allowed
        display.position.x / display.position.y window position
        display.size.maximize                   maximize window
        display.size.width / display.size.height window size
        wait.implicit.msec.pageload             page-load timeout (required)
        wait.implicit.msec.element              element-wait timeout (required)
    """

    def __init__(
        self,
        properties: PropertySource,
        resource_package: str = DEFAULT_RESOURCE_PACKAGE,
    ):
        """
        Initialize factory.

        Args:
            properties: Settings source
            resource_package: Package that classpath: driver paths resolve against
        """
        self.properties = properties
        self.resource_package = resource_package

        self._builders: Dict[BrowserKind, Callable[[], Tuple[Any, Optional[str]]]] = {
            BrowserKind.CHROME: self._chrome_options,
            BrowserKind.IE: self._ie_options,
            BrowserKind.FIREFOX: self._firefox_options,
        }

    def create(self, kind: BrowserKind) -> WebDriver:
        """
        Create and configure a driver.

        Args:
            kind: Browser to start

        Returns:
            Running WebDriver with window and timeouts applied

        Raises:
            ConfigurationError: Unknown browser or invalid settings
            DriverCreationError: Browser failed to start
        """
        with allure.step(f"Create WebDriver: {getattr(kind, 'name', kind)}"):
            config = self.build_configuration(kind)
            driver = self._launch(config)
            try:
                self._apply_window(driver, config)
                self._apply_timeouts(driver, config)
            except Exception:
                # Don't leave a half-configured browser running
                driver.quit()
                raise
            return driver

    def build_configuration(self, kind: BrowserKind) -> DriverConfiguration:
        """
        Resolve every setting needed to start ``kind``.

        Raises:
            ConfigurationError: Unknown browser or invalid settings
        """
        builder = self._builders.get(kind) if isinstance(kind, BrowserKind) else None
        if builder is None:
            raise ConfigurationError(f"Unsupported browser kind: {kind!r}")

        options, driver_path = builder()

        props = self.properties
        return DriverConfiguration(
            browser=kind,
            options=options,
            driver_path=driver_path,
            position=self._pair("display.position.x", "display.position.y"),
            maximize=props.get_bool("display.size.maximize"),
            size=self._pair("display.size.width", "display.size.height"),
            page_load_timeout_ms=props.get_int("wait.implicit.msec.pageload", required=True),
            element_wait_timeout_ms=props.get_int("wait.implicit.msec.element", required=True),
        )

    # =========================================================================
    # Browser Options
    # =========================================================================

    def _chrome_options(self) -> Tuple[Any, Optional[str]]:
        driver_path = self.resolve_driver_path("driver.url.chrome")
        os.environ[CHROME_DRIVER_EXE_PROPERTY] = driver_path

        options = webdriver.ChromeOptions()
        options.add_argument("--disable-extensions")
        return options, driver_path

    def _ie_options(self) -> Tuple[Any, Optional[str]]:
        driver_path = self.resolve_driver_path("driver.url.ie")
        os.environ[IE_DRIVER_EXE_PROPERTY] = driver_path

        options = webdriver.IeOptions()
        # Skip the protected-mode zone check
        options.ignore_protected_mode_settings = True
        return options, driver_path

    def _firefox_options(self) -> Tuple[Any, Optional[str]]:
        options = webdriver.FirefoxOptions()
        options.profile = FirefoxProfile()
        return options, None

    def resolve_driver_path(self, key: str) -> str:
        """
        Resolve a driver binary setting to an absolute path.

        ``classpath:drivers/chromedriver`` is looked up inside the resource
        package; any other value is taken relative to the working directory.

        Raises:
            ConfigurationError: Setting missing or resource not found
        """
        value = self.properties.get_string(key).strip()
        if not value:
            raise ConfigurationError(f"Required setting is missing: {key}")

        if not value.startswith(CLASSPATH_PREFIX):
            return str(Path(value).absolute())

        resource_name = value[len(CLASSPATH_PREFIX):].lstrip("/")
        try:
            resource = resources.files(self.resource_package).joinpath(resource_name)
        except ModuleNotFoundError as e:
            raise ConfigurationError(
                f"Resource package not found: {self.resource_package}"
            ) from e

        if not resource.is_file():
            raise ConfigurationError(
                f"Driver resource not found for {key}: {value} "
                f"(package {self.resource_package})"
            )
        return str(Path(str(resource)).absolute())

    def _pair(self, first: str, second: str) -> Optional[Tuple[int, int]]:
        """Both integers, or None unless both settings are present."""
        props = self.properties
        if not props.get_string(first) or not props.get_string(second):
            return None
        return props.get_int(first, required=True), props.get_int(second, required=True)

    # =========================================================================
    # Driver Lifecycle
    # =========================================================================

    def _launch(self, config: DriverConfiguration) -> WebDriver:
        """Start the browser described by ``config``."""
        kind = config.browser
        logger.debug(f"create driver -> {kind.name} (driver={config.driver_path})")

        try:
            if kind is BrowserKind.CHROME:
                return webdriver.Chrome(
                    options=config.options,
                    service=ChromeService(executable_path=config.driver_path),
                )
            if kind is BrowserKind.IE:
                return webdriver.Ie(
                    options=config.options,
                    service=IeService(executable_path=config.driver_path),
                )
            return webdriver.Firefox(options=config.options)
        except WebDriverException as e:
            raise DriverCreationError(f"Failed to start {kind.name} driver: {e.msg}") from e

    @staticmethod
    def _apply_window(driver: WebDriver, config: DriverConfiguration) -> None:
        if config.position is not None:
            x, y = config.position
            driver.set_window_position(x, y)
            logger.debug(f"Window position: ({x}, {y})")

        if config.maximize:
            driver.maximize_window()
            logger.debug("Window maximized")
        elif config.size is not None:
            width, height = config.size
            driver.set_window_size(width, height)
            logger.debug(f"Window size: {width}x{height}")

    @staticmethod
    def _apply_timeouts(driver: WebDriver, config: DriverConfiguration) -> None:
        driver.set_page_load_timeout(config.page_load_timeout_ms / 1000)
        driver.implicitly_wait(config.element_wait_timeout_ms / 1000)
        logger.debug(
            f"Implicit waits: pageload={config.page_load_timeout_ms}ms, "
            f"element={config.element_wait_timeout_ms}ms"
        )


__all__ = [
    "CHROME_DRIVER_EXE_PROPERTY",
    "IE_DRIVER_EXE_PROPERTY",
    "BrowserKind",
    "DriverConfiguration",
    "DriverCreationError",
    "WebDriverFactory",
]
